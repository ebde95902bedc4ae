"""
Terminal guards with fixed semantics.

``ANY`` and ``UNKNOWN`` behave identically at runtime; they differ only in
the type they narrow to.
"""

from dataclasses import dataclass
from typing import Any, TypeGuard

from shapeguard.domain.interfaces import GuardInterface
from shapeguard.domain.models import UNDEFINED, Undefined


@dataclass(frozen=True, eq=False)
class NullGuard(GuardInterface[None]):
    """Matches ``None`` only."""

    def __call__(self, value: Any) -> TypeGuard[None]:
        return value is None


@dataclass(frozen=True, eq=False)
class UndefinedGuard(GuardInterface[Undefined]):
    """Matches ``UNDEFINED`` only."""

    def __call__(self, value: Any) -> TypeGuard[Undefined]:
        return value is UNDEFINED


@dataclass(frozen=True, eq=False)
class NullishGuard(GuardInterface[Undefined | None]):
    """Matches ``None`` or ``UNDEFINED``, and no other falsy value."""

    def __call__(self, value: Any) -> TypeGuard[Undefined | None]:
        return value is None or value is UNDEFINED


@dataclass(frozen=True, eq=False)
class AnyGuard(GuardInterface[Any]):
    """Matches everything."""

    def __call__(self, value: Any) -> TypeGuard[Any]:
        return True


@dataclass(frozen=True, eq=False)
class UnknownGuard(GuardInterface[object]):
    """Matches everything, narrowing to ``object``."""

    def __call__(self, value: Any) -> TypeGuard[object]:
        return True


NULL = NullGuard()
UNDEFINED_GUARD = UndefinedGuard()
NULLISH = NullishGuard()
ANY = AnyGuard()
UNKNOWN = UnknownGuard()
