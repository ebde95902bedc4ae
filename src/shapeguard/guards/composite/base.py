"""
Logical guard composition.

IntersectionGuard and UnionGuard apply every child guard to the same value.
"""

from dataclasses import dataclass
from typing import Any, TypeGuard

from shapeguard.domain.interfaces import Guard, GuardInterface
from shapeguard.guards.validation import require_guards


@dataclass(frozen=True, eq=False)
class IntersectionGuard(GuardInterface[Any]):
    """
    Logical AND of multiple guards. All must pass.

    Evaluates guards in order, short-circuits on first failure.
    An empty intersection matches everything.
    """

    guards: tuple[Guard, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "guards", require_guards(self.guards, "intersection"))

    def __call__(self, value: Any) -> TypeGuard[Any]:
        for guard in self.guards:
            if not guard(value):
                return False  # Short-circuit on failure
        return True


@dataclass(frozen=True, eq=False)
class UnionGuard(GuardInterface[Any]):
    """
    Logical OR of multiple guards. Any may pass.

    Evaluates guards in order, short-circuits on first success.
    An empty union matches everything.
    """

    guards: tuple[Guard, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "guards", require_guards(self.guards, "union"))

    def __call__(self, value: Any) -> TypeGuard[Any]:
        if not self.guards:
            return True
        for guard in self.guards:
            if guard(value):
                return True  # Short-circuit on success
        return False
