"""
Array and tuple guards.

``ArrayGuard`` treats its children as a union applied to every element;
``TupleGuard`` applies its children by position.
"""

from dataclasses import dataclass
from typing import Any, TypeGuard

from shapeguard.domain.interfaces import Guard, GuardInterface
from shapeguard.domain.members import is_array, read_member
from shapeguard.guards.validation import require_guards

ArrayValue = list[Any] | tuple[Any, ...]


@dataclass(frozen=True, eq=False)
class ArrayGuard(GuardInterface[ArrayValue]):
    """
    Matches arrays whose every element satisfies at least one child guard.

    With no children any array matches.
    """

    guards: tuple[Guard, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "guards", require_guards(self.guards, "array"))

    def __call__(self, value: Any) -> TypeGuard[ArrayValue]:
        if not is_array(value):
            return False
        if not self.guards:
            return True
        return all(
            any(guard(element) for guard in self.guards) for element in value
        )


@dataclass(frozen=True, eq=False)
class TupleGuard(GuardInterface[ArrayValue]):
    """
    Matches arrays whose element ``i`` satisfies child guard ``i``.

    This is a prefix match: trailing elements beyond the last guard are
    ignored, and missing positions read as ``UNDEFINED``.
    """

    guards: tuple[Guard, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "guards", require_guards(self.guards, "tuple"))

    def __call__(self, value: Any) -> TypeGuard[ArrayValue]:
        if not is_array(value):
            return False
        return all(
            guard(read_member(value, index)) for index, guard in enumerate(self.guards)
        )
