"""
Domain interfaces (Ports) for the guard algebra.

These abstract base classes define the contract every guard satisfies.
They have no external dependencies and represent the core domain boundary.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeAlias, TypeGuard, TypeVar

T_co = TypeVar("T_co", covariant=True)


class GuardInterface(ABC, Generic[T_co]):
    """
    Port for runtime value classification.

    A guard is a pure predicate: it reads the value it is given, never
    mutates it, and answers ``True`` when the value has the shape the guard
    describes. The type parameter is the static type the guard narrows to
    when used as a condition.
    """

    @abstractmethod
    def __call__(self, value: Any) -> TypeGuard[T_co]:
        """
        Classify a value.

        Args:
            value: Any Python value

        Returns:
            True if the value matches the described shape
        """
        pass


# Anything usable as a child guard: a GuardInterface or any one-argument predicate.
Guard: TypeAlias = Callable[[Any], bool]
