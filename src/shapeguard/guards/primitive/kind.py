"""
Classification guards.

Pure guards with no child guards - they compare a value against a fixed
primitive kind or a set of classes.
"""

from dataclasses import dataclass
from typing import Any, TypeGuard

from shapeguard.domain.exceptions import GuardDefinitionError, UnknownKindError
from shapeguard.domain.interfaces import GuardInterface
from shapeguard.domain.models import KINDS, matches_kind
from shapeguard.guards.validation import logger


@dataclass(frozen=True, eq=False)
class TypeOfGuard(GuardInterface[Any]):
    """
    Matches values whose primitive classification equals ``kind``.

    ``TypeOfGuard("object")`` matches ``None`` as well as containers and
    instances, mirroring the classification quirk it is modelled on.
    """

    kind: str

    def __post_init__(self) -> None:
        if not isinstance(self.kind, str) or self.kind not in KINDS:
            logger.debug("type_of rejected kind %r", self.kind)
            raise UnknownKindError(
                f"unknown kind {self.kind!r}; expected one of {sorted(KINDS)}",
                argument=self.kind,
            )

    def __call__(self, value: Any) -> TypeGuard[Any]:
        return matches_kind(value, self.kind)


@dataclass(frozen=True, eq=False)
class InstanceOfGuard(GuardInterface[Any]):
    """
    Matches instances of any of ``classes`` (subclasses included).

    With no classes the guard places no constraint and matches everything.
    """

    classes: tuple[type, ...] = ()

    def __post_init__(self) -> None:
        classes = tuple(self.classes)
        for position, cls in enumerate(classes):
            if not isinstance(cls, type):
                logger.debug("instance_of rejected argument %d: %r", position, cls)
                raise GuardDefinitionError(
                    f"instance_of() argument {position} must be a class, "
                    f"got {type(cls).__name__}",
                    argument=cls,
                )
        object.__setattr__(self, "classes", classes)

    def __call__(self, value: Any) -> TypeGuard[Any]:
        return not self.classes or isinstance(value, self.classes)
