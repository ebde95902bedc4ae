"""
Literal-set guard.
"""

from dataclasses import dataclass
from typing import Any, TypeGuard

from shapeguard.domain.exceptions import EmptyLiteralSetError, GuardDefinitionError
from shapeguard.domain.interfaces import GuardInterface
from shapeguard.domain.models import Primitive, is_primitive, strictly_equal
from shapeguard.guards.validation import logger


@dataclass(frozen=True, eq=False)
class ConstGuard(GuardInterface[Any]):
    """
    Matches values strictly equal to one of ``literals``.

    Strict equality never crosses classifications (``True`` is not ``1``)
    and NaN matches nothing, itself included.
    """

    literals: tuple[Primitive, ...]

    def __post_init__(self) -> None:
        literals = tuple(self.literals)
        if not literals:
            logger.debug("const rejected an empty literal set")
            raise EmptyLiteralSetError()
        for position, literal in enumerate(literals):
            if not is_primitive(literal):
                logger.debug("const rejected argument %d: %r", position, literal)
                raise GuardDefinitionError(
                    f"const() argument {position} must be a primitive literal, "
                    f"got {type(literal).__name__}",
                    argument=literal,
                )
        object.__setattr__(self, "literals", literals)

    def __call__(self, value: Any) -> TypeGuard[Any]:
        return any(strictly_equal(literal, value) for literal in self.literals)
