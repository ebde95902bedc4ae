"""
Construction-time argument checks shared by every guard.

Guards fail fast: a malformed argument raises when the guard is built,
never later as a confusing ``False``.
"""

import logging
from collections.abc import Iterable
from typing import Any

from shapeguard.domain.exceptions import GuardDefinitionError
from shapeguard.domain.interfaces import Guard

logger = logging.getLogger("shapeguard.guards")


def require_guards(guards: Iterable[Any], owner: str) -> tuple[Guard, ...]:
    """
    Freeze child guards into a tuple, rejecting anything not callable.

    Args:
        guards: Candidate child guards, in evaluation order
        owner: Constructor name used in the error message

    Returns:
        The guards as an immutable tuple

    Raises:
        GuardDefinitionError: If any element is not callable
    """
    frozen = tuple(guards)
    for position, guard in enumerate(frozen):
        if not callable(guard):
            logger.debug("%s rejected argument %d: %r", owner, position, guard)
            raise GuardDefinitionError(
                f"{owner}() argument {position} must be a guard (callable), "
                f"got {type(guard).__name__}",
                argument=guard,
            )
    return frozen
