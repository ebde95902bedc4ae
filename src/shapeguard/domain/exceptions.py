"""
Domain exceptions for the guard algebra.

Guards never raise while classifying a value. These exceptions report
malformed *construction* arguments, raised immediately when a guard is built.
"""

from typing import Any


class GuardDefinitionError(TypeError):
    """
    Raised when a guard constructor receives an argument it cannot use.

    Examples: a non-callable where a child guard is expected, a non-class
    passed to ``instance_of``, or a non-primitive ``const`` literal.
    """

    def __init__(self, message: str, argument: Any = None):
        """
        Args:
            message: Human-readable error message
            argument: The offending constructor argument
        """
        super().__init__(message)
        self.argument = argument


class UnknownKindError(GuardDefinitionError, ValueError):
    """Raised when ``type_of`` receives a name outside the fixed kind set."""


class EmptyLiteralSetError(GuardDefinitionError, ValueError):
    """
    Raised when ``const``/``enum`` is called without literals.

    A literal guard over an empty set could never match anything, which is
    always a caller mistake.
    """

    def __init__(self) -> None:
        super().__init__("const() requires at least one literal", argument=())
