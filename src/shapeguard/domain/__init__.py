"""
Domain layer for the guard algebra.

Contains the value model, member access, and the guard port, with no
dependencies on the guard implementations.
"""

from shapeguard.domain.exceptions import (
    EmptyLiteralSetError,
    GuardDefinitionError,
    UnknownKindError,
)
from shapeguard.domain.interfaces import Guard, GuardInterface
from shapeguard.domain.members import is_array, is_object, own_entries, read_member
from shapeguard.domain.models import (
    KINDS,
    UNDEFINED,
    Constructor,
    Kind,
    Primitive,
    Symbol,
    Undefined,
    is_primitive,
    kind_of,
    matches_kind,
    strictly_equal,
)

__all__ = [
    # Models
    "KINDS",
    "UNDEFINED",
    "Constructor",
    "Kind",
    "Primitive",
    "Symbol",
    "Undefined",
    "is_primitive",
    "kind_of",
    "matches_kind",
    "strictly_equal",
    # Member access
    "is_array",
    "is_object",
    "own_entries",
    "read_member",
    # Interfaces
    "Guard",
    "GuardInterface",
    # Exceptions
    "GuardDefinitionError",
    "UnknownKindError",
    "EmptyLiteralSetError",
]
