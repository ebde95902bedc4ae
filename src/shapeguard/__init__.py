"""
shapeguard: composable runtime value guards.

A guard is a pure predicate that answers whether an arbitrary value has a
described shape: a primitive kind, a literal set, an instance of a class, an
array, a tuple, an object shape, a record, a union, or an intersection.

Example:
    from shapeguard import is_

    is_point = is_.object({"x": is_("number"), "y": is_("number")})
    is_point({"x": 1, "y": 2.5})   # True
    is_point({"x": 1})             # False - "y" reads as UNDEFINED
"""

# Application layer (the is_ namespace)
from shapeguard.application import Is, is_

# Domain exceptions
from shapeguard.domain.exceptions import (
    EmptyLiteralSetError,
    GuardDefinitionError,
    UnknownKindError,
)

# Domain interfaces (for type hints and custom guards)
from shapeguard.domain.interfaces import Guard, GuardInterface

# Domain models
from shapeguard.domain.models import (
    UNDEFINED,
    Constructor,
    Kind,
    Primitive,
    Symbol,
    Undefined,
    kind_of,
)

# Guards (for direct construction and isinstance checks)
from shapeguard.guards import (
    AnyGuard,
    ArrayGuard,
    ConstGuard,
    InstanceOfGuard,
    IntersectionGuard,
    NullGuard,
    NullishGuard,
    ObjectGuard,
    RecordGuard,
    TupleGuard,
    TypeOfGuard,
    UndefinedGuard,
    UnionGuard,
    UnknownGuard,
)

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Namespace
    "is_",
    "Is",
    # Domain models
    "UNDEFINED",
    "Undefined",
    "Symbol",
    "Kind",
    "Primitive",
    "Constructor",
    "kind_of",
    # Domain interfaces
    "Guard",
    "GuardInterface",
    # Domain exceptions
    "GuardDefinitionError",
    "UnknownKindError",
    "EmptyLiteralSetError",
    # Guards
    "TypeOfGuard",
    "InstanceOfGuard",
    "ConstGuard",
    "ArrayGuard",
    "TupleGuard",
    "RecordGuard",
    "ObjectGuard",
    "IntersectionGuard",
    "UnionGuard",
    "NullGuard",
    "UndefinedGuard",
    "NullishGuard",
    "AnyGuard",
    "UnknownGuard",
]
