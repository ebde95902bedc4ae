"""
Guards for the guard algebra.

Guards are pure predicates that return True when a value has the shape they
describe. They compose: every structural and composite guard accepts other
guards (or any one-argument callable) as children.

Organization by role:
- primitive/: Classification, literal, and terminal guards (no children)
- structural/: Array, tuple, record, and object-shape guards
- composite/: Union and intersection
"""

from shapeguard.guards.composite import IntersectionGuard, UnionGuard
from shapeguard.guards.primitive import (
    ANY,
    NULL,
    NULLISH,
    UNDEFINED_GUARD,
    UNKNOWN,
    AnyGuard,
    ConstGuard,
    InstanceOfGuard,
    NullGuard,
    NullishGuard,
    TypeOfGuard,
    UndefinedGuard,
    UnknownGuard,
)
from shapeguard.guards.structural import ArrayGuard, ObjectGuard, RecordGuard, TupleGuard

__all__ = [
    # Primitive guards
    "TypeOfGuard",
    "InstanceOfGuard",
    "ConstGuard",
    "NullGuard",
    "UndefinedGuard",
    "NullishGuard",
    "AnyGuard",
    "UnknownGuard",
    "NULL",
    "UNDEFINED_GUARD",
    "NULLISH",
    "ANY",
    "UNKNOWN",
    # Structural guards
    "ArrayGuard",
    "TupleGuard",
    "RecordGuard",
    "ObjectGuard",
    # Composition patterns
    "IntersectionGuard",
    "UnionGuard",
]
