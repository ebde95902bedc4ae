"""
Primitive guards - classification, literal, and terminal matches.

These guards hold no child guards.
"""

from shapeguard.guards.primitive.kind import InstanceOfGuard, TypeOfGuard
from shapeguard.guards.primitive.literal import ConstGuard
from shapeguard.guards.primitive.terminal import (
    ANY,
    NULL,
    NULLISH,
    UNDEFINED_GUARD,
    UNKNOWN,
    AnyGuard,
    NullGuard,
    NullishGuard,
    UndefinedGuard,
    UnknownGuard,
)

__all__ = [
    "TypeOfGuard",
    "InstanceOfGuard",
    "ConstGuard",
    # Terminals
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
]
