"""
Structural guards - arrays, tuples, records, and object shapes.

These guards inspect the members of a value and delegate each member to
their child guards.
"""

from shapeguard.guards.structural.mapping import ObjectGuard, RecordGuard
from shapeguard.guards.structural.sequence import ArrayGuard, TupleGuard

__all__ = [
    "ArrayGuard",
    "TupleGuard",
    "RecordGuard",
    "ObjectGuard",
]
