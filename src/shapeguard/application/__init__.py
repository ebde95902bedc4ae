"""
Application layer for the guard algebra.

Exposes the ``is_`` namespace that builds guards from the guard classes.
"""

from shapeguard.application.namespace import (
    Is,
    array,
    const,
    instance_of,
    intersection,
    is_,
    record,
    shape,
    tuple_of,
    type_of,
    union,
)

__all__ = [
    "Is",
    "is_",
    "type_of",
    "instance_of",
    "const",
    "record",
    "array",
    "shape",
    "tuple_of",
    "intersection",
    "union",
]
