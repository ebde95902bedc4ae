"""
Composite guards - Guard composition patterns.

These guards combine multiple guards using logical operators.
"""

from shapeguard.guards.composite.base import IntersectionGuard, UnionGuard

__all__ = [
    "IntersectionGuard",
    "UnionGuard",
]
