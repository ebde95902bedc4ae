"""
The ``is_`` namespace: one callable carrying every guard constructor.

``is_("number")`` builds a kind guard; ``is_.array(...)``, ``is_.object(...)``
and the rest build the structural and composite guards. Aliases are the same
object, so ``is_.dict is is_.record``.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Literal, TypeVar, overload

from shapeguard.domain.interfaces import Guard, GuardInterface
from shapeguard.domain.models import Kind, Primitive, Symbol, Undefined
from shapeguard.guards import (
    ANY,
    NULL,
    NULLISH,
    UNDEFINED_GUARD,
    UNKNOWN,
    ArrayGuard,
    ConstGuard,
    InstanceOfGuard,
    IntersectionGuard,
    ObjectGuard,
    RecordGuard,
    TupleGuard,
    TypeOfGuard,
    UnionGuard,
)

logger = logging.getLogger("shapeguard.application")

T = TypeVar("T")
G = TypeVar("G", bound=GuardInterface[Any])


def _built(guard: G) -> G:
    logger.debug("Built %r", guard)
    return guard


@overload
def type_of(kind: Literal["bigint"]) -> GuardInterface[int]: ...
@overload
def type_of(kind: Literal["boolean"]) -> GuardInterface[bool]: ...
@overload
def type_of(kind: Literal["function"]) -> GuardInterface[Callable[..., Any]]: ...
@overload
def type_of(kind: Literal["number"]) -> GuardInterface[int | float]: ...
@overload
def type_of(kind: Literal["object"]) -> GuardInterface[object]: ...
@overload
def type_of(kind: Literal["string"]) -> GuardInterface[str]: ...
@overload
def type_of(kind: Literal["symbol"]) -> GuardInterface[Symbol]: ...
@overload
def type_of(kind: Literal["undefined"]) -> GuardInterface[Undefined]: ...
def type_of(kind: str) -> GuardInterface[Any]:
    """
    Returns a guard matching values whose primitive classification is ``kind``.

    >>> is_("number")(1)
    True
    """
    return _built(TypeOfGuard(kind))


def instance_of(*classes: type[T]) -> GuardInterface[T]:
    """Returns a guard matching instances of any of the given classes."""
    return _built(InstanceOfGuard(classes))


def const(*literals: Primitive) -> ConstGuard:
    """Returns a guard matching values strictly equal to any of ``literals``."""
    return _built(ConstGuard(literals))


def record(*guards: Guard) -> RecordGuard:
    """
    Returns a guard matching objects where every own member value matches
    any of the given guards.
    """
    return _built(RecordGuard(guards))


def array(*guards: Guard) -> ArrayGuard:
    """
    Returns a guard matching arrays where every element matches any of the
    given guards.
    """
    return _built(ArrayGuard(guards))


def shape(fields: Mapping[Any, Guard]) -> ObjectGuard:
    """
    Returns a guard matching objects where each member matches the guard
    stored under the same key in ``fields``.
    """
    return _built(ObjectGuard(fields))


def tuple_of(*guards: Guard) -> TupleGuard:
    """
    Returns a guard matching arrays where each element matches the guard at
    the same position.
    """
    return _built(TupleGuard(guards))


def intersection(*guards: Guard) -> IntersectionGuard:
    """Returns a guard matching values that match _ALL_ of the given guards."""
    return _built(IntersectionGuard(guards))


def union(*guards: Guard) -> UnionGuard:
    """Returns a guard matching values that match _ANY_ of the given guards."""
    return _built(UnionGuard(guards))


class Is:
    """
    Callable namespace of guard constructors.

    Example:
        is_user = is_.object({
            "name": is_("string"),
            "email": is_.union(is_("string"), is_.undefined),
            "roles": is_.array(is_.const("admin", "member")),
        })
        if is_user(payload):
            ...
    """

    __slots__ = ()

    def __call__(self, kind: Kind) -> GuardInterface[Any]:
        return type_of(kind)

    type_of = typeOf = staticmethod(type_of)
    instance_of = instanceOf = staticmethod(instance_of)
    const = enum = staticmethod(const)
    record = dict = staticmethod(record)
    array = staticmethod(array)
    object = shape = staticmethod(shape)
    tuple = staticmethod(tuple_of)
    intersection = staticmethod(intersection)
    union = staticmethod(union)

    # Terminals
    null = NULL
    undefined = UNDEFINED_GUARD
    nullish = nil = NULLISH
    unknown = UNKNOWN
    any = ANY


is_ = Is()
