"""
Value model for the guard algebra.

Python has no ``undefined`` and no symbol keys, so this module supplies both
(``UNDEFINED`` and ``Symbol``) together with the primitive classification
that every kind guard is defined against.
"""

from typing import Any, Literal, TypeAlias, get_args

# =============================================================================
# SENTINELS
# =============================================================================


class Undefined:
    """
    Type of the ``UNDEFINED`` sentinel.

    ``UNDEFINED`` is what a missing member reads as. It is distinct from
    ``None`` (which plays the role of ``null``) and is falsy.
    """

    _instance: "Undefined | None" = None

    def __new__(cls) -> "Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined()


class Symbol:
    """
    Unique key living in a namespace orthogonal to string keys.

    Two symbols are never equal unless they are the same object, even with
    the same description. Symbols may key mapping entries and object guard
    maps alongside ordinary string keys.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None):
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"


# =============================================================================
# PRIMITIVE CLASSIFICATION
# =============================================================================

Kind: TypeAlias = Literal[
    "bigint",
    "boolean",
    "function",
    "number",
    "object",
    "string",
    "symbol",
    "undefined",
]

KINDS: frozenset[str] = frozenset(get_args(Kind))

Primitive: TypeAlias = int | float | bool | str | Symbol | Undefined | None

Constructor: TypeAlias = type


def kind_of(value: Any) -> Kind:
    """
    Return the primitive classification of a value.

    ``None`` classifies as ``object``; an ``int`` classifies as ``number``
    (see ``matches_kind`` for ``bigint``); anything callable is a
    ``function``.
    """
    if value is UNDEFINED:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if callable(value):
        return "function"
    return "object"


def matches_kind(value: Any, kind: str) -> bool:
    """Whether ``value`` belongs to ``kind``. Every ``int`` is also a ``bigint``."""
    if kind == "bigint":
        return isinstance(value, int) and not isinstance(value, bool)
    return kind_of(value) == kind


def is_primitive(value: Any) -> bool:
    """Whether a value may be used as a ``const`` literal."""
    return kind_of(value) not in ("object", "function") or value is None


def strictly_equal(left: Any, right: Any) -> bool:
    """
    Identity-style equality for primitives.

    Values of different classifications are never equal, so ``True`` does
    not equal ``1``. ``int`` and ``float`` share a classification, so ``1``
    equals ``1.0``. NaN is unequal to itself. Symbols and ``UNDEFINED``
    compare by identity.
    """
    if left is None or right is None:
        return left is right
    kind = kind_of(left)
    if kind != kind_of(right):
        return False
    if kind in ("symbol", "undefined", "object", "function"):
        return left is right
    return bool(left == right)
