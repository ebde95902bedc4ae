"""
Member access for object-classified values.

Reading is side-effect free apart from ordinary attribute access: mappings
are probed with ``in`` before indexing so ``__missing__`` never fires.
"""

from collections.abc import Iterator, Mapping
from typing import Any

from shapeguard.domain.models import UNDEFINED, kind_of


def is_array(value: Any) -> bool:
    """Native arrays are lists and tuples; strings and bytes are not."""
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    """Non-``None`` values classified as ``object``."""
    return value is not None and kind_of(value) == "object"


def _slot_names(cls: type) -> Iterator[str]:
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                yield f"_{klass.__name__.lstrip('_')}{name}"
            else:
                yield name


def own_entries(value: Any) -> Iterator[tuple[Any, Any]]:
    """
    Yield ``(key, member)`` pairs for every own member of ``value``.

    Mappings yield all items (string and ``Symbol`` keys alike), arrays
    yield ``(index, element)``. Other objects yield their instance
    ``__dict__`` followed by every assigned ``__slots__`` member along
    the MRO; unassigned slots are not members.
    """
    if isinstance(value, Mapping):
        yield from value.items()
    elif is_array(value):
        yield from enumerate(value)
    else:
        namespace = getattr(value, "__dict__", None)
        seen: set[Any] = set()
        if isinstance(namespace, Mapping):
            seen.update(namespace)
            yield from namespace.items()
        for name in _slot_names(type(value)):
            if name in seen:
                continue
            seen.add(name)
            member = getattr(value, name, UNDEFINED)
            if member is not UNDEFINED:
                yield name, member


def _holds_key(mapping: Mapping, key: Any) -> bool:
    if key not in mapping:
        return False
    # True == 1 and False == 0 hash alike; a bool key never matches an int
    # and vice versa.
    if isinstance(key, int) and key in (0, 1):
        return any(
            isinstance(stored, bool) == isinstance(key, bool)
            for stored in mapping
            if stored == key
        )
    return True


def read_member(value: Any, key: Any) -> Any:
    """
    Read ``value[key]``, returning ``UNDEFINED`` when the member is absent.

    Mapping keys match type-exactly on the bool/int line. Non-string keys
    on plain objects are looked up in the instance ``__dict__``. Negative
    array indices are absent.
    """
    if isinstance(value, Mapping):
        return value[key] if _holds_key(value, key) else UNDEFINED
    if is_array(value):
        if isinstance(key, int) and not isinstance(key, bool) and 0 <= key < len(value):
            return value[key]
        return UNDEFINED
    if isinstance(key, str):
        return getattr(value, key, UNDEFINED)
    namespace = getattr(value, "__dict__", None)
    if isinstance(namespace, Mapping) and _holds_key(namespace, key):
        return namespace[key]
    return UNDEFINED
