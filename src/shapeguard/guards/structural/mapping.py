"""
Record and object-shape guards.

Both require a non-``None`` value classified as ``object``. Matching is
open: members the guard does not mention are never inspected.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeGuard

from shapeguard.domain.exceptions import GuardDefinitionError
from shapeguard.domain.interfaces import Guard, GuardInterface
from shapeguard.domain.members import is_object, own_entries, read_member
from shapeguard.domain.models import Symbol
from shapeguard.guards.validation import logger, require_guards


@dataclass(frozen=True, eq=False)
class RecordGuard(GuardInterface[Any]):
    """
    Matches objects whose every own member satisfies at least one child guard.

    Keys are unconstrained. ``Symbol`` keys are checked alongside string
    keys. With no children any object matches.
    """

    guards: tuple[Guard, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "guards", require_guards(self.guards, "record"))

    def __call__(self, value: Any) -> TypeGuard[Any]:
        if not is_object(value):
            return False
        if not self.guards:
            return True
        return all(
            any(guard(member) for guard in self.guards)
            for _key, member in own_entries(value)
        )


def _is_key(key: Any) -> bool:
    if isinstance(key, bool):
        return False
    return isinstance(key, (str, int, Symbol))


@dataclass(frozen=True, eq=False)
class ObjectGuard(GuardInterface[Any]):
    """
    Matches objects where each key of ``fields`` satisfies its guard.

    A missing member reads as ``UNDEFINED``, so a key is optional exactly
    when its guard accepts ``UNDEFINED``. String and integer keys are
    checked first, then ``Symbol`` keys, each in declaration order.
    """

    fields: Mapping[Any, Guard]

    def __post_init__(self) -> None:
        if not isinstance(self.fields, Mapping):
            logger.debug("object rejected non-mapping %r", self.fields)
            raise GuardDefinitionError(
                f"object() expects a mapping of keys to guards, "
                f"got {type(self.fields).__name__}",
                argument=self.fields,
            )
        for key in self.fields:
            if not _is_key(key):
                logger.debug("object rejected key %r", key)
                raise GuardDefinitionError(
                    f"object() keys must be str, int or Symbol, got {type(key).__name__}",
                    argument=key,
                )
        keys = [key for key in self.fields if not isinstance(key, Symbol)]
        keys += [key for key in self.fields if isinstance(key, Symbol)]
        guards = require_guards((self.fields[key] for key in keys), "object")
        object.__setattr__(self, "fields", MappingProxyType(dict(zip(keys, guards))))

    def __call__(self, value: Any) -> TypeGuard[Any]:
        if not is_object(value):
            return False
        return all(guard(read_member(value, key)) for key, guard in self.fields.items())
