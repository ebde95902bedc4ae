"""
Guard tree renderer.

Draws a composed guard as a ``rich`` tree: one node per guard, with object
keys and tuple positions labelling the edges to their child guards.
"""

from __future__ import annotations

from typing import Any

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

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

_TERMINAL_NAMES: dict[type, str] = {
    NullGuard: "null",
    UndefinedGuard: "undefined",
    NullishGuard: "nullish",
    AnyGuard: "any",
    UnknownGuard: "unknown",
}

_COMBINATOR_NAMES: dict[type, str] = {
    ArrayGuard: "array",
    TupleGuard: "tuple",
    RecordGuard: "record",
    ObjectGuard: "object",
    UnionGuard: "union",
    IntersectionGuard: "intersection",
}

_CHILD_BEARING = (ArrayGuard, RecordGuard, UnionGuard, IntersectionGuard)


def _label(guard: Any) -> Text:
    if isinstance(guard, TypeOfGuard):
        return Text(f"type_of({guard.kind!r})", style="cyan")
    if isinstance(guard, InstanceOfGuard):
        names = ", ".join(cls.__qualname__ for cls in guard.classes)
        return Text(f"instance_of({names})", style="cyan")
    if isinstance(guard, ConstGuard):
        literals = ", ".join(repr(literal) for literal in guard.literals)
        return Text(f"const({literals})", style="green")
    for cls, name in _TERMINAL_NAMES.items():
        if isinstance(guard, cls):
            return Text(name, style="magenta")
    for cls, name in _COMBINATOR_NAMES.items():
        if isinstance(guard, cls):
            return Text(name, style="bold")
    name = getattr(guard, "__qualname__", type(guard).__qualname__)
    return Text(name, style="dim")


def _add(node: Tree, guard: Any) -> None:
    if isinstance(guard, ObjectGuard):
        for key, child in guard.fields.items():
            branch = node.add(Text(f"{key!r}:", style="yellow"))
            _add(branch.add(_label(child)), child)
    elif isinstance(guard, TupleGuard):
        for index, child in enumerate(guard.guards):
            branch = node.add(Text(f"[{index}]", style="yellow"))
            _add(branch.add(_label(child)), child)
    elif isinstance(guard, _CHILD_BEARING):
        for child in guard.guards:
            _add(node.add(_label(child)), child)


def guard_tree(guard: Any) -> Tree:
    """
    Build a ``rich`` tree describing ``guard`` and its children.

    Args:
        guard: A guard or any one-argument callable

    Returns:
        The tree, ready to be printed by a ``rich`` console
    """
    tree = Tree(_label(guard))
    _add(tree, guard)
    return tree


def render_guard_tree(guard: Any, console: Console | None = None) -> Tree:
    """
    Print the tree for ``guard`` and return it.

    Args:
        guard: A guard or any one-argument callable
        console: Console to print to (defaults to a new stdout console)

    Returns:
        The printed tree
    """
    tree = guard_tree(guard)
    (console or Console()).print(tree)
    return tree
