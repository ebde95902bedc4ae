"""Tests for the guard tree renderer."""

import io

from rich.console import Console
from rich.tree import Tree

from shapeguard import Symbol, is_
from shapeguard.visualization import guard_tree, render_guard_tree


def is_even(value) -> bool:
    return isinstance(value, int) and value % 2 == 0


def _render(guard) -> str:
    buffer = io.StringIO()
    console = Console(file=buffer, width=100, color_system=None)
    render_guard_tree(guard, console=console)
    return buffer.getvalue()


class TestGuardTree:
    """guard_tree builds a rich Tree without printing."""

    def test_returns_tree(self):
        assert isinstance(guard_tree(is_("string")), Tree)

    def test_children_become_nodes(self):
        tree = guard_tree(is_.union(is_("string"), is_.null))
        assert len(tree.children) == 2

    def test_object_keys_become_branches(self):
        tree = guard_tree(is_.object({"a": is_.any, "b": is_.any}))
        assert len(tree.children) == 2
        assert all(len(branch.children) == 1 for branch in tree.children)

    def test_leaf_has_no_children(self):
        assert guard_tree(is_.const(1)).children == []


class TestRenderGuardTree:
    """render_guard_tree prints labels for every guard."""

    def test_nested_shape(self):
        output = _render(
            is_.object(
                {
                    "name": is_("string"),
                    "roles": is_.array(is_.const("admin", "member")),
                    "point": is_.tuple(is_("number"), is_("number")),
                    "meta": is_.union(is_.record(is_.any), is_.nullish),
                }
            )
        )
        assert "object" in output
        assert "'name':" in output
        assert "type_of('string')" in output
        assert "array" in output
        assert "const('admin', 'member')" in output
        assert "[0]" in output
        assert "[1]" in output
        assert "union" in output
        assert "record" in output
        assert "nullish" in output

    def test_symbol_keys(self):
        output = _render(is_.object({Symbol("id"): is_("bigint")}))
        assert "Symbol('id'):" in output
        assert "type_of('bigint')" in output

    def test_instance_of_and_intersection(self):
        output = _render(is_.intersection(is_.instance_of(int, float), is_.unknown))
        assert "intersection" in output
        assert "instance_of(int, float)" in output
        assert "unknown" in output

    def test_plain_callable_uses_qualname(self):
        output = _render(is_.array(is_even, callable))
        assert "is_even" in output
        assert "callable" in output

    def test_returns_printed_tree(self):
        buffer = io.StringIO()
        tree = render_guard_tree(is_.null, console=Console(file=buffer))
        assert isinstance(tree, Tree)
        assert "null" in buffer.getvalue()
