"""Tests for ConstGuard."""

import pytest

from shapeguard import (
    UNDEFINED,
    ConstGuard,
    EmptyLiteralSetError,
    GuardDefinitionError,
    Symbol,
    is_,
)


class TestConstGuard:
    """Literal sets use strict equality."""

    def test_matches_listed_literals(self):
        guard = is_.const(1, 2)
        assert guard(1) is True
        assert guard(2) is True
        assert guard(3) is False

    def test_enum_is_const(self):
        assert is_.enum is is_.const
        assert is_.enum("a", "b")("b") is True

    def test_bool_and_int_never_match(self):
        assert is_.const(1)(True) is False
        assert is_.const(True)(1) is False
        assert is_.const(0)(False) is False

    def test_string_and_number_never_match(self):
        assert is_.const("1")(1) is False
        assert is_.const(1)("1") is False

    def test_int_matches_equal_float(self):
        assert is_.const(1)(1.0) is True

    def test_nan_matches_nothing(self):
        nan = float("nan")
        assert is_.const(nan)(nan) is False

    def test_none_and_undefined_are_distinct(self):
        assert is_.const(None)(None) is True
        assert is_.const(None)(UNDEFINED) is False
        assert is_.const(UNDEFINED)(UNDEFINED) is True
        assert is_.const(UNDEFINED)(None) is False

    def test_symbol_by_identity(self, symbol):
        guard = is_.const(symbol)
        assert guard(symbol) is True
        assert guard(Symbol("b")) is False

    def test_containers_never_match(self):
        assert is_.const("a")(["a"]) is False
        assert is_.const(1)({1: 1}) is False

    def test_literals_frozen_as_tuple(self):
        assert ConstGuard(["a", "b"]).literals == ("a", "b")

    def test_bool_and_int_guards_stay_distinct(self):
        one, true = is_.const(1), is_.const(True)
        assert one != true
        assert len({one, true}) == 2
        assert {one: "one", true: "true"}[true] == "true"

    def test_empty_literal_set_raises(self):
        with pytest.raises(EmptyLiteralSetError):
            is_.const()

    def test_empty_literal_set_is_value_error(self):
        with pytest.raises(ValueError, match="at least one literal"):
            is_.enum()

    def test_non_primitive_literal_raises(self):
        with pytest.raises(GuardDefinitionError, match="primitive literal") as excinfo:
            is_.const("a", ["b"])
        assert excinfo.value.argument == ["b"]
