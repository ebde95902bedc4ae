"""Shared pytest fixtures for shapeguard tests."""

from types import SimpleNamespace

import pytest

from shapeguard import Symbol


class CountingGuard:
    """Test guard that counts invocations and returns a fixed verdict."""

    def __init__(self, verdict: bool = True):
        self.verdict = verdict
        self.call_count = 0

    def __call__(self, value) -> bool:  # noqa: ARG002
        self.call_count += 1
        return self.verdict


@pytest.fixture
def counting_guard() -> type[CountingGuard]:
    """Expose CountingGuard so tests can build as many as they need."""
    return CountingGuard


@pytest.fixture
def symbol() -> Symbol:
    """A fresh hidden key."""
    return Symbol("b")


@pytest.fixture
def user_payload() -> dict:
    """A nested mapping resembling a decoded request body."""
    return {
        "name": "Ada",
        "age": 36,
        "tags": ["admin", "ops"],
        "address": {"city": "London", "zip": None},
    }


@pytest.fixture
def user_object() -> SimpleNamespace:
    """The same user as attributes on a plain object."""
    return SimpleNamespace(
        name="Ada",
        age=36,
        tags=["admin", "ops"],
        address=SimpleNamespace(city="London", zip=None),
    )
