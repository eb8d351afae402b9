"""Shared fixtures for ring tests."""

from __future__ import annotations

import pytest

from consistency import NamedNode, Ring


@pytest.fixture
def foo() -> NamedNode:
    return NamedNode("Foo", "192.168.0.1", 1234)


@pytest.fixture
def bar() -> NamedNode:
    return NamedNode("Bar", "192.168.0.2", 1234)


@pytest.fixture
def baz() -> NamedNode:
    return NamedNode("Baz", "192.168.0.3", 1234)


@pytest.fixture
def ring(foo: NamedNode, bar: NamedNode, baz: NamedNode) -> Ring[NamedNode]:
    """Foo, Bar and Baz with three replicas each."""
    ring = Ring(3, foo)
    ring.add(bar)
    ring.add(baz)
    return ring
