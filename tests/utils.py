"""Test utilities for ring tests."""

from __future__ import annotations

from consistency import Digest


class MutableNode:
    """Owner with mutable payload, used to check the ring keeps its own copy."""

    def __init__(self, name: str, address: str) -> None:
        self.name = name
        self.address = address

    def __eq__(self, other: object) -> bool:
        return isinstance(other, MutableNode) and self.name == other.name

    def __lt__(self, other: MutableNode) -> bool:
        return self.name < other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return f"MutableNode<({self.name} addr={self.address})>"


def table_digest(table: dict[str, str]) -> Digest:
    """Digest resolving labels found in *table* and passing other keys through.

    Lets tests place virtual nodes at chosen positions and look up raw hashes.
    """

    def digest(key: str) -> str:
        return table.get(key, key)

    return digest
