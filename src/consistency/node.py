"""Owner identity contract for entities placed on a ``Ring``."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, Self, runtime_checkable

__all__ = ["NamedNode", "Node"]


@runtime_checkable
class Node(Protocol):
    """Protocol every ring owner must satisfy.

    The ring only relies on ``name``: it is the basis of equality and must
    be unique among the owners of one ring.  Ordering has to agree with
    name ordering.  Owners are duplicated into the ring with
    ``copy.copy``, so types holding mutable state may define ``__copy__``.
    """

    @property
    def name(self) -> str: ...

    def __eq__(self, other: object, /) -> bool: ...

    def __lt__(self, other: Self, /) -> bool: ...

    def __str__(self) -> str: ...


@dataclass(frozen=True, order=True)
class NamedNode:
    """Ready-made owner identified by name, carrying an optional address.

    ``address`` and ``port`` are opaque payload: they take no part in
    equality, ordering or hashing.

    Parameters
    ----------
    name : str
        Unique identifier on the ring.
    address : str | None
        Host the owner can be reached at.
    port : int | None
        Port the owner can be reached at.

    Examples
    --------
    >>> str(NamedNode("Foo", "192.168.0.1", 1234))
    'NamedNode<(Foo addr=192.168.0.1:1234)>'
    >>> NamedNode("Foo", "10.0.0.1") == NamedNode("Foo", "10.0.0.2")
    True
    """

    name: str
    address: str | None = field(default=None, compare=False)
    port: int | None = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.address is None:
            return f"NamedNode<({self.name})>"
        if self.port is None:
            return f"NamedNode<({self.name} addr={self.address})>"
        return f"NamedNode<({self.name} addr={self.address}:{self.port})>"
