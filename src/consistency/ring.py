"""Consistent hash ring with virtual nodes.

Maps arbitrary keys onto a mutable set of owners so that adding or removing
an owner only reassigns the keys that fall on that owner's virtual nodes.

This is a pure data structure: it performs no I/O and holds no locks.
Callers sharing a ring between threads must serialize ``add``/``remove``
against every other call themselves.

Example:
    ring = Ring(3, NamedNode("Foo"))
    ring.add(NamedNode("Bar"))
    ring.add(NamedNode("Baz"))

    # Owner responsible for a key
    owner = ring.lookup("users:user-123")
"""

from __future__ import annotations

import bisect
import copy
import heapq
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from consistency.config import RingConfig
from consistency.digest import Digest, digest_for, hash_of
from consistency.node import Node

__all__ = ["Ring", "VirtualNode"]

logger = logging.getLogger("consistency.ring")


@dataclass(frozen=True, order=True)
class VirtualNode[N: Node]:
    """One position on the hash ring.

    Equality, ordering and hashing use ``hash`` alone: two virtual nodes
    with the same digest are indistinguishable even if their owners differ.
    """

    replica: int = field(compare=False)  # 0 to replicas-1
    owner: N = field(compare=False)  # the ring's stored copy of the owner
    hash: str

    @classmethod
    def create(cls, replica: int, owner: N, digest: Digest = hash_of) -> VirtualNode[N]:
        """Place replica number *replica* of *owner* at ``digest("{name}_{replica}")``."""
        return cls(replica, owner, digest(f"{owner.name}_{replica}"))


class Ring[N: Node]:
    """Consistent hash ring over owners implementing ``Node``.

    Features:
    - O(log n) key lookup via binary search
    - ``replicas`` virtual nodes per owner for even distribution
    - Single-pass merge when an owner joins, no re-sort
    - Only the departing owner's keys move when it leaves

    The ring keeps its own copy of every owner (made with ``copy.copy``);
    lookups return those stored copies.

    Parameters
    ----------
    replicas : int
        Virtual nodes generated per owner, fixed for the ring's lifetime.
    seed : N
        First owner placed on the ring.
    digest : Digest
        Function hashing both virtual node labels and lookup keys.

    Raises
    ------
    ValueError
        If ``replicas`` is smaller than 1.

    Examples
    --------
    >>> ring = Ring(3, NamedNode("Foo"))
    >>> ring.add(NamedNode("Bar"))
    >>> ring
    Ring(replicas=3, owners=2, vnodes=6)
    """

    def __init__(self, replicas: int, seed: N, *, digest: Digest = hash_of) -> None:
        if replicas < 1:
            msg = f"replicas must be a positive integer, got {replicas}"
            raise ValueError(msg)

        self._replicas = replicas
        self._digest = digest
        self._owners: dict[str, N] = {}  # name -> stored owner, insertion order
        self._vnodes: list[VirtualNode[N]] = []  # sorted by hash
        self._hashes: list[str] = []  # just hashes for bisect

        self.add(seed)

    @classmethod
    def from_config(cls, seed: N, config: RingConfig | None = None) -> Ring[N]:
        """Build a ring from a ``RingConfig`` (defaults when ``None``)."""
        config = config or RingConfig()
        return cls(config.replicas, seed, digest=digest_for(config.digest))

    def _spawn(self, owner: N) -> list[VirtualNode[N]]:
        return sorted(
            VirtualNode.create(replica, owner, self._digest)
            for replica in range(self._replicas)
        )

    def contains(self, name: str) -> bool:
        """Check whether an owner called *name* is on the ring."""
        return name in self._owners

    def contains_owner(self, owner: N) -> bool:
        return self.contains(owner.name)

    def get(self, name: str) -> N | None:
        """Return the ring's stored copy of the owner called *name*."""
        return self._owners.get(name)

    def add(self, owner: N) -> None:
        """Add *owner* and its virtual nodes.

        Adding an owner whose name is already on the ring is a no-op.

        Args:
            owner: The owner to place. The ring stores a copy of it.
        """
        if owner.name in self._owners:
            logger.debug("Owner already on ring, ignoring add: %s", owner.name)
            return

        stored = copy.copy(owner)
        self._owners[stored.name] = stored

        # Both sides are sorted, so a single merge pass keeps the ring sorted
        self._vnodes = list(heapq.merge(self._vnodes, self._spawn(stored)))
        self._hashes = [vnode.hash for vnode in self._vnodes]

        logger.debug(
            "Added owner %s (owners=%d, vnodes=%d)",
            stored.name,
            len(self._owners),
            len(self._vnodes),
        )

    def remove(self, owner: N) -> None:
        """Remove the owner matching *owner* by name and all its virtual nodes.

        Removing an owner that is not on the ring is a no-op.

        Args:
            owner: The owner to remove. Only its name is consulted.
        """
        stored = self._owners.pop(owner.name, None)
        if stored is None:
            logger.debug("Owner not on ring, ignoring remove: %s", owner.name)
            return

        self._vnodes = [
            vnode for vnode in self._vnodes if vnode.owner.name != stored.name
        ]
        self._hashes = [vnode.hash for vnode in self._vnodes]

        logger.debug(
            "Removed owner %s (owners=%d, vnodes=%d)",
            stored.name,
            len(self._owners),
            len(self._vnodes),
        )

    def lookup_by_hash(self, key_hash: str) -> N | None:
        """Get the owner of the first virtual node at or after *key_hash*.

        A hash past the last virtual node wraps around to the first one.

        Args:
            key_hash: A digest produced by the ring's digest function.

        Returns:
            The stored owner responsible for the hash, or None if the ring
            has no virtual nodes.
        """
        if not self._vnodes:
            return None

        idx = bisect.bisect_left(self._hashes, key_hash)

        # Wrap around to first vnode if past the end
        if idx >= len(self._vnodes):
            idx = 0

        return self._vnodes[idx].owner

    def lookup(self, key: str) -> N | None:
        """Get the owner responsible for *key*, or None on an empty ring."""
        return self.lookup_by_hash(self._digest(key))

    def is_responsible(self, name: str, key: str) -> bool:
        """Check if the owner called *name* is the one *key* resolves to."""
        owner = self.lookup(key)
        return owner is not None and owner.name == name

    def vnodes_of(self, name: str) -> tuple[VirtualNode[N], ...]:
        """Virtual nodes of the owner called *name*, in ring order."""
        return tuple(vnode for vnode in self._vnodes if vnode.owner.name == name)

    @property
    def replicas(self) -> int:
        return self._replicas

    @property
    def owners(self) -> tuple[N, ...]:
        """Stored owners in the order they were added."""
        return tuple(self._owners.values())

    @property
    def vnodes(self) -> tuple[VirtualNode[N], ...]:
        """All virtual nodes, ascending by hash."""
        return tuple(self._vnodes)

    @property
    def owner_count(self) -> int:
        return len(self._owners)

    @property
    def vnode_count(self) -> int:
        return len(self._vnodes)

    def __len__(self) -> int:
        """Number of owners."""
        return len(self._owners)

    def __iter__(self) -> Iterator[N]:
        return iter(tuple(self._owners.values()))

    def __contains__(self, item: object) -> bool:
        """Check membership by name, accepting either a name or an owner."""
        if isinstance(item, str):
            return self.contains(item)
        name = getattr(item, "name", None)
        return isinstance(name, str) and self.contains(name)

    def __repr__(self) -> str:
        return (
            f"Ring(replicas={self._replicas}, owners={len(self._owners)}, "
            f"vnodes={len(self._vnodes)})"
        )
