"""Consistency - consistent hashing with virtual nodes for Python 3.12+.

Basic usage:
    from consistency import NamedNode, Ring

    ring = Ring(3, NamedNode("Foo", "192.168.0.1", 1234))
    ring.add(NamedNode("Bar", "192.168.0.2", 1234))
    ring.add(NamedNode("Baz", "192.168.0.3", 1234))

    owner = ring.lookup("hello world")
    print(owner)  # NamedNode<(... addr=...)>
"""

from consistency.config import (
    ConsistencyConfig,
    RingConfig,
    discover_config,
    load_config,
)
from consistency.digest import Digest, DigestAlgorithm, digest_for, hash_of
from consistency.node import NamedNode, Node
from consistency.ring import Ring, VirtualNode

__all__ = [
    "ConsistencyConfig",
    "Digest",
    "DigestAlgorithm",
    "NamedNode",
    "Node",
    "Ring",
    "RingConfig",
    "VirtualNode",
    "digest_for",
    "discover_config",
    "hash_of",
    "load_config",
]
