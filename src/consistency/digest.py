"""Deterministic string digests used to place keys and virtual nodes.

Every digest renders as fixed-length lowercase hex, so plain string
comparison orders digests the same way their integer values would.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from typing import Literal, get_args

__all__ = [
    "DIGEST_ALGORITHMS",
    "Digest",
    "DigestAlgorithm",
    "digest_for",
    "hash_of",
]


type Digest = Callable[[str], str]
type DigestAlgorithm = Literal["sha1", "md5", "sha256", "blake2b"]

DIGEST_ALGORITHMS: frozenset[str] = frozenset(get_args(DigestAlgorithm.__value__))


def hash_of(key: str) -> str:
    """SHA-1 hex digest of *key*.

    Parameters
    ----------
    key : str
        Arbitrary text, encoded as UTF-8 before hashing.

    Returns
    -------
    str
        40 lowercase hex characters.

    Examples
    --------
    >>> len(hash_of("Foo_0"))
    40
    """
    return hashlib.sha1(key.encode("utf-8"), usedforsecurity=False).hexdigest()


def _md5(key: str) -> str:
    return hashlib.md5(key.encode("utf-8"), usedforsecurity=False).hexdigest()


def _sha256(key: str) -> str:
    return hashlib.sha256(key.encode("utf-8")).hexdigest()


def _blake2b(key: str) -> str:
    return hashlib.blake2b(key.encode("utf-8"), digest_size=20).hexdigest()


_DIGESTS: dict[str, Digest] = {
    "sha1": hash_of,
    "md5": _md5,
    "sha256": _sha256,
    "blake2b": _blake2b,
}


def digest_for(algorithm: DigestAlgorithm) -> Digest:
    """Return the digest function registered under *algorithm*.

    Raises
    ------
    ValueError
        If *algorithm* is not one of ``DIGEST_ALGORITHMS``.
    """
    try:
        return _DIGESTS[algorithm]
    except KeyError:
        msg = (
            f"Unknown digest algorithm {algorithm!r}, "
            f"expected one of {sorted(DIGEST_ALGORITHMS)}"
        )
        raise ValueError(msg) from None
