"""TOML-based configuration for consistent hash rings.

Provides ``load_config`` / ``discover_config`` for loading ``consistency.toml``
and the frozen dataclasses holding ring settings.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from consistency.digest import DIGEST_ALGORITHMS, DigestAlgorithm

__all__ = [
    "CONFIG_FILENAME",
    "ConsistencyConfig",
    "RingConfig",
    "discover_config",
    "load_config",
]


CONFIG_FILENAME = "consistency.toml"


@dataclass(frozen=True)
class RingConfig:
    """Settings used to build a ``Ring``.

    Parameters
    ----------
    replicas : int
        Virtual nodes generated per owner. Higher values spread keys more
        evenly at the cost of memory and slower membership changes.
    digest : DigestAlgorithm
        Hash function placing virtual nodes and keys: ``"sha1"``,
        ``"md5"``, ``"sha256"`` or ``"blake2b"``.

    Raises
    ------
    ValueError
        If ``replicas`` is smaller than 1 or ``digest`` is unknown.

    Examples
    --------
    >>> RingConfig(replicas=64, digest="md5")
    RingConfig(replicas=64, digest='md5')
    """

    replicas: int = 160
    digest: DigestAlgorithm = "sha1"

    def __post_init__(self) -> None:
        if self.replicas < 1:
            msg = f"replicas must be a positive integer, got {self.replicas}"
            raise ValueError(msg)
        if self.digest not in DIGEST_ALGORITHMS:
            msg = (
                f"Unknown digest algorithm {self.digest!r}, "
                f"expected one of {sorted(DIGEST_ALGORITHMS)}"
            )
            raise ValueError(msg)


@dataclass(frozen=True)
class ConsistencyConfig:
    """Top-level configuration loaded from ``consistency.toml``.

    Examples
    --------
    >>> ConsistencyConfig().ring.replicas
    160
    """

    ring: RingConfig = field(default_factory=RingConfig)


def discover_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for ``consistency.toml``.

    Parameters
    ----------
    start : Path | None
        Directory to start searching from.

    Returns
    -------
    Path | None
        Path to the discovered config file, or ``None`` if not found.
    """
    current = start or Path.cwd()
    current = current.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(path: Path | None = None) -> ConsistencyConfig:
    """Load a ``ConsistencyConfig`` from a TOML file.

    If *path* is ``None``, auto-discovers ``consistency.toml`` by walking up
    from the current working directory.  Returns default config if no file
    is found.

    Parameters
    ----------
    path : Path | None
        Explicit path to a TOML config file.

    Returns
    -------
    ConsistencyConfig

    Raises
    ------
    FileNotFoundError
        If an explicit *path* is given but does not exist.

    Examples
    --------
    >>> config = load_config(Path("consistency.toml"))
    >>> config.ring.replicas
    160
    """
    if path is None:
        discovered = discover_config()
        if discovered is None:
            return ConsistencyConfig()
        path = discovered

    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open("rb") as f:
        raw = tomllib.load(f)

    ring_raw: dict[str, Any] = raw.get("ring", {})
    return ConsistencyConfig(ring=RingConfig(**ring_raw))
