from __future__ import annotations

from pathlib import Path

import pytest

from consistency.config import (
    ConsistencyConfig,
    RingConfig,
    discover_config,
    load_config,
)


# ---------------------------------------------------------------------------
# Config dataclass defaults
# ---------------------------------------------------------------------------


class TestRingConfig:
    def test_defaults(self) -> None:
        cfg = RingConfig()
        assert cfg.replicas == 160
        assert cfg.digest == "sha1"

    def test_custom(self) -> None:
        cfg = RingConfig(replicas=8, digest="blake2b")
        assert cfg.replicas == 8
        assert cfg.digest == "blake2b"

    def test_frozen(self) -> None:
        cfg = RingConfig()
        with pytest.raises(AttributeError):
            cfg.replicas = 42  # type: ignore[misc]

    @pytest.mark.parametrize("replicas", [0, -3])
    def test_rejects_non_positive_replicas(self, replicas: int) -> None:
        with pytest.raises(ValueError, match="replicas must be a positive integer"):
            RingConfig(replicas=replicas)

    def test_rejects_unknown_digest(self) -> None:
        with pytest.raises(ValueError, match="Unknown digest algorithm 'crc32'"):
            RingConfig(digest="crc32")  # type: ignore[arg-type]


class TestConsistencyConfig:
    def test_defaults(self) -> None:
        cfg = ConsistencyConfig()
        assert cfg.ring == RingConfig()


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


class TestDiscoverConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / "consistency.toml").write_text("")
        assert discover_config(tmp_path) == tmp_path / "consistency.toml"

    def test_walks_up_to_parent(self, tmp_path: Path) -> None:
        (tmp_path / "consistency.toml").write_text("")
        child = tmp_path / "a" / "b"
        child.mkdir(parents=True)
        assert discover_config(child) == tmp_path / "consistency.toml"

    def test_ignores_directory_named_like_config(self, tmp_path: Path) -> None:
        start = tmp_path / "project"
        (start / "consistency.toml").mkdir(parents=True)
        found = discover_config(start)
        assert found is None or found != start / "consistency.toml"

    def test_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "consistency.toml").write_text("")
        monkeypatch.chdir(tmp_path)
        assert discover_config() == tmp_path.resolve() / "consistency.toml"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "consistency.toml"
        path.write_text('[ring]\nreplicas = 32\ndigest = "md5"\n')

        cfg = load_config(path)

        assert cfg.ring == RingConfig(replicas=32, digest="md5")

    def test_partial_ring_table(self, tmp_path: Path) -> None:
        path = tmp_path / "consistency.toml"
        path.write_text("[ring]\nreplicas = 4\n")

        cfg = load_config(path)

        assert cfg.ring.replicas == 4
        assert cfg.ring.digest == "sha1"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "consistency.toml"
        path.write_text("")
        assert load_config(path) == ConsistencyConfig()

    def test_missing_explicit_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            load_config(tmp_path / "nope.toml")

    def test_discovers_from_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "consistency.toml").write_text("[ring]\nreplicas = 12\n")
        nested = tmp_path / "src"
        nested.mkdir()
        monkeypatch.chdir(nested)

        assert load_config().ring.replicas == 12

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        path = tmp_path / "consistency.toml"
        path.write_text("[ring]\nreplicas = 0\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_unknown_key_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "consistency.toml"
        path.write_text("[ring]\nvnodes = 12\n")

        with pytest.raises(TypeError):
            load_config(path)
