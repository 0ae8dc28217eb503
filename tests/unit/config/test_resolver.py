"""Unit tests for configuration path resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from audio_converter.config import ConfigResolver


class TestConfigResolver:
    """Tests for ConfigResolver."""

    def test_explicit_path_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test an explicit path takes priority over the working directory."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "audio_converter.yaml").write_text("transform: {}\n")
        explicit = tmp_path / "custom.yaml"
        explicit.write_text("transform: {}\n")

        assert ConfigResolver(explicit).resolve() == explicit

    def test_explicit_path_missing(self, tmp_path: Path) -> None:
        """Test a missing explicit path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="not found"):
            ConfigResolver(tmp_path / "missing.yaml").resolve()

    @pytest.mark.parametrize("name", ["audio_converter.yaml", "audio_converter.yml", "audio_converter.json"])
    def test_finds_config_in_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, name: str) -> None:
        """Test each default file name is discovered."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / name).write_text("{}\n")

        assert ConfigResolver().resolve() == tmp_path / name

    def test_yaml_preferred_over_json(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the first default name wins when several exist."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "audio_converter.json").write_text("{}\n")
        (tmp_path / "audio_converter.yaml").write_text("{}\n")

        assert ConfigResolver().resolve() == tmp_path / "audio_converter.yaml"

    def test_no_config_returns_none(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test None is returned when nothing is found."""
        monkeypatch.chdir(tmp_path)
        assert ConfigResolver().resolve() is None

    def test_get_default_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the default path points into the working directory."""
        monkeypatch.chdir(tmp_path)
        assert ConfigResolver.get_default_path() == tmp_path / "audio_converter.yaml"

    def test_explicit_directory_rejected(self, tmp_path: Path) -> None:
        """Test a directory given as --config is reported as not a file."""
        with pytest.raises(FileNotFoundError, match="is not a file"):
            ConfigResolver(tmp_path).resolve()

    def test_search_dir(self, tmp_path: Path) -> None:
        """Test an explicit search directory is used instead of the CWD."""
        (tmp_path / "audio_converter.yml").write_text("{}\n")
        assert ConfigResolver(search_dir=tmp_path).resolve() == tmp_path / "audio_converter.yml"

    def test_candidates_order(self, tmp_path: Path) -> None:
        """Test candidate paths follow the default name order."""
        assert [p.name for p in ConfigResolver(search_dir=tmp_path).candidates()] == [
            "audio_converter.yaml",
            "audio_converter.yml",
            "audio_converter.json",
        ]

    def test_get_default_path_in_search_dir(self, tmp_path: Path) -> None:
        """Test the default path honours an explicit directory."""
        assert ConfigResolver.get_default_path(tmp_path) == tmp_path / "audio_converter.yaml"
