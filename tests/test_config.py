"""Tests for the configuration module."""

from pathlib import Path

import pytest

from ladder._cli.config import ConfigError, LadderConfig, find_pyproject_toml, get_config, load_config


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert find_pyproject_toml(tmp_path) == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")
        subdir = tmp_path / "circuits" / "adders"
        subdir.mkdir(parents=True)

        assert find_pyproject_toml(subdir) == pyproject


class TestLoadConfig:
    """Tests for load_config."""

    def test_relative_circuit_path(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.ladder]\ncircuit = "circuits/xor.toml"\n')

        config = load_config(pyproject)

        assert config.circuit == tmp_path / "circuits" / "xor.toml"
        assert config.project_root == tmp_path

    def test_absolute_circuit_path(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "xor.toml"
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(f"[tool.ladder]\ncircuit = {str(target)!r}\n")

        assert load_config(pyproject).circuit == target

    def test_missing_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        assert load_config(pyproject) == LadderConfig(project_root=tmp_path)

    def test_circuit_must_be_string(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.ladder]\ncircuit = 3\n")

        with pytest.raises(ConfigError, match="expected string path"):
            load_config(pyproject)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.ladder\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)


class TestGetConfig:
    def test_reads_from_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.ladder]\ncircuit = "xor.toml"\n')
        monkeypatch.chdir(tmp_path)

        assert get_config().circuit == tmp_path.resolve() / "xor.toml"
