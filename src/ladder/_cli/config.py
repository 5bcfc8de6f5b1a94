"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in ladder configuration."""


@dataclass(slots=True, frozen=True)
class LadderConfig:
    """Configuration loaded from pyproject.toml.

    All relative paths are resolved from the project root (directory containing pyproject.toml).
    """

    circuit: Path | None = None
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            # Reached filesystem root
            return None
        current = parent


def load_config(pyproject_path: Path) -> LadderConfig:
    """Load and validate [tool.ladder] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed LadderConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    ladder_section = data.get("tool", {}).get("ladder", {})
    if not ladder_section:
        return LadderConfig(project_root=project_root)

    circuit_path: Path | None = None
    if "circuit" in ladder_section:
        circuit_value = ladder_section["circuit"]
        if not isinstance(circuit_value, str):
            msg = "Invalid [tool.ladder].circuit: expected string path"
            raise ConfigError(msg)
        circuit_path = Path(circuit_value)
        if not circuit_path.is_absolute():
            circuit_path = project_root / circuit_path

    return LadderConfig(circuit=circuit_path, project_root=project_root)


def get_config() -> LadderConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        LadderConfig (may be empty if no pyproject.toml or no [tool.ladder] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return LadderConfig()
    return load_config(pyproject_path)
