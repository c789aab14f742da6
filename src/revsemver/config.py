# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class SemverConfig:
    """CLI configuration loaded from the ``[tool.revsemver]`` table.

    Attributes:
        project_dir: Directory containing pyproject.toml
        tolerant: Parse versions in tolerant mode by default
        reverse: Sort versions in descending order by default
    """

    project_dir: Path
    tolerant: bool = False
    reverse: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "SemverConfig":
        """Load configuration from pyproject.toml.

        A missing pyproject.toml yields the default configuration.

        Raises:
            ConfigError: If the file is not valid TOML or has bad values
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            return cls(project_dir=project_path)

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(cls, pyproject: dict[str, Any], project_dir: Path) -> "SemverConfig":
        """Create SemverConfig from a parsed pyproject.toml dictionary."""
        tool_table = pyproject.get("tool", {})
        if not isinstance(tool_table, dict):
            raise ConfigError("[tool] must be a table")

        tool_config = tool_table.get("revsemver", {})
        if not isinstance(tool_config, dict):
            raise ConfigError("[tool.revsemver] must be a table")

        values: dict[str, bool] = {}
        for key in ("tolerant", "reverse"):
            if key not in tool_config:
                continue
            value = tool_config[key]
            if not isinstance(value, bool):
                raise ConfigError(
                    f"tool.revsemver.{key} must be a boolean, got {type(value).__name__}"
                )
            values[key] = value

        unknown = sorted(set(tool_config) - {"tolerant", "reverse"})
        if unknown:
            raise ConfigError(f"Unknown keys in [tool.revsemver]: {', '.join(unknown)}")

        return cls(project_dir=project_dir, **values)


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory containing a pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        The project directory, or None if no pyproject.toml was found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    for directory in (current, *current.parents):
        if (directory / "pyproject.toml").exists():
            return directory

    return None


def load_config(project_dir: Optional[Path] = None) -> SemverConfig:
    """Load configuration for the given directory, or the nearest project."""
    if project_dir is not None:
        return SemverConfig.from_pyproject(project_dir)

    root = find_project_root()
    if root is None:
        return SemverConfig(project_dir=Path.cwd())
    return SemverConfig.from_pyproject(root)
