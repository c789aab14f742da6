# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """Create a project directory whose pyproject.toml has no revsemver table."""
    project_dir = tmp_path / "empty_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "empty-project"
version = "1.0.0"
"""
    )
    return project_dir


@pytest.fixture
def tolerant_project(tmp_path: Path) -> Path:
    """Create a project directory configured for tolerant, descending output."""
    project_dir = tmp_path / "tolerant_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "tolerant-project"
version = "1.0.0"

[tool.revsemver]
tolerant = true
reverse = true
"""
    )
    return project_dir
