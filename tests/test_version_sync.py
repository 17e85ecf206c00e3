#!/usr/bin/env python3
"""
Tests that VERSION, pyproject.toml and filesaver.__version__ agree.
"""

import tomllib

import filesaver
from conftest import REPO_ROOT


def test_version_matches_everywhere():
	version_file = (REPO_ROOT / "VERSION").read_text(encoding="utf-8").strip()
	pyproject = tomllib.loads((REPO_ROOT / "pyproject.toml").read_text(encoding="utf-8"))
	assert pyproject["project"]["version"] == version_file
	assert filesaver.__version__ == version_file


def test_console_script_points_at_cli():
	pyproject = tomllib.loads((REPO_ROOT / "pyproject.toml").read_text(encoding="utf-8"))
	assert pyproject["project"]["scripts"]["filesaver"] == "filesaver.cli:main"
