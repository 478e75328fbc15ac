"""
Pytest configuration and shared fixtures for Subcrate tests.

This module provides common test fixtures, configuration, and utilities
used across the test suite.
"""

import pytest
from pathlib import Path

from subcrate.utils.config import SubcrateConfig, set_config


_CONFIG_ENV_VARS = (
    "SUBCRATE_CONFIG",
    "SUBCRATE_MAX_DEPTH",
    "SUBCRATE_STRICT",
    "SUBCRATE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def default_config(monkeypatch, tmp_path):
    """Give every test a fresh default configuration."""
    for var in _CONFIG_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    config = SubcrateConfig(str(tmp_path / "missing_config.json"))
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration file and return its path."""
    def _write(content: str, file_name: str = "subcrate_config.yaml") -> Path:
        path = tmp_path / file_name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Empty working directory for scaffolding tests."""
    root = tmp_path / "workspace"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def package_dir(tmp_path):
    """Build a package directory from a manifest and source files."""
    def _build(manifest: str, files=None, name: str = "pkg") -> Path:
        root = tmp_path / name
        root.mkdir()
        (root / "Subcrate.yaml").write_text(manifest, encoding="utf-8")
        for rel, content in (files or {}).items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return root
    return _build

