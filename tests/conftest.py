"""
Shared test fixtures and configuration.
"""

from pathlib import Path

import pytest


@pytest.fixture
def go_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An isolated Go project with a cmd/ directory, used as cwd."""
    root = tmp_path / "app"
    (root / "cmd").mkdir(parents=True)
    (root / "cmd" / "root.go").write_text("package cmd\n")
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def gopath_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """A temporary GOPATH."""
    path = tmp_path / "gopath"
    (path / "src").mkdir(parents=True)
    monkeypatch.setenv("GOPATH", str(path))
    return path
