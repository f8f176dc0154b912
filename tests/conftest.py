"""Shared test fixtures — config files and temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture
def record_console() -> Console:
    """A console that records output instead of writing to the terminal."""
    return Console(record=True, width=200, force_terminal=False, color_system=None)


@pytest.fixture
def custom_toml() -> str:
    return textwrap.dedent("""\
        subject = "update things"

        [[types]]
        value = "feat"
        label = "A new feature"

        [[types]]
        value = "docs"
        label = "Documentation only changes"

        [[scopes]]
        value = "cli"
        label = "Command line interface"

        [git]
        auto_add_all = false
        auto_push = true
    """)


@pytest.fixture
def write_config(tmp_path: Path):
    """Write *text* to commit.toml (or *name*) under tmp_path and return the path."""

    def _write(text: str, name: str = "commit.toml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


def _git(*args: str, cwd: Path) -> None:
    subprocess.run(["git", *args], cwd=cwd, capture_output=True, check=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository for integration tests."""
    repo = tmp_path / "repo"
    repo.mkdir()
    _git("init", cwd=repo)
    _git("config", "user.email", "test@test.com", cwd=repo)
    _git("config", "user.name", "Test", cwd=repo)
    _git("config", "commit.gpgsign", "false", cwd=repo)
    # Initial commit
    (repo / "README.md").write_text("# Test\n")
    _git("add", ".", cwd=repo)
    _git("commit", "-m", "init", cwd=repo)
    return repo


@pytest.fixture
def tmp_git_repo_with_remote(tmp_git_repo: Path, tmp_path: Path) -> Path:
    """tmp_git_repo with a bare origin and upstream tracking set."""
    remote = tmp_path / "origin.git"
    _git("init", "--bare", str(remote), cwd=tmp_path)
    _git("remote", "add", "origin", str(remote), cwd=tmp_git_repo)
    _git("push", "-u", "origin", "HEAD", cwd=tmp_git_repo)
    return tmp_git_repo

