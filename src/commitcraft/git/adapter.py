"""Git subprocess wrapper — add, commit, push."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence


class GitError(Exception):
    """Raised when git is unavailable or does not finish in time."""


@dataclass(frozen=True)
class GitResult:
    """Exit status and captured output of one git invocation."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def output(self) -> str:
        """Trimmed stderr if present, else trimmed stdout."""
        return (self.stderr.strip() or self.stdout.strip())


def run_git(args: Sequence[str], cwd: Optional[Path] = None, timeout: int = 120) -> GitResult:
    """Run ``git *args`` and capture its output. Non-zero exits are returned, not raised."""
    cmd = ("git", *args)
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd or Path.cwd(),
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError("git is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    return GitResult(
        args=cmd,
        returncode=result.returncode,
        stdout=result.stdout or "",
        stderr=result.stderr or "",
    )


def add_all(cwd: Optional[Path] = None) -> GitResult:
    """Stage every change in the working tree."""
    return run_git(["add", "."], cwd=cwd)


def commit(message: str, cwd: Optional[Path] = None) -> GitResult:
    return run_git(["commit", "-m", message], cwd=cwd)


def push(cwd: Optional[Path] = None) -> GitResult:
    # pushing waits on the network
    return run_git(["push"], cwd=cwd, timeout=300)
