"""Git interface layer."""

from commitcraft.git.adapter import GitError, GitResult, add_all, commit, push, run_git

__all__ = [
    "GitError",
    "GitResult",
    "add_all",
    "commit",
    "push",
    "run_git",
]
