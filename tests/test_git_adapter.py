"""Tests for the git subprocess wrapper."""

import subprocess
from pathlib import Path

import pytest

from commitcraft.git import adapter
from commitcraft.git.adapter import GitError, GitResult, add_all, commit, push, run_git


class TestGitResult:
    def test_ok(self):
        assert GitResult(("git", "status"), 0, "", "").ok is True
        assert GitResult(("git", "status"), 1, "", "").ok is False

    def test_output_prefers_stderr(self):
        result = GitResult(("git", "push"), 1, "out\n", "  err\n")
        assert result.output == "err"

    def test_output_falls_back_to_stdout(self):
        result = GitResult(("git", "commit"), 1, "nothing to commit\n", "")
        assert result.output == "nothing to commit"


class TestRunGit:
    def test_captures_stdout(self, tmp_git_repo: Path):
        result = run_git(["rev-parse", "--is-inside-work-tree"], cwd=tmp_git_repo)
        assert result.ok
        assert result.stdout.strip() == "true"
        assert result.args == ("git", "rev-parse", "--is-inside-work-tree")

    def test_nonzero_exit_returned(self, tmp_path: Path):
        result = run_git(["rev-parse", "--show-toplevel"], cwd=tmp_path)
        assert not result.ok
        assert "not a git repository" in result.stderr.lower()

    def test_missing_git_raises(self, monkeypatch, tmp_path: Path):
        def boom(*args, **kwargs):
            raise FileNotFoundError("git")

        monkeypatch.setattr(adapter.subprocess, "run", boom)
        with pytest.raises(GitError, match="not installed"):
            run_git(["status"], cwd=tmp_path)

    def test_timeout_raises(self, monkeypatch, tmp_path: Path):
        def slow(*args, **kwargs):
            raise subprocess.TimeoutExpired(cmd="git push", timeout=1)

        monkeypatch.setattr(adapter.subprocess, "run", slow)
        with pytest.raises(GitError, match="timed out"):
            run_git(["push"], cwd=tmp_path, timeout=1)


class TestCommands:
    def test_add_and_commit(self, tmp_git_repo: Path):
        (tmp_git_repo / "new.txt").write_text("hello\n")
        assert add_all(tmp_git_repo).ok
        result = commit("feat(core): add greeting", tmp_git_repo)
        assert result.ok
        log = subprocess.run(
            ["git", "log", "-1", "--format=%s"],
            cwd=tmp_git_repo, capture_output=True, text=True, check=True,
        )
        assert log.stdout.strip() == "feat(core): add greeting"

    def test_commit_nothing_staged_fails(self, tmp_git_repo: Path):
        result = commit("fix(core): nothing", tmp_git_repo)
        assert not result.ok
        assert result.output

    def test_push_without_remote_fails(self, tmp_git_repo: Path):
        assert not push(tmp_git_repo).ok

    def test_push_to_origin(self, tmp_git_repo_with_remote: Path):
        repo = tmp_git_repo_with_remote
        (repo / "a.txt").write_text("a\n")
        add_all(repo)
        commit("chore(repo): add a", repo)
        assert push(repo).ok
