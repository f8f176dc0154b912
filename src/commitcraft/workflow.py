"""Commit workflow — format the message, then add / commit / push."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.console import Console

from commitcraft.config.schema import GitAutomationSettings
from commitcraft.git import adapter
from commitcraft.output import terminal


def format_commit_message(type_: str, scope: str, message: str) -> str:
    """Return ``type(scope): message``."""
    message = message.strip()
    if not message:
        raise ValueError("commit message must not be empty")
    return f"{type_}({scope}): {message}"


def run_commit(
    message: str,
    git: GitAutomationSettings,
    *,
    cwd: Optional[Path] = None,
    dry_run: bool = False,
    console: Optional[Console] = None,
) -> int:
    """Preview *message* and run the git steps *git* enables.

    Returns 0 on success (or dry run) and 1 when a git step fails.
    Raises GitError if git itself cannot be run.
    """
    console = console or Console(stderr=True)
    terminal.render_commit_preview(message, console=console)

    if dry_run:
        console.print()
        console.print("[green]✓ Dry run completed - no git commands executed[/green]")
        return 0

    if git.auto_add_all:
        terminal.render_step("📦 Adding all changes...", console=console)
        result = adapter.add_all(cwd)
        terminal.render_step_result(
            result, "Successfully added all changes", "Failed to add changes", console=console
        )
        if not result.ok:
            return 1

    terminal.render_step("💾 Committing changes...", console=console)
    result = adapter.commit(message, cwd)
    terminal.render_step_result(
        result,
        "Successfully committed changes",
        "Failed to commit changes",
        show_output=True,
        console=console,
    )
    if not result.ok:
        return 1

    if git.auto_push:
        terminal.render_step("🚀 Pushing changes...", console=console)
        result = adapter.push(cwd)
        terminal.render_step_result(
            result, "Successfully pushed changes", "Failed to push changes", console=console
        )
        if not result.ok:
            return 1

    return 0
