"""commitcraft CLI — Typer application with commit, init, and check commands."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from commitcraft import __version__

app = typer.Typer(
    name="commitcraft",
    help="Write conventional commits from an interactive prompt.",
    add_completion=False,
    invoke_without_command=True,
)

console = Console(stderr=True)


def _pick(kind: str, given: Optional[str], allowed: list[str]) -> Optional[str]:
    """Validate a value passed on the command line against the config."""
    if given is None:
        return None
    if given not in allowed:
        console.print(
            f"[bold red]Invalid {kind}:[/bold red] {escape(given)} "
            f"[dim](choose from: {escape(', '.join(allowed))})[/dim]"
        )
        raise typer.Exit(code=2)
    return given


# ── commit ────────────────────────────────────────────────────────────────────


@app.command()
def commit(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to commit.toml"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Show the commit message without running git"),
    type_: Optional[str] = typer.Option(None, "--type", "-t", help="Commit type (skips the prompt)"),
    scope: Optional[str] = typer.Option(None, "--scope", "-s", help="Commit scope (skips the prompt)"),
    message: Optional[str] = typer.Option(None, "--message", "-m", help="Commit message (skips the prompt)"),
) -> None:
    """Prompt for type, scope, and message, then commit."""
    from commitcraft import prompts
    from commitcraft.config.loader import resolve_config
    from commitcraft.git.adapter import GitError
    from commitcraft.workflow import format_commit_message, run_commit

    cfg = resolve_config(config, console=console).config

    chosen_type = _pick("type", type_, cfg.type_values())
    chosen_scope = _pick("scope", scope, cfg.scope_values())
    if message is not None and not message.strip():
        console.print("[bold red]Invalid message:[/bold red] commit message must not be empty")
        raise typer.Exit(code=2)

    try:
        chosen_type = chosen_type or prompts.select_type(cfg.types)
        chosen_scope = chosen_scope or prompts.select_scope(cfg.scopes)
        text = message if message is not None else prompts.ask_message(cfg.subject)
    except prompts.PromptAborted:
        console.print("[yellow]✗ Commit aborted[/yellow]")
        raise typer.Exit(code=1)

    commit_message = format_commit_message(chosen_type, chosen_scope, text)

    try:
        code = run_commit(commit_message, cfg.git, dry_run=dry_run, console=console)
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    raise typer.Exit(code=code)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    force: bool = typer.Option(False, "--force", help="Overwrite an existing commit.toml"),
) -> None:
    """Generate a starter commit.toml in the current directory."""
    from commitcraft.config.defaults import DEFAULT_TOML
    from commitcraft.config.loader import DEFAULT_CONFIG_NAME

    config_path = Path.cwd() / DEFAULT_CONFIG_NAME

    if config_path.exists() and not force:
        console.print(f"[yellow]⚠[/yellow]  {DEFAULT_CONFIG_NAME} already exists at {escape(str(config_path))}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {escape(str(config_path))}")


# ── check ─────────────────────────────────────────────────────────────────────


@app.command()
def check(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to commit.toml"),
) -> None:
    """Validate the config and show what commit would use."""
    from commitcraft.config.loader import resolve_config
    from commitcraft.output.terminal import render_config_table

    resolution = resolve_config(config, console=console)
    render_config_table(resolution.config, console=console)
    if not resolution.ok:
        raise typer.Exit(code=1)


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"commitcraft {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """commitcraft — conventional commits without the typing.

    With no subcommand, runs the interactive commit flow.
    """
    if ctx.invoked_subcommand is None:
        commit(config=None, dry_run=False, type_=None, scope=None, message=None)
