"""Rich terminal reporter — status lines, commit preview, config table."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from commitcraft.config.loader import (
    Resolution,
    SchemaViolation,
    SourceNotFound,
)
from commitcraft.config.schema import ResolvedConfig
from commitcraft.git.adapter import GitResult

_BRANCH = "[red]└─ [/red]"


def _console(console: Optional[Console]) -> Console:
    return console or Console(stderr=True)


def render_config_status(resolution: Resolution, *, console: Optional[Console] = None) -> None:
    """Print the one-line success/failure indicator for config resolution."""
    console = _console(console)
    err = resolution.error

    if err is None:
        console.print("[green]✓ Successfully parsed config[/green]")
    elif isinstance(err, SourceNotFound):
        if err.explicit:
            console.print(f"[yellow]✗ {escape(str(err))}[/yellow]")
        else:
            console.print("[yellow]✗ No config file found[/yellow]")
    elif isinstance(err, SchemaViolation):
        console.print("[red]✗ Failed to parse config[/red]")
        for issue in err.issues:
            console.print(f"{_BRANCH}[dim]{escape(str(issue))}[/dim]", highlight=False)
    else:
        console.print("[red]✗ Failed to load config[/red]")
        console.print(f"{_BRANCH}[dim]{escape(str(err))}[/dim]", highlight=False)


def render_commit_preview(message: str, *, console: Optional[Console] = None) -> None:
    console = _console(console)
    console.print()
    console.print("[blue]📝 Commit message:[/blue]")
    console.print(f"[blue]└─ [/blue][dim yellow]{escape(message)}[/dim yellow]", highlight=False)


def render_step(title: str, *, console: Optional[Console] = None) -> None:
    """Announce a git step, e.g. ``📦 Adding all changes...``."""
    console = _console(console)
    console.print()
    console.print(f"[blue]{title}[/blue]")


def render_step_result(
    result: GitResult,
    success: str,
    failure: str,
    *,
    show_output: bool = False,
    console: Optional[Console] = None,
) -> None:
    """Print the outcome of a git step; on failure git's stderr follows."""
    console = _console(console)
    if result.ok:
        console.print(f"[green]✓ {success}[/green]")
        if show_output and result.stdout.strip():
            console.print(
                f"[green]└─ [/green][dim yellow]{escape(result.stdout.strip())}[/dim yellow]",
                highlight=False,
            )
    else:
        console.print(f"[red]✗ {failure}[/red]")
        if result.output:
            console.print(f"{_BRANCH}[dim]{escape(result.output)}[/dim]", highlight=False)


def render_config_table(config: ResolvedConfig, *, console: Optional[Console] = None) -> None:
    """Show the resolved types, scopes, and git flags."""
    console = _console(console)

    for title, entries in (("Types", config.types), ("Scopes", config.scopes)):
        table = Table(title=title, title_style="bold", border_style="dim")
        table.add_column("Value", style="cyan")
        table.add_column("Label")
        for entry in entries:
            table.add_row(escape(entry.value), escape(entry.label))
        console.print(table)

    console.print()
    console.print(f"[dim]Subject:[/dim]       {escape(config.subject or '-')}")
    console.print(f"[dim]Auto add all:[/dim]  {config.git.auto_add_all}")
    console.print(f"[dim]Auto push:[/dim]     {config.git.auto_push}")
