"""Load, validate, and resolve configuration from commit.toml.

Resolution never fails: a missing, malformed, or invalid source falls back
to the built-in defaults and the caught error is returned alongside them.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from pydantic import ValidationError
from rich.console import Console

from commitcraft.config.schema import ResolvedConfig

DEFAULT_CONFIG_NAME = "commit.toml"
PYPROJECT_TABLE = ("tool", "commitcraft")


class ConfigError(Exception):
    """Base class for configuration failures."""


class SourceNotFound(ConfigError):
    """Raised when the config source does not exist or cannot be read."""

    def __init__(self, path: Path, explicit: bool = False, reason: str = "") -> None:
        self.path = path
        self.explicit = explicit
        super().__init__(reason or f"Config file not found: {path}")


class SourceMalformed(ConfigError):
    """Raised when the config source is not valid TOML."""


@dataclass(frozen=True)
class SchemaIssue:
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class SchemaViolation(ConfigError):
    """Raised when loaded data does not conform to the schema."""

    def __init__(self, issues: List[SchemaIssue]) -> None:
        self.issues = issues
        super().__init__("; ".join(str(i) for i in issues))

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "SchemaViolation":
        issues = [
            SchemaIssue(
                path=".".join(str(part) for part in err["loc"]) or "<root>",
                message=err["msg"],
            )
            for err in exc.errors()
        ]
        return cls(issues)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolve_config: always carries a usable config."""

    config: ResolvedConfig
    path: Path
    error: Optional[ConfigError] = field(default=None)

    @property
    def ok(self) -> bool:
        return self.error is None


def _unwrap(raw: Dict[str, Any], path: Path, explicit: bool) -> Dict[str, Any]:
    """Pick the config table out of a parsed document."""
    if path.name == "pyproject.toml":
        table: Any = raw
        for key in PYPROJECT_TABLE:
            table = table.get(key) if isinstance(table, dict) else None
        if table is None:
            raise SourceNotFound(path, explicit=explicit, reason=f"No [tool.commitcraft] table in {path}")
        if not isinstance(table, dict):
            raise SourceMalformed(f"[tool.commitcraft] in {path} is not a table")
        return table
    # a lone [default] table stands for the whole config
    if set(raw) == {"default"} and isinstance(raw["default"], dict):
        return raw["default"]
    return raw


def load_source(path: Path, explicit: bool = False) -> Dict[str, Any]:
    """Read *path* as TOML and return the config table."""
    try:
        with open(path, "rb") as f:
            raw = tomllib.load(f)
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
        raise SourceNotFound(path, explicit=explicit) from exc
    except PermissionError as exc:
        raise SourceNotFound(path, explicit=explicit, reason=f"Cannot read {path}: {exc}") from exc
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise SourceMalformed(f"Failed to parse {path}: {exc}") from exc
    except (OSError, ValueError) as exc:
        # ENAMETOOLONG, ELOOP, EIO, NUL bytes in the path
        raise SourceNotFound(path, explicit=explicit, reason=f"Cannot read {path}: {exc}") from exc
    return _unwrap(raw, path, explicit)


def validate_config(data: Any) -> ResolvedConfig:
    """Validate *data* against the schema, filling in defaults."""
    if not isinstance(data, dict):
        raise SchemaViolation([SchemaIssue("<root>", "Input should be a table")])
    try:
        return ResolvedConfig.model_validate(data)
    except ValidationError as exc:
        raise SchemaViolation.from_validation_error(exc) from exc


def default_config() -> ResolvedConfig:
    """Return the built-in configuration."""
    return validate_config({})


def resolve_config(
    source: Union[str, Path, None] = None,
    *,
    cwd: Optional[Path] = None,
    console: Optional[Console] = None,
) -> Resolution:
    """Load and validate *source*, falling back to defaults on any failure.

    *source* defaults to ``commit.toml`` in *cwd* (the invocation directory).
    When *console* is given the status line is printed through it.
    """
    base = cwd or Path.cwd()
    explicit = source is not None
    path = base / (Path(source) if explicit else Path(DEFAULT_CONFIG_NAME))

    try:
        config = validate_config(load_source(path, explicit=explicit))
        resolution = Resolution(config=config, path=path)
    except ConfigError as exc:
        resolution = Resolution(config=default_config(), path=path, error=exc)

    if console is not None:
        from commitcraft.output.terminal import render_config_status

        render_config_status(resolution, console=console)
    return resolution
