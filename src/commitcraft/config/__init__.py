"""Configuration loading, schema, and defaults."""

from commitcraft.config.loader import (
    ConfigError,
    Resolution,
    SchemaIssue,
    SchemaViolation,
    SourceMalformed,
    SourceNotFound,
    default_config,
    load_source,
    resolve_config,
    validate_config,
)
from commitcraft.config.schema import GitAutomationSettings, OptionEntry, ResolvedConfig

__all__ = [
    "ConfigError",
    "GitAutomationSettings",
    "OptionEntry",
    "Resolution",
    "ResolvedConfig",
    "SchemaIssue",
    "SchemaViolation",
    "SourceMalformed",
    "SourceNotFound",
    "default_config",
    "load_source",
    "resolve_config",
    "validate_config",
]
