"""Configuration schema — pydantic models with built-in defaults."""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

_FROZEN = ConfigDict(frozen=True, extra="ignore")


class OptionEntry(BaseModel):
    """One selectable commit type or scope."""

    model_config = _FROZEN

    value: StrictStr = Field(min_length=1)
    label: StrictStr


class GitAutomationSettings(BaseModel):
    model_config = _FROZEN

    auto_add_all: StrictBool = True
    auto_push: StrictBool = False


DEFAULT_TYPES: Tuple[OptionEntry, ...] = (
    OptionEntry(value="fix", label="A bug fix"),
    OptionEntry(value="feat", label="A new feature"),
    OptionEntry(value="chore", label="Other changes"),
)

DEFAULT_SCOPES: Tuple[OptionEntry, ...] = (
    OptionEntry(value="page", label="Page changes"),
    OptionEntry(value="component", label="Component changes"),
    OptionEntry(value="server", label="Server changes"),
    OptionEntry(value="db", label="Database changes"),
    OptionEntry(value="repo", label="Project changes"),
    OptionEntry(value="release", label="A new Release"),
    OptionEntry(value="docs", label="Documentation changes"),
    OptionEntry(value="tests", label="Test changes"),
)


def _unique_values(entries: Tuple[OptionEntry, ...]) -> Tuple[OptionEntry, ...]:
    if not entries:
        raise ValueError("must not be empty")
    seen: set[str] = set()
    for entry in entries:
        if entry.value in seen:
            raise ValueError(f"duplicate value {entry.value!r}")
        seen.add(entry.value)
    return entries


class ResolvedConfig(BaseModel):
    """Validated configuration handed to prompting and git execution."""

    model_config = _FROZEN

    types: Tuple[OptionEntry, ...] = DEFAULT_TYPES
    scopes: Tuple[OptionEntry, ...] = DEFAULT_SCOPES
    subject: Optional[StrictStr] = None
    git: GitAutomationSettings = Field(default_factory=GitAutomationSettings)

    @field_validator("types", "scopes")
    @classmethod
    def _check_unique(cls, entries: Tuple[OptionEntry, ...]) -> Tuple[OptionEntry, ...]:
        return _unique_values(entries)

    def type_values(self) -> list[str]:
        return [t.value for t in self.types]

    def scope_values(self) -> list[str]:
        return [s.value for s in self.scopes]
