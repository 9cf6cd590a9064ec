"""Data types describing agent configuration files and validation results."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


class ConfigError(Exception):
    """Raised when an agent configuration file cannot be read, parsed or resolved."""


def _scalar_text(key: str, value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    raise ConfigError(f"field '{key}' must be a scalar, got {type(value).__name__}")


def _string_list(key: str, value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError(f"field '{key}' must be a list, got {type(value).__name__}")
    return [_scalar_text(key, item) for item in value]


def _overrides(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"field 'overrides' must be a mapping, got {type(value).__name__}")
    return {str(key): item for key, item in value.items()}


@dataclass
class AgmdFrontmatter:
    """The YAML front matter of an agent configuration file."""

    version: str = ""
    shared: str = ""
    profiles: list[str] = field(default_factory=list)
    extends: str = ""
    type: str = ""
    overrides: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Any) -> AgmdFrontmatter:
        """Build front matter from a decoded YAML mapping; unknown keys are ignored."""
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ConfigError(f"front matter must be a mapping, got {type(data).__name__}")
        return cls(
            version=_scalar_text("version", data.get("version")),
            shared=_scalar_text("shared", data.get("shared")),
            profiles=_string_list("profiles", data.get("profiles")),
            extends=_scalar_text("extends", data.get("extends")),
            type=_scalar_text("type", data.get("type")),
            overrides=_overrides(data.get("overrides")),
        )


@dataclass
class Section:
    """A markdown section: a heading and the text up to the next heading."""

    title: str = ""
    level: int = 1
    content: str = ""
    key: str = ""


@dataclass
class AgmdFile:
    """A complete agent configuration file."""

    frontmatter: AgmdFrontmatter = field(default_factory=AgmdFrontmatter)
    content: str = ""
    sections: list[Section] = field(default_factory=list)
    path: str = ""


@dataclass
class ResolvedConfig:
    """The layers of an inheritance chain and their merged result."""

    universal: AgmdFile | None = None
    profiles: list[AgmdFile] = field(default_factory=list)
    project: AgmdFile | None = None
    merged: AgmdFile | None = None


@dataclass
class ValidationIssue:
    """A single validation error."""

    kind: str
    message: str
    path: str = ""


@dataclass
class ValidationResult:
    """The outcome of validating a configuration file."""

    valid: bool = True
    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, kind: str, message: str, path: str = "") -> None:
        """Record an error and mark the result invalid."""
        self.valid = False
        self.errors.append(ValidationIssue(kind, message, path))

    def add_warning(self, message: str) -> None:
        """Record a non-fatal warning."""
        self.warnings.append(message)