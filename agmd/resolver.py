"""Loading the layers of an inheritance chain and merging them."""

from __future__ import annotations

import os
import re
from pathlib import Path

from agmd.merger import apply_overrides, merge_sections, rebuild_content
from agmd.parser import parse_file
from agmd.types import AgmdFile, ConfigError, ResolvedConfig

_ENV_VAR = re.compile(r"\$(?:\{([^}]*)\}|([A-Za-z0-9_]+))")


def _home_dir(home: str | Path | None) -> Path:
    if home is not None:
        return Path(home)
    try:
        return Path.home()
    except RuntimeError as exc:
        raise ConfigError(f"failed to get home directory: {exc}") from exc


def _expand(path: str, home: str | Path | None) -> str:
    if path.startswith("~/"):
        try:
            base = _home_dir(home)
        except ConfigError:
            base = None
        if base is not None:
            path = str(base / path[2:])

    def _lookup(match: re.Match[str]) -> str:
        name = match.group(1) if match.group(1) is not None else match.group(2)
        return os.environ.get(name, "")

    return _ENV_VAR.sub(_lookup, path)


def expand_path(path: str) -> str:
    """Expand a leading ``~/`` and ``$VAR``/``${VAR}`` references; unset variables become empty."""
    return _expand(path, None)


def load_shared(shared_path: str) -> AgmdFile:
    """Load the universal shared configuration file."""
    file = parse_file(expand_path(shared_path))
    kind = file.frontmatter.type
    if kind and kind != "universal":
        raise ConfigError(f"shared config must be type 'universal', got '{kind}'")
    return file


def load_profile(name: str, home: str | Path | None = None) -> AgmdFile:
    """Load a profile by name from the registry's profile directories."""
    base = _home_dir(home) / ".agmd" / "profiles"
    search_paths = [base / "custom" / f"{name}.md", base / f"{name}.md"]

    for path in search_paths:
        if not path.exists():
            continue
        try:
            file = parse_file(path)
        except ConfigError as exc:
            raise ConfigError(f"failed to parse profile at {path}: {exc}") from exc
        kind = file.frontmatter.type
        if kind and kind != "profile":
            raise ConfigError(f"profile must be type 'profile', got '{kind}'")
        return file

    searched = ", ".join(str(path) for path in search_paths)
    raise ConfigError(f"profile '{name}' not found (searched: {searched})")


def merge_configs(resolved: ResolvedConfig) -> AgmdFile:
    """Merge universal, profile and project layers into one effective file."""
    sections = list(resolved.universal.sections) if resolved.universal else []
    for profile in resolved.profiles:
        sections = merge_sections(sections, profile.sections)
    if resolved.project is not None:
        sections = merge_sections(sections, resolved.project.sections)
    return AgmdFile(sections=sections, content=rebuild_content(sections))


def resolve(project_path: str | Path, home: str | Path | None = None) -> ResolvedConfig:
    """Load a project file with its shared config and profiles, and merge them."""
    try:
        project = parse_file(project_path)
    except ConfigError as exc:
        raise ConfigError(f"failed to parse project config: {exc}") from exc

    resolved = ResolvedConfig(project=project)
    frontmatter = project.frontmatter

    if frontmatter.shared:
        try:
            resolved.universal = load_shared(_expand(frontmatter.shared, home))
        except ConfigError as exc:
            raise ConfigError(f"failed to load shared config: {exc}") from exc

    for profile_name in frontmatter.profiles:
        try:
            resolved.profiles.append(load_profile(profile_name, home))
        except ConfigError as exc:
            raise ConfigError(f"failed to load profile '{profile_name}': {exc}") from exc

    merged = merge_configs(resolved)
    if frontmatter.overrides:
        merged = apply_overrides(merged, frontmatter.overrides)
    resolved.merged = merged
    return resolved