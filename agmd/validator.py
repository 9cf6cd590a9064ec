"""Checking an agent configuration file and its inheritance chain."""

from __future__ import annotations

from pathlib import Path

from agmd.merger import find_section_by_key
from agmd.parser import parse_file
from agmd.resolver import _expand, load_profile, load_shared, resolve
from agmd.types import ConfigError, ValidationResult

_EXPECTED_SECTIONS = ("project-structure", "build-commands")


def section_key_from_override(override_key: str) -> str:
    """Return the section part of ``section.property``, or "" without a dot."""
    section, dot, _ = override_key.partition(".")
    return section if dot else ""


def validate(project_path: str | Path, home: str | Path | None = None) -> ValidationResult:
    """Validate a project file, its shared config, profiles and overrides."""
    result = ValidationResult()
    try:
        project = parse_file(project_path)
    except ConfigError as exc:
        result.add_error("parse_error", f"Failed to parse project config: {exc}", str(project_path))
        return result

    frontmatter = project.frontmatter
    if not frontmatter.version:
        result.add_warning("No version specified in frontmatter")

    if frontmatter.shared:
        shared_path = _expand(frontmatter.shared, home)
        if not Path(shared_path).exists():
            result.add_error("missing_file", f"Shared config not found: {shared_path}", shared_path)
        else:
            try:
                load_shared(shared_path)
            except ConfigError as exc:
                result.add_error("invalid_shared", f"Invalid shared config: {exc}", shared_path)

    for profile_name in frontmatter.profiles:
        try:
            load_profile(profile_name, home)
        except ConfigError:
            result.add_error("missing_profile", f"Profile '{profile_name}' not found", profile_name)

    if frontmatter.overrides:
        try:
            resolved = resolve(project_path, home)
        except ConfigError:
            resolved = None
        if resolved is not None and resolved.merged is not None:
            for override_key in frontmatter.overrides:
                section_key = section_key_from_override(override_key)
                if section_key and find_section_by_key(resolved.merged.sections, section_key) is None:
                    result.add_warning(f"Override '{override_key}' doesn't match any section")

    present = {section.key for section in project.sections}
    for expected in _EXPECTED_SECTIONS:
        if expected not in present:
            result.add_warning(f"Consider adding '{expected}' section")

    return result


def validate_profile(profile_path: str | Path) -> ValidationResult:
    """Validate a profile file."""
    result = ValidationResult()
    try:
        profile = parse_file(profile_path)
    except ConfigError as exc:
        result.add_error("parse_error", f"Failed to parse profile: {exc}", str(profile_path))
        return result

    kind = profile.frontmatter.type
    if kind and kind != "profile":
        result.add_warning(f"Profile should have type: profile, got: {kind}")
    if not profile.frontmatter.extends:
        result.add_warning("Profile should specify 'extends' field")
    return result