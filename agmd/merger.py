"""Merging section lists and applying front matter overrides."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable, Mapping
from typing import Any

from agmd.types import AgmdFile, Section


def merge_sections(base: Iterable[Section], overlay: Iterable[Section]) -> list[Section]:
    """Merge overlay sections over base sections.

    Overlay sections come first; base sections follow unless an overlay
    section has the same key. Untitled (keyless) base sections are kept.
    """
    overlay = list(overlay)
    seen = {section.key for section in overlay if section.key}
    result = list(overlay)
    result.extend(section for section in base if not section.key or section.key not in seen)
    return result


def apply_overrides(file: AgmdFile, overrides: Mapping[str, Any]) -> AgmdFile:
    """Return a copy of ``file`` with ``section-key.property`` overrides applied."""
    if not overrides:
        return file
    sections = [dataclasses.replace(section) for section in file.sections]
    for key, value in overrides.items():
        _apply_override(sections, key, value)
    return dataclasses.replace(file, sections=sections, content=rebuild_content(sections))


def _apply_override(sections: list[Section], override_key: str, value: Any) -> None:
    section_key, dot, property_name = override_key.partition(".")
    if not dot:
        return
    section = find_section_by_key(sections, section_key)
    if section is not None:
        section.content = apply_property_override(section.content, property_name, value)


def _format_value(value: Any) -> str:
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    if isinstance(value, Mapping):
        items = sorted((str(k), _format_value(v)) for k, v in value.items())
        return "map[" + " ".join(f"{k}:{v}" for k, v in items) + "]"
    return str(value)


def apply_property_override(content: str, property_name: str, value: Any) -> str:
    """Replace every ``property: value`` line in content, or append one."""
    value_text = _format_value(value)
    pattern = re.compile(
        r"(-[\t\n\f\r ]*)?" + re.escape(property_name) + r"[:\t\n\f\r ]+[^\n]+",
        re.IGNORECASE,
    )
    if pattern.search(content):
        return pattern.sub(
            lambda m: f"{m.group(1) or ''}{property_name}: {value_text}", content
        )
    return content + f"\n- {property_name}: {value_text}\n"


def find_section_by_key(sections: Iterable[Section], key: str) -> Section | None:
    """Return the first section with the given key, or None."""
    return next((section for section in sections if section.key == key), None)


def section_titles(sections: Iterable[Section]) -> list[str]:
    """Return the titles of all titled sections."""
    return [section.title for section in sections if section.title]


def rebuild_content(sections: Iterable[Section]) -> str:
    """Reassemble markdown text from sections."""
    parts = []
    for section in sections:
        if section.title:
            parts.append(f"{'#' * section.level} {section.title}\n")
        parts.append(section.content)
        if not section.content.endswith("\n\n"):
            parts.append("\n\n")
    return "".join(parts)