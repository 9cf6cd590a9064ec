"""Reading which registry items a directives file uses."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path

_WS = r"[\t\n\f\r ]"
_INCLUDE = re.compile(rf"^:::include{_WS}+([a-z0-9-]+):([a-z0-9/_-]+)", re.MULTILINE)
_LIST = re.compile(rf":::list{_WS}+([a-z0-9-]+){_WS}*\n(.*?)\n:::end", re.DOTALL)
_EXCLUDED_TYPES = frozenset({"profile", "shared"})


@dataclass
class ActiveItems:
    """Items referenced by a directives file, by type."""

    rules: set[str] = field(default_factory=set)
    workflows: set[str] = field(default_factory=set)
    guidelines: set[str] = field(default_factory=set)
    custom: dict[str, set[str]] = field(default_factory=dict)

    def _bucket(self, item_type: str) -> set[str] | None:
        return {
            "rule": self.rules,
            "workflow": self.workflows,
            "guideline": self.guidelines,
        }.get(item_type)

    def summary(self) -> str:
        """Describe how many items of each type are active."""
        parts = [
            f"{len(self.rules)} rules",
            f"{len(self.workflows)} workflows",
            f"{len(self.guidelines)} guidelines",
        ]
        parts.extend(f"{len(names)} {type_name}" for type_name, names in self.custom.items() if names)
        return ", ".join(parts)


def extract_active_items(content: str) -> ActiveItems:
    """Collect the items named by ``:::include`` lines and ``:::list`` blocks.

    Custom types count only through ``:::include``; names listed in a
    ``:::list`` block of a custom type are not tracked.
    """
    active = ActiveItems()
    for match in _INCLUDE.finditer(content):
        item_type, name = match.group(1), match.group(2)
        bucket = active._bucket(item_type)
        if bucket is None:
            bucket = active.custom.setdefault(item_type, set())
        bucket.add(name)

    for match in _LIST.finditer(content):
        bucket = active._bucket(match.group(1))
        if bucket is None:
            continue
        bucket.update(name for name in (line.strip() for line in match.group(2).split("\n")) if name)
    return active


def list_custom_types(base_path: str | Path) -> dict[str, list[str]]:
    """Map each type directory of the registry to the ``.md`` item names in it.

    The ``profile`` and ``shared`` directories are left out, as are
    directories holding no items. Raises OSError if the registry cannot be read.
    """
    base_path = Path(base_path)
    result: dict[str, list[str]] = {}
    for entry in sorted(base_path.iterdir(), key=lambda p: p.name):
        if not entry.is_dir() or entry.name in _EXCLUDED_TYPES:
            continue
        try:
            children = sorted(entry.iterdir(), key=lambda p: p.name)
        except OSError:
            continue
        names = [
            os.path.splitext(child.name)[0]
            for child in children
            if not child.is_dir() and child.name.endswith(".md")
        ]
        if names:
            result[entry.name] = names
    return result