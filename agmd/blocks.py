"""Detecting ``:::new`` blocks in directives and parsing item specifications."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

_WS = r"[\t\n\f\r ]"
_NEW_BLOCK = re.compile(
    rf"^:::new{_WS}+(rule|workflow|guideline):([a-z0-9/_-]+){_WS}*$",
    re.MULTILINE,
)


@dataclass
class NewBlocks:
    """Names found in ``:::new TYPE:NAME`` markers, grouped by type."""

    rules: list[str] = field(default_factory=list)
    workflows: list[str] = field(default_factory=list)
    guidelines: list[str] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Return True when no block of any type was found."""
        return not (self.rules or self.workflows or self.guidelines)

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(type, name)`` pairs: rules, then workflows, then guidelines."""
        for item_type, names in (
            ("rule", self.rules),
            ("workflow", self.workflows),
            ("guideline", self.guidelines),
        ):
            for name in names:
                yield item_type, name


def detect_new_blocks(content: str) -> NewBlocks:
    """Find the ``:::new TYPE:NAME`` markers in directives text, without duplicates."""
    result = NewBlocks()
    buckets = {
        "rule": result.rules,
        "workflow": result.workflows,
        "guideline": result.guidelines,
    }
    for match in _NEW_BLOCK.finditer(content):
        names = buckets[match.group(1)]
        name = match.group(2)
        if name not in names:
            names.append(name)
    return result


def parse_item_spec(spec: str) -> tuple[str, str]:
    """Split ``type:name`` into a lower-cased type and the name."""
    item_type, colon, name = spec.partition(":")
    if not colon:
        raise ValueError("invalid format. Use 'type:name' (e.g., 'rule:typescript')")
    return item_type.lower(), name