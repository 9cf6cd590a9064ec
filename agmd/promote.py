"""Moving ``:::new`` blocks out of directives text into registry files."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

_WS = r"[\t\n\f\r ]"
_SUPPORTED_TYPES = frozenset({"rule", "workflow", "guideline"})


class PromoteError(Exception):
    """Raised when a ``:::new`` block cannot be promoted to the registry."""


def find_new_block(content: str, item_type: str, name: str) -> tuple[str, str]:
    """Locate the ``:::new TYPE:NAME`` block.

    Returns the whole matched block and its trimmed body.
    """
    pattern = re.compile(
        rf":::new{_WS}+{re.escape(item_type)}:{re.escape(name)}{_WS}*\n(.*?)\n:::",
        re.DOTALL,
    )
    match = pattern.search(content)
    if match is None:
        raise PromoteError(f"could not find :::new {item_type}:{name} block")
    return match.group(0), match.group(1).strip()


def promote_block(content: str, item_type: str, name: str, base_path: str | Path) -> str:
    """Save a ``:::new`` block as a registry item and return the updated directives.

    The item is written to ``base_path/<type>/<name>.md`` and the block is
    replaced by ``:::include TYPE:NAME``.
    """
    full_match, body = find_new_block(content, item_type, name)
    if item_type not in _SUPPORTED_TYPES:
        raise PromoteError(f"unsupported type: {item_type}")

    type_dir = Path(base_path) / item_type
    file_path = type_dir / f"{name}.md"
    if file_path.exists():
        raise PromoteError(f"{item_type}:{name} already exists in registry at {file_path}")

    if "/" in name:
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PromoteError(f"failed to create subdirectories: {exc}") from exc

    text = f'---\nname: {name}\ndescription: ""\n---\n\n{body}'
    try:
        file_path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise PromoteError(f"failed to write to registry: {exc}") from exc

    return content.replace(full_match, f":::include {item_type}:{name}", 1)


def promote_many(
    content: str,
    items: Iterable[tuple[str, str]],
    base_path: str | Path,
) -> tuple[str, list[tuple[str, str]], list[tuple[str, str, PromoteError]]]:
    """Promote several ``(type, name)`` blocks in turn.

    Returns the updated content, the items promoted, and the items that
    failed with their errors. A failure leaves the content as it was.
    """
    promoted: list[tuple[str, str]] = []
    failed: list[tuple[str, str, PromoteError]] = []
    for item_type, name in items:
        try:
            content = promote_block(content, item_type, name, base_path)
        except PromoteError as exc:
            failed.append((item_type, name, exc))
        else:
            promoted.append((item_type, name))
    return content, promoted, failed