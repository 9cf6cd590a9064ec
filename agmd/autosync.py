"""Keeping registry file names in step with the names in their front matter."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

import yaml

from agmd.types import ConfigError


def extract_frontmatter_bytes(content: bytes) -> tuple[bytes | None, bytes]:
    """Split raw bytes into front matter and the markdown after it.

    Returns ``(None, content)`` when the content does not open with ``---``.
    """
    if len(content) < 4 or content[:4] != b"---\n":
        return None, content
    closing = content.find(b"\n---", 4)
    if closing == -1:
        raise ConfigError("unclosed frontmatter")
    end = closing + 1
    return content[4:end], content[end + 3:].lstrip(b"\n\r")


def _frontmatter_name(file_path: Path) -> str | None:
    try:
        content = file_path.read_bytes()
        frontmatter, _ = extract_frontmatter_bytes(content)
    except (OSError, ConfigError):
        return None
    if not frontmatter:
        return None
    try:
        data = yaml.safe_load(frontmatter)
    except yaml.YAMLError:
        return None
    if not isinstance(data, dict):
        return None
    name = data.get("name")
    if not isinstance(name, str) or not name:
        return None
    return name


def sync_file(file_path: str | Path, base_dir: str | Path) -> Path | None:
    """Rename a registry file to match its front matter name.

    Returns the new path when the file was moved, otherwise None. Problems
    are never raised: a file that cannot be synced is left where it is.
    """
    file_path = Path(file_path)
    base_dir = Path(base_dir)
    name = _frontmatter_name(file_path)
    if name is None:
        return None

    try:
        relative = file_path.relative_to(base_dir)
    except ValueError:
        return None
    stem, extension = os.path.splitext(relative.as_posix())
    if stem == name:
        return None

    new_path = base_dir / (name + os.path.splitext(file_path.name)[1])
    if new_path.exists():
        return None
    try:
        new_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.rename(new_path)
    except OSError:
        return None

    old_dir = file_path.parent
    if old_dir != base_dir:
        try:
            old_dir.rmdir()
        except OSError:
            pass
    return new_path


def sync_directory(base_dir: str | Path) -> list[tuple[Path, Path]]:
    """Sync every ``.md`` file below a directory; return the moves made."""
    base_dir = Path(base_dir)
    candidates = sorted(
        Path(root) / filename
        for root, _, filenames in os.walk(base_dir)
        for filename in filenames
        if os.path.splitext(filename)[1] == ".md"
    )
    moves = []
    for path in candidates:
        new_path = sync_file(path, base_dir)
        if new_path is not None:
            moves.append((path, new_path))
    return moves


def sync_directories(base_dirs: Iterable[str | Path]) -> list[tuple[Path, Path]]:
    """Sync several registry directories in turn; return all moves made."""
    return [move for base_dir in base_dirs for move in sync_directory(base_dir)]