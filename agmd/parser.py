"""Reading agent configuration files into front matter and sections."""

from __future__ import annotations

import re
from pathlib import Path

import yaml

from agmd.types import AgmdFile, AgmdFrontmatter, ConfigError, Section

_WS = r"[\t\n\f\r ]"
_HEADING = re.compile(rf"^(#{{2,3}}){_WS}+(.+?)$", re.MULTILINE)
_KEY_INVALID = re.compile(r"[^a-z0-9\t\n\f\r -]")
_KEY_SPACES = re.compile(rf"{_WS}+")
_KEY_HYPHENS = re.compile(r"-+")


def parse_file(path: str | Path) -> AgmdFile:
    """Read and parse an agent configuration file from disk."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed to read file: {exc}") from exc
    return parse_text(text, str(path))


def parse_text(text: str, path: str = "") -> AgmdFile:
    """Parse the text of an agent configuration file."""
    try:
        frontmatter_text, markdown = extract_frontmatter(text)
    except ConfigError as exc:
        raise ConfigError(f"failed to extract frontmatter: {exc}") from exc

    frontmatter = AgmdFrontmatter()
    if frontmatter_text:
        try:
            data = yaml.safe_load(frontmatter_text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML frontmatter: {exc}") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("invalid YAML frontmatter: expected a mapping")
        if "agmd" in data:
            try:
                frontmatter = AgmdFrontmatter.from_mapping(data["agmd"])
            except ConfigError as exc:
                raise ConfigError(f"invalid agmd frontmatter: {exc}") from exc
        else:
            try:
                frontmatter = AgmdFrontmatter.from_mapping(data)
            except ConfigError as exc:
                raise ConfigError(f"invalid frontmatter: {exc}") from exc

    return AgmdFile(
        frontmatter=frontmatter,
        content=markdown,
        sections=parse_sections(markdown),
        path=path,
    )


def extract_frontmatter(content: str) -> tuple[str | None, str]:
    """Split text into its YAML front matter and the markdown after it.

    Returns ``(None, content)`` when there is no front matter.
    """
    if not (content.startswith("---\n") or content.startswith("---\r\n")):
        return None, content

    pos = content.index("\n") + 1
    lines: list[str] = []
    while pos < len(content):
        newline = content.find("\n", pos)
        if newline == -1:
            line, following = content[pos:], len(content)
        else:
            line, following = content[pos:newline], newline + 1
        if line.endswith("\r"):
            line = line[:-1]
        if line == "---":
            return "\n".join(lines), content[following:].lstrip("\n\r")
        lines.append(line)
        pos = following

    raise ConfigError("unclosed frontmatter (missing closing ---)")


def parse_sections(markdown: str) -> list[Section]:
    """Split markdown into sections at level 2 and 3 headings.

    Text before the first heading is dropped; markdown without any heading
    becomes one untitled section.
    """
    matches = list(_HEADING.finditer(markdown))
    if not matches:
        if markdown.strip():
            return [Section(title="", level=1, content=markdown, key="")]
        return []

    sections = []
    ends = [m.start() for m in matches[1:]] + [len(markdown)]
    for match, end in zip(matches, ends):
        title = match.group(2)
        sections.append(
            Section(
                title=title.strip(),
                level=len(match.group(1)),
                content=markdown[match.end():end].rstrip("\n\r "),
                key=normalize_key(title),
            )
        )
    return sections


def normalize_key(title: str) -> str:
    """Turn a section title into a key, e.g. "Code Quality" -> "code-quality"."""
    key = title.lower()
    key = _KEY_INVALID.sub("", key)
    key = _KEY_SPACES.sub("-", key)
    key = _KEY_HYPHENS.sub("-", key)
    return key.strip("-")