from agmd.merger import (
    apply_overrides,
    apply_property_override,
    find_section_by_key,
    merge_sections,
    rebuild_content,
    section_titles,
)
from agmd.parser import parse_sections
from agmd.types import AgmdFile, Section


def _section(title, content="body", level=2, key=None):
    return Section(title=title, level=level, content=content, key=title.lower() if key is None else key)


def test_merge_overlay_takes_precedence():
    base = [_section("A", "base a"), _section("B", "base b")]
    overlay = [_section("A", "overlay a")]
    merged = merge_sections(base, overlay)
    assert [(s.key, s.content) for s in merged] == [("a", "overlay a"), ("b", "base b")]


def test_merge_keeps_keyless_base_sections():
    intro = Section(title="", level=1, content="intro", key="")
    merged = merge_sections([intro, _section("A")], [_section("A", "new")])
    assert intro in merged
    assert len(merged) == 2


def test_merge_keeps_overlay_duplicates():
    overlay = [_section("A", "one"), _section("A", "two")]
    merged = merge_sections([_section("A", "base")], overlay)
    assert [s.content for s in merged] == ["one", "two"]


def test_apply_overrides_replaces_property():
    section = _section("Code Quality", "\n- File-Size-Limit: 300 lines", key="code-quality")
    file = AgmdFile(sections=[section], content="old")
    result = apply_overrides(file, {"code-quality.file-size-limit": 500})
    assert result.sections[0].content == "\n- file-size-limit: 500"
    assert result.content == rebuild_content(result.sections)
    assert section.content == "\n- File-Size-Limit: 300 lines"


def test_apply_overrides_empty_returns_same_file():
    file = AgmdFile(content="text")
    assert apply_overrides(file, {}) is file


def test_apply_overrides_skips_key_without_dot():
    sections = [_section("A", "keep")]
    file = AgmdFile(sections=sections)
    result = apply_overrides(file, {"a": "x"})
    assert result.sections == sections
    assert result.content == rebuild_content(sections)


def test_apply_overrides_unknown_section_unchanged():
    sections = [_section("A", "keep")]
    result = apply_overrides(AgmdFile(sections=sections), {"missing.prop": 1})
    assert result.sections == sections


def test_apply_property_override_appends_when_missing():
    assert apply_property_override("text", "limit", "10") == "text\n- limit: 10\n"


def test_apply_property_override_formats_bool():
    assert apply_property_override("", "strict", True) == "\n- strict: true\n"


def test_find_section_by_key():
    sections = [_section("A"), _section("B", "target")]
    assert find_section_by_key(sections, "b") is sections[1]
    assert find_section_by_key(sections, "z") is None


def test_section_titles_skip_untitled():
    sections = [Section(content="intro"), _section("A"), _section("B")]
    assert section_titles(sections) == ["A", "B"]


def test_rebuild_content_format():
    sections = [_section("Title", "Body", level=3), Section(content="tail\n\n")]
    assert rebuild_content(sections) == "### Title\nBody\n\ntail\n\n"


def test_rebuild_round_trips_headings():
    sections = [_section("First Part", "\none", level=2), _section("Second", "\ntwo", level=3)]
    reparsed = parse_sections(rebuild_content(sections))
    assert [(s.title, s.level) for s in reparsed] == [(s.title, s.level) for s in sections]
    assert [s.content.strip() for s in reparsed] == ["one", "two"]