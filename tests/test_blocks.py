import pytest

from agmd.blocks import NewBlocks, detect_new_blocks, parse_item_spec


def test_detects_each_type():
    content = (
        "# Title\n"
        ":::new rule:simple-test\nbody\n:::\n"
        ":::new workflow:deploy\nsteps\n:::\n"
        ":::new guideline:code-style\ntext\n:::\n"
    )
    blocks = detect_new_blocks(content)
    assert blocks.rules == ["simple-test"]
    assert blocks.workflows == ["deploy"]
    assert blocks.guidelines == ["code-style"]
    assert not blocks.is_empty()


def test_duplicates_are_collapsed():
    content = ":::new rule:auth\nx\n:::\n:::new rule:auth\ny\n:::\n"
    assert detect_new_blocks(content).rules == ["auth"]


def test_subfolder_names_are_kept():
    content = ":::new rule:auth/custom-auth\nx\n:::\n"
    assert detect_new_blocks(content).rules == ["auth/custom-auth"]


def test_marker_must_start_line_and_end_cleanly():
    content = "text :::new rule:inline\n:::new rule:abc extra\n:::new rule:Upper\n"
    assert detect_new_blocks(content).is_empty()


def test_unknown_type_is_ignored():
    assert detect_new_blocks(":::new profile:default\n").is_empty()


def test_trailing_whitespace_allowed():
    assert detect_new_blocks(":::new workflow:release   \n").workflows == ["release"]


def test_items_order():
    blocks = NewBlocks(rules=["r"], workflows=["w"], guidelines=["g"])
    assert list(blocks.items()) == [("rule", "r"), ("workflow", "w"), ("guideline", "g")]


def test_empty_blocks():
    blocks = NewBlocks()
    assert blocks.is_empty()
    assert list(blocks.items()) == []


def test_parse_item_spec_lowercases_type():
    assert parse_item_spec("Rule:frontend/ts") == ("rule", "frontend/ts")


def test_parse_item_spec_splits_once():
    assert parse_item_spec("rule:a:b") == ("rule", "a:b")


def test_parse_item_spec_requires_colon():
    with pytest.raises(ValueError, match="invalid format"):
        parse_item_spec("typescript")