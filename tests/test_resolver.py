from pathlib import Path

import pytest

from agmd.resolver import expand_path, load_profile, load_shared, merge_configs, resolve
from agmd.types import AgmdFile, ConfigError, ResolvedConfig, Section


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_expand_path_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert expand_path("~/shared.md") == str(tmp_path / "shared.md")


def test_expand_path_env_variables(monkeypatch):
    monkeypatch.setenv("AGMD_TEST_DIR", "/data")
    monkeypatch.delenv("AGMD_UNSET_VAR", raising=False)
    assert expand_path("$AGMD_TEST_DIR/a.md") == "/data/a.md"
    assert expand_path("${AGMD_TEST_DIR}/b.md") == "/data/b.md"
    assert expand_path("${AGMD_UNSET_VAR}/c.md") == "/c.md"


def test_expand_path_plain_path_unchanged():
    assert expand_path("relative/file.md") == "relative/file.md"


def test_load_profile_prefers_custom(tmp_path):
    profiles = tmp_path / ".agmd" / "profiles"
    _write(profiles / "web.md", "---\ntype: profile\n---\n## Plain\nplain\n")
    custom = _write(profiles / "custom" / "web.md", "---\ntype: profile\n---\n## Custom\ncustom\n")
    profile = load_profile("web", home=tmp_path)
    assert profile.path == str(custom)
    assert [s.title for s in profile.sections] == ["Custom"]


def test_load_profile_missing(tmp_path):
    with pytest.raises(ConfigError, match="profile 'ghost' not found"):
        load_profile("ghost", home=tmp_path)


def test_load_profile_wrong_type(tmp_path):
    _write(tmp_path / ".agmd" / "profiles" / "web.md", "---\ntype: universal\n---\n## A\nx\n")
    with pytest.raises(ConfigError, match="profile must be type 'profile'"):
        load_profile("web", home=tmp_path)


def test_load_shared_checks_type(tmp_path):
    good = _write(tmp_path / "good.md", "---\ntype: universal\n---\n## Base\nbase\n")
    bad = _write(tmp_path / "bad.md", "---\ntype: project\n---\n## Base\nbase\n")
    assert load_shared(str(good)).sections[0].key == "base"
    with pytest.raises(ConfigError, match="shared config must be type 'universal'"):
        load_shared(str(bad))


def test_resolve_merges_layers(tmp_path):
    _write(tmp_path / "shared.md", "---\ntype: universal\n---\n## A\nuniversal a\n\n## B\nuniversal b\n")
    _write(
        tmp_path / ".agmd" / "profiles" / "web.md",
        "---\ntype: profile\n---\n## B\nprofile b\n\n## C\nprofile c\n",
    )
    project = _write(
        tmp_path / "AGENTS.md",
        "---\nagmd:\n  shared: ~/shared.md\n  profiles: [web]\n---\n## D\nproject d\n\n## A\nproject a\n",
    )
    resolved = resolve(project, home=tmp_path)
    assert resolved.universal is not None
    assert len(resolved.profiles) == 1
    keys = [s.key for s in resolved.merged.sections]
    assert keys == ["d", "a", "b", "c"]
    contents = {s.key: s.content for s in resolved.merged.sections}
    assert "project a" in contents["a"]
    assert "profile b" in contents["b"]


def test_resolve_applies_overrides(tmp_path):
    project = _write(
        tmp_path / "AGENTS.md",
        "---\noverrides:\n  build-commands.Test: pytest\n---\n## Build Commands\n- Test: make test\n",
    )
    resolved = resolve(project, home=tmp_path)
    assert "- Test: pytest" in resolved.merged.content
    assert "make test" not in resolved.merged.content


def test_resolve_missing_profile(tmp_path):
    project = _write(tmp_path / "AGENTS.md", "---\nprofiles: [ghost]\n---\n## A\nx\n")
    with pytest.raises(ConfigError, match="failed to load profile 'ghost'"):
        resolve(project, home=tmp_path)


def test_resolve_missing_project(tmp_path):
    with pytest.raises(ConfigError, match="failed to parse project config"):
        resolve(tmp_path / "missing.md", home=tmp_path)


def test_merge_configs_empty():
    merged = merge_configs(ResolvedConfig())
    assert merged.sections == []
    assert merged.content == ""


def test_merge_configs_project_only():
    project = AgmdFile(sections=[Section(title="X", level=2, content="body", key="x")])
    merged = merge_configs(ResolvedConfig(project=project))
    assert [s.key for s in merged.sections] == ["x"]
    assert merged.content.startswith("## X\nbody")