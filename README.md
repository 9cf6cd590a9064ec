# agmd

Tools for managing AI agent configuration files written in Markdown with
YAML frontmatter.

An `AGENTS.md` file can inherit from a universal shared file and from any
number of profiles. A profile named `NAME` is looked up first as
`~/.agmd/profiles/custom/NAME.md`, then as `~/.agmd/profiles/NAME.md`.
Sections (`##` and `###` headings) from later layers replace sections with
the same key from earlier layers, and frontmatter `overrides` adjust
individual properties inside a section.

## Installation

```
pip install .
```

## Command line

```
agmd show                  # print AGENTS.md as it is
agmd show --merged         # print the configuration after inheritance
agmd show --merged --json  # the merged configuration as JSON
agmd validate              # check frontmatter, shared config and profiles
```

Both commands read `AGENTS.md` from the current directory. `agmd validate`
exits with status 1 when the configuration has errors; warnings alone (no
`version`, no `project-structure` or `build-commands` section, an override
that matches no section) leave it at 0.

## Frontmatter

The settings may sit under an `agmd:` key or at the top level.

```markdown
---
agmd:
  version: "1.0.0"
  shared: ~/.agmd/shared/base.md
  profiles: [typescript]
  overrides:
    code-quality.file-size-limit: 300
---

## Code Quality

- file-size-limit: 500
```

An override key is `section-key.property`. Lines of the form
`property: value` in that section are rewritten; if there is none, a
`- property: value` line is appended. A `~/` prefix and `$VAR` / `${VAR}`
references in `shared` are expanded.

## Library

- `agmd.parser.parse_file` / `parse_text` read a file into an `AgmdFile`
  with its `AgmdFrontmatter` and `Section` list; `normalize_key` turns a
  heading into its key (`"Code Quality"` becomes `code-quality`).
- `agmd.merger.merge_sections`, `apply_overrides` and `rebuild_content`
  combine sections and reassemble Markdown.
- `agmd.resolver.resolve` loads every layer and merges them into a
  `ResolvedConfig`; `load_profile` and `load_shared` load single layers.
- `agmd.validator.validate` and `validate_profile` report errors and
  warnings as a `ValidationResult`.
- `agmd.blocks.detect_new_blocks` finds `:::new type:name` markers in a
  `directives.md`; `parse_item_spec` splits `type:name`.
- `agmd.promote.promote_block` writes a `:::new` block to
  `<base>/<type>/<name>.md` with frontmatter and replaces the block with
  `:::include type:name`; `promote_many` does several, collecting failures.
- `agmd.directives.extract_active_items` lists the items a `directives.md`
  refers to through `:::include` lines and `:::list` blocks;
  `list_custom_types` lists item names per type directory of a registry.
- `agmd.autosync.sync_directory` renames `.md` files below a directory to
  match the `name` in their frontmatter.
- `agmd.templates.generate_template` and `generate_generic_template`
  produce starter files for rules, workflows, guidelines and custom types;
  `open_in_editor` opens a file in `$VISUAL`, `$EDITOR` or a common editor.

Errors in reading or resolving configuration raise `agmd.types.ConfigError`;
promotion failures raise `agmd.promote.PromoteError`.

## What it does not do

The command line offers only `show` and `validate`. There are no commands to
set up a registry, initialise a project, add or remove directives, create,
edit, move or delete registry items, promote blocks, or generate `AGENTS.md`
from `directives.md`; the directive handling above is available only as
library functions.

## Tests

```
pip install .[test]
pytest
```