"""Command line interface for showing and validating agent configuration."""

from __future__ import annotations

import argparse
import json
import os
import sys
from pathlib import Path

from agmd.resolver import resolve
from agmd.types import ConfigError, ValidationResult
from agmd.validator import validate

DIRECTIVES_MD_FILENAME = "directives.md"
AGENTS_MD_FILENAME = "AGENTS.md"

_COLORS = {"red": "31", "green": "32", "yellow": "33", "blue": "34", "cyan": "36"}


def _paint(color: str, text: str) -> str:
    if os.environ.get("NO_COLOR") is not None or not sys.stdout.isatty():
        return text
    return f"\033[{_COLORS[color]}m{text}\033[0m"


def run_show(path: str | Path = AGENTS_MD_FILENAME, merged: bool = False, as_json: bool = False) -> None:
    """Print the configuration file, or its merged effective form."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"{path.name} not found in current directory. Run 'agmd init' first")

    if not merged:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to read {path.name}: {exc}") from exc
        sys.stdout.write(text)
        return

    if not as_json:
        print(f"{_paint('blue', '→')} Resolving inheritance...")

    try:
        resolved = resolve(path)
    except ConfigError as exc:
        raise ConfigError(f"failed to resolve config: {exc}") from exc

    project = resolved.project
    effective = resolved.merged

    if as_json:
        document = {
            "inheritance": {
                "universal": resolved.universal.path if resolved.universal else None,
                "profiles": [profile.path for profile in resolved.profiles],
                "project": project.path,
                "overrides": len(project.frontmatter.overrides),
            },
            "sections": [
                {
                    "title": section.title,
                    "level": section.level,
                    "key": section.key,
                    "content": section.content,
                }
                for section in effective.sections
            ],
            "content": effective.content,
        }
        print(json.dumps(document, indent=2, ensure_ascii=False))
        return

    check = _paint("green", "✓")
    print(f"\n{_paint('blue', '→')} Inheritance Chain:")
    if resolved.universal is not None:
        print(f"  {check} Universal: {resolved.universal.path}")
    for profile in resolved.profiles:
        print(f"  {check} Profile: {profile.path}")
    print(f"  {check} Project: {project.path}")
    if project.frontmatter.overrides:
        print(f"  {check} Overrides: {len(project.frontmatter.overrides)} applied")

    print()
    print("---")
    print()
    print("# Effective Configuration\n")
    sys.stdout.write(effective.content)


def run_validate(path: str | Path = AGENTS_MD_FILENAME) -> ValidationResult:
    """Validate the configuration file, print a report and return the result."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"{path.name} not found in current directory")

    print(f"Validating {path}...\n")
    result = validate(path)

    if result.errors:
        for error in result.errors:
            print(f"{_paint('red', '✗')} {error.kind}: {error.message}")
            if error.path and error.path != str(path):
                print(f"  Path: {error.path}")
        print()

    if result.warnings:
        for warning in result.warnings:
            print(f"{_paint('yellow', '!')} {warning}")
        print()

    if result.valid:
        print(f"{_paint('green', '✓')} Configuration is valid")
        if result.warnings:
            print(f"\n{len(result.warnings)} warning(s) found")
    else:
        print(f"{_paint('red', '✗')} Configuration is invalid")
        print(f"\n{len(result.errors)} error(s), {len(result.warnings)} warning(s)")
    return result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="agmd", description="Manage AI agent configuration files")
    parser.add_argument("--version", action="version", version="agmd 1.0.0")
    commands = parser.add_subparsers(dest="command")

    show = commands.add_parser("show", help="Show agent configuration")
    show.add_argument("--merged", action="store_true", help="Show merged config (after inheritance)")
    show.add_argument("--json", action="store_true", help="Output as JSON")

    commands.add_parser("validate", help="Validate agent configuration")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.command == "show":
            run_show(AGENTS_MD_FILENAME, merged=args.merged, as_json=args.json)
            return 0
        result = run_validate(AGENTS_MD_FILENAME)
        return 0 if result.valid else 1
    except (ConfigError, OSError) as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())