"""Starter templates for new registry items and opening files in an editor."""

from __future__ import annotations

import os
import re
import shutil
import subprocess
from datetime import datetime, timedelta
from pathlib import Path

_FENCE = "```"
_FALLBACK_EDITORS = ("vim", "vi", "nano", "code", "subl")
_WORD_START = re.compile(r"(?<!\w)(\w)")

_RULE_TEMPLATE = """---
name: {name}
category: custom
description: Brief description of this rule
created_at: {timestamp}
---

# Rule: {title}

## Purpose

Describe what this rule enforces and why it's important.

## Guidelines

- Guideline 1
- Guideline 2
- Guideline 3

## Examples

### Good Example

{fence}
// Example of following the rule
{fence}

### Bad Example

{fence}
// Example of violating the rule
{fence}

## Notes

Additional context, exceptions, or related information.
"""

_WORKFLOW_TEMPLATE = """---
name: {name}
description: Brief description of this workflow
created_at: {timestamp}
---

# Workflow: {title}

## Overview

Describe what this workflow accomplishes and when to use it.

## Prerequisites

- Prerequisite 1
- Prerequisite 2

## Steps

1. **Step 1**: Description
   - Detail about step 1
   - Commands or actions

2. **Step 2**: Description
   - Detail about step 2
   - Commands or actions

3. **Step 3**: Description
   - Detail about step 3
   - Commands or actions

## Verification

How to verify the workflow completed successfully:

{fence}bash
# Verification commands
{fence}

## Troubleshooting

Common issues and solutions:

- **Issue 1**: Solution
- **Issue 2**: Solution
"""

_GUIDELINE_TEMPLATE = """---
name: {name}
description: Brief description of this guideline
created_at: {timestamp}
---

# Guideline: {title}

## Overview

Describe the purpose and scope of this guideline.

## Best Practices

### Practice 1

Description of best practice 1.

{fence}
// Example
{fence}

### Practice 2

Description of best practice 2.

{fence}
// Example
{fence}

### Practice 3

Description of best practice 3.

{fence}
// Example
{fence}

## Anti-Patterns

What to avoid:

- Anti-pattern 1
- Anti-pattern 2

## References

- Link to documentation
- Related resources
"""

_GENERIC_TEMPLATE = """---
name: {name}
description: Brief description of this {item_type}
created_at: {timestamp}
---

# {type_title}: {title}

## Overview

Describe the purpose and content of this {item_type}.

## Content

Add your content here.

## Notes

Additional context or information.
"""

_TEMPLATES = {
    "rule": _RULE_TEMPLATE,
    "workflow": _WORKFLOW_TEMPLATE,
    "guideline": _GUIDELINE_TEMPLATE,
}


def title_case(text: str) -> str:
    """Upper-case the first letter of every word, leaving other letters alone."""
    return _WORD_START.sub(lambda match: match.group(1).upper(), text)


def _timestamp(now: datetime | None) -> str:
    if now is None:
        now = datetime.now().astimezone()
    elif now.tzinfo is None:
        now = now.astimezone()
    text = now.isoformat(timespec="seconds")
    if now.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def _display_title(name: str) -> str:
    return title_case(name.replace("-", " "))


def generate_template(item_type: str, name: str, now: datetime | None = None) -> str:
    """Return the starter text for a rule, workflow or guideline; "" for other types."""
    template = _TEMPLATES.get(item_type)
    if template is None:
        return ""
    return template.format(
        name=name,
        timestamp=_timestamp(now),
        title=_display_title(name),
        fence=_FENCE,
    )


def generate_generic_template(item_type: str, name: str, now: datetime | None = None) -> str:
    """Return the starter text for an item of a custom type."""
    return _GENERIC_TEMPLATE.format(
        name=name,
        item_type=item_type,
        timestamp=_timestamp(now),
        type_title=title_case(item_type),
        title=_display_title(name),
    )


def find_editor() -> str | None:
    """Pick an editor: $VISUAL, then $EDITOR, then the first common editor on PATH."""
    editor = os.environ.get("VISUAL") or os.environ.get("EDITOR")
    if editor:
        return editor
    return next((name for name in _FALLBACK_EDITORS if shutil.which(name)), None)


def open_in_editor(file_path: str | Path) -> None:
    """Open a file in the user's editor and wait for it to exit.

    Raises RuntimeError when no editor can be found and
    subprocess.CalledProcessError when the editor exits with an error.
    """
    editor = find_editor()
    if editor is None:
        raise RuntimeError("no editor found (set EDITOR or VISUAL environment variable)")
    subprocess.run([editor, str(file_path)], check=True)