"""Guide templates, one per category.

Templates ship with the package and are not user data.  ``$title`` and
``$name`` are the only substitutions.
"""

from __future__ import annotations

from string import Template

from guidebook.scaffold.models import Category, Guide

MECHANICS_TEMPLATE = Template(
    """\
# $title

Brief description of what $name is and when to use it.

## Quick Reference

| Command / Pattern | Description  |
| ----------------- | ------------ |
| `example`         | What it does |

## Basic Usage

```bash
# Example command
$name --help
```
"""
)

MENTAL_MODEL_TEMPLATE = Template(
    """\
# $title

Why this matters and when to apply these principles.

## Core Concepts

### First Principle

Explanation of the fundamental idea.

**Example:**

```text
Concrete illustration of the concept
```
"""
)

TEMPLATES: dict[Category, Template] = {
    Category.HOW: MECHANICS_TEMPLATE,
    Category.WHY: MENTAL_MODEL_TEMPLATE,
}


def render_guide(guide: Guide) -> str:
    return TEMPLATES[guide.category].substitute(title=guide.title, name=guide.name)
