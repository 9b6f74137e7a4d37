"""Scaffolder -- create one new guide from its category template.

The scaffolder never overwrites an existing guide and never edits the two
index documents.  Where a new row belongs in those free-form tables is a
judgment call, so the caller gets the reminders from ``next_steps`` instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

from guidebook.config import GuidebookConfig
from guidebook.errors import AlreadyExistsError, UsageError
from guidebook.scaffold.models import Category, Guide, guide_name_problem
from guidebook.scaffold.templates import render_guide

logger = logging.getLogger(__name__)


def create_guide(
    name: str | None,
    category: str | Category | None,
    *,
    root: str | Path,
) -> Path:
    """Write a new guide and return its path.

    Raises:
        UsageError: *name* or *category* is missing, or *name* is not a
            usable filename stem, or the category directory resolves
            outside *root*.
        InvalidCategoryError: *category* is not ``how`` or ``why``.
        AlreadyExistsError: the target file already exists.
        OSError: the write itself failed; not retried.
    """
    if not name or not category:
        raise UsageError()

    cat = category if isinstance(category, Category) else Category.parse(category)

    problem = guide_name_problem(name)
    if problem:
        raise UsageError(f"Error: {problem}")

    guide = Guide(category=cat, name=name)
    path = guide.path_in(root)
    if path.exists():
        raise AlreadyExistsError(guide.relative_path)
    if Category.of_path(path, root) is not cat:
        raise UsageError(f"Error: {guide.relative_path} does not resolve inside {cat.directory}/")

    content = render_guide(guide)
    path.parent.mkdir(exist_ok=True)
    try:
        with open(path, "x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError:
        raise AlreadyExistsError(guide.relative_path) from None

    logger.info("Created %s", path)
    return path


def next_steps(category: str | Category, config: GuidebookConfig) -> list[str]:
    """The two manual index updates a new guide still needs."""
    cat = category if isinstance(category, Category) else Category.parse(category)
    return [
        f"1. Update {config.root_guide} table in {cat.directory}/ section",
        f"2. Update {config.readme} table",
    ]
