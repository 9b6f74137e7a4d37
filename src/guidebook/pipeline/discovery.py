"""Which markdown files each stage covers.

Format and structural lint see the whole documentation tree.  Prose lint
sees a curated subset: the top-level content files plus any directory that
has been onboarded to the current style rules.  ``prose_exclude_dirs`` is
the reviewable list of directories with known, not-yet-migrated warnings.
"""

from __future__ import annotations

import logging
from pathlib import Path

from guidebook.config import GuidebookConfig

logger = logging.getLogger(__name__)


def _excluded(rel: Path, exclude_dirs: list[str]) -> bool:
    return any(part in exclude_dirs for part in rel.parts[:-1])


def discover_documents(root: str | Path, config: GuidebookConfig) -> list[Path]:
    """Every markdown file under *root* matched by ``config.doc_glob``."""
    root = Path(root)
    docs: list[Path] = []
    for path in sorted(root.glob(config.doc_glob)):
        if not path.is_file():
            continue
        if _excluded(path.relative_to(root), config.exclude_dirs):
            continue
        docs.append(path)
    logger.debug("Discovered %d documents under %s", len(docs), root)
    return docs


def prose_lint_targets(root: str | Path, config: GuidebookConfig) -> list[Path]:
    """Files the prose linter checks: allowlisted top-level docs and onboarded dirs."""
    root = Path(root)
    targets: list[Path] = []

    for path in sorted(root.glob("*.md")):
        if not path.is_file():
            continue
        if config.prose_include and path.name not in config.prose_include:
            continue
        targets.append(path)

    for missing in sorted(set(config.prose_include) - {p.name for p in targets}):
        logger.warning("Prose-lint target missing: %s", missing)

    for dirname in config.prose_include_dirs:
        directory = root / dirname
        if not directory.is_dir():
            logger.warning("Prose-lint directory missing: %s", dirname)
            continue
        for path in sorted(directory.rglob("*.md")):
            rel = path.relative_to(root)
            if not path.is_file() or _excluded(rel, config.exclude_dirs):
                continue
            if _under_any(rel, config.prose_exclude_dirs):
                continue
            targets.append(path)

    return targets


def _under_any(rel: Path, dirs: list[str]) -> bool:
    for d in dirs:
        prefix = Path(d).parts
        if rel.parts[: len(prefix)] == prefix:
            return True
    return False
