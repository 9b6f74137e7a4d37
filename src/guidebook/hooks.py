"""Pre-commit gate and the one-time hook installation behind ``guidebook setup``."""

from __future__ import annotations

import logging
import shlex
import stat
import sys
from collections.abc import Mapping
from pathlib import Path

from guidebook.config import GuidebookConfig
from guidebook.errors import AlreadyExistsError, GuidebookError
from guidebook.events import EventSink
from guidebook.pipeline.report import ValidationReport
from guidebook.pipeline.runner import Mode, Pipeline
from guidebook.pipeline.tools import DocTool

logger = logging.getLogger(__name__)

HOOK_TEMPLATE = """\
#!/bin/sh
# Installed by `guidebook setup`. Runs the validation pipeline in check mode.
exec {python} -m guidebook --root {root} pre-commit
"""


def hook_script(root: str | Path, python: str | None = None) -> str:
    """Hook body pinned to the interpreter that ran ``setup``."""
    return HOOK_TEMPLATE.format(
        python=shlex.quote(python or sys.executable),
        root=shlex.quote(str(Path(root).resolve())),
    )


def run_gate(
    root: str | Path,
    config: GuidebookConfig,
    *,
    tools: Mapping[str, DocTool] | None = None,
    sink: EventSink | None = None,
) -> ValidationReport:
    """Run check mode; a non-zero ``exit_code`` aborts the commit."""
    report = Pipeline(root, config, tools=tools, sink=sink).run(Mode.CHECK)
    if report.exit_code:
        logger.warning("Pre-commit gate failed with exit code %d", report.exit_code)
    return report


def install_hook(root: str | Path, *, force: bool = False) -> Path:
    """Write the pre-commit hook into ``.git/hooks``.

    Raises:
        GuidebookError: *root* is not a git checkout.
        AlreadyExistsError: a hook is already installed and *force* is False.
    """
    git_dir = Path(root) / ".git"
    if not git_dir.is_dir():
        raise GuidebookError(f"Error: {root} is not a git repository (no .git directory)")

    hook = git_dir / "hooks" / "pre-commit"
    if hook.exists() and not force:
        raise AlreadyExistsError(hook.relative_to(root))

    hook.parent.mkdir(exist_ok=True)
    hook.write_text(hook_script(root), encoding="utf-8")
    hook.chmod(hook.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    logger.info("Installed pre-commit hook at %s", hook)
    return hook
