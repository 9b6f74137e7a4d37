"""Test fixtures for guidebook tests."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from guidebook import GuidebookConfig
from guidebook.errors import ExternalToolFailure
from guidebook.pipeline.runner import (
    FORMAT_CHECK,
    FORMAT_WRITE,
    PROSE_LINT,
    STRUCTURAL_LINT,
)
from guidebook.pipeline.tools import ToolResult


class FakeTool:
    """Stand-in for an external formatter or linter."""

    def __init__(
        self,
        name: str,
        *,
        returncode: int = 0,
        output: str = "",
        on_run: Callable[[Sequence[Path]], None] | None = None,
    ) -> None:
        self.name = name
        self.returncode = returncode
        self.output = output
        self.on_run = on_run
        self.calls: list[list[Path]] = []

    def run(self, paths: Sequence[Path]) -> ToolResult:
        self.calls.append(list(paths))
        if self.on_run:
            self.on_run(paths)
        if self.returncode != 0:
            raise ExternalToolFailure(self.name, self.returncode, self.output)
        return ToolResult(self.name, 0, self.output)


def strip_trailing_whitespace(paths: Sequence[Path]) -> None:
    """Idempotent formatter body: only writes files it actually changes."""
    for path in paths:
        text = path.read_text(encoding="utf-8")
        cleaned = "\n".join(line.rstrip() for line in text.splitlines()) + "\n"
        if cleaned != text:
            path.write_text(cleaned, encoding="utf-8")


def make_fake_tools(**overrides: FakeTool) -> dict[str, FakeTool]:
    tools = {
        FORMAT_CHECK: FakeTool("prettier"),
        FORMAT_WRITE: FakeTool("prettier", on_run=strip_trailing_whitespace),
        STRUCTURAL_LINT: FakeTool("markdownlint"),
        PROSE_LINT: FakeTool("vale"),
    }
    for key, tool in overrides.items():
        tools[key.replace("_", "-")] = tool
    return tools


def make_test_config(**kwargs) -> GuidebookConfig:
    return GuidebookConfig(**kwargs)


@pytest.fixture()
def repo(tmp_path: Path) -> Path:
    """A small knowledge-base checkout with both categories and both indexes."""
    (tmp_path / "how").mkdir()
    (tmp_path / "why").mkdir()
    (tmp_path / "CLAUDE.md").write_text("# Guide\n\n## how/\n\n## why/\n", encoding="utf-8")
    (tmp_path / "README.md").write_text("# Knowledge base\n", encoding="utf-8")
    (tmp_path / "how" / "git.md").write_text("# Git\n\n## Quick Reference\n", encoding="utf-8")
    (tmp_path / "why" / "testing.md").write_text("# Testing\n\n## Core Concepts\n", encoding="utf-8")
    return tmp_path


def snapshot(root: Path) -> dict[str, bytes]:
    """Every file under *root* keyed by relative path."""
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }
