"""External tool protocol -- the capability interface for each pipeline stage.

Every formatter and linter is an opaque black box: it gets a list of files,
runs, and either succeeds or raises ``ExternalToolFailure`` carrying its
unmodified output.  The pipeline only sees the protocol, so tests inject
fakes instead of the real binaries.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from guidebook.config import GuidebookConfig
from guidebook.errors import ExternalToolFailure

logger = logging.getLogger(__name__)

# Conventional shell status for "command not found".
MISSING_EXECUTABLE = 127


@dataclass
class ToolResult:
    """Successful tool run: its name, exit status, and raw output."""

    tool_name: str
    returncode: int = 0
    output: str = ""


@runtime_checkable
class DocTool(Protocol):
    """Anything that can check (or rewrite) a list of markdown files."""

    name: str

    def run(self, paths: Sequence[Path]) -> ToolResult: ...


@runtime_checkable
class Formatter(DocTool, Protocol):
    """Whitespace/markdown formatter; may rewrite files in fix mode."""


@runtime_checkable
class StructuralLinter(DocTool, Protocol):
    """Markdown syntax conventions: heading order, list formatting."""


@runtime_checkable
class ProseLinter(DocTool, Protocol):
    """Writing-style rules: passive voice, word choice."""


class CommandTool:
    """Runs ``argv + paths`` in the repository root and captures its output."""

    name = "command"

    def __init__(self, argv: Sequence[str], *, root: str | Path) -> None:
        self.argv = list(argv)
        self.root = Path(root)

    def command(self, paths: Sequence[Path]) -> list[str]:
        return [*self.argv, *(self._display(p) for p in paths)]

    def _display(self, path: Path) -> str:
        try:
            return Path(path).relative_to(self.root).as_posix()
        except ValueError:
            return str(path)

    def run(self, paths: Sequence[Path]) -> ToolResult:
        return self._execute(self.command(paths))

    def _execute(self, cmd: list[str]) -> ToolResult:
        logger.debug("Running %s: %s", self.name, " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                cwd=self.root,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ExternalToolFailure(
                self.name, MISSING_EXECUTABLE, f"{cmd[0]}: {exc.strerror or exc}\n"
            ) from exc

        output = (proc.stdout or "") + (proc.stderr or "")
        if proc.returncode != 0:
            raise ExternalToolFailure(self.name, proc.returncode, output)
        return ToolResult(self.name, proc.returncode, output)


class PrettierFormatter(CommandTool):
    name = "prettier"

    def __init__(self, config: GuidebookConfig, *, root: str | Path, write: bool = False) -> None:
        self.write = write
        flag = "--write" if write else "--check"
        super().__init__([*config.prettier_cmd, flag], root=root)


class MarkdownLinter(CommandTool):
    name = "markdownlint"

    def __init__(self, config: GuidebookConfig, *, root: str | Path) -> None:
        argv = list(config.markdownlint_cmd)
        if (Path(root) / config.markdownlint_config).is_file():
            argv += ["--config", config.markdownlint_config]
        super().__init__(argv, root=root)


class ValeLinter(CommandTool):
    name = "vale"

    def __init__(self, config: GuidebookConfig, *, root: str | Path) -> None:
        argv = list(config.vale_cmd)
        if (Path(root) / config.vale_config).is_file():
            argv += ["--config", config.vale_config]
        super().__init__(argv, root=root)

    def sync(self) -> ToolResult:
        """Download the style packages listed in the vale config."""
        return self._execute([*self.argv, "sync"])


def create_tool(
    tool_name: str,
    config: GuidebookConfig,
    *,
    root: str | Path,
    write: bool = False,
) -> DocTool:
    """Factory for the real tools by name.

    Args:
        tool_name: "prettier", "markdownlint", or "vale".
        config: Repository configuration (commands and config files).
        root: Repository root; tools run with it as their working directory.
        write: Only meaningful for prettier; rewrite files instead of checking.

    Raises:
        ValueError: If *tool_name* is not recognised.
    """
    if tool_name == "prettier":
        return PrettierFormatter(config, root=root, write=write)
    elif tool_name == "markdownlint":
        return MarkdownLinter(config, root=root)
    elif tool_name == "vale":
        return ValeLinter(config, root=root)
    else:
        raise ValueError(f"Unknown tool: {tool_name}")
