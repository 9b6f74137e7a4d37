"""Validation pipeline -- fixed, ordered composition of external checks.

Stage order per mode:

  check   format-check -> structural-lint -> prose-lint
  fix     format-write -> structural-lint -> prose-lint
  lint    structural-lint -> prose-lint
  format  format-write

Formatting always runs before linting so whitespace the formatter would
resolve never shows up as a lint failure.  Every stage runs even after an
earlier one fails; the report carries every problem from one pass.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

from guidebook.config import GuidebookConfig
from guidebook.errors import ExternalToolFailure
from guidebook.events import (
    RUN_COMPLETED,
    STAGE_COMPLETED,
    EventSink,
    NullSink,
    PipelineEvent,
)
from guidebook.pipeline.discovery import discover_documents, prose_lint_targets
from guidebook.pipeline.report import StageResult, ValidationReport
from guidebook.pipeline.tools import DocTool, ValeLinter, create_tool

logger = logging.getLogger(__name__)

FORMAT_CHECK = "format-check"
FORMAT_WRITE = "format-write"
STRUCTURAL_LINT = "structural-lint"
PROSE_LINT = "prose-lint"


class Mode(str, Enum):
    CHECK = "check"
    FIX = "fix"
    LINT = "lint"
    FORMAT = "format"


MODE_STAGES: dict[Mode, tuple[str, ...]] = {
    Mode.CHECK: (FORMAT_CHECK, STRUCTURAL_LINT, PROSE_LINT),
    Mode.FIX: (FORMAT_WRITE, STRUCTURAL_LINT, PROSE_LINT),
    Mode.LINT: (STRUCTURAL_LINT, PROSE_LINT),
    Mode.FORMAT: (FORMAT_WRITE,),
}

# Stages allowed to touch files on disk.
WRITING_STAGES = frozenset({FORMAT_WRITE})


def default_tools(config: GuidebookConfig, root: str | Path) -> dict[str, DocTool]:
    return {
        FORMAT_CHECK: create_tool("prettier", config, root=root, write=False),
        FORMAT_WRITE: create_tool("prettier", config, root=root, write=True),
        STRUCTURAL_LINT: create_tool("markdownlint", config, root=root),
        PROSE_LINT: create_tool("vale", config, root=root),
    }


class Pipeline:
    """Runs the stages for a mode and aggregates a ValidationReport."""

    def __init__(
        self,
        root: str | Path,
        config: GuidebookConfig,
        *,
        tools: Mapping[str, DocTool] | None = None,
        sink: EventSink | None = None,
    ) -> None:
        self.root = Path(root)
        self.config = config
        self.tools: dict[str, DocTool] = {
            **default_tools(config, self.root),
            **(tools or {}),
        }
        self.sink = sink or NullSink()

    def targets(self, stage: str) -> list[Path]:
        if stage == PROSE_LINT:
            return prose_lint_targets(self.root, self.config)
        return discover_documents(self.root, self.config)

    def is_advisory(self, stage: str, tool: DocTool) -> bool:
        advisory = self.config.advisory_stages
        return stage in advisory or tool.name in advisory

    def run(self, mode: Mode | str) -> ValidationReport:
        mode = Mode(mode)
        report = ValidationReport(mode=mode.value)
        for stage in MODE_STAGES[mode]:
            result = self._run_stage(stage)
            report.add(result)
            self.sink.emit(
                PipelineEvent(
                    name=STAGE_COMPLETED,
                    mode=mode.value,
                    stage=stage,
                    attributes={
                        "tool": result.tool_name,
                        "passed": result.passed,
                        "returncode": result.returncode,
                        "advisory": result.advisory,
                    },
                )
            )

        self.sink.emit(
            PipelineEvent(
                name=RUN_COMPLETED,
                mode=mode.value,
                attributes={"exit_code": report.exit_code},
            )
        )
        logger.info("Pipeline %s finished with exit code %d", mode.value, report.exit_code)
        return report

    def _run_stage(self, stage: str) -> StageResult:
        tool = self.tools[stage]
        advisory = self.is_advisory(stage, tool)
        paths = self.targets(stage)
        if not paths:
            logger.info("%s: no files to check", stage)
            return StageResult(stage, tool.name, True, "no files to check", 0, advisory)

        try:
            outcome = tool.run(paths)
        except ExternalToolFailure as exc:
            level = logging.INFO if advisory else logging.WARNING
            logger.log(level, "%s: %s exited with status %d", stage, exc.tool_name, exc.returncode)
            return StageResult(stage, tool.name, False, exc.output, exc.returncode, advisory)

        logger.debug("%s: %s passed on %d files", stage, tool.name, len(paths))
        return StageResult(stage, tool.name, True, outcome.output, outcome.returncode, advisory)


def run_pipeline(
    mode: Mode | str,
    *,
    root: str | Path,
    config: GuidebookConfig,
    tools: Mapping[str, DocTool] | None = None,
    sink: EventSink | None = None,
) -> int:
    """Run *mode* and return the pipeline's exit code."""
    return Pipeline(root, config, tools=tools, sink=sink).run(mode).exit_code


def sync_prose_rules(root: str | Path, config: GuidebookConfig) -> StageResult:
    """One-time download of the prose linter's style packages."""
    vale = ValeLinter(config, root=root)
    try:
        outcome = vale.sync()
    except ExternalToolFailure as exc:
        return StageResult("sync", vale.name, False, exc.output, exc.returncode)
    return StageResult("sync", vale.name, True, outcome.output, outcome.returncode)
