"""Validation pipeline -- format and lint checks over the documentation tree."""

from guidebook.pipeline.discovery import discover_documents, prose_lint_targets
from guidebook.pipeline.report import (
    StageResult,
    ValidationReport,
    format_json,
    format_table,
)
from guidebook.pipeline.runner import (
    MODE_STAGES,
    Mode,
    Pipeline,
    run_pipeline,
    sync_prose_rules,
)
from guidebook.pipeline.tools import (
    DocTool,
    Formatter,
    ProseLinter,
    StructuralLinter,
    ToolResult,
    create_tool,
)

__all__ = [
    "DocTool",
    "Formatter",
    "MODE_STAGES",
    "Mode",
    "Pipeline",
    "ProseLinter",
    "StageResult",
    "StructuralLinter",
    "ToolResult",
    "ValidationReport",
    "create_tool",
    "discover_documents",
    "format_json",
    "format_table",
    "prose_lint_targets",
    "run_pipeline",
    "sync_prose_rules",
]
