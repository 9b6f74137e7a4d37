"""Error taxonomy for the scaffolder, pipeline, and CLI.

Every error is terminal for the current invocation. The CLI maps any
``GuidebookError`` to a stderr message and exit code 1.
"""

from __future__ import annotations

from pathlib import Path

USAGE = "Usage: guidebook new NAME TYPE\n  TYPE must be 'how' or 'why'"


class GuidebookError(Exception):
    """Base class for all guidebook errors."""


class UsageError(GuidebookError):
    """Missing or malformed command-line arguments."""

    def __init__(self, message: str = "", usage: str = USAGE) -> None:
        self.usage = usage
        super().__init__(message or usage)


class InvalidCategoryError(UsageError):
    """A category string outside the fixed enumeration."""

    def __init__(self, value: str, allowed: tuple[str, ...]) -> None:
        self.value = value
        self.allowed = allowed
        quoted = " or ".join(f"'{a}'" for a in allowed)
        super().__init__(f"Error: TYPE must be {quoted} (got {value!r})")


class AlreadyExistsError(GuidebookError):
    """The target guide file is already on disk."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Error: {path} already exists")


class ExternalToolFailure(GuidebookError):
    """An external formatter or linter exited non-zero.

    ``output`` is the tool's combined stdout/stderr, unmodified.
    """

    def __init__(self, tool_name: str, returncode: int, output: str) -> None:
        self.tool_name = tool_name
        self.returncode = returncode
        self.output = output
        super().__init__(f"{tool_name} exited with status {returncode}")


class ConfigError(GuidebookError):
    """Malformed ``guidebook.yaml``."""
