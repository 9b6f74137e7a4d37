"""Repository configuration -- the contract between the tooling and a guide repo.

A GuidebookConfig tells the scaffolder and the validation pipeline where
things live and how the external tools are invoked.  Defaults match a repo
laid out as::

    CLAUDE.md        root guide with one index table per category
    README.md        second index table
    how/*.md         mechanics references
    why/*.md         mental models
    .markdownlint.json
    .vale.ini

An optional ``guidebook.yaml`` at the repository root overrides any field::

    prose_exclude_dirs: [how, why]
    advisory_stages: [vale]
    vale_cmd: [npx, vale]
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from guidebook.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "guidebook.yaml"
ROOT_ENV_VAR = "GUIDEBOOK_ROOT"


@dataclass
class GuidebookConfig:
    """Configuration for one knowledge-base repository.

    Attributes:
        root_guide: Index document with a table per category section.
        readme: Second index document listing every guide.
        doc_glob: Pattern (relative to the root) of files the format and
            structural-lint stages cover.
        exclude_dirs: Directory names never descended into during discovery.
        prose_include: Top-level files the prose linter checks.  Empty means
            every top-level markdown file.
        prose_include_dirs: Directories already onboarded to the prose rules.
        prose_exclude_dirs: Directories with known, not-yet-migrated style
            warnings.  Wins over ``prose_include_dirs``.
        advisory_stages: Tool names whose failures are reported but do not
            affect the exit code.
        prettier_cmd / markdownlint_cmd / vale_cmd: Argv prefix for each tool.
        markdownlint_config / vale_config: Config files passed to the linters
            when present.
    """

    root_guide: str = "CLAUDE.md"
    readme: str = "README.md"
    doc_glob: str = "**/*.md"
    exclude_dirs: list[str] = field(
        default_factory=lambda: [".git", "node_modules", ".vale", ".venv", "styles"]
    )
    prose_include: list[str] = field(default_factory=list)
    prose_include_dirs: list[str] = field(default_factory=list)
    prose_exclude_dirs: list[str] = field(default_factory=lambda: ["how", "why"])
    advisory_stages: list[str] = field(default_factory=list)
    prettier_cmd: list[str] = field(default_factory=lambda: ["prettier"])
    markdownlint_cmd: list[str] = field(default_factory=lambda: ["markdownlint"])
    vale_cmd: list[str] = field(default_factory=lambda: ["vale"])
    markdownlint_config: str = ".markdownlint.json"
    vale_config: str = ".vale.ini"


class ConfigFile(BaseModel):
    """Strict schema for ``guidebook.yaml``.  Every key is optional."""

    model_config = ConfigDict(extra="forbid")

    root_guide: str | None = None
    readme: str | None = None
    doc_glob: str | None = None
    exclude_dirs: list[str] | None = None
    prose_include: list[str] | None = None
    prose_include_dirs: list[str] | None = None
    prose_exclude_dirs: list[str] | None = None
    advisory_stages: list[str] | None = None
    prettier_cmd: list[str] | None = None
    markdownlint_cmd: list[str] | None = None
    vale_cmd: list[str] | None = None
    markdownlint_config: str | None = None
    vale_config: str | None = None

    @field_validator(
        "exclude_dirs",
        "prose_include",
        "prose_include_dirs",
        "prose_exclude_dirs",
        "advisory_stages",
    )
    @classmethod
    def normalize_lists(cls, values: list[str] | None) -> list[str] | None:
        if values is None:
            return None
        return [v.strip().strip("/") for v in values if v.strip().strip("/")]

    @field_validator("prettier_cmd", "markdownlint_cmd", "vale_cmd")
    @classmethod
    def require_executable(cls, values: list[str] | None) -> list[str] | None:
        if values is not None and not [v for v in values if v.strip()]:
            raise ValueError("command must name an executable")
        return values


def resolve_root(root: str | Path | None = None) -> Path:
    """Pick the repository root: explicit argument, then env var, then cwd."""
    if root:
        return Path(root).resolve()
    env_root = os.getenv(ROOT_ENV_VAR, "").strip()
    if env_root:
        return Path(env_root).resolve()
    return Path.cwd()


def load_config(root: str | Path) -> GuidebookConfig:
    """Load ``guidebook.yaml`` from *root*, falling back to defaults."""
    path = Path(root) / CONFIG_FILENAME
    if not path.is_file():
        logger.debug("No %s in %s; using defaults", CONFIG_FILENAME, root)
        return GuidebookConfig()

    try:
        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] | None = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML -- {exc}") from exc

    if data is None:
        return GuidebookConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: top level must be a mapping")

    try:
        parsed = ConfigFile(**data)
    except ValidationError as exc:
        raise ConfigError(f"{path}: {exc}") from exc

    overrides = {
        f.name: getattr(parsed, f.name)
        for f in fields(GuidebookConfig)
        if getattr(parsed, f.name) is not None
    }
    logger.debug("Loaded %s with overrides: %s", path, sorted(overrides))
    return replace(GuidebookConfig(), **overrides)
