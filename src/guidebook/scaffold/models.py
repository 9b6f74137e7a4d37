"""Category enumeration and the Guide model."""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePath

from pydantic import BaseModel, ConfigDict, field_validator

from guidebook.errors import InvalidCategoryError


class Category(str, Enum):
    """Top-level grouping that decides a guide's directory and template."""

    HOW = "how"
    WHY = "why"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls, value: str) -> Category:
        """Convert a CLI string to a Category or raise InvalidCategoryError."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidCategoryError(value, cls.values()) from None

    @classmethod
    def of_path(cls, path: str | Path, root: str | Path) -> Category | None:
        """Infer the category of a guide from its containing directory."""
        try:
            rel = Path(path).resolve().relative_to(Path(root).resolve())
        except ValueError:
            return None
        if len(rel.parts) != 2 or rel.suffix != ".md":
            return None
        try:
            return cls(rel.parts[0])
        except ValueError:
            return None

    @property
    def directory(self) -> str:
        return self.value


def guide_name_problem(name: str) -> str | None:
    """Return why *name* cannot be a filename stem, or None if it can."""
    if not name or not name.strip():
        return "NAME must not be empty"
    if name != name.strip():
        return "NAME must not start or end with whitespace"
    if "/" in name or "\\" in name or PurePath(name).name != name:
        return f"NAME must not contain a path separator: {name!r}"
    if name.startswith("."):
        return f"NAME must not start with '.': {name!r}"
    return None


class Guide(BaseModel):
    """A single markdown guide identified by ``(category, name)``."""

    model_config = ConfigDict(frozen=True)

    category: Category
    name: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        problem = guide_name_problem(value)
        if problem:
            raise ValueError(problem)
        return value

    @property
    def title(self) -> str:
        """Name with only its first character upper-cased."""
        return self.name[:1].upper() + self.name[1:]

    @property
    def relative_path(self) -> Path:
        return Path(self.category.directory) / f"{self.name}.md"

    def path_in(self, root: str | Path) -> Path:
        return Path(root) / self.relative_path
