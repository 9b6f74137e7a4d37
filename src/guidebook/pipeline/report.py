"""Validation report and its table/JSON renderings."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field

# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StageResult:
    stage: str
    tool_name: str
    passed: bool
    detail: str = ""
    returncode: int = 0
    advisory: bool = False


@dataclass
class ValidationReport:
    """Ordered stage results from one pipeline run."""

    mode: str
    results: list[StageResult] = field(default_factory=list)

    def add(self, result: StageResult) -> None:
        self.results.append(result)

    @property
    def failures(self) -> list[StageResult]:
        return [r for r in self.results if not r.passed]

    @property
    def exit_code(self) -> int:
        """First non-zero status among mandatory failures, else 0."""
        for r in self.results:
            if not r.passed and not r.advisory:
                return r.returncode or 1
        return 0

    @property
    def passed(self) -> bool:
        return self.exit_code == 0


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _status(r: StageResult) -> str:
    if r.passed:
        return "ok"
    return "warn" if r.advisory else "FAIL"


def _row(cols: list[str], widths: list[int]) -> str:
    return "  ".join(c.ljust(w) for c, w in zip(cols, widths)).rstrip()


def format_table(report: ValidationReport) -> str:
    widths = [16, 14, 6, 4]
    lines = [
        f"Validation Report ({report.mode})",
        "=" * 48,
        _row(["Stage", "Tool", "Status", "Exit"], widths),
        "-" * 48,
    ]
    for r in report.results:
        lines.append(
            _row([r.stage, r.tool_name, _status(r), str(r.returncode)], widths)
        )
    lines.append("-" * 48)
    verdict = "passed" if report.passed else f"failed (exit {report.exit_code})"
    lines.append(f"Result: {verdict}")
    return "\n".join(lines)


def format_json(report: ValidationReport) -> str:
    payload = {
        "mode": report.mode,
        "exit_code": report.exit_code,
        "stages": [asdict(r) for r in report.results],
    }
    return json.dumps(payload, indent=2)
