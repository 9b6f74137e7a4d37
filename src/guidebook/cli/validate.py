"""CLI handlers for the pipeline commands: lint, format, check, fix, sync, setup, pre-commit."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path

from guidebook.config import GuidebookConfig
from guidebook.errors import GuidebookError
from guidebook.events import LoggingSink
from guidebook.hooks import install_hook, run_gate
from guidebook.pipeline.report import ValidationReport, format_json, format_table
from guidebook.pipeline.runner import Pipeline, sync_prose_rules


def _print_report(report: ValidationReport, as_json: bool) -> None:
    if as_json:
        print(format_json(report))
        return
    for result in report.failures:
        if result.detail:
            sys.stdout.write(result.detail)
            if not result.detail.endswith("\n"):
                sys.stdout.write("\n")
    print(format_table(report))


def run_mode(args: Namespace, root: Path, config: GuidebookConfig) -> int:
    report = Pipeline(root, config, sink=LoggingSink()).run(args.command)
    _print_report(report, args.json)
    return report.exit_code


def run_pre_commit(args: Namespace, root: Path, config: GuidebookConfig) -> int:
    report = run_gate(root, config, sink=LoggingSink())
    _print_report(report, False)
    return report.exit_code


def run_sync(args: Namespace, root: Path, config: GuidebookConfig) -> int:
    result = sync_prose_rules(root, config)
    if result.detail:
        sys.stdout.write(result.detail)
    return 0 if result.passed else result.returncode


def run_setup(args: Namespace, root: Path, config: GuidebookConfig) -> int:
    try:
        hook = install_hook(root, force=args.force)
    except GuidebookError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(f"Installed {hook.relative_to(root).as_posix()}")
    return 0
