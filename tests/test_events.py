"""Tests for guidebook.events sinks."""

from __future__ import annotations

import logging
from pathlib import Path

from conftest import FakeTool, make_fake_tools, make_test_config

from guidebook.events import RUN_COMPLETED, STAGE_COMPLETED, LoggingSink, PipelineEvent
from guidebook.pipeline.runner import Mode, Pipeline


def test_logging_sink_formats_event(caplog) -> None:
    caplog.set_level(logging.INFO, logger="guidebook.events")
    LoggingSink().emit(
        PipelineEvent(
            name=STAGE_COMPLETED,
            mode="check",
            stage="prose-lint",
            attributes={"tool": "vale", "passed": False},
        )
    )

    [record] = [r for r in caplog.records if r.name == "guidebook.events"]
    assert record.levelno == logging.INFO
    assert record.getMessage() == (
        "pipeline.stage_completed mode=check stage=prose-lint passed=False tool=vale"
    )


def test_logging_sink_run_event_has_no_stage(caplog) -> None:
    caplog.set_level(logging.INFO, logger="guidebook.events")
    LoggingSink().emit(PipelineEvent(name=RUN_COMPLETED, mode="fix", attributes={"exit_code": 0}))
    assert caplog.records[-1].getMessage() == "pipeline.run_completed mode=fix stage=- exit_code=0"


def test_logging_sink_records_each_stage_and_run(repo: Path, caplog) -> None:
    caplog.set_level(logging.INFO, logger="guidebook.events")
    tools = make_fake_tools(structural_lint=FakeTool("markdownlint", returncode=1))
    Pipeline(repo, make_test_config(), tools=tools, sink=LoggingSink()).run(Mode.LINT)

    messages = [r.getMessage() for r in caplog.records if r.name == "guidebook.events"]
    assert len(messages) == 3
    assert messages[0].startswith("pipeline.stage_completed mode=lint stage=structural-lint ")
    assert "passed=False" in messages[0]
    assert "returncode=1" in messages[0]
    assert messages[1].startswith("pipeline.stage_completed mode=lint stage=prose-lint ")
    assert messages[2] == "pipeline.run_completed mode=lint stage=- exit_code=1"


def test_custom_logger_name(caplog) -> None:
    caplog.set_level(logging.INFO, logger="kb.audit")
    LoggingSink("kb.audit").emit(PipelineEvent(name=RUN_COMPLETED, mode="check"))
    assert [r.name for r in caplog.records] == ["kb.audit"]
