"""Pipeline events and the sinks that receive them."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

STAGE_COMPLETED = "pipeline.stage_completed"
RUN_COMPLETED = "pipeline.run_completed"


@dataclass
class PipelineEvent:
    """One stage finishing, or one whole run finishing."""

    name: str
    mode: str
    stage: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    timestamp_ms: float = field(default_factory=lambda: time.time() * 1000)


@runtime_checkable
class EventSink(Protocol):
    def emit(self, event: PipelineEvent) -> None: ...


class NullSink:
    """Default sink; drops everything."""

    def emit(self, event: PipelineEvent) -> None:
        _ = event


class RecordingSink:
    """Keeps every event in order.  Used by tests."""

    def __init__(self) -> None:
        self.events: list[PipelineEvent] = []

    def emit(self, event: PipelineEvent) -> None:
        self.events.append(event)

    def stages(self) -> list[str]:
        return [e.stage for e in self.events if e.name == STAGE_COMPLETED]


class LoggingSink:
    """Forwards events to the ``guidebook.events`` logger at INFO."""

    def __init__(self, logger_name: str = "guidebook.events") -> None:
        self.logger = logging.getLogger(logger_name)

    def emit(self, event: PipelineEvent) -> None:
        self.logger.info(
            "%s mode=%s stage=%s %s",
            event.name,
            event.mode,
            event.stage or "-",
            " ".join(f"{k}={v}" for k, v in sorted(event.attributes.items())),
        )
