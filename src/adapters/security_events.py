"""
Security Event Adapters.

Implementations of SecurityEventPort.

Key behaviors:
- LoggingSecurityEventSink writes "[SECURITY] <event>: <detail>" to a logger
- RecordingSecurityEventSink stores events in memory for assertions
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.core.ports.events import SecurityEvent

DEFAULT_SECURITY_LOGGER = "security"


@dataclass
class LoggingSecurityEventSink:
    """Writes each event to the security logger."""

    logger_name: str = DEFAULT_SECURITY_LOGGER
    log_level: int = logging.WARNING

    def emit(self, event: SecurityEvent) -> None:
        logging.getLogger(self.logger_name).log(
            self.log_level, "[SECURITY] %s: %s", event.event, event.detail
        )


@dataclass
class RecordingSecurityEventSink:
    """Keeps events in memory, oldest first, up to max_events."""

    max_events: int = 1000
    events: list[SecurityEvent] = field(default_factory=list)

    def emit(self, event: SecurityEvent) -> None:
        self.events.append(event)
        if len(self.events) > self.max_events:
            del self.events[: len(self.events) - self.max_events]

    def recent(self, limit: int = 50) -> list[SecurityEvent]:
        """Most recent events, newest first."""
        return list(reversed(self.events[-limit:])) if limit > 0 else []

    def clear(self) -> None:
        """Clear stored events (for test isolation)."""
        self.events.clear()

    @property
    def event_count(self) -> int:
        return len(self.events)
