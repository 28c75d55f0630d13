"""
Security Event Interface.

Protocol-based interface for reporting rejected input and blocked operations.
Validators and the banking service emit events; adapters decide where they go.

Key requirements:
- Event schema is {event, detail}, both free text
- Emitting never alters the outcome of the operation that emitted it
- Sinks are optional; components work without one

Implementation strategies:
1. LoggingSecurityEventSink: writes to the "security" logger
2. RecordingSecurityEventSink: keeps events in memory (tests, CLI)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class SecurityEvent:
    """A single security-relevant notification."""

    event: str
    detail: str

    def to_dict(self) -> dict[str, str]:
        return {"event": self.event, "detail": self.detail}


class SecurityEventPort(Protocol):
    """Sink for security events."""

    def emit(self, event: SecurityEvent) -> None:
        """Record or forward one event."""
        ...


def emit_event(sink: SecurityEventPort | None, event: str, detail: str) -> None:
    """Emit an event if a sink was supplied."""
    if sink is not None:
        sink.emit(SecurityEvent(event=event, detail=detail))
