# thinking-bank - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from src.core.ports.events import (
    SecurityEvent,
    SecurityEventPort,
    emit_event,
)

__all__ = [
    # Security events
    "SecurityEvent",
    "SecurityEventPort",
    "emit_event",
]
