"""
Amounts component - Port interfaces.

The parser talks to nothing but an optional security event sink.
"""

from __future__ import annotations

from src.core.ports.events import SecurityEvent, SecurityEventPort

__all__ = ["SecurityEvent", "SecurityEventPort"]
