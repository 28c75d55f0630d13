"""
Fields component - Port interfaces.
"""

from __future__ import annotations

from src.core.ports.events import SecurityEvent, SecurityEventPort

__all__ = ["SecurityEvent", "SecurityEventPort"]
