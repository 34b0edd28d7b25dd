"""
Storage abstractions for the UI Analytics runtime.

Includes:
- EventLogStore: append-only in-memory event log + open screen spans
"""

from .event_log_store import EventLogStore

__all__ = ["EventLogStore"]
