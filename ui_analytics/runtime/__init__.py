"""
Runtime package for the UI Analytics event log.

This package contains:
- Store (EventLogStore: append-only record buffer + open screen spans)
- Models (Pydantic models for records, control events and HTTP schemas)
- API layer (FastAPI app + routes for local debugging)
"""
