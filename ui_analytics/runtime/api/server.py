"""
FastAPI application entry point for the UI Analytics runtime.

Responsibilities:
- create the FastAPI app
- construct (or accept) the EventLogStore and InteractionTracker
- include event-related routes under /events

Start it with the CLI (`ui-analytics serve`) or directly:

    uvicorn --factory ui_analytics.runtime.api.server:create_app --reload
"""

from typing import Optional

from fastapi import FastAPI

from ...core.tracking.interaction_tracker import InteractionTracker
from ..store.event_log_store import EventLogStore
from . import event_routes


def create_app(store: Optional[EventLogStore] = None) -> FastAPI:
    """Build a FastAPI app bound to `store` (a fresh one if not given)."""
    store = store if store is not None else EventLogStore()

    app = FastAPI(title="UI Analytics Runtime")

    # Shared objects live on app.state so each app owns its own store.
    app.state.event_log_store = store
    app.state.interaction_tracker = InteractionTracker(store)

    app.include_router(event_routes.router, prefix="/events")
    return app

