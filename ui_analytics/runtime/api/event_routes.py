"""HTTP routes for recording into and reading from the event log.

Exposes endpoints like:

- POST   /events/interaction        -> record (element_type, action_type)
- POST   /events/control            -> record a classified ControlEvent
- POST   /events/screen/appear      -> open a screen span
- POST   /events/screen/disappear   -> close a screen span
- GET    /events/logs               -> all records as JSON
- GET    /events/logs/display       -> human-readable text rendering
- DELETE /events/logs               -> clear records and spans
"""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import PlainTextResponse

from ...core.tracking.interaction_tracker import InteractionTracker
from ...exceptions.exceptions import UnsupportedControlEventException
from ..models.api_models import (
    InteractionRequest,
    LogsResponse,
    ScreenEventRequest,
    StatusResponse,
)
from ..models.log_models import ControlEvent, LogRecord
from ..store.event_log_store import EventLogStore


logger = logging.getLogger(__name__)

# Router for all event-related endpoints
router = APIRouter()


def _require_store(request: Request) -> EventLogStore:
    store = getattr(request.app.state, "event_log_store", None)
    if store is None:
        raise HTTPException(
            status_code=500,
            detail="EventLogStore is not configured on the server.",
        )
    return store


def _require_tracker(request: Request) -> InteractionTracker:
    tracker = getattr(request.app.state, "interaction_tracker", None)
    if tracker is None:
        raise HTTPException(
            status_code=500,
            detail="InteractionTracker is not configured on the server.",
        )
    return tracker


# --------------------------------------------------------
# Recording
# --------------------------------------------------------
@router.post("/interaction", response_model=LogRecord)
def record_interaction(body: InteractionRequest, request: Request) -> LogRecord:
    store = _require_store(request)
    return store.record_interaction(body.element_type, body.action_type)


@router.post("/control", response_model=LogRecord)
def record_control_event(event: ControlEvent, request: Request) -> LogRecord:
    """Classify a control event and record it.

    Events missing the fields their kind needs are rejected with 400.
    """
    tracker = _require_tracker(request)
    try:
        return tracker.handle_control_event(event)
    except UnsupportedControlEventException as e:
        logger.warning(
            "[EVENTS] Rejected control event kind=%s missing=%s",
            e.kind,
            e.missing_fields,
        )
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("[EVENTS] Unexpected error for control event %r", event)
        raise


@router.post("/screen/appear", response_model=LogRecord)
def record_screen_appear(body: ScreenEventRequest, request: Request) -> LogRecord:
    store = _require_store(request)
    return store.record_screen_appear(body.screen_id)


@router.post("/screen/disappear", response_model=LogRecord)
def record_screen_disappear(body: ScreenEventRequest, request: Request) -> LogRecord:
    store = _require_store(request)
    return store.record_screen_disappear(body.screen_id)


# --------------------------------------------------------
# Queries
# --------------------------------------------------------
@router.get("/logs", response_model=LogsResponse)
def get_logs(request: Request) -> LogsResponse:
    store = _require_store(request)
    logs = store.get_all_logs()
    return LogsResponse(count=len(logs), logs=list(logs))


@router.get("/logs/display", response_class=PlainTextResponse)
def display_logs(request: Request) -> str:
    store = _require_store(request)
    return store.format_for_display()


@router.delete("/logs", response_model=StatusResponse)
def clear_logs(request: Request) -> StatusResponse:
    store = _require_store(request)
    store.clear()
    return StatusResponse(status="cleared")


# --------------------------------------------------------
# Endpoint: GET /events/healthz
# --------------------------------------------------------
@router.get("/healthz")
def health_check():
    """
    Simple health check endpoint for uptime monitoring.
    """
    return {"status": "ok"}
