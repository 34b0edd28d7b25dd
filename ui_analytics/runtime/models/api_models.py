"""
HTTP request/response models for the UI Analytics runtime API.
"""

from typing import List

from pydantic import BaseModel

from .log_models import LogRecord


class InteractionRequest(BaseModel):
    element_type: str
    action_type: str


class ScreenEventRequest(BaseModel):
    screen_id: str


class LogsResponse(BaseModel):
    count: int
    logs: List[LogRecord]


class StatusResponse(BaseModel):
    status: str
