from .dispatcher import EventDispatcher
from .interaction_tracker import (
    CONTROL_EVENT,
    SCREEN_APPEAR_EVENT,
    SCREEN_DISAPPEAR_EVENT,
    InteractionTracker,
)

__all__ = [
    "CONTROL_EVENT",
    "SCREEN_APPEAR_EVENT",
    "SCREEN_DISAPPEAR_EVENT",
    "EventDispatcher",
    "InteractionTracker",
]
