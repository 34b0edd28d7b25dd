"""InteractionTracker implementation.

Responsible for:
- turning UI control events into (element_type, action_type) pairs
- forwarding screen appear / disappear notifications
- recording all of the above into an EventLogStore

Hosts wire their native event bindings (delegate callbacks, listeners,
signals) to the tracker at start-up, either by calling the typed
log_* methods directly or by attaching an event source:

    store = EventLogStore()
    tracker = InteractionTracker(store)
    tracker.start_tracking(dispatcher)

    dispatcher.emit("screen_appear", "Login")
    dispatcher.emit("control", ControlEvent(kind="button", title="Save"))
"""

from datetime import date
from typing import Any, Callable, Dict, Optional

from ...configs.settings import settings
from ...exceptions.exceptions import UnsupportedControlEventException
from ...runtime.models.log_models import ControlEvent, ControlKind, ElementType, LogRecord
from ...runtime.store.event_log_store import EventLogStore
from ..classification.element_classifier import (
    classify_control,
    describe_button_click,
    describe_date_picker_change,
    describe_segmented_control_change,
    describe_slider_change,
    describe_switch_toggle,
    describe_table_cell_selection,
)


CONTROL_EVENT = "control"
SCREEN_APPEAR_EVENT = "screen_appear"
SCREEN_DISAPPEAR_EVENT = "screen_disappear"


class InteractionTracker:
    """Adapter between host UI events and an EventLogStore.

    Parameters
    ----------
    store:
        The EventLogStore that receives every record.
    date_format:
        strftime pattern for date picker values. Defaults to
        UI_ANALYTICS_DATE_PICKER_FORMAT.
    """

    def __init__(self, store: EventLogStore, date_format: Optional[str] = None):
        self.store = store
        self.date_format = date_format or settings.date_picker_format

        self._control_handlers: Dict[ControlKind, Callable[[ControlEvent], LogRecord]] = {
            ControlKind.BUTTON: self._handle_button,
            ControlKind.SWITCH: self._handle_switch,
            ControlKind.SLIDER: self._handle_slider,
            ControlKind.SEGMENTED_CONTROL: self._handle_segmented_control,
            ControlKind.DATE_PICKER: self._handle_date_picker,
            ControlKind.TABLE_CELL: self._handle_table_cell,
            ControlKind.OTHER: self._handle_other,
        }

    # ------------------------------------------------------------------
    # Listener registration
    # ------------------------------------------------------------------

    def attach(self, source) -> None:
        """Register this tracker's callbacks on an event source.

        `source` is expected to expose add_listener(event_name, callback),
        e.g. an EventDispatcher.
        """
        source.add_listener(CONTROL_EVENT, self.handle_control_event)
        source.add_listener(SCREEN_APPEAR_EVENT, self.log_screen_appear)
        source.add_listener(SCREEN_DISAPPEAR_EVENT, self.log_screen_disappear)

    def detach(self, source) -> None:
        source.remove_listener(CONTROL_EVENT, self.handle_control_event)
        source.remove_listener(SCREEN_APPEAR_EVENT, self.log_screen_appear)
        source.remove_listener(SCREEN_DISAPPEAR_EVENT, self.log_screen_disappear)

    def start_tracking(self, *sources) -> None:
        """Attach to every given event source."""
        for source in sources:
            self.attach(source)

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def log_screen_appear(self, screen_name: str) -> LogRecord:
        return self.store.record_screen_appear(screen_name)

    def log_screen_disappear(self, screen_name: str) -> LogRecord:
        return self.store.record_screen_disappear(screen_name)

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------

    def log_button_click(self, button_title: Optional[str]) -> LogRecord:
        return self.store.record_interaction(
            ElementType.BUTTON.value, describe_button_click(button_title)
        )

    def log_switch_toggle(self, is_on: bool) -> LogRecord:
        return self.store.record_interaction(
            ElementType.SWITCH.value, describe_switch_toggle(is_on)
        )

    def log_slider_change(self, value: float) -> LogRecord:
        return self.store.record_interaction(
            ElementType.SLIDER.value, describe_slider_change(value)
        )

    def log_segmented_control_change(self, selected_title: Optional[str], selected_index: int) -> LogRecord:
        return self.store.record_interaction(
            ElementType.SEGMENTED_CONTROL.value,
            describe_segmented_control_change(selected_title, selected_index),
        )

    def log_date_picker_change(self, selected_date: date) -> LogRecord:
        return self.store.record_interaction(
            ElementType.DATE_PICKER.value,
            describe_date_picker_change(selected_date, self.date_format),
        )

    def log_table_cell_selection(self, table_name: str, row_number: int) -> LogRecord:
        return self.store.record_interaction(
            ElementType.TABLE_CELL.value,
            describe_table_cell_selection(table_name, row_number),
        )

    def log_other_control(self, control: Any, action_description: str = "Tap") -> LogRecord:
        """Log a control with no dedicated handler.

        The element type is the runtime type name of `control` (a class,
        an instance, or a type name string).
        """
        return self.store.record_interaction(
            classify_control(ControlKind.OTHER, control), action_description
        )

    # ------------------------------------------------------------------
    # ControlEvent dispatch
    # ------------------------------------------------------------------

    def handle_control_event(self, event: ControlEvent) -> LogRecord:
        """Record a ControlEvent using the handler registered for its kind."""
        handler = self._control_handlers.get(event.kind, self._handle_other)
        return handler(event)

    @staticmethod
    def _require(event: ControlEvent, *fields: str) -> None:
        missing = [name for name in fields if getattr(event, name) is None]
        if missing:
            raise UnsupportedControlEventException(event.kind.value, missing)

    def _handle_button(self, event: ControlEvent) -> LogRecord:
        return self.log_button_click(event.title)

    def _handle_switch(self, event: ControlEvent) -> LogRecord:
        self._require(event, "is_on")
        return self.log_switch_toggle(event.is_on)

    def _handle_slider(self, event: ControlEvent) -> LogRecord:
        self._require(event, "value")
        return self.log_slider_change(event.value)

    def _handle_segmented_control(self, event: ControlEvent) -> LogRecord:
        self._require(event, "index")
        return self.log_segmented_control_change(event.title, event.index)

    def _handle_date_picker(self, event: ControlEvent) -> LogRecord:
        self._require(event, "selected_date")
        return self.log_date_picker_change(event.selected_date)

    def _handle_table_cell(self, event: ControlEvent) -> LogRecord:
        self._require(event, "table_name", "row")
        return self.log_table_cell_selection(event.table_name, event.row)

    def _handle_other(self, event: ControlEvent) -> LogRecord:
        return self.log_other_control(event.control_type, event.action)
