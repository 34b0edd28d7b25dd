from datetime import datetime

import pytest

from ui_analytics.core.tracking.dispatcher import EventDispatcher
from ui_analytics.core.tracking.interaction_tracker import (
    CONTROL_EVENT,
    SCREEN_APPEAR_EVENT,
    SCREEN_DISAPPEAR_EVENT,
    InteractionTracker,
)
from ui_analytics.exceptions.exceptions import UnsupportedControlEventException
from ui_analytics.runtime.models.log_models import ControlEvent


class CustomKnob:
    pass


@pytest.fixture
def tracker(store):
    return InteractionTracker(store, date_format="%Y-%m-%d")


def _only(store):
    logs = store.get_all_logs()
    assert len(logs) == 1
    return logs[0]


def test_log_button_click(tracker, store):
    tracker.log_button_click("TestButton")
    record = _only(store)
    assert record.element_type == "Button"
    assert record.action_type == "Button Click - TestButton"


def test_log_switch_toggle(tracker, store):
    tracker.log_switch_toggle(True)
    record = _only(store)
    assert record.element_type == "Switch"
    assert record.action_type == "Switch Toggled - ON"


def test_log_slider_change(tracker, store):
    tracker.log_slider_change(0.5)
    assert _only(store).action_type == "Slider Value Changed - 0.5"


def test_log_segmented_control_change(tracker, store):
    tracker.log_segmented_control_change("TestSegment", 1)
    record = _only(store)
    assert record.element_type == "SegmentedControl"
    assert record.action_type == "Segmented Control Changed - TestSegment at index 1"


def test_log_date_picker_change(tracker, store):
    tracker.log_date_picker_change(datetime(2024, 11, 3, 8, 0))
    record = _only(store)
    assert record.element_type == "DatePicker"
    assert record.action_type == "Date Picker Changed - 2024-11-03"


def test_log_table_cell_selection(tracker, store):
    tracker.log_table_cell_selection("Contacts", 2)
    record = _only(store)
    assert record.element_type == "TableCell"
    assert record.action_type == "Cell Selected - Contacts Row 2"


def test_log_other_control_uses_type_name(tracker, store):
    tracker.log_other_control(CustomKnob())
    record = _only(store)
    assert record.element_type == "CustomKnob"
    assert record.action_type == "Tap"


def test_screen_events_go_through_span_tracking(tracker, store, clock):
    tracker.log_screen_appear("Profile")
    clock.advance(3)
    record = tracker.log_screen_disappear("Profile")
    assert record.duration == pytest.approx(3)


def test_handle_control_event_dispatches_by_kind(tracker, store):
    tracker.handle_control_event(ControlEvent(kind="switch", is_on=False))
    tracker.handle_control_event(ControlEvent(kind="segmented_control", title="Daily", index=0))
    tracker.handle_control_event(ControlEvent(kind="other", control_type="Stepper", action="Increment"))

    assert [(r.element_type, r.action_type) for r in store.get_all_logs()] == [
        ("Switch", "Switch Toggled - OFF"),
        ("SegmentedControl", "Segmented Control Changed - Daily at index 0"),
        ("Stepper", "Increment"),
    ]


def test_handle_control_event_rejects_missing_fields(tracker, store):
    with pytest.raises(UnsupportedControlEventException) as excinfo:
        tracker.handle_control_event(ControlEvent(kind="table_cell", table_name="Contacts"))

    assert excinfo.value.missing_fields == ["row"]
    assert store.get_all_logs() == ()


def test_attach_wires_dispatcher_events(tracker, store, clock):
    dispatcher = EventDispatcher()
    tracker.start_tracking(dispatcher)

    dispatcher.emit(SCREEN_APPEAR_EVENT, "Home")
    dispatcher.emit(CONTROL_EVENT, ControlEvent(kind="button", title="Next"))
    clock.advance(2)
    dispatcher.emit(SCREEN_DISAPPEAR_EVENT, "Home")

    logs = store.get_all_logs()
    assert [r.action_type for r in logs] == [
        "Screen Appear - Home",
        "Button Click - Next",
        "Screen Disappear - Home",
    ]
    assert logs[-1].duration == pytest.approx(2)


def test_detach_stops_recording(tracker, store):
    dispatcher = EventDispatcher()
    tracker.attach(dispatcher)
    tracker.detach(dispatcher)

    dispatcher.emit(CONTROL_EVENT, ControlEvent(kind="button", title="Next"))

    assert store.get_all_logs() == ()
    assert dispatcher.listener_count(CONTROL_EVENT) == 0


def test_dispatcher_remove_unknown_listener_is_ignored():
    dispatcher = EventDispatcher()
    dispatcher.remove_listener("control", print)
    assert dispatcher.emit("control") == []
