# element_classifier.py

from datetime import date
from typing import Any, Optional, Union

from ...runtime.models.log_models import ControlKind, ElementType

# Lookup table from control kind to the element-type label that is logged.
# ControlKind.OTHER has no entry and falls back to the control's
# runtime type name.
CONTROL_ELEMENT_TYPES = {
    ControlKind.BUTTON: ElementType.BUTTON,
    ControlKind.SWITCH: ElementType.SWITCH,
    ControlKind.SLIDER: ElementType.SLIDER,
    ControlKind.SEGMENTED_CONTROL: ElementType.SEGMENTED_CONTROL,
    ControlKind.DATE_PICKER: ElementType.DATE_PICKER,
    ControlKind.TABLE_CELL: ElementType.TABLE_CELL,
}


def classify_control(kind: Union[ControlKind, str], control: Any = None) -> str:
    """Return the element-type label for a control.

    Unknown kinds and ControlKind.OTHER use the runtime type name of
    `control` (or its own value, if a type name string was passed),
    falling back to "Other".
    """
    try:
        kind = ControlKind(kind)
    except ValueError:
        kind = ControlKind.OTHER

    element_type = CONTROL_ELEMENT_TYPES.get(kind)
    if element_type is not None:
        return element_type.value

    if control is None:
        return ElementType.OTHER.value
    if isinstance(control, str):
        return control or ElementType.OTHER.value
    if isinstance(control, type):
        return control.__name__
    return type(control).__name__


# ---------------------------------------------------------------------------
# Action descriptions
# ---------------------------------------------------------------------------


def describe_button_click(title: Optional[str]) -> str:
    return f"Button Click - {title or ''}"


def describe_switch_toggle(is_on: bool) -> str:
    return f"Switch Toggled - {'ON' if is_on else 'OFF'}"


def describe_slider_change(value: float) -> str:
    return f"Slider Value Changed - {value}"


def describe_segmented_control_change(title: Optional[str], index: int) -> str:
    return f"Segmented Control Changed - {title or ''} at index {index}"


def describe_date_picker_change(selected: date, date_format: str) -> str:
    return f"Date Picker Changed - {selected.strftime(date_format)}"


def describe_table_cell_selection(table_name: str, row: int) -> str:
    return f"Cell Selected - {table_name} Row {row}"
