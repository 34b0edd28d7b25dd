from .element_classifier import (
    CONTROL_ELEMENT_TYPES,
    classify_control,
    describe_button_click,
    describe_date_picker_change,
    describe_segmented_control_change,
    describe_slider_change,
    describe_switch_toggle,
    describe_table_cell_selection,
)

__all__ = [
    "CONTROL_ELEMENT_TYPES",
    "classify_control",
    "describe_button_click",
    "describe_date_picker_change",
    "describe_segmented_control_change",
    "describe_slider_change",
    "describe_switch_toggle",
    "describe_table_cell_selection",
]
