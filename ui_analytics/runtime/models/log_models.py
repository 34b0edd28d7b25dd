"""
Event-related models for the UI Analytics runtime.

These describe:
- ElementType enum (the fixed vocabulary of logged element categories)
- LogRecord (one immutable logged event)
- ControlKind enum + ControlEvent (what an adapter reports for a UI control)
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict


class ElementType(str, Enum):
    VIEW_CONTROLLER = "ViewController"
    BUTTON = "Button"
    SWITCH = "Switch"
    SLIDER = "Slider"
    SEGMENTED_CONTROL = "SegmentedControl"
    DATE_PICKER = "DatePicker"
    TABLE_CELL = "TableCell"
    OTHER = "Other"


class LogRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    element_type: str       # ElementType value or a control's runtime type name
    action_type: str        # e.g. "Button Click - Save"
    timestamp: datetime
    duration: Optional[float] = None  # seconds, closed screen spans only


class ControlKind(str, Enum):
    BUTTON = "button"
    SWITCH = "switch"
    SLIDER = "slider"
    SEGMENTED_CONTROL = "segmented_control"
    DATE_PICKER = "date_picker"
    TABLE_CELL = "table_cell"
    OTHER = "other"


class ControlEvent(BaseModel):
    """
    A single control interaction as reported by a host adapter.

    Which fields are required depends on `kind`:

      - button:            title
      - switch:            is_on
      - slider:            value
      - segmented_control: title, index
      - date_picker:       selected_date
      - table_cell:        table_name, row
      - other:             control_type (optional), action
    """
    kind: ControlKind
    title: Optional[str] = None
    is_on: Optional[bool] = None
    value: Optional[float] = None
    index: Optional[int] = None
    selected_date: Optional[Union[datetime, date]] = None
    table_name: Optional[str] = None
    row: Optional[int] = None
    control_type: Optional[str] = None
    action: str = "Tap"
