"""
Custom exceptions for UI Analytics adapters and tooling.

These exceptions are intentionally simple and descriptive.
They are used across:

  - core/tracking/
  - runtime/api/
  - cli/

The EventLogStore itself never raises: every recording operation is total.
Only the layers that translate external input into store calls can fail.
"""


class UnsupportedControlEventException(Exception):
    """
    Raised when a control event cannot be translated into a log record,
    e.g. a switch event that carries no ON/OFF state.

    The exception contains the control kind and the list of missing fields.
    """

    def __init__(self, kind, missing_fields):
        self.kind = kind
        self.missing_fields = list(missing_fields)
        msg = (
            f"Control event of kind {kind!s} is missing field(s): "
            + ", ".join(str(f) for f in self.missing_fields)
        )
        super().__init__(msg)


class EventReplayFormatException(Exception):
    """
    Raised when a line of an event replay script cannot be parsed.

    Example:
        {"event": "screen_appear", "screen_id": "Login"}  ← expected
        {"event": "teleport"}                             ← raises this exception
    """

    def __init__(self, line_number, line, details=None):
        self.line_number = line_number
        self.line = line
        self.details = details or "Invalid event format."
        msg = f"Replay error on line {line_number}: {line}\nDetails: {self.details}"
        super().__init__(msg)
