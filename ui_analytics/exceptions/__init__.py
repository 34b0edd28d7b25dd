from .exceptions import EventReplayFormatException, UnsupportedControlEventException

__all__ = ["EventReplayFormatException", "UnsupportedControlEventException"]
