"""EventLogStore: append-only in-memory log of UI interactions.

The store owns two pieces of state:

- the record buffer, an ordered list of immutable LogRecord objects
- the open-span map, screen_id -> timestamp of its last "appear"

Screen visibility durations are resolved from the span map when the
matching "disappear" arrives:

    record_screen_appear("Login")      # opens span, duration=None
    record_screen_disappear("Login")   # closes span, duration=elapsed

A second "appear" for a screen that is already open overwrites the open
timestamp; the earlier span is discarded and never becomes a duration.

Nothing here is persisted. The store is created explicitly by the host and
passed to whoever records into it (tracker, HTTP app, CLI).
"""

import logging
import sys
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from ...configs.settings import settings
from ..models.log_models import ElementType, LogRecord


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

LOGS_HEADER = "--- User Interaction Logs ---"
LOGS_FOOTER = "--- End of Logs ---"
NO_LOGS_MESSAGE = "No logs available."


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventLogStore:
    """In-memory event log with screen-visibility span tracking.

    Parameters
    ----------
    clock:
        Callable returning the current time as a timezone-aware datetime.
        Defaults to UTC wall-clock time; tests inject a fake clock.
    timestamp_format:
        strftime pattern used by format_for_display(). Defaults to
        UI_ANALYTICS_TIMESTAMP_FORMAT (a medium date + short time).
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        timestamp_format: Optional[str] = None,
    ) -> None:
        self._clock: Clock = clock or _utc_now
        self.timestamp_format = timestamp_format or settings.timestamp_format

        self._logs: List[LogRecord] = []
        self._open_spans: Dict[str, datetime] = {}

        # Guards _logs and _open_spans; sync FastAPI endpoints run in a
        # thread pool.
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def record_interaction(self, element_type: str, action_type: str) -> LogRecord:
        """Append a plain interaction record (no duration)."""
        with self._lock:
            return self._append(element_type, action_type, self._clock())

    def record_screen_appear(self, screen_id: str) -> LogRecord:
        """Open a visibility span for `screen_id` and log the appearance."""
        with self._lock:
            now = self._clock()
            previous = self._open_spans.get(screen_id)
            if previous is not None:
                logger.debug(
                    "Discarding unresolved span for screen=%s opened at %s",
                    screen_id,
                    previous.isoformat(),
                )
            self._open_spans[screen_id] = now
            return self._append(
                ElementType.VIEW_CONTROLLER.value,
                f"Screen Appear - {screen_id}",
                now,
            )

    def record_screen_disappear(self, screen_id: str) -> LogRecord:
        """Log a disappearance, closing the open span if there is one.

        Without a prior appear the record is still written, with
        duration=None.
        """
        with self._lock:
            now = self._clock()
            started_at = self._open_spans.pop(screen_id, None)
            duration: Optional[float] = None
            if started_at is not None:
                duration = (now - started_at).total_seconds()
            return self._append(
                ElementType.VIEW_CONTROLLER.value,
                f"Screen Disappear - {screen_id}",
                now,
                duration=duration,
            )

    def _append(
        self,
        element_type: str,
        action_type: str,
        timestamp: datetime,
        duration: Optional[float] = None,
    ) -> LogRecord:
        # Caller holds self._lock.
        record = LogRecord(
            element_type=element_type,
            action_type=action_type,
            timestamp=timestamp,
            duration=duration,
        )
        self._logs.append(record)
        logger.debug(
            "Recorded %s: %s (duration=%s)", element_type, action_type, duration
        )
        return record

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_all_logs(self) -> Tuple[LogRecord, ...]:
        """Return every record in insertion order.

        The result is an immutable snapshot; records themselves are frozen.
        """
        with self._lock:
            return tuple(self._logs)

    def open_spans(self) -> Dict[str, datetime]:
        """Return a copy of the currently open screen spans."""
        with self._lock:
            return dict(self._open_spans)

    def __len__(self) -> int:
        with self._lock:
            return len(self._logs)

    # ------------------------------------------------------------------
    # Maintenance
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Drop all records and open spans."""
        with self._lock:
            self._logs = []
            self._open_spans = {}
        logger.debug("Event log cleared")

    remove_all = clear

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def _format_timestamp(self, timestamp: datetime) -> str:
        # Render in the host's local time zone, like a device log would.
        return timestamp.astimezone().strftime(self.timestamp_format)

    def format_for_display(self) -> str:
        """Render all records as a human-readable, multi-line string."""
        records = self.get_all_logs()

        lines = ["", LOGS_HEADER, ""]
        if not records:
            lines.append(NO_LOGS_MESSAGE)
        else:
            for index, record in enumerate(records, start=1):
                duration_text = ""
                if record.duration is not None:
                    duration_text = f" | Duration: {record.duration:.2f} seconds"
                lines.append(
                    f"{index}. [{self._format_timestamp(record.timestamp)}] "
                    f"{record.element_type}: {record.action_type}{duration_text}"
                )
        lines.extend(["", LOGS_FOOTER, ""])
        return "\n".join(lines)

    def display_logs(self, stream: Optional[TextIO] = None) -> None:
        """Print format_for_display() to `stream` (stdout by default)."""
        print(self.format_for_display(), file=stream or sys.stdout)
