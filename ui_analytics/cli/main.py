#!/usr/bin/env python3
"""
UI Analytics CLI

Debugging helpers around the in-memory event log.

Commands:

1) replay
   - Read a JSON Lines event script and feed it through an
     EventDispatcher into a fresh EventLogStore, then print the logs.
     One event per line, e.g.:

       {"event": "screen_appear", "screen_id": "Login"}
       {"event": "control", "kind": "button", "title": "Sign In"}
       {"event": "control", "kind": "switch", "is_on": true}
       {"event": "interaction", "element_type": "Other", "action_type": "Swipe"}
       {"event": "screen_disappear", "screen_id": "Login"}

     Blank lines and lines starting with '#' are skipped.

2) demo
   - Record a short scripted session and print the logs.

3) serve
   - Start the HTTP runtime:
       uvicorn --factory ui_analytics.runtime.api.server:create_app
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from typing import Any, Dict

from pydantic import ValidationError

from ..configs.settings import configure_logging, settings
from ..core.tracking.dispatcher import EventDispatcher
from ..core.tracking.interaction_tracker import (
    CONTROL_EVENT,
    SCREEN_APPEAR_EVENT,
    SCREEN_DISAPPEAR_EVENT,
    InteractionTracker,
)
from ..exceptions.exceptions import EventReplayFormatException, UnsupportedControlEventException
from ..runtime.models.log_models import ControlEvent
from ..runtime.store.event_log_store import EventLogStore


INTERACTION_EVENT = "interaction"


def _require_field(payload: Dict[str, Any], name: str, line_number: int, line: str) -> str:
    value = payload.get(name)
    if not isinstance(value, str):
        raise EventReplayFormatException(
            line_number, line, f"'{name}' must be a string"
        )
    return value


def _replay_line(
    store: EventLogStore,
    dispatcher: EventDispatcher,
    line_number: int,
    line: str,
) -> None:
    """Parse one script line and emit it through the dispatcher."""
    try:
        payload = json.loads(line)
    except json.JSONDecodeError as e:
        raise EventReplayFormatException(line_number, line, f"invalid JSON: {e.msg}")

    if not isinstance(payload, dict):
        raise EventReplayFormatException(line_number, line, "expected a JSON object")

    event_name = payload.pop("event", None)

    if event_name in (SCREEN_APPEAR_EVENT, SCREEN_DISAPPEAR_EVENT):
        screen_id = _require_field(payload, "screen_id", line_number, line)
        dispatcher.emit(event_name, screen_id)
    elif event_name == CONTROL_EVENT:
        try:
            event = ControlEvent(**payload)
            dispatcher.emit(CONTROL_EVENT, event)
        except (ValidationError, UnsupportedControlEventException) as e:
            raise EventReplayFormatException(line_number, line, str(e))
    elif event_name == INTERACTION_EVENT:
        element_type = _require_field(payload, "element_type", line_number, line)
        action_type = _require_field(payload, "action_type", line_number, line)
        store.record_interaction(element_type, action_type)
    else:
        raise EventReplayFormatException(
            line_number, line, f"unknown event type: {event_name!r}"
        )


# ---------------------------------------------------------------------------
# replay
# ---------------------------------------------------------------------------


def cmd_replay(path: str, store: EventLogStore | None = None) -> EventLogStore:
    """
    Replay a JSON Lines event script into `store` (a fresh one by default),
    print the resulting logs and return the store.
    """
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Event script not found: {path}")

    store = store if store is not None else EventLogStore()
    dispatcher = EventDispatcher()
    tracker = InteractionTracker(store)
    tracker.start_tracking(dispatcher)

    print(f"[UI-Analytics] Replaying events from {path}")
    with open(path, "rb") as f:
        for line_number, raw in enumerate(f, start=1):
            try:
                line = raw.decode("utf-8").strip()
            except UnicodeDecodeError as e:
                raise EventReplayFormatException(
                    line_number,
                    raw.decode("utf-8", errors="replace").strip(),
                    f"invalid UTF-8: {e.reason}",
                )
            if not line or line.startswith("#"):
                continue
            _replay_line(store, dispatcher, line_number, line)

    print(f"[UI-Analytics] ✓ {len(store)} records")
    store.display_logs()
    return store


# ---------------------------------------------------------------------------
# demo
# ---------------------------------------------------------------------------


def cmd_demo(store: EventLogStore | None = None, pause: float = 0.0) -> EventLogStore:
    """
    Record a short scripted session and print it.

    `pause` seconds are slept while the Login screen is visible so the
    closing record shows a non-trivial duration.
    """
    store = store if store is not None else EventLogStore()
    tracker = InteractionTracker(store)

    print("[UI-Analytics] Recording demo session...")
    tracker.log_screen_appear("LoginViewController")
    tracker.log_button_click("Sign In")
    tracker.log_switch_toggle(True)
    tracker.log_slider_change(0.5)
    tracker.log_segmented_control_change("Weekly", 1)
    tracker.log_table_cell_selection("Settings", 3)
    if pause > 0:
        time.sleep(pause)
    tracker.log_screen_disappear("LoginViewController")

    store.display_logs()
    return store


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------


def cmd_serve(
    host: str, port: int, reload: bool, store: EventLogStore | None = None
) -> None:
    """
    Run the HTTP runtime with uvicorn.

    Without --reload the app is built here around `store` (a fresh one by
    default). With --reload uvicorn imports the create_app factory itself,
    so each reloaded worker starts with an empty store.
    """
    # Lazy import so replay/demo work without the server stack loaded.
    import uvicorn

    from ..runtime.api.server import create_app

    print(f"[UI-Analytics] Serving event log on http://{host}:{port}/events")
    if reload:
        target = "ui_analytics.runtime.api.server:create_app"
    else:
        target = create_app(store)
    uvicorn.run(
        target,
        factory=reload,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UI Analytics CLI")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (default: UI_ANALYTICS_LOG_LEVEL or 'INFO')",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # replay
    p_replay = subparsers.add_parser(
        "replay", help="Replay a JSON Lines event script and print the logs"
    )
    p_replay.add_argument("path", help="Path to the .jsonl event script")

    # demo
    p_demo = subparsers.add_parser(
        "demo", help="Record a scripted demo session and print the logs"
    )
    p_demo.add_argument(
        "--pause",
        type=float,
        default=1.0,
        help="Seconds the demo screen stays visible (default: 1.0)",
    )

    # serve
    p_serve = subparsers.add_parser("serve", help="Start the HTTP runtime")
    p_serve.add_argument(
        "--host",
        default=settings.host,
        help="Bind address (default: UI_ANALYTICS_HOST or 127.0.0.1)",
    )
    p_serve.add_argument(
        "--port",
        type=int,
        default=None,
        help="Bind port (default: UI_ANALYTICS_PORT or 8000)",
    )
    p_serve.add_argument(
        "--reload", action="store_true", help="Enable uvicorn auto-reload"
    )

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level.upper())
    command: str = args.command

    try:
        if command == "replay":
            cmd_replay(path=args.path)
        elif command == "demo":
            cmd_demo(pause=args.pause)
        elif command == "serve":
            port = args.port if args.port is not None else settings.port
            cmd_serve(host=args.host, port=port, reload=args.reload)
        else:
            parser.error(f"Unknown command: {command}")
    except EventReplayFormatException as e:
        print(f"[UI-Analytics] ✗ {e}", file=sys.stderr)
        return 2
    except (FileNotFoundError, RuntimeError) as e:
        print(f"[UI-Analytics] ✗ {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
