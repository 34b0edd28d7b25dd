import json

import pytest
import uvicorn
from fastapi import FastAPI

from ui_analytics.cli.main import cmd_demo, cmd_replay, cmd_serve, main
from ui_analytics.configs.settings import settings
from ui_analytics.exceptions.exceptions import EventReplayFormatException


def _write_script(tmp_path, lines):
    path = tmp_path / "events.jsonl"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


def test_replay_feeds_events_into_store(tmp_path, store, clock, capsys):
    path = _write_script(
        tmp_path,
        [
            "# login flow",
            json.dumps({"event": "screen_appear", "screen_id": "Login"}),
            "",
            json.dumps({"event": "control", "kind": "button", "title": "Sign In"}),
            json.dumps({"event": "control", "kind": "switch", "is_on": True}),
            json.dumps({"event": "interaction", "element_type": "Other", "action_type": "Swipe"}),
            json.dumps({"event": "screen_disappear", "screen_id": "Login"}),
        ],
    )

    cmd_replay(str(path), store=store)

    assert [(r.element_type, r.action_type) for r in store.get_all_logs()] == [
        ("ViewController", "Screen Appear - Login"),
        ("Button", "Button Click - Sign In"),
        ("Switch", "Switch Toggled - ON"),
        ("Other", "Swipe"),
        ("ViewController", "Screen Disappear - Login"),
    ]
    out = capsys.readouterr().out
    assert "5 records" in out
    assert "5. [" in out


@pytest.mark.parametrize(
    "line, fragment",
    [
        ("not json", "invalid JSON"),
        (json.dumps(["screen_appear"]), "expected a JSON object"),
        (json.dumps({"event": "teleport"}), "unknown event type"),
        (json.dumps({"event": "screen_appear"}), "'screen_id' must be a string"),
        (json.dumps({"event": "control", "kind": "switch"}), "is_on"),
    ],
)
def test_replay_rejects_malformed_lines(tmp_path, store, line, fragment):
    path = _write_script(
        tmp_path,
        [json.dumps({"event": "screen_appear", "screen_id": "Login"}), line],
    )

    with pytest.raises(EventReplayFormatException) as excinfo:
        cmd_replay(str(path), store=store)

    assert excinfo.value.line_number == 2
    assert fragment in excinfo.value.details


def test_main_returns_2_on_bad_script(tmp_path, capsys):
    path = _write_script(tmp_path, ["{broken"])

    assert main(["replay", str(path)]) == 2
    assert "line 1" in capsys.readouterr().err


def test_main_returns_1_on_missing_script(tmp_path):
    assert main(["replay", str(tmp_path / "missing.jsonl")]) == 1


def test_demo_records_a_closed_login_span(store, capsys):
    cmd_demo(store=store)

    logs = store.get_all_logs()
    assert logs[0].action_type == "Screen Appear - LoginViewController"
    assert logs[-1].action_type == "Screen Disappear - LoginViewController"
    assert logs[-1].duration is not None
    assert all(r.duration is None for r in logs[:-1])
    assert "--- End of Logs ---" in capsys.readouterr().out


def test_replay_rejects_invalid_utf8(tmp_path, store):
    path = tmp_path / "events.jsonl"
    path.write_bytes(
        b'{"event": "screen_appear", "screen_id": "Login"}\n'
        b'{"event": "screen_appear", "screen_id": "\xff\xfe"}\n'
    )

    with pytest.raises(EventReplayFormatException) as excinfo:
        cmd_replay(str(path), store=store)

    assert excinfo.value.line_number == 2
    assert "invalid UTF-8" in excinfo.value.details


def test_main_returns_2_on_invalid_utf8(tmp_path, capsys):
    path = tmp_path / "events.jsonl"
    path.write_bytes(b'{"event": "screen_appear", "screen_id": "\xff\xfe"}\n')

    assert main(["replay", str(path)]) == 2
    assert "line 1" in capsys.readouterr().err


def test_invalid_port_setting_does_not_break_other_commands(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "_port_raw", "abc")
    path = _write_script(
        tmp_path, [json.dumps({"event": "screen_appear", "screen_id": "Login"})]
    )

    assert main(["demo", "--pause", "0"]) == 0
    assert main(["replay", str(path)]) == 0


def test_serve_reports_invalid_port_setting(monkeypatch, capsys):
    monkeypatch.setattr(settings, "_port_raw", "abc")

    assert main(["serve"]) == 1
    assert "UI_ANALYTICS_PORT" in capsys.readouterr().err


def test_serve_passes_explicit_port(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    assert main(["serve", "--host", "0.0.0.0", "--port", "9123"]) == 0
    assert calls[0][1]["host"] == "0.0.0.0"
    assert calls[0][1]["port"] == 9123


def test_serve_runs_an_app_bound_to_the_given_store(monkeypatch, store):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    cmd_serve(host="127.0.0.1", port=8001, reload=False, store=store)

    target, kwargs = calls[0]
    assert isinstance(target, FastAPI)
    assert target.state.event_log_store is store
    assert kwargs["factory"] is False


def test_serve_with_reload_uses_app_factory(monkeypatch):
    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

    cmd_serve(host="127.0.0.1", port=8001, reload=True)

    target, kwargs = calls[0]
    assert target == "ui_analytics.runtime.api.server:create_app"
    assert kwargs["factory"] is True
    assert kwargs["reload"] is True
