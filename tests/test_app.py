import sys
import types

import pytest

import app
import config


@pytest.fixture
def started(monkeypatch):
    events = []
    monkeypatch.setattr(app, "start_next_server", lambda ready_port=0: events.append(("server", ready_port)))
    monkeypatch.setitem(sys.modules, "gui", types.SimpleNamespace(run_gui=lambda cfg: events.append(("gui", cfg))))
    return events


def test_main_launches_server_before_gui(monkeypatch, started):
    settings = dict(config.DEFAULT_CONFIG, server_ready_port=3000)
    monkeypatch.setattr(app, "load_config", lambda: settings)
    monkeypatch.setattr(app, "should_launch_server", lambda cfg: True)

    app.main()

    assert started == [("server", 3000), ("gui", settings)]


def test_main_skips_server_when_gated(monkeypatch, started):
    settings = dict(config.DEFAULT_CONFIG)
    monkeypatch.setattr(app, "load_config", lambda: settings)
    monkeypatch.setattr(app, "should_launch_server", lambda cfg: False)

    app.main()

    assert started == [("gui", settings)]
