import pytest

from services import deployment_detector, server_launcher


class FakeRegistry:
    """In-memory registry: {(hive, path): [subkey names]} or an exception to raise."""

    def __init__(self, keys=None):
        self.keys = keys or {}
        self.opened = []

    def subkey_names(self, hive, path):
        self.opened.append((hive, path))
        entry = self.keys.get((hive, path))
        if entry is None:
            raise FileNotFoundError(2, "The system cannot find the file specified")
        if isinstance(entry, Exception):
            raise entry
        return list(entry)


@pytest.fixture
def fake_registry():
    return FakeRegistry


@pytest.fixture(autouse=True)
def reset_log_callbacks(monkeypatch):
    monkeypatch.setattr(server_launcher, "log_callback", None)
    monkeypatch.setattr(deployment_detector, "log_callback", None)
