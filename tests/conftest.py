import os
import time

import pytest


def _apply_tz(name):
    if name is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = name
    if hasattr(time, "tzset"):
        time.tzset()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep user settings, .env files and the host time zone out of tests."""
    for var in ("SIR_TRACKER_STORAGE_PATH", "SIR_TRACKER_LOG_LEVEL", "SIR_TRACKER_LOG_JSON"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    original_tz = os.environ.get("TZ")
    _apply_tz("UTC0")
    yield
    _apply_tz(original_tz)


@pytest.fixture
def local_tz():
    """Switch the process-local time zone, e.g. local_tz("EST+5")."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")
    return _apply_tz


@pytest.fixture
def tmp_storage(tmp_path):
    """Provide a temporary topics file path for tests."""
    return tmp_path / "data" / "storage.json"
