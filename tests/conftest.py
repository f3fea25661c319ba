# tests/conftest.py

import os
from datetime import datetime
from pathlib import Path

import pytest

ENV_KEYS = (
    "PICOBLOG_TITLE",
    "PICOBLOG_MODE",
    "PICOBLOG_URL",
    "PICOBLOG_LIST",
    "PICOBLOG_FEED_FULL_CONTENT",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's PICOBLOG_* settings out of the tests."""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for key in ENV_KEYS:
        os.environ.pop(key, None)


@pytest.fixture
def write_post(tmp_path):
    """Factory writing a post file with a fixed modification time."""

    def _write(name: str, contents: str = "", mtime: datetime = None) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(contents, encoding="utf-8")
        if mtime is not None:
            ts = mtime.timestamp()
            os.utime(path, (ts, ts))
        return path

    return _write
