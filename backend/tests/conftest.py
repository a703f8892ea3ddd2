from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Ensure `backend/` is on sys.path so `import eventstream.*` works when running tests from repo root.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from eventstream.core.config import get_settings  # noqa: E402
from eventstream.main import create_app  # noqa: E402


@pytest.fixture()
def app(monkeypatch):
    monkeypatch.setenv("ENV", "test")
    # Small bounds so the limit checks are cheap to exercise.
    monkeypatch.setenv("MAX_DECODE_BYTES", "1024")
    monkeypatch.setenv("MAX_EVENTS_PER_REQUEST", "3")
    get_settings.cache_clear()
    yield create_app()
    get_settings.cache_clear()
