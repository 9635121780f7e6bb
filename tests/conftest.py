"""Shared fixtures: a fake Pwned Passwords range service and isolated SIEM logs."""

import os
import tempfile

# Keep SIEM output out of the working tree before application modules load
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="password-check-logs-"))

import pytest

from core import config
from fakes import FakeRangeService


@pytest.fixture(autouse=True)
def siem_log_file(tmp_path, monkeypatch):
    """Write SIEM events for each test to its own file."""
    path = tmp_path / "siem_events.jsonl"
    monkeypatch.setattr(config, "SIEM_LOG_FILE", str(path))
    return path


@pytest.fixture
def range_service(monkeypatch):
    """Patch urlopen so breach lookups hit an in-memory range service."""
    service = FakeRangeService()
    monkeypatch.setattr("breach_check.urllib.request.urlopen", service.urlopen)
    return service
