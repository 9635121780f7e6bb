"""Tests for SIEM event logging."""

import json

from core import config
from core.siem import count_events_by_status, get_siem_events, log_siem_event


class TestSiemLogging:
    """Test JSON event logging."""

    def test_event_is_json_line(self, siem_log_file):
        log_siem_event("password_check", "SUCCESS", source_ip="10.0.0.5", details={"pwned": False})
        get_siem_events()

        lines = siem_log_file.read_text().splitlines()
        assert len(lines) == 1
        event = json.loads(lines[0])
        assert event["event_type"] == "password_check"
        assert event["status"] == "SUCCESS"
        assert event["ip_address"] == "10.0.0.5"
        assert event["source"] == "password_check_api"
        assert event["details"] == {"pwned": False}
        assert "timestamp" in event

    def test_details_omitted_when_empty(self):
        log_siem_event("breach_lookup", "UNAVAILABLE")
        event = get_siem_events()[-1]
        assert "details" not in event
        assert event["ip_address"] == "unknown"

    def test_limit(self):
        for i in range(5):
            log_siem_event("password_check", "SUCCESS", details={"n": i})
        events = get_siem_events(limit=2)
        assert [e["details"]["n"] for e in events] == [3, 4]

    def test_no_log_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "SIEM_LOG_FILE", str(tmp_path / "missing" / "events.jsonl"))
        assert get_siem_events() == []

    def test_count_events_by_status(self):
        log_siem_event("password_check", "SUCCESS")
        log_siem_event("password_check", "SUCCESS")
        log_siem_event("password_check", "ERROR")
        log_siem_event("breach_lookup", "UNAVAILABLE")

        assert count_events_by_status("password_check") == {"SUCCESS": 2, "ERROR": 1}
        assert count_events_by_status()["UNAVAILABLE"] == 1

    def test_skips_corrupt_lines(self, siem_log_file):
        log_siem_event("password_check", "SUCCESS")
        get_siem_events()
        with open(siem_log_file, "a") as f:
            f.write("not json\n")
        assert len(get_siem_events()) == 1
