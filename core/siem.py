"""SIEM-compatible security event logging.

Provides structured JSON logging for security events, suitable for
integration with SIEM platforms like Splunk, ELK, or QRadar.

Events never carry passwords, digests or generated candidates. Callers pass
only outcome flags and counts in ``details``.
"""

import json
import logging
import os
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core import config


SIEM_LOGGER_NAME = "password_check.siem"

# Module-level state
_configured_path: Optional[str] = None
_configure_lock = Lock()


def _get_siem_logger() -> logging.Logger:
    """Return the SIEM logger, attaching a rotating file handler on first use."""
    global _configured_path
    logger = logging.getLogger(SIEM_LOGGER_NAME)

    with _configure_lock:
        if _configured_path == config.SIEM_LOG_FILE:
            return logger

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        log_dir = os.path.dirname(config.SIEM_LOG_FILE)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        handler = RotatingFileHandler(
            config.SIEM_LOG_FILE,
            maxBytes=config.SIEM_LOG_MAX_BYTES,
            backupCount=config.SIEM_LOG_BACKUP_COUNT,
        )
        handler.setFormatter(logging.Formatter('%(message)s'))

        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        # JSON lines only go to the SIEM file, not the application log
        logger.propagate = False
        _configured_path = config.SIEM_LOG_FILE

    return logger


def log_siem_event(
    event_type: str,
    status: str,
    source_ip: str = "unknown",
    details: Optional[dict] = None
) -> None:
    """Log event in JSON format suitable for SIEM tools.

    Args:
        event_type: Type of security event (e.g., 'password_check', 'breach_lookup')
        status: Event status (e.g., 'SUCCESS', 'ERROR', 'UNAVAILABLE')
        source_ip: Source IP address
        details: Optional additional event details
    """
    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "ip_address": source_ip,
        "source": "password_check_api"
    }

    if details:
        event["details"] = details

    _get_siem_logger().info(json.dumps(event))


def get_siem_events(limit: int = 100) -> list[dict]:
    """Read and parse SIEM log events.

    Args:
        limit: Maximum number of events to return

    Returns:
        List of parsed event dictionaries, oldest first
    """
    if not os.path.exists(config.SIEM_LOG_FILE):
        return []

    for handler in _get_siem_logger().handlers:
        handler.flush()

    events = []
    with open(config.SIEM_LOG_FILE, "r") as f:
        for line in f:
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                continue

    return events[-limit:]


def count_events_by_status(event_type: Optional[str] = None) -> dict[str, int]:
    """Count SIEM events grouped by status.

    Args:
        event_type: Optional filter by event type

    Returns:
        Dictionary mapping status to count
    """
    events = get_siem_events(limit=10000)
    counts = {}

    for event in events:
        if event_type and event.get("event_type") != event_type:
            continue

        status = event.get("status", "UNKNOWN")
        counts[status] = counts.get(status, 0) + 1

    return counts
