"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Deployment-specific settings can be overridden via environment variables.
"""

import os

# Logging
LOG_DIR = os.environ.get("LOG_DIR", "logs")
SIEM_LOG_FILE = os.path.join(LOG_DIR, "siem_events.jsonl")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Pwned Passwords range API (k-Anonymity)
HIBP_API_URL = os.environ.get("HIBP_API_URL", "https://api.pwnedpasswords.com/range/")
HIBP_USER_AGENT = os.environ.get("HIBP_USER_AGENT", "PasswordCheck-Service/1.0")
HIBP_REQUEST_TIMEOUT = float(os.environ.get("HIBP_REQUEST_TIMEOUT", "5"))  # seconds
# Padding makes every range response roughly the same size
HIBP_ADD_PADDING = os.environ.get("HIBP_ADD_PADDING", "true").lower() == "true"

# Whether a breach lookup of the submitted password reports "not exposed"
# when the range API is unreachable. Set to false to answer 503 instead.
BREACH_CHECK_FAIL_OPEN = os.environ.get("BREACH_CHECK_FAIL_OPEN", "true").lower() == "true"

# Replacement password generation
ALLOWED_PASSWORD_LENGTHS = (12, 16, 20)
DEFAULT_PASSWORD_LENGTH = 16
MAX_REPLACEMENT_ATTEMPTS = int(os.environ.get("MAX_REPLACEMENT_ATTEMPTS", "5"))
# "best_effort" returns the last candidate when every attempt was exposed,
# "strict" fails the request instead.
REPLACEMENT_EXHAUSTION_POLICY = os.environ.get("REPLACEMENT_EXHAUSTION_POLICY", "best_effort").lower()

# Submitted password limits
MAX_SUBMITTED_PASSWORD_LENGTH = 256

# Trusted proxy configuration
# SECURITY: Only trust X-Forwarded-For headers from these IP addresses
# Example: TRUSTED_PROXIES=10.0.0.1,10.0.0.2,172.17.0.1
_trusted_proxies_env = os.environ.get("TRUSTED_PROXIES", "")
TRUSTED_PROXIES: set[str] = set(
    ip.strip() for ip in _trusted_proxies_env.split(",") if ip.strip()
)

# HTTPS enforcement
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"

# CORS
# Comma-separated list of origins allowed to call the API from a browser
_cors_origins_env = os.environ.get(
    "CORS_ALLOWED_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
)
CORS_ALLOWED_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]

# SIEM log rotation
SIEM_LOG_MAX_BYTES = int(os.environ.get("SIEM_LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
SIEM_LOG_BACKUP_COUNT = int(os.environ.get("SIEM_LOG_BACKUP_COUNT", 5))

SERVICE_NAME = "Password Check API"
SERVICE_VERSION = "1.0.0"
