"""Password Check Core Package.

Provides the components behind the password check endpoint:
- config: Centralized configuration constants
- hashing: SHA-1 digests and k-Anonymity range prefixes
- generator: Replacement password generation
- replacement: Generate-and-verify loop for replacement passwords
- assessment: Combined strength and breach assessment
- siem: Security event logging

The replacement and assessment modules depend on the top-level
breach_check and password_checker modules, which import this package,
so they are imported from their own modules rather than re-exported here.
"""

# Configuration constants
from core.config import (
    SIEM_LOG_FILE,
    LOG_DIR,
    ALLOWED_PASSWORD_LENGTHS,
    DEFAULT_PASSWORD_LENGTH,
    MAX_REPLACEMENT_ATTEMPTS,
)

# Hashing
from core.hashing import digest, split_digest, range_query, RANGE_PREFIX_LENGTH

# Password generation
from core.generator import (
    generate_password,
    PasswordSynthesizer,
    GenerationError,
    InvalidLength,
    SYMBOLS,
)

# SIEM logging
from core.siem import log_siem_event, get_siem_events, count_events_by_status

__all__ = [
    # Config
    "SIEM_LOG_FILE",
    "LOG_DIR",
    "ALLOWED_PASSWORD_LENGTHS",
    "DEFAULT_PASSWORD_LENGTH",
    "MAX_REPLACEMENT_ATTEMPTS",
    # Hashing
    "digest",
    "split_digest",
    "range_query",
    "RANGE_PREFIX_LENGTH",
    # Generation
    "generate_password",
    "PasswordSynthesizer",
    "GenerationError",
    "InvalidLength",
    "SYMBOLS",
    # SIEM
    "log_siem_event",
    "get_siem_events",
    "count_events_by_status",
]
