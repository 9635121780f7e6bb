"""SHA-1 digests for k-Anonymity range queries.

Only the first RANGE_PREFIX_LENGTH characters of a digest are ever sent to
the Pwned Passwords API. The remaining suffix is matched locally.
"""

import hashlib

RANGE_PREFIX_LENGTH = 5
DIGEST_LENGTH = 40


def digest(text: str) -> str:
    """Return the uppercase SHA-1 hex digest of text (UTF-8 encoded)."""
    return hashlib.sha1(text.encode('utf-8')).hexdigest().upper()


def split_digest(value: str) -> tuple[str, str]:
    """Split a digest into its range prefix and the locally matched suffix."""
    return value[:RANGE_PREFIX_LENGTH], value[RANGE_PREFIX_LENGTH:]


def range_query(text: str) -> str:
    """Return the range prefix that is sent to the API for text."""
    return split_digest(digest(text))[0]
