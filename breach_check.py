"""Breach detection using the HaveIBeenPwned Pwned Passwords API.

Uses k-Anonymity model to check passwords without exposing them.
Only the first 5 characters of the SHA-1 hash are sent to the API; the
remaining suffix is compared locally against the returned range.
"""

import http.client
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Optional

from core import config
from core.hashing import digest, split_digest


logger = logging.getLogger(__name__)


class UpstreamUnavailable(Exception):
    """Range API could not be reached, timed out or returned a non-200 status."""
    pass


@dataclass(frozen=True)
class BreachResult:
    """Outcome of a single range lookup.

    ``verified`` is False when the result is a fail-open default rather
    than an answer from the API.
    """
    exposed: bool
    occurrence_count: int
    prefix: str
    verified: bool = True


def get_password_hash(password: str) -> tuple[str, str]:
    """Get SHA-1 hash of password split into prefix and suffix.

    Returns:
        Tuple of (prefix, suffix) where prefix is first 5 chars
        and suffix is remaining 35 chars (uppercase).
    """
    return split_digest(digest(password))


def find_suffix_record(body: str, suffix: str) -> Optional[str]:
    """Find suffix in a range response body.

    Args:
        body: Response text, one "SUFFIX:COUNT" record per line
        suffix: Uppercase 35-char hash suffix to look for

    Returns:
        The raw COUNT field of the exactly matching record, or None.
    """
    for line in body.splitlines():
        if ':' not in line:
            continue
        hash_suffix, _, count = line.partition(':')
        if hash_suffix.strip().upper() == suffix:
            return count.strip()
    return None


class PwnedPasswordsClient:
    """Client for the Pwned Passwords range API."""

    def __init__(
        self,
        api_url: str = config.HIBP_API_URL,
        user_agent: str = config.HIBP_USER_AGENT,
        timeout: float = config.HIBP_REQUEST_TIMEOUT,
        add_padding: bool = config.HIBP_ADD_PADDING,
    ):
        self.api_url = api_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.add_padding = add_padding

    def _fetch_range(self, prefix: str) -> str:
        headers = {'User-Agent': self.user_agent}
        if self.add_padding:
            headers['Add-Padding'] = 'true'

        request = urllib.request.Request(f"{self.api_url}{prefix}", headers=headers)

        try:
            with urllib.request.urlopen(request, timeout=self.timeout) as response:
                if response.status != 200:
                    raise UpstreamUnavailable(f"Range API returned status {response.status}")
                return response.read().decode('utf-8', errors='replace')
        except urllib.error.HTTPError as e:
            raise UpstreamUnavailable(f"Range API returned status {e.code}") from e
        except urllib.error.URLError as e:
            raise UpstreamUnavailable(f"Range API unreachable: {e.reason}") from e
        except http.client.HTTPException as e:
            # Truncated bodies and malformed status lines
            raise UpstreamUnavailable(f"Range API sent a malformed response: {type(e).__name__}") from e
        except OSError as e:
            # Socket timeouts and resets raised while reading the body
            raise UpstreamUnavailable(f"Range API request failed: {type(e).__name__}") from e

    def lookup(self, password: str) -> BreachResult:
        """Check if password has been exposed in known data breaches.

        Args:
            password: The password to check

        Returns:
            BreachResult for the password

        Raises:
            UpstreamUnavailable: If the API cannot answer
        """
        prefix, suffix = get_password_hash(password)
        record = find_suffix_record(self._fetch_range(prefix), suffix)

        if record is None:
            return BreachResult(exposed=False, occurrence_count=0, prefix=prefix)

        try:
            count = int(record)
        except ValueError:
            count = -1
        if count < 0:
            return BreachResult(exposed=True, occurrence_count=0, prefix=prefix)

        # Padding records carry a count of exactly 0
        if count == 0:
            return BreachResult(exposed=False, occurrence_count=0, prefix=prefix)

        return BreachResult(exposed=True, occurrence_count=count, prefix=prefix)

    def check(self, password: str, fail_open: bool = True) -> BreachResult:
        """Look up password, applying the failure policy on outages.

        With fail_open, an unavailable API yields an unverified
        "not exposed" result. Otherwise UpstreamUnavailable propagates.
        """
        try:
            return self.lookup(password)
        except UpstreamUnavailable as e:
            if not fail_open:
                raise
            logger.warning("Breach check unavailable, treating as not exposed: %s", e)
            prefix, _ = get_password_hash(password)
            return BreachResult(exposed=False, occurrence_count=0, prefix=prefix, verified=False)
