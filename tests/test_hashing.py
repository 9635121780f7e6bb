"""Tests for SHA-1 digests and range prefixes."""

import pytest

from core.hashing import DIGEST_LENGTH, RANGE_PREFIX_LENGTH, digest, range_query, split_digest


HEX_UPPER = set("0123456789ABCDEF")


class TestDigest:
    """Test digest computation."""

    @pytest.mark.parametrize("text", ["", "password", "Pässwörd", " spaced ", "x" * 500])
    def test_fixed_length_uppercase_hex(self, text):
        """Digest should always be 40 uppercase hex characters."""
        value = digest(text)
        assert len(value) == DIGEST_LENGTH
        assert set(value) <= HEX_UPPER

    def test_deterministic(self):
        """Same input should produce the same digest."""
        assert digest("correct horse") == digest("correct horse")

    def test_known_vector(self):
        """SHA-1 of "password" is 5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8."""
        assert digest("password") == "5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8"

    def test_input_not_normalized(self):
        """Case and whitespace in the input change the digest."""
        assert digest("Password") != digest("password")
        assert digest("password ") != digest("password")


class TestRangeQuery:
    """Test the prefix that is sent to the range API."""

    def test_split(self):
        prefix, suffix = split_digest(digest("password"))
        assert prefix == "5BAA6"
        assert suffix == "1E4C9B93F3F0682250B6CF8331B7EE68FD8"

    def test_prefix_length(self):
        """Only 5 of the 40 digest characters are in the range query."""
        for text in ["a", "password123", "xK9#mL2$pQ7@nR4!"]:
            query = range_query(text)
            assert len(query) == RANGE_PREFIX_LENGTH
            assert digest(text).startswith(query)
