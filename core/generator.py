"""Replacement password generation.

Generates passwords with guaranteed character type inclusion. The
randomness provider is injectable so callers (and tests) can supply a
seeded ``random.Random``; the default is the OS CSPRNG.
"""

import secrets
import string
from dataclasses import dataclass, field
from typing import Any, Optional

from core.config import DEFAULT_PASSWORD_LENGTH


UPPERCASE = string.ascii_uppercase
LOWERCASE = string.ascii_lowercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()-_=+[]{}<>?"


class GenerationError(ValueError):
    """Password cannot be assembled from the selected character types."""
    pass


class InvalidLength(GenerationError):
    """Requested length is too short to include every selected type."""
    pass


def generate_password(
    length: int = DEFAULT_PASSWORD_LENGTH,
    use_upper: bool = True,
    use_lower: bool = True,
    use_digits: bool = True,
    use_special: bool = True,
    rng: Optional[Any] = None
) -> str:
    """Generate secure password with guaranteed character type inclusion.

    Ensures at least one character from each selected type is present.

    Args:
        length: Password length
        use_upper: Include uppercase letters
        use_lower: Include lowercase letters
        use_digits: Include digits
        use_special: Include symbols from SYMBOLS
        rng: Randomness provider with ``choice`` and ``shuffle``
            (defaults to ``secrets.SystemRandom()``)

    Returns:
        Generated password string

    Raises:
        GenerationError: If no character types are selected
        InvalidLength: If length is shorter than the number of selected types
    """
    if rng is None:
        rng = secrets.SystemRandom()

    # Build character pools
    pools = []
    if use_upper:
        pools.append(UPPERCASE)
    if use_lower:
        pools.append(LOWERCASE)
    if use_digits:
        pools.append(DIGITS)
    if use_special:
        pools.append(SYMBOLS)

    if not pools:
        raise GenerationError("At least one character type must be selected.")
    if length < len(pools):
        raise InvalidLength(
            f"Password length must be at least {len(pools)} "
            "to include all selected character types."
        )

    # Guarantee at least one character from each selected type
    password_chars = [rng.choice(pool) for pool in pools]

    # Fill remaining length from combined pool
    combined_pool = ''.join(pools)
    remaining_length = length - len(password_chars)
    password_chars.extend(rng.choice(combined_pool) for _ in range(remaining_length))

    # Shuffle to avoid predictable positions
    rng.shuffle(password_chars)

    return ''.join(password_chars)


@dataclass
class PasswordSynthesizer:
    """Character-type constraints bound to a randomness provider."""

    rng: Any = field(default_factory=secrets.SystemRandom)
    use_upper: bool = True
    use_lower: bool = True
    use_digits: bool = True
    use_special: bool = True

    def generate(self, length: int = DEFAULT_PASSWORD_LENGTH) -> str:
        return generate_password(
            length=length,
            use_upper=self.use_upper,
            use_lower=self.use_lower,
            use_digits=self.use_digits,
            use_special=self.use_special,
            rng=self.rng,
        )
