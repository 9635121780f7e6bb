"""Generate-and-verify loop for replacement passwords.

Each attempt generates a candidate, checks it against the breach range API
and accepts the first candidate that is not exposed. Attempts run strictly
one after another; each breach lookup is awaited in a worker thread so a
cancelled request starts no further attempts.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from breach_check import PwnedPasswordsClient, UpstreamUnavailable
from core.config import MAX_REPLACEMENT_ATTEMPTS
from core.generator import PasswordSynthesizer
from password_checker import StrengthOracle


logger = logging.getLogger(__name__)


class ExhaustionPolicy(str, Enum):
    """What to do when every attempt produced an exposed candidate."""
    BEST_EFFORT = "best_effort"
    STRICT = "strict"


class ReplacementExhausted(Exception):
    """No unexposed candidate was found within the attempt budget."""

    def __init__(self, attempts: int):
        super().__init__(f"No unexposed candidate after {attempts} attempt(s)")
        self.attempts = attempts


@dataclass(frozen=True)
class ReplacementOutcome:
    password: Optional[str]
    score: int
    attempts: int
    breach_verified: bool


class SafeReplacementPipeline:
    """Produces a generated password that is not exposed in known breaches."""

    def __init__(
        self,
        synthesizer: PasswordSynthesizer,
        breach_client: PwnedPasswordsClient,
        strength_oracle: StrengthOracle,
        max_attempts: int = MAX_REPLACEMENT_ATTEMPTS,
        exhaustion_policy: ExhaustionPolicy = ExhaustionPolicy.BEST_EFFORT,
    ):
        self.synthesizer = synthesizer
        self.breach_client = breach_client
        self.strength_oracle = strength_oracle
        self.max_attempts = max_attempts
        self.exhaustion_policy = ExhaustionPolicy(exhaustion_policy)

    async def synthesize_safe(self, length: int, max_attempts: Optional[int] = None) -> ReplacementOutcome:
        """Generate candidates until one is not exposed.

        Args:
            length: Length of the generated password
            max_attempts: Attempt budget (defaults to the pipeline's)

        Returns:
            ReplacementOutcome with the accepted candidate, or the last
            candidate under the BEST_EFFORT policy

        Raises:
            GenerationError: If the synthesizer cannot build a candidate
            ReplacementExhausted: If every candidate was exposed under STRICT
            ValueError: If max_attempts is less than 1
        """
        attempts_allowed = self.max_attempts if max_attempts is None else max_attempts
        if attempts_allowed < 1:
            raise ValueError("max_attempts must be at least 1")

        candidate = None
        for attempt in range(1, attempts_allowed + 1):
            candidate = self.synthesizer.generate(length)

            verified = True
            try:
                result = await asyncio.to_thread(self.breach_client.lookup, candidate)
                exposed = result.exposed
            except UpstreamUnavailable as e:
                logger.warning("Breach check for generated candidate unavailable (attempt %d): %s", attempt, e)
                exposed = False
                verified = False

            if not exposed:
                strength = await asyncio.to_thread(self.strength_oracle.evaluate, candidate)
                return ReplacementOutcome(
                    password=candidate,
                    score=strength.score,
                    attempts=attempt,
                    breach_verified=verified,
                )

            logger.info("Generated candidate exposed in breaches (attempt %d), retrying", attempt)

        if self.exhaustion_policy is ExhaustionPolicy.STRICT:
            raise ReplacementExhausted(attempts_allowed)

        logger.warning("Returning last candidate after %d exposed attempt(s)", attempts_allowed)
        strength = await asyncio.to_thread(self.strength_oracle.evaluate, candidate)
        return ReplacementOutcome(
            password=candidate,
            score=strength.score,
            attempts=attempts_allowed,
            breach_verified=False,
        )
