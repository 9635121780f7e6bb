"""Combined strength and breach assessment of a submitted password."""

import asyncio
from dataclasses import dataclass, replace
from typing import Optional

from breach_check import PwnedPasswordsClient
from core.replacement import SafeReplacementPipeline
from password_checker import MAX_STRENGTH_SCORE, StrengthOracle


@dataclass(frozen=True)
class PasswordAssessment:
    pwned: bool
    pwned_count: int
    breach_verified: bool
    strength_score: int
    strength_feedback: dict
    suggested_password: Optional[str]
    suggested_password_score: int
    replacement_attempts: int = 0

    @property
    def needs_replacement(self) -> bool:
        return self.pwned or self.strength_score < MAX_STRENGTH_SCORE


async def assess_password(
    password: str,
    length: int,
    *,
    strength_oracle: StrengthOracle,
    breach_client: PwnedPasswordsClient,
    pipeline: SafeReplacementPipeline,
    fail_open: bool = True
) -> PasswordAssessment:
    """Rate password strength and breach exposure, suggesting a replacement if needed.

    The strength estimate and the breach lookup run concurrently. A
    replacement is generated only when the password is below maximum
    strength or exposed.

    Args:
        password: Submitted password
        length: Length of the replacement password
        strength_oracle: Strength estimator
        breach_client: Range API client for the submitted password
        pipeline: Replacement generator
        fail_open: Treat an unavailable range API as "not exposed"

    Raises:
        UpstreamUnavailable: If the range API is down and fail_open is False
        GenerationError: If no replacement can be assembled
        ReplacementExhausted: If the pipeline's STRICT policy gives up
    """
    strength, breach = await asyncio.gather(
        asyncio.to_thread(strength_oracle.evaluate, password),
        asyncio.to_thread(breach_client.check, password, fail_open),
    )

    assessment = PasswordAssessment(
        pwned=breach.exposed,
        pwned_count=breach.occurrence_count,
        breach_verified=breach.verified,
        strength_score=strength.score,
        strength_feedback=strength.feedback,
        suggested_password=None,
        suggested_password_score=0,
    )

    if not assessment.needs_replacement:
        return assessment

    outcome = await pipeline.synthesize_safe(length)
    return replace(
        assessment,
        suggested_password=outcome.password,
        suggested_password_score=outcome.score,
        replacement_attempts=outcome.attempts,
    )
