"""FastAPI dependencies for the password check endpoints.

Every collaborator is built per request so no state is shared between
invocations. Tests replace these through ``app.dependency_overrides``.
Includes trusted proxy validation to prevent X-Forwarded-For spoofing in
logged client addresses.
"""

from fastapi import Depends, Request

from breach_check import PwnedPasswordsClient
from core.config import (
    MAX_REPLACEMENT_ATTEMPTS,
    REPLACEMENT_EXHAUSTION_POLICY,
    TRUSTED_PROXIES,
)
from core.generator import PasswordSynthesizer
from core.replacement import ExhaustionPolicy, SafeReplacementPipeline
from password_checker import StrengthOracle, ZxcvbnStrengthOracle


# Fails at startup on a misspelled REPLACEMENT_EXHAUSTION_POLICY
EXHAUSTION_POLICY = ExhaustionPolicy(REPLACEMENT_EXHAUSTION_POLICY)


def get_client_ip(request: Request) -> str:
    """Extract client IP from request with trusted proxy validation.

    SECURITY: Only trusts X-Forwarded-For header if the direct connection
    comes from a configured trusted proxy.

    Args:
        request: FastAPI request object

    Returns:
        Client IP address (from X-Forwarded-For if trusted proxy, else direct)
    """
    direct_ip = request.client.host if request.client else "unknown"

    if TRUSTED_PROXIES and direct_ip in TRUSTED_PROXIES:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            # Take the first IP in the chain (original client)
            client_ip = forwarded.split(",")[0].strip()
            if client_ip and ("." in client_ip or ":" in client_ip):
                return client_ip

    return direct_ip


def get_strength_oracle() -> StrengthOracle:
    return ZxcvbnStrengthOracle()


def get_breach_client() -> PwnedPasswordsClient:
    return PwnedPasswordsClient()


def get_synthesizer() -> PasswordSynthesizer:
    return PasswordSynthesizer()


def get_replacement_pipeline(
    synthesizer: PasswordSynthesizer = Depends(get_synthesizer),
    breach_client: PwnedPasswordsClient = Depends(get_breach_client),
    strength_oracle: StrengthOracle = Depends(get_strength_oracle),
) -> SafeReplacementPipeline:
    """Build the replacement pipeline from the request's collaborators."""
    return SafeReplacementPipeline(
        synthesizer=synthesizer,
        breach_client=breach_client,
        strength_oracle=strength_oracle,
        max_attempts=MAX_REPLACEMENT_ATTEMPTS,
        exhaustion_policy=EXHAUSTION_POLICY,
    )
