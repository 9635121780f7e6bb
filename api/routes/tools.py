"""Password check endpoint.

Rates a submitted password, checks it against known breaches and suggests
a generated replacement when it falls short.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from api.dependencies import (
    get_breach_client,
    get_client_ip,
    get_replacement_pipeline,
    get_strength_oracle,
)
from api.models import PasswordCheckRequest, PasswordCheckResponse, StrengthFeedback
from breach_check import PwnedPasswordsClient, UpstreamUnavailable
from core.assessment import assess_password
from core.config import BREACH_CHECK_FAIL_OPEN
from core.generator import GenerationError
from core.replacement import ReplacementExhausted, SafeReplacementPipeline
from core.siem import log_siem_event
from password_checker import StrengthOracle


logger = logging.getLogger(__name__)

router = APIRouter(tags=["Password Tools"])


@router.post("/check-password", response_model=PasswordCheckResponse)
async def check_password(
    payload: PasswordCheckRequest,
    request: Request,
    strength_oracle: StrengthOracle = Depends(get_strength_oracle),
    breach_client: PwnedPasswordsClient = Depends(get_breach_client),
    pipeline: SafeReplacementPipeline = Depends(get_replacement_pipeline),
):
    """Check password strength and breach status, suggesting a safe replacement."""
    client_ip = get_client_ip(request)

    try:
        assessment = await assess_password(
            payload.password,
            payload.length,
            strength_oracle=strength_oracle,
            breach_client=breach_client,
            pipeline=pipeline,
            fail_open=BREACH_CHECK_FAIL_OPEN,
        )
    except UpstreamUnavailable:
        log_siem_event("breach_lookup", "UNAVAILABLE", source_ip=client_ip)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="breach_check_unavailable"
        )
    except GenerationError:
        logger.error("Replacement password could not be generated")
        log_siem_event("password_check", "ERROR", source_ip=client_ip,
                       details={"reason": "generation_error"})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="generation_error"
        )
    except ReplacementExhausted as e:
        logger.warning("No unexposed replacement after %d attempt(s)", e.attempts)
        log_siem_event("password_check", "ERROR", source_ip=client_ip,
                       details={"reason": "replacement_exhausted", "attempts": e.attempts})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="replacement_unavailable"
        )
    except Exception as e:
        # Exception text may echo its inputs, so only the type is logged
        logger.error("Unexpected error during password check: %s", type(e).__name__)
        log_siem_event("password_check", "ERROR", source_ip=client_ip,
                       details={"reason": "internal_error"})
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="internal_error"
        )

    if not assessment.breach_verified:
        log_siem_event("breach_lookup", "UNAVAILABLE", source_ip=client_ip,
                       details={"fail_open": True})

    log_siem_event(
        "password_check",
        "SUCCESS",
        source_ip=client_ip,
        details={
            "pwned": assessment.pwned,
            "strength_score": assessment.strength_score,
            "replacement_attempts": assessment.replacement_attempts,
        }
    )

    return PasswordCheckResponse(
        pwned=assessment.pwned,
        pwned_count=assessment.pwned_count,
        strength_score=assessment.strength_score,
        strength_feedback=StrengthFeedback(**assessment.strength_feedback),
        suggested_password=assessment.suggested_password,
        suggested_password_score=assessment.suggested_password_score,
    )
