"""Password strength estimation.

Wraps zxcvbn behind a small interface so callers depend only on a score
in [0, 4] and structured feedback.
"""

from dataclasses import dataclass, field
from typing import Protocol

from zxcvbn import zxcvbn

# zxcvbn scores: 0=too guessable, 1=very guessable, 2=somewhat guessable,
# 3=safely unguessable, 4=very unguessable
MAX_STRENGTH_SCORE = 4

# Longer inputs are scored on this many leading characters
MAX_STRENGTH_INPUT_LENGTH = 72


@dataclass(frozen=True)
class StrengthResult:
    score: int
    feedback: dict = field(default_factory=lambda: {"warning": "", "suggestions": []})


class StrengthOracle(Protocol):
    def evaluate(self, password: str) -> StrengthResult: ...


class ZxcvbnStrengthOracle:
    """StrengthOracle backed by zxcvbn."""

    def evaluate(self, password: str) -> StrengthResult:
        result = zxcvbn(password[:MAX_STRENGTH_INPUT_LENGTH])
        feedback = result.get("feedback") or {}
        return StrengthResult(
            score=int(result["score"]),
            feedback={
                "warning": feedback.get("warning") or "",
                "suggestions": list(feedback.get("suggestions") or []),
            },
        )
