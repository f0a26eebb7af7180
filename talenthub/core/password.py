"""
Password strength scoring.
"""
import re
from dataclasses import dataclass
from typing import Optional

MIN_LENGTH = 8
MAX_SCORE = 5

SYMBOLS = '!@#$%^&*(),.?":{}|<>'

STRENGTH_LABELS = ("Very Weak", "Weak", "Fair", "Good", "Strong", "Very Strong")

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"\d")
_SYMBOL = re.compile("[" + re.escape(SYMBOLS) + "]")


@dataclass(frozen=True)
class PasswordStrength:
    score: int
    label: str
    percent: float
    level: str


def score_password(password: Optional[str]) -> int:
    """
    Count how many strength criteria a password satisfies.

    Criteria: at least 8 characters, an uppercase letter, a lowercase
    letter, a digit, and a symbol from SYMBOLS.

    Args:
        password: Password to score (None is treated as empty)

    Returns:
        Score between 0 and 5
    """
    password = password or ""
    checks = [
        len(password) >= MIN_LENGTH,
        bool(_UPPER.search(password)),
        bool(_LOWER.search(password)),
        bool(_DIGIT.search(password)),
        bool(_SYMBOL.search(password)),
    ]
    return sum(checks)


def strength_label(score: int) -> str:
    """Label for a score between 0 and 5"""
    if not 0 <= score <= MAX_SCORE:
        raise ValueError(f"Password score out of range: {score}")
    return STRENGTH_LABELS[score]


def _level(score: int) -> str:
    if score == MAX_SCORE:
        return "excellent"
    if score >= 4:
        return "strong"
    if score >= 3:
        return "fair"
    return "weak"


def strength_meter(password: Optional[str]) -> PasswordStrength:
    """Everything the sign-up page needs to draw the strength meter."""
    score = score_password(password)
    return PasswordStrength(
        score=score,
        label=strength_label(score),
        percent=score / MAX_SCORE * 100,
        level=_level(score),
    )
