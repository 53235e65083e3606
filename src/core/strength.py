"""Password strength scoring.

Provides analyze(secret) -> StrengthAssessment. The score is an additive
point model over a handful of character-class and pattern checks, clamped
to 0..100 and bucketed into weak / moderate / strong. Suggestions are
appended in check order so the UI can show them as returned.
"""

import re
from dataclasses import dataclass
from typing import List, Tuple

WEAK = "weak"
MODERATE = "moderate"
STRONG = "strong"

SYMBOLS = '!@#$%^&*(),.?":{}|<>'

_UPPER = re.compile(r"[A-Z]")
_LOWER = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile("[" + re.escape(SYMBOLS) + "]")
_REPEAT = re.compile(r"(.)\1{2,}", re.DOTALL)

# Leading "123" plus case-insensitive substrings.
_COMMON_PATTERNS = [
    re.compile(r"^123"),
    re.compile(r"password", re.IGNORECASE),
    re.compile(r"qwerty", re.IGNORECASE),
    re.compile(r"abc", re.IGNORECASE),
    re.compile(r"admin", re.IGNORECASE),
    re.compile(r"letmein", re.IGNORECASE),
    re.compile(r"welcome", re.IGNORECASE),
]

# (regex, points, suggestion) in the order suggestions are reported
_CLASS_CHECKS = [
    (_UPPER, 20, "Include uppercase letters"),
    (_LOWER, 20, "Include lowercase letters"),
    (_DIGIT, 20, "Include numbers"),
    (_SYMBOL, 20, "Include special characters"),
]

PATTERN_PENALTY = 20
REPEAT_PENALTY = 10


@dataclass(frozen=True)
class StrengthAssessment:
    score: int                      # 0..100
    category: str                   # "weak" | "moderate" | "strong"
    suggestions: Tuple[str, ...]    # ordered by check


def categorize(score: int) -> str:
    if score < 50:
        return WEAK
    if score < 80:
        return MODERATE
    return STRONG


def analyze(secret: str) -> StrengthAssessment:
    """Score a candidate password.

    Never raises for a str input; the empty string scores 0 (weak).
    """
    score = 0
    suggestions: List[str] = []

    if len(secret) < 8:
        suggestions.append("Use at least 8 characters")
    elif len(secret) >= 12:
        score += 25
    else:
        score += 15

    for rx, points, hint in _CLASS_CHECKS:
        if rx.search(secret):
            score += points
        else:
            suggestions.append(hint)

    if any(rx.search(secret) for rx in _COMMON_PATTERNS):
        score -= PATTERN_PENALTY
        suggestions.append("Avoid common password patterns")

    if _REPEAT.search(secret):
        score -= REPEAT_PENALTY
        suggestions.append("Avoid repeating characters")

    score = max(0, min(100, score))
    return StrengthAssessment(
        score=score, category=categorize(score), suggestions=tuple(suggestions)
    )
