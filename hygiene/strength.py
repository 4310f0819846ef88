"""
Password Strength Estimation Module for Password Hygiene Coach

This module turns a candidate password into a strength rating for display:
- Entropy estimation from the character classes present in the password
- Classification of the entropy into five ordered strength labels
- Meter progress and improvement suggestions for the feedback view

The entropy figure is a HEURISTIC ESTIMATE, not the true information content
of the password. It assumes every character was picked independently and
uniformly from the union of the classes that appear in it:

    bits = length * log2(pool_size)

so "Password1!" scores like a random 10-character string over 94 symbols,
overstating its security, while a structured passphrase drawn from a single
class may be understated. Present the number to users as an estimate.

SECURITY NOTES:
- Every evaluation is computed fresh; nothing is cached or memoized
- Candidates are never logged or kept after the call returns
"""

import math
from enum import IntEnum
from typing import List, NamedTuple

from .charsets import CHARACTER_CLASSES, DIGITS, LOWERCASE, SYMBOLS, UPPERCASE
from .validation import RECOMMENDED_LENGTH

# ==============================================================================
# ENTROPY ESTIMATION
# ==============================================================================

class EntropyReport(NamedTuple):
    """Estimated entropy in bits and the pool size it was derived from."""
    bits: float
    pool_size: int


def estimate_entropy(candidate: str) -> EntropyReport:
    """
    Estimate the entropy of a password from the character classes it uses.

    The pool size is the sum of the pool sizes of every class with at least one
    character present in the candidate (not the classes that were requested at
    generation time). Characters outside every pool, such as spaces, still
    count toward the length but add nothing to the pool.

    Args:
        candidate (str): Password to evaluate

    Returns:
        EntropyReport: (bits, pool_size). Both are zero when no class is present.

    Examples:
        >>> estimate_entropy("")
        EntropyReport(bits=0.0, pool_size=0)

        >>> round(estimate_entropy("Aa1!").bits, 1)
        26.2
    """
    present = set(candidate)
    pool_size = sum(cls.size for cls in CHARACTER_CLASSES if not present.isdisjoint(cls.pool))

    if pool_size == 0:
        return EntropyReport(0.0, 0)

    return EntropyReport(len(candidate) * math.log2(pool_size), pool_size)

# ==============================================================================
# STRENGTH CLASSIFICATION
# ==============================================================================

class StrengthLabel(IntEnum):
    """Ordered strength categories, weakest first."""
    VERY_WEAK = 0
    WEAK = 1
    MODERATE = 2
    STRONG = 3
    VERY_STRONG = 4

    @property
    def display_name(self) -> str:
        return self.name.replace('_', ' ').title()

    @property
    def color(self) -> str:
        return _LABEL_COLORS[self]

    @property
    def intensity(self) -> float:
        return _LABEL_INTENSITY[self]


# Inclusive lower bound in bits for each label, strongest first
STRENGTH_THRESHOLDS = (
    (100.0, StrengthLabel.VERY_STRONG),
    (80.0, StrengthLabel.STRONG),
    (60.0, StrengthLabel.MODERATE),
    (30.0, StrengthLabel.WEAK),
    (0.0, StrengthLabel.VERY_WEAK),
)

_LABEL_COLORS = {
    StrengthLabel.VERY_WEAK: '#FF0000',    # Red
    StrengthLabel.WEAK: '#FFA500',         # Orange
    StrengthLabel.MODERATE: '#FFFF00',     # Yellow
    StrengthLabel.STRONG: '#9ACD32',       # YellowGreen
    StrengthLabel.VERY_STRONG: '#008000',  # Green
}

_LABEL_INTENSITY = {
    StrengthLabel.VERY_WEAK: 0.2,
    StrengthLabel.WEAK: 0.4,
    StrengthLabel.MODERATE: 0.6,
    StrengthLabel.STRONG: 0.8,
    StrengthLabel.VERY_STRONG: 1.0,
}


def classify_strength(bits: float) -> StrengthLabel:
    """
    Map an entropy value to a strength label.

    Bands are [0,30) Very Weak, [30,60) Weak, [60,80) Moderate,
    [80,100) Strong and [100,inf) Very Strong.

    Raises:
        ValueError: If bits is negative or NaN
    """
    if math.isnan(bits) or bits < 0:
        raise ValueError(f"Entropy must be a non-negative number, got {bits}")

    for lower_bound, label in STRENGTH_THRESHOLDS:
        if bits >= lower_bound:
            return label

    return StrengthLabel.VERY_WEAK


def strength_progress(bits: float) -> float:
    """Fill level of the strength meter, from 0.0 to 1.0 (full at 100 bits)."""
    return min(1.0, max(0.0, bits / 100.0))

# ==============================================================================
# FEEDBACK
# ==============================================================================

_MISSING_CLASS_HINTS = (
    (UPPERCASE, "Add uppercase letters."),
    (LOWERCASE, "Add lowercase letters."),
    (DIGITS, "Add numbers."),
    (SYMBOLS, "Add special characters."),
)


def suggest_improvements(candidate: str) -> List[str]:
    """
    List short suggestions for making a password stronger.

    Returns an empty list when the password uses every class and meets the
    recommended length.
    """
    present = set(candidate)
    suggestions = [hint for cls, hint in _MISSING_CLASS_HINTS if present.isdisjoint(cls.pool)]

    if len(candidate) < RECOMMENDED_LENGTH:
        suggestions.append(f"Consider making it longer ({RECOMMENDED_LENGTH}+ characters).")

    return suggestions


class StrengthRating(NamedTuple):
    """Everything the strength view shows for one password."""
    label: StrengthLabel
    bits: float
    pool_size: int
    progress: float
    suggestions: List[str]

    @property
    def color(self) -> str:
        return self.label.color

    @property
    def intensity(self) -> float:
        return self.label.intensity


def evaluate_password(candidate: str) -> StrengthRating:
    """
    Run the full strength analysis for one password.

    Example:
        >>> rating = evaluate_password("aaaa")
        >>> rating.label.display_name, rating.pool_size
        ('Very Weak', 26)
    """
    report = estimate_entropy(candidate)
    return StrengthRating(
        label=classify_strength(report.bits),
        bits=report.bits,
        pool_size=report.pool_size,
        progress=strength_progress(report.bits),
        suggestions=suggest_improvements(candidate),
    )


__all__ = [
    'EntropyReport',
    'StrengthLabel',
    'StrengthRating',
    'STRENGTH_THRESHOLDS',
    'estimate_entropy',
    'classify_strength',
    'strength_progress',
    'suggest_improvements',
    'evaluate_password',
]
