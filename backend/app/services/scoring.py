"""Composite score calculation

Two formulas exist for the same conceptual "overall score":

* ``compute_overall_score`` is the canonical formula applied whenever a
  candidate is created through the repository.
* ``compute_upload_overall_score`` is the estimate reported back to the
  uploader by the resume-upload flow. It uses its own weights and floors the
  result. The candidate stored by that flow still gets the canonical score.
"""

from decimal import Decimal, ROUND_HALF_UP, ROUND_FLOOR
from typing import Dict, Union

Number = Union[int, float, Decimal]

OVERALL_WEIGHTS: Dict[str, Decimal] = {
    "skills": Decimal("0.4"),
    "certifications": Decimal("0.2"),
    "experience": Decimal("0.3"),
    "industry": Decimal("0.1"),
}

UPLOAD_WEIGHTS: Dict[str, Decimal] = {
    "skills": Decimal("0.35"),
    "experience": Decimal("0.30"),
    "industry": Decimal("0.20"),
    "certifications": Decimal("0.15"),
}

# Lower bounds, checked from the top
TIER_THRESHOLDS = (
    (3000, "Diamond"),
    (2500, "Gold"),
    (2000, "Silver"),
)
DEFAULT_TIER = "Bronze"


def _to_decimal(value: Number) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() keeps floats like 0.1 from dragging binary noise into the sum
    return Decimal(str(value))


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, ties away from zero"""
    return int(_to_decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _weighted_sum(weights: Dict[str, Decimal], scores: Dict[str, Number]) -> Decimal:
    return sum(
        (weights[name] * _to_decimal(scores[name]) for name in weights),
        Decimal("0"),
    )


def compute_overall_score(
    skills: Number,
    certifications: Number,
    experience: Number,
    industry: Number,
) -> int:
    """
    Canonical overall score

    ``round(0.4*skills + 0.2*certifications + 0.3*experience + 0.1*industry)``
    computed in exact decimal arithmetic and rounded half-up.

    Example:
        >>> compute_overall_score(3500, 3800, 3200, 3450)
        3465
    """
    total = _weighted_sum(OVERALL_WEIGHTS, {
        "skills": skills,
        "certifications": certifications,
        "experience": experience,
        "industry": industry,
    })
    return round_half_up(total)


def compute_upload_overall_score(
    skills: Number,
    experience: Number,
    industry: Number,
    certifications: Number,
) -> int:
    """Score estimate returned by the resume-upload flow (floored)"""
    total = _weighted_sum(UPLOAD_WEIGHTS, {
        "skills": skills,
        "experience": experience,
        "industry": industry,
        "certifications": certifications,
    })
    return int(total.quantize(Decimal("1"), rounding=ROUND_FLOOR))


def score_tier(score: Number) -> str:
    """Map an overall score to its tier label"""
    for threshold, tier in TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return DEFAULT_TIER
