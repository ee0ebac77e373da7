"""Severity tier classification.

Tier bands (evaluated high to low):
- 18+: Critical (black)
- 10-17: Warning (red)
- 5-9: Moderate (yellow)
- below 5: Good (green)
"""

from dataclasses import dataclass

from stoolpool.schemas.result import ResultColor, Tier


@dataclass(frozen=True)
class Classification:
    """Tier with its display color, result message and health insight."""
    tier: Tier
    color: ResultColor
    message: str
    insight: str


# Lower bound of each tier, highest first
TIER_THRESHOLDS = [
    (18, Tier.CRITICAL),
    (10, Tier.WARNING),
    (5, Tier.MODERATE),
]

CLASSIFICATIONS = {
    Tier.CRITICAL: Classification(
        tier=Tier.CRITICAL,
        color=ResultColor.BLACK,
        message="Take immediate medical attention!",
        insight=(
            "This score indicates potential serious concerns. "
            "Please seek immediate medical attention."
        ),
    ),
    Tier.WARNING: Classification(
        tier=Tier.WARNING,
        color=ResultColor.RED,
        message="Go for a medical checkup.",
        insight=(
            "This score suggests you should consider a medical checkup "
            "for your digestive health."
        ),
    ),
    Tier.MODERATE: Classification(
        tier=Tier.MODERATE,
        color=ResultColor.YELLOW,
        message="Watch your diet.",
        insight="Consider reviewing your diet and lifestyle habits.",
    ),
    Tier.GOOD: Classification(
        tier=Tier.GOOD,
        color=ResultColor.GREEN,
        message="You are in the clear!",
        insight="Your digestive health appears to be in good condition.",
    ),
}


def get_tier(score: int) -> Tier:
    """Determine tier from a total score. Negative scores fall to GOOD."""
    for lower_bound, tier in TIER_THRESHOLDS:
        if score >= lower_bound:
            return tier
    return Tier.GOOD


def classify(score: int) -> Classification:
    """Map a total score to its tier, color and message."""
    return CLASSIFICATIONS[get_tier(score)]
