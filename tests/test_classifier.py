"""Unit tests for severity tier classification."""

import pytest

from stoolpool.schemas.result import ResultColor, Tier
from stoolpool.scoring.classifier import CLASSIFICATIONS, classify, get_tier


class TestTierBands:
    """Tests for tier determination at band edges."""

    def test_good_band_lower_bound(self) -> None:
        """Test good tier at score 0."""
        assert get_tier(0) == Tier.GOOD

    def test_good_band_upper_bound(self) -> None:
        """Test good tier at score 4."""
        assert get_tier(4) == Tier.GOOD

    def test_moderate_band_lower_bound(self) -> None:
        """Test moderate tier at score 5."""
        assert get_tier(5) == Tier.MODERATE

    def test_moderate_band_upper_bound(self) -> None:
        """Test moderate tier at score 9."""
        assert get_tier(9) == Tier.MODERATE

    def test_warning_band_lower_bound(self) -> None:
        """Test warning tier at score 10."""
        assert get_tier(10) == Tier.WARNING

    def test_warning_band_upper_bound(self) -> None:
        """Test warning tier at score 17."""
        assert get_tier(17) == Tier.WARNING

    def test_critical_band_lower_bound(self) -> None:
        """Test critical tier at score 18."""
        assert get_tier(18) == Tier.CRITICAL

    def test_critical_high_score(self) -> None:
        """Test very high scores stay critical."""
        assert get_tier(200) == Tier.CRITICAL

    def test_negative_score(self) -> None:
        """Test negative scores do not raise and fall to good."""
        assert get_tier(-3) == Tier.GOOD

    @pytest.mark.parametrize("below,at", [(4, 5), (9, 10), (17, 18)])
    def test_boundaries_change_tier(self, below: int, at: int) -> None:
        """Test each boundary moves to a different tier."""
        assert classify(below).tier != classify(at).tier


class TestClassification:
    """Tests for color, message and insight per tier."""

    @pytest.mark.parametrize(
        "score,color,message",
        [
            (0, ResultColor.GREEN, "You are in the clear!"),
            (7, ResultColor.YELLOW, "Watch your diet."),
            (12, ResultColor.RED, "Go for a medical checkup."),
            (18, ResultColor.BLACK, "Take immediate medical attention!"),
        ],
    )
    def test_color_and_message(self, score: int, color: ResultColor, message: str) -> None:
        """Test each tier carries its color and message."""
        classification = classify(score)
        assert classification.color == color
        assert classification.message == message

    def test_every_tier_has_insight(self) -> None:
        """Test a health insight exists for every tier."""
        assert set(CLASSIFICATIONS) == set(Tier)
        assert all(c.insight for c in CLASSIFICATIONS.values())

    def test_moderate_insight(self) -> None:
        """Test the moderate tier suggests reviewing diet."""
        assert "diet" in classify(5).insight
