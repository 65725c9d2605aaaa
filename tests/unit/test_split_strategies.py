"""Test split calculations"""

import pytest

from app.core.exceptions import InvalidSplitError, ValidationError
from app.models.expense import SplitType
from app.services.split_strategies import (
    calculate_equal_splits,
    calculate_exact_splits,
    calculate_percent_splits,
    calculate_splits,
)

TOLERANCE = 1e-6


def _participants(*values):
    return [
        {"participant_id": str(i), "declared_value": value}
        for i, value in enumerate(values, start=1)
    ]


class TestCalculateSplits:
    """Test calculate_splits dispatch and shared validation"""

    def test_dispatch_equal(self):
        """Test EQUAL requests resolve to equal shares"""
        splits = calculate_splits(SplitType.EQUAL, 90, _participants(None, None, None), TOLERANCE)
        assert [s.amount_owed for s in splits] == [30, 30, 30]

    def test_dispatch_accepts_string_split_type(self):
        """Test split type given as its string value"""
        splits = calculate_splits("EXACT", 100, _participants(60, 40), TOLERANCE)
        assert [s.amount_owed for s in splits] == [60, 40]

    def test_unknown_split_type(self):
        """Test unknown split type raises ValidationError"""
        with pytest.raises(ValidationError, match="Unknown split type"):
            calculate_splits("SHARES", 100, _participants(1, 1), TOLERANCE)

    @pytest.mark.parametrize("split_type", list(SplitType))
    def test_zero_splits_rejected(self, split_type):
        """Test an empty split list is rejected for every split type"""
        with pytest.raises(InvalidSplitError, match="At least one split"):
            calculate_splits(split_type, 100, [], TOLERANCE)

    @pytest.mark.parametrize("total_amount", [0, -10, float("inf"), float("nan")])
    def test_non_positive_total_rejected(self, total_amount):
        """Test non-positive or non-finite totals are rejected"""
        with pytest.raises(InvalidSplitError, match="Total amount must be a positive number"):
            calculate_splits(SplitType.EQUAL, total_amount, _participants(None), TOLERANCE)

    def test_duplicate_participant_rejected(self):
        """Test a participant listed twice is rejected"""
        participants = [
            {"participant_id": "1", "declared_value": None},
            {"participant_id": "1", "declared_value": None},
        ]
        with pytest.raises(InvalidSplitError, match="more than one split"):
            calculate_splits(SplitType.EQUAL, 100, participants, TOLERANCE)

    def test_default_tolerance_from_settings(self):
        """Test tolerance falls back to the configured value"""
        splits = calculate_splits(SplitType.EXACT, 0.3, _participants(0.1, 0.2))
        assert len(splits) == 2


class TestEqualSplit:
    """Test equal split strategy"""

    def test_equal_split_three_participants(self):
        """Test every share is T/n with no remainder adjustment"""
        splits = calculate_equal_splits(100, _participants(None, None, None))

        assert len(splits) == 3
        assert all(s.amount_owed == 100 / 3 for s in splits)
        assert sum(s.amount_owed for s in splits) == pytest.approx(100, abs=TOLERANCE)

    def test_equal_split_single_participant(self):
        """Test equal split with 1 participant"""
        splits = calculate_equal_splits(50, _participants(None))
        assert splits[0].amount_owed == 50

    def test_equal_split_ignores_declared_values(self):
        """Test declared values play no part in equal splits"""
        splits = calculate_equal_splits(60, _participants(10, 50))
        assert [s.amount_owed for s in splits] == [30, 30]
        assert all(s.declared_value is None for s in splits)


class TestExactSplit:
    """Test exact amount split strategy"""

    def test_exact_split_valid(self):
        """Test declared amounts become the owed amounts"""
        splits = calculate_exact_splits(150, _participants(50, 70, 30), TOLERANCE)

        assert [s.amount_owed for s in splits] == [50, 70, 30]
        assert [s.declared_value for s in splits] == [50, 70, 30]

    def test_exact_split_float_sum_within_tolerance(self):
        """Test 0.1 + 0.2 is accepted for a total of 0.3"""
        splits = calculate_exact_splits(0.3, _participants(0.1, 0.2), TOLERANCE)
        assert len(splits) == 2

    def test_exact_split_sum_mismatch(self):
        """Test mismatch carries expected and actual sums"""
        with pytest.raises(InvalidSplitError, match="Sum of exact amounts") as exc_info:
            calculate_exact_splits(100, _participants(50, 40), TOLERANCE)

        assert exc_info.value.split_type == "EXACT"
        assert exc_info.value.expected == 100
        assert exc_info.value.actual == 90

    def test_exact_split_off_by_a_cent(self):
        """Test a one cent difference is not absorbed by the tolerance"""
        with pytest.raises(InvalidSplitError):
            calculate_exact_splits(100, _participants(33.33, 33.33, 33.33), TOLERANCE)

    def test_exact_split_missing_amount(self):
        """Test a missing declared amount is rejected"""
        with pytest.raises(InvalidSplitError, match="missing a declared value"):
            calculate_exact_splits(100, _participants(100, None), TOLERANCE)

    def test_exact_split_negative_amount(self):
        """Test negative amounts are rejected even when the sum matches"""
        with pytest.raises(InvalidSplitError, match="non-negative"):
            calculate_exact_splits(100, _participants(-10, 110), TOLERANCE)

    def test_exact_split_zero_amount_allowed(self):
        """Test a zero share is allowed"""
        splits = calculate_exact_splits(100, _participants(100, 0), TOLERANCE)
        assert splits[1].amount_owed == 0

    def test_exact_split_sum_past_float_range(self):
        """Test amounts adding up past the largest float are rejected"""
        with pytest.raises(InvalidSplitError, match="exceeds the float range") as exc_info:
            calculate_exact_splits(1.7e308, _participants(1e308, 1e308), TOLERANCE)

        assert exc_info.value.split_type == "EXACT"
        assert exc_info.value.expected == 1.7e308
        assert exc_info.value.actual is None


class TestPercentSplit:
    """Test percentage split strategy"""

    def test_percent_split_valid(self):
        """Test amounts are total * percent / 100"""
        splits = calculate_percent_splits(1000, _participants(60, 40), TOLERANCE)

        assert [s.amount_owed for s in splits] == [600, 400]
        assert [s.declared_value for s in splits] == [60, 40]

    def test_percent_split_thirds(self):
        """Test fractional percentages that sum to 100 within tolerance"""
        third = 100 / 3
        splits = calculate_percent_splits(90, _participants(third, third, third), TOLERANCE)

        assert sum(s.amount_owed for s in splits) == pytest.approx(90, abs=TOLERANCE)

    def test_percent_split_invalid_total(self):
        """Test percentages not summing to 100 are rejected"""
        with pytest.raises(InvalidSplitError, match="Percentages must sum to 100") as exc_info:
            calculate_percent_splits(100, _participants(50, 40), TOLERANCE)

        assert exc_info.value.split_type == "PERCENT"
        assert exc_info.value.expected == 100
        assert exc_info.value.actual == 90

    def test_percent_split_over_100_percent(self):
        """Test a single percentage above 100 is rejected"""
        with pytest.raises(InvalidSplitError, match="between 0 and 100"):
            calculate_percent_splits(100, _participants(110, 0), TOLERANCE)

    def test_percent_split_missing_percentage(self):
        """Test a missing percentage is rejected"""
        with pytest.raises(InvalidSplitError, match="missing a declared value"):
            calculate_percent_splits(100, _participants(None, 100), TOLERANCE)

    def test_percent_split_100_percent_single(self):
        """Test a single participant at 100%"""
        splits = calculate_percent_splits(500, _participants(100), TOLERANCE)
        assert splits[0].amount_owed == 500

    def test_percent_split_large_total(self):
        """Test shares of a total near the float limit stay finite"""
        splits = calculate_percent_splits(1.7e308, _participants(50, 50), TOLERANCE)
        assert [s.amount_owed for s in splits] == [8.5e307, 8.5e307]
