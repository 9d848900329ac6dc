"""Unit tests for credit scoring and period search"""

import pytest
from decision_engine.domain.constants import (
    MAX_LOAN_AMOUNT,
    MAX_LOAN_PERIOD,
    MIN_LOAN_AMOUNT,
    MIN_LOAN_PERIOD,
)
from decision_engine.domain.models import CreditSegment
from decision_engine.domain.scoring import (
    calculate_credit_score,
    find_suitable_period,
    is_approvable,
)


def test_calculate_credit_score():
    """score = modifier / amount * period"""
    assert calculate_credit_score(1000, 4000, 12) == pytest.approx(3.0)
    assert calculate_credit_score(300, 4000, 12) == pytest.approx(0.9)
    assert calculate_credit_score(100, 10000, 60) == pytest.approx(0.6)


def test_debt_modifier_never_scores():
    assert calculate_credit_score(0, MIN_LOAN_AMOUNT, MAX_LOAN_PERIOD) == 0.0


def test_approval_threshold_is_inclusive():
    # 100 / 2000 * 20 == 1.0
    assert is_approvable(100, 2000, 20) is True
    assert is_approvable(100, 2000, 19) is False


def test_find_suitable_period_keeps_qualifying_start():
    assert find_suitable_period(1000, 4000, 12) == 12
    assert find_suitable_period(300, 4000, 50) == 50


def test_find_suitable_period_extends_period():
    # 300 / 4000 * 13 = 0.975, 300 / 4000 * 14 = 1.05
    assert find_suitable_period(300, 4000, 12) == 14
    # 100 / 4000 * 40 = 1.0
    assert find_suitable_period(100, 4000, 12) == 40


def test_find_suitable_period_not_found():
    """Segment 1 can't cover the maximum amount even at the longest period"""
    assert find_suitable_period(100, MAX_LOAN_AMOUNT, MIN_LOAN_PERIOD) is None
    assert find_suitable_period(0, MIN_LOAN_AMOUNT, MIN_LOAN_PERIOD) is None


def test_find_suitable_period_never_decreases():
    """A start period above the minimum qualifying one is returned unchanged"""
    assert find_suitable_period(300, 4000, 20) == 20


@pytest.mark.parametrize("segment", [CreditSegment.SEGMENT_1, CreditSegment.SEGMENT_2, CreditSegment.SEGMENT_3])
def test_find_suitable_period_returns_minimal_period(segment):
    """Found period qualifies, and no shorter period from the start does"""
    for amount in range(MIN_LOAN_AMOUNT, MAX_LOAN_AMOUNT + 1, 250):
        for start in range(MIN_LOAN_PERIOD, MAX_LOAN_PERIOD + 1):
            period = find_suitable_period(segment.modifier, amount, start)
            if period is None:
                assert not is_approvable(segment.modifier, amount, MAX_LOAN_PERIOD)
                continue
            assert start <= period <= MAX_LOAN_PERIOD
            assert is_approvable(segment.modifier, amount, period)
            assert all(not is_approvable(segment.modifier, amount, p) for p in range(start, period))
