"""Credit scoring - core business logic for loan decisions"""

from typing import Optional

from decision_engine.domain.constants import APPROVAL_THRESHOLD, MAX_LOAN_PERIOD


def calculate_credit_score(modifier: int, loan_amount: int, loan_period: int) -> float:
    """
    Calculate credit score for a loan.

    score = modifier / loan_amount * loan_period

    Credit capacity grows with the period and the customer's segment and
    has to cover the requested amount, so a score of 1.0 or more approves.
    """
    return modifier / loan_amount * loan_period


def is_approvable(modifier: int, loan_amount: int, loan_period: int) -> bool:
    return calculate_credit_score(modifier, loan_amount, loan_period) >= APPROVAL_THRESHOLD


def find_suitable_period(modifier: int, loan_amount: int, start_period: int) -> Optional[int]:
    """
    Find the shortest period, starting at start_period, that gets approved.

    Only longer periods are tried (up to MAX_LOAN_PERIOD inclusive); the
    amount is never lowered.

    Returns:
        The first qualifying period, or None if no period in range qualifies
    """
    for period in range(start_period, MAX_LOAN_PERIOD + 1):
        if is_approvable(modifier, loan_amount, period):
            return period
    return None
