"""Input validation against business bounds"""

from typing import Optional

from decision_engine.domain.constants import (
    MAX_AGE,
    MAX_LOAN_AMOUNT,
    MAX_LOAN_PERIOD,
    MIN_AGE,
    MIN_LOAN_AMOUNT,
    MIN_LOAN_PERIOD,
)
from decision_engine.domain.models import DecisionError, ErrorKind
from decision_engine.domain.personal_code import is_valid_personal_code


def validate(personal_code: str, loan_amount: int, loan_period: int, age: int) -> Optional[DecisionError]:
    """
    Check a loan request against business rules.

    Checks run in order and the first failure is returned:
    - personal code format and checksum
    - MIN_LOAN_AMOUNT <= loan_amount <= MAX_LOAN_AMOUNT
    - MIN_LOAN_PERIOD <= loan_period <= MAX_LOAN_PERIOD
    - MIN_AGE <= age <= MAX_AGE

    Returns:
        None if the request is valid, otherwise the DecisionError to report
    """
    if not is_valid_personal_code(personal_code):
        return DecisionError(ErrorKind.INVALID_IDENTITY_CODE, "Invalid personal ID code!")

    if not MIN_LOAN_AMOUNT <= loan_amount <= MAX_LOAN_AMOUNT:
        return DecisionError(ErrorKind.INVALID_LOAN_AMOUNT, "Invalid loan amount!")

    if not MIN_LOAN_PERIOD <= loan_period <= MAX_LOAN_PERIOD:
        return DecisionError(ErrorKind.INVALID_LOAN_PERIOD, "Invalid loan period!")

    if not MIN_AGE <= age <= MAX_AGE:
        return DecisionError(ErrorKind.INVALID_AGE, "Invalid age for loan application!")

    return None
