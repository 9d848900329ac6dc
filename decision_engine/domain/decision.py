"""Loan decision assembly - main entry point of the decision engine"""

import logging
from typing import Mapping, Optional

from decision_engine.domain.models import CreditSegment, Decision, ErrorKind, LoanRequest
from decision_engine.domain.scoring import find_suitable_period
from decision_engine.domain.segmentation import DEFAULT_SEGMENT_OVERRIDES, resolve_segment
from decision_engine.domain.validation import validate

logger = logging.getLogger(__name__)


def evaluate_request(
    request: LoanRequest,
    *,
    segment_overrides: Optional[Mapping[str, CreditSegment]] = None,
) -> Decision:
    """
    Decide on a loan request.

    Flow:
    1. Validate inputs, reject with the first failing check
    2. Resolve credit segment, reject customers with debt
    3. Score the requested period, searching longer periods if it fails
    4. Approve the requested amount with the requested or found period

    Every outcome is returned as a Decision; nothing is raised for
    rejected requests.
    """
    error = validate(request.personal_code, request.loan_amount, request.loan_period, request.age)
    if error is not None:
        return Decision(error=error)

    if segment_overrides is None:
        segment_overrides = DEFAULT_SEGMENT_OVERRIDES
    segment = resolve_segment(request.personal_code, segment_overrides)

    if segment is CreditSegment.DEBT:
        return Decision.reject(ErrorKind.NO_VALID_LOAN, "No valid loan found due to debt!")

    period = find_suitable_period(segment.modifier, request.loan_amount, request.loan_period)
    if period is None:
        return Decision.reject(
            ErrorKind.NO_VALID_LOAN,
            "No valid loan amount found within the given parameters.",
        )

    if period != request.loan_period:
        logger.debug(
            "Loan period extended",
            extra={
                "segment": segment.name,
                "requested_period": request.loan_period,
                "approved_period": period,
            },
        )

    return Decision.approve(request.loan_amount, period)


def evaluate(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    age: int,
    *,
    segment_overrides: Optional[Mapping[str, CreditSegment]] = None,
) -> Decision:
    """Decide on a loan for the given personal code, amount, period and age"""
    request = LoanRequest(
        personal_code=personal_code,
        loan_amount=loan_amount,
        loan_period=loan_period,
        age=age,
    )
    return evaluate_request(request, segment_overrides=segment_overrides)
