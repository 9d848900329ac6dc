"""POST /v1/loan/decision - loan decision endpoint"""

import time
import logging
from typing import Mapping

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from decision_engine.api.v1.schemas import DecisionRequest, DecisionResponse
from decision_engine.api.dependencies import get_request_id, get_segment_overrides
from decision_engine.domain.decision import evaluate_request
from decision_engine.domain.models import CreditSegment, ErrorKind, LoanRequest
from decision_engine.infrastructure.observability.metrics import record_decision
from decision_engine.infrastructure.observability.logging import log_decision

router = APIRouter()

STATUS_BY_ERROR_KIND = {
    ErrorKind.INVALID_IDENTITY_CODE: 400,
    ErrorKind.INVALID_LOAN_AMOUNT: 400,
    ErrorKind.INVALID_LOAN_PERIOD: 400,
    ErrorKind.INVALID_AGE: 400,
    ErrorKind.NO_VALID_LOAN: 404,
}


@router.post(
    "/loan/decision",
    response_model=DecisionResponse,
    responses={400: {"model": DecisionResponse}, 404: {"model": DecisionResponse}},
)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    segment_overrides: Mapping[str, CreditSegment] = Depends(get_segment_overrides),
):
    """
    Decide on a loan application.

    Flow:
    1. Validate personal code, amount, period and age
    2. Resolve the customer's credit segment
    3. Approve the requested amount, extending the period if needed
    4. Return the decision; rejections carry their error kind
    """
    start_time = time.time()
    request_id = get_request_id(request)

    loan_request = LoanRequest(
        personal_code=request_body.personal_code,
        loan_amount=request_body.loan_amount,
        loan_period=request_body.loan_period,
        age=request_body.age,
    )

    try:
        decision = evaluate_request(loan_request, segment_overrides=segment_overrides)

        # Record metrics and logs
        duration_ms = (time.time() - start_time) * 1000
        record_decision(decision, loan_request.loan_period)
        log_decision(
            request_id,
            decision.approved,
            None if decision.approved else decision.error.kind.value,
            loan_request.loan_period,
            decision.loan_period,
            duration_ms,
        )

        response = DecisionResponse.from_decision(decision)
        status_code = 200 if decision.approved else STATUS_BY_ERROR_KIND[decision.error.kind]
        return JSONResponse(status_code=status_code, content=response.model_dump())

    except Exception as e:
        logging.exception(f"Unexpected error: {e}", extra={"request_id": request_id})
        return JSONResponse(
            status_code=500,
            content=DecisionResponse(error_message="An unexpected error occurred").model_dump(),
        )
