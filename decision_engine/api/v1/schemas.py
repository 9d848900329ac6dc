"""Pydantic schemas for API request/response validation"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt

from decision_engine.domain.models import Decision


class DecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision"""

    personal_code: str = Field(..., description="Estonian personal identification code")
    loan_amount: StrictInt = Field(..., description="Requested loan amount in euros")
    loan_period: StrictInt = Field(..., description="Requested loan period in months")
    age: StrictInt = Field(..., description="Applicant age in years")


class DecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_kind: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def from_decision(cls, decision: Decision) -> "DecisionResponse":
        if decision.approved:
            return cls(loan_amount=decision.loan_amount, loan_period=decision.loan_period)
        return cls(error_kind=decision.error.kind.value, error_message=decision.error.message)
