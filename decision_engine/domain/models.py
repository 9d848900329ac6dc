"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from decision_engine.domain.constants import (
    SEGMENT_1_CREDIT_MODIFIER,
    SEGMENT_2_CREDIT_MODIFIER,
    SEGMENT_3_CREDIT_MODIFIER,
)


@dataclass(frozen=True)
class LoanRequest:
    """Loan application as submitted by the customer"""

    personal_code: str
    loan_amount: int  # euros
    loan_period: int  # months
    age: int  # years


class CreditSegment(Enum):
    """Customer credit bucket; the value is the segment's credit modifier"""

    DEBT = 0
    SEGMENT_1 = SEGMENT_1_CREDIT_MODIFIER
    SEGMENT_2 = SEGMENT_2_CREDIT_MODIFIER
    SEGMENT_3 = SEGMENT_3_CREDIT_MODIFIER

    @property
    def modifier(self) -> int:
        return self.value


class ErrorKind(str, Enum):
    """Reasons a loan request can be rejected"""

    INVALID_IDENTITY_CODE = "InvalidIdentityCode"
    INVALID_LOAN_AMOUNT = "InvalidLoanAmount"
    INVALID_LOAN_PERIOD = "InvalidLoanPeriod"
    INVALID_AGE = "InvalidAge"
    NO_VALID_LOAN = "NoValidLoan"


@dataclass(frozen=True)
class DecisionError:
    """Typed rejection carried inside a Decision"""

    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Decision:
    """
    Output of the decision engine.

    Either an approval (loan_amount and loan_period set) or a rejection
    (error set). Never both, never neither.
    """

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error: Optional[DecisionError] = None

    def __post_init__(self) -> None:
        has_loan = self.loan_amount is not None and self.loan_period is not None
        partial_loan = (self.loan_amount is None) != (self.loan_period is None)
        if partial_loan or has_loan == (self.error is not None):
            raise ValueError("Decision must hold either an approved loan or an error")

    @classmethod
    def approve(cls, loan_amount: int, loan_period: int) -> "Decision":
        return cls(loan_amount=loan_amount, loan_period=loan_period)

    @classmethod
    def reject(cls, kind: ErrorKind, message: str) -> "Decision":
        return cls(error=DecisionError(kind=kind, message=message))

    @property
    def approved(self) -> bool:
        return self.error is None
