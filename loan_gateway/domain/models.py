"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CustomerSegment(Enum):
    """Risk tier derived from the personal code, valued by its credit modifier"""

    DEBT = 0
    SEGMENT_1 = 100
    SEGMENT_2 = 300
    SEGMENT_3 = 1000

    @property
    def credit_modifier(self) -> int:
        return self.value


@dataclass(frozen=True)
class AgeRestriction:
    """Regional age policy applied before any loan is computed"""

    minimum_age: int
    life_expectancy: int


@dataclass(frozen=True)
class LoanLimits:
    """Global bounds for requested and approved loans (amounts in euros, periods in months)"""

    minimum_loan_amount: int = 2000
    maximum_loan_amount: int = 10000
    minimum_loan_period: int = 12
    maximum_loan_period: int = 60

    def __post_init__(self) -> None:
        if self.minimum_loan_amount > self.maximum_loan_amount:
            raise ValueError("minimum_loan_amount must not exceed maximum_loan_amount")
        if self.minimum_loan_period > self.maximum_loan_period:
            raise ValueError("minimum_loan_period must not exceed maximum_loan_period")


@dataclass(frozen=True)
class Decision:
    """
    Output of the decision engine.

    A rejected request carries only an error message. An approved one carries
    amount and period, and may still carry a message when the credit score for
    the requested amount fell below the approval threshold.
    """

    loan_amount: Optional[int]
    loan_period: Optional[int]
    error_message: Optional[str] = None

    @classmethod
    def rejected(cls, error_message: str) -> "Decision":
        return cls(loan_amount=None, loan_period=None, error_message=error_message)

    @property
    def approved(self) -> bool:
        return self.loan_amount is not None


BALTIC_AGE_RESTRICTION = AgeRestriction(minimum_age=18, life_expectancy=75)

DEFAULT_LOAN_LIMITS = LoanLimits()
