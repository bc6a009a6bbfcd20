"""Request validation against business rules"""

from typing import Callable

from loan_gateway.domain.exceptions import (
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
)
from loan_gateway.domain.models import LoanLimits


def verify_inputs(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    limits: LoanLimits,
    code_validator: Callable[[str], bool],
) -> None:
    """
    Verify that all inputs are valid. Checked in order: code, amount, period.

    Raises:
        InvalidPersonalCodeError: If the personal ID code is invalid
        InvalidLoanAmountError: If the amount is outside the allowed bounds
        InvalidLoanPeriodError: If the period is outside the allowed bounds
    """
    if not code_validator(personal_code):
        raise InvalidPersonalCodeError("Invalid personal ID code!")

    if not limits.minimum_loan_amount <= loan_amount <= limits.maximum_loan_amount:
        raise InvalidLoanAmountError("Invalid loan amount!")

    if not limits.minimum_loan_period <= loan_period <= limits.maximum_loan_period:
        raise InvalidLoanPeriodError("Invalid loan period!")
