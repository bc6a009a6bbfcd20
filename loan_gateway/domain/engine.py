"""Decision engine - main entry point for loan decisions"""

import logging
from datetime import date
from typing import Callable

from loan_gateway.domain.exceptions import LoanRequestRejected, NoValidLoanError
from loan_gateway.domain.identity import verify_age
from loan_gateway.domain.models import (
    BALTIC_AGE_RESTRICTION,
    DEFAULT_LOAN_LIMITS,
    AgeRestriction,
    Decision,
    LoanLimits,
)
from loan_gateway.domain.optimizer import optimize_loan
from loan_gateway.domain.personal_code import is_valid_personal_code, mask_personal_code
from loan_gateway.domain.segments import get_credit_modifier
from loan_gateway.domain.validation import verify_inputs

logger = logging.getLogger(__name__)


class DecisionEngine:
    """
    Calculates the approved loan amount and period for a customer.

    Holds only read-only collaborators, so one instance can serve concurrent
    requests. Everything derived for a request is passed along explicitly.
    """

    def __init__(
        self,
        code_validator: Callable[[str], bool] = is_valid_personal_code,
        today: Callable[[], date] = date.today,
        age_restriction: AgeRestriction = BALTIC_AGE_RESTRICTION,
        limits: LoanLimits = DEFAULT_LOAN_LIMITS,
    ):
        self.code_validator = code_validator
        self.today = today
        self.age_restriction = age_restriction
        self.limits = limits

    def calculate_approved_loan(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Decide on a loan request.

        Invalid input and age restrictions come back as a Decision with only an
        error message. Loans that cannot be offered at all raise.

        Raises:
            NoValidLoanError: If there is no valid loan for this customer
        """
        try:
            verify_inputs(personal_code, loan_amount, loan_period, self.limits, self.code_validator)
            verify_age(personal_code, loan_period, self.age_restriction, self.today())
        except LoanRequestRejected as e:
            logger.info(
                "Loan request rejected",
                extra={
                    "personal_code": mask_personal_code(personal_code),
                    "reason": type(e).__name__,
                },
            )
            return Decision.rejected(str(e))

        credit_modifier = get_credit_modifier(personal_code)

        try:
            return optimize_loan(credit_modifier, loan_amount, loan_period, self.limits)
        except NoValidLoanError as e:
            logger.warning(
                f"No valid loan: {e}",
                extra={
                    "personal_code": mask_personal_code(personal_code),
                    "credit_modifier": credit_modifier,
                },
            )
            raise
