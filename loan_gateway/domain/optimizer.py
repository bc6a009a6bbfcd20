"""Loan optimizer - finds the largest approvable amount/period for a credit modifier"""

import logging
from typing import Optional

from loan_gateway.domain.exceptions import NoValidLoanError
from loan_gateway.domain.models import Decision, LoanLimits

logger = logging.getLogger(__name__)

LOW_CREDIT_SCORE_MESSAGE = "Load amount with this period is not approved"


def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest loan the modifier supports over the given period"""
    return credit_modifier * loan_period


def highest_valid_loan_period(credit_modifier: int, loan_amount: int) -> int:
    return credit_modifier // loan_amount


def calculate_credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """Credit score = (modifier / amount) * period; below 1.0 the requested amount is not approvable"""
    return (credit_modifier / loan_amount) * loan_period


def optimize_loan(
    credit_modifier: int,
    loan_amount: int,
    loan_period: int,
    limits: LoanLimits,
) -> Decision:
    """
    Search for the best loan amount and period for a credit modifier.

    Steps:
    1. DEBT customers (modifier 0) get no loan
    2. Extend the period until the minimum loan amount becomes reachable
    3. Score the originally requested amount; a score below 1 adds a warning
       message but does not stop the calculation
    4. Fail if the extended period is beyond the maximum period, otherwise take
       the largest amount for that period (capped at the maximum amount)
    5. If that is still below the minimum amount, fall back to the requested
       amount and a period derived from it
    6. Recompute the amount from whichever period is now current
    7. Clamp the period into the allowed range

    Raises:
        NoValidLoanError: For DEBT customers, or when no period within bounds
            reaches the minimum loan amount
    """
    if credit_modifier == 0:
        raise NoValidLoanError("No valid loan found!")

    while highest_valid_loan_amount(credit_modifier, loan_period) < limits.minimum_loan_amount:
        loan_period += 1

    error_message: Optional[str] = None
    credit_score = calculate_credit_score(credit_modifier, loan_amount, loan_period)
    if credit_score < 1:
        error_message = LOW_CREDIT_SCORE_MESSAGE

    if loan_period <= limits.maximum_loan_period:
        output_amount = min(
            limits.maximum_loan_amount,
            highest_valid_loan_amount(credit_modifier, loan_period),
        )
    else:
        raise NoValidLoanError("Loan period is not valid")

    if output_amount < limits.minimum_loan_amount:
        loan_period = highest_valid_loan_period(credit_modifier, loan_amount)
        output_amount = loan_amount

    output_amount = min(
        limits.maximum_loan_amount,
        highest_valid_loan_amount(credit_modifier, loan_period),
    )
    loan_period = max(limits.minimum_loan_period, min(limits.maximum_loan_period, loan_period))

    logger.debug(
        "Loan optimized",
        extra={
            "credit_modifier": credit_modifier,
            "credit_score": round(credit_score, 3),
            "loan_amount": output_amount,
            "loan_period": loan_period,
        },
    )

    return Decision(loan_amount=output_amount, loan_period=loan_period, error_message=error_message)
