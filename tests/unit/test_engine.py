"""Unit tests for the decision engine"""

import pytest
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from loan_gateway.domain.engine import DecisionEngine
from loan_gateway.domain.exceptions import NoValidLoanError
from loan_gateway.domain.models import AgeRestriction, Decision, LoanLimits
from loan_gateway.domain.optimizer import LOW_CREDIT_SCORE_MESSAGE
from conftest import (
    DEBT_CODE,
    LEAP_DAY_CODE,
    SEGMENT_1_CODE,
    SEGMENT_2_CODE,
    SEGMENT_3_CODE,
    SENIOR_CODE,
    UNDERAGE_CODE,
)

UNDERAGE_DEBT_CODE = "61001010009"  # born 2010-01-01, segment 0009


@pytest.mark.parametrize("personal_code", ["", "49002010966", "abc"])
def test_invalid_personal_code_is_soft(engine: DecisionEngine, personal_code):
    decision = engine.calculate_approved_loan(personal_code, 4000, 12)
    assert decision == Decision.rejected("Invalid personal ID code!")
    assert decision.approved is False


@pytest.mark.parametrize("loan_amount", [1999, 10001])
def test_invalid_loan_amount_is_soft(engine: DecisionEngine, loan_amount):
    decision = engine.calculate_approved_loan(SEGMENT_3_CODE, loan_amount, 12)
    assert decision == Decision(None, None, "Invalid loan amount!")


@pytest.mark.parametrize("loan_period", [11, 61])
def test_invalid_loan_period_is_soft(engine: DecisionEngine, loan_period):
    decision = engine.calculate_approved_loan(SEGMENT_3_CODE, 4000, loan_period)
    assert decision == Decision(None, None, "Invalid loan period!")


def test_first_validation_failure_wins(engine: DecisionEngine):
    assert engine.calculate_approved_loan("", 1, 1).error_message == "Invalid personal ID code!"
    assert engine.calculate_approved_loan(SEGMENT_3_CODE, 1, 1).error_message == "Invalid loan amount!"


def test_bounds_are_inclusive(engine: DecisionEngine):
    assert engine.calculate_approved_loan(SEGMENT_3_CODE, 2000, 12).approved
    assert engine.calculate_approved_loan(SEGMENT_3_CODE, 10000, 60).approved


def test_debt_segment_is_hard_failure(engine: DecisionEngine):
    with pytest.raises(NoValidLoanError):
        engine.calculate_approved_loan(DEBT_CODE, 4000, 12)


def test_underage_rejected_regardless_of_segment(engine: DecisionEngine):
    for personal_code in (UNDERAGE_CODE, UNDERAGE_DEBT_CODE):
        decision = engine.calculate_approved_loan(personal_code, 4000, 12)
        assert decision == Decision.rejected("You must be above the age of 18")


def test_leap_day_applicant_rejected_on_28_february():
    engine = DecisionEngine(today=lambda: date(2026, 2, 28))
    decision = engine.calculate_approved_loan(LEAP_DAY_CODE, 4000, 12)
    assert decision == Decision.rejected("You must be above the age of 18")

    engine = DecisionEngine(today=lambda: date(2026, 3, 1))
    decision = engine.calculate_approved_loan(LEAP_DAY_CODE, 4000, 12)
    assert decision == Decision(loan_amount=10000, loan_period=12, error_message=None)


def test_life_expectancy_uses_requested_period(engine: DecisionEngine):
    rejected = engine.calculate_approved_loan(SENIOR_CODE, 5000, 60)
    assert rejected == Decision.rejected("You are above the age of 70")

    approved = engine.calculate_approved_loan(SENIOR_CODE, 5000, 48)
    assert approved == Decision(loan_amount=10000, loan_period=48, error_message=None)


def test_segment_1_period_extended(engine: DecisionEngine):
    decision = engine.calculate_approved_loan(SEGMENT_1_CODE, 2000, 12)
    assert decision == Decision(loan_amount=2000, loan_period=20, error_message=None)


def test_segment_2_regression(engine: DecisionEngine):
    decision = engine.calculate_approved_loan(SEGMENT_2_CODE, 4000, 12)
    assert decision == Decision(loan_amount=3600, loan_period=12, error_message=LOW_CREDIT_SCORE_MESSAGE)


def test_segment_3_maximum(engine: DecisionEngine):
    decision = engine.calculate_approved_loan(SEGMENT_3_CODE, 10000, 12)
    assert decision == Decision(loan_amount=10000, loan_period=12, error_message=None)


def test_injected_collaborators(today: date):
    engine = DecisionEngine(
        code_validator=lambda code: False,
        today=lambda: today,
    )
    assert engine.calculate_approved_loan(SEGMENT_3_CODE, 4000, 12).error_message == "Invalid personal ID code!"

    strict = DecisionEngine(
        today=lambda: today,
        age_restriction=AgeRestriction(minimum_age=40, life_expectancy=75),
    )
    assert strict.calculate_approved_loan(SEGMENT_3_CODE, 4000, 12).error_message == "You must be above the age of 40"

    narrow = DecisionEngine(
        today=lambda: today,
        limits=LoanLimits(minimum_loan_amount=2000, maximum_loan_amount=5000, minimum_loan_period=12, maximum_loan_period=24),
    )
    assert narrow.calculate_approved_loan(SEGMENT_3_CODE, 5000, 24) == Decision(5000, 24, None)
    assert narrow.calculate_approved_loan(SEGMENT_3_CODE, 6000, 24).error_message == "Invalid loan amount!"


def test_shared_engine_keeps_calls_independent(engine: DecisionEngine):
    requests = [
        (SEGMENT_1_CODE, 2000, 12),
        (SEGMENT_2_CODE, 4000, 12),
        (SEGMENT_3_CODE, 10000, 12),
    ] * 50
    expected = [engine.calculate_approved_loan(*r) for r in requests]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda r: engine.calculate_approved_loan(*r), requests))

    assert results == expected
