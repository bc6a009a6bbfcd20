"""POST /v1/loan/decision - loan decision endpoint"""

import logging
import time

from fastapi import APIRouter, Depends, HTTPException, Request

from loan_gateway.api.dependencies import get_decision_engine, get_request_id
from loan_gateway.api.v1.schemas import DecisionRequest, DecisionResponse
from loan_gateway.domain.engine import DecisionEngine
from loan_gateway.domain.exceptions import NoValidLoanError
from loan_gateway.infrastructure.observability.logging import log_decision
from loan_gateway.infrastructure.observability.metrics import (
    decision_outcome,
    record_decision,
    record_no_valid_loan,
)

router = APIRouter()


@router.post("/loan/decision", response_model=DecisionResponse)
def create_decision(
    request_body: DecisionRequest,
    request: Request,
    engine: DecisionEngine = Depends(get_decision_engine),
):
    """
    Decide on a loan request.

    Flow:
    1. Validate personal code, amount and period
    2. Check age eligibility
    3. Derive credit modifier from the customer segment
    4. Find the best approvable amount and period

    Rejected requests are still 200 responses carrying an error message.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        decision = engine.calculate_approved_loan(
            request_body.personal_code,
            request_body.loan_amount,
            request_body.loan_period,
        )

    except NoValidLoanError as e:
        record_no_valid_loan()
        log_decision(request_id, "no_valid_loan", None, None, (time.time() - start_time) * 1000)
        raise HTTPException(status_code=404, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="An unexpected error occurred")

    duration_ms = (time.time() - start_time) * 1000
    record_decision(decision)
    log_decision(request_id, decision_outcome(decision), decision.loan_amount, decision.loan_period, duration_ms)

    return DecisionResponse.from_decision(decision)
