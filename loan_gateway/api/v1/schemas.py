"""Pydantic schemas for API request/response validation"""

from typing import Optional

from pydantic import BaseModel, Field

from loan_gateway.domain.models import Decision


class DecisionRequest(BaseModel):
    """Request body for POST /v1/loan/decision"""

    # Bounds are enforced by the decision engine so violations come back as soft decisions
    personal_code: str = Field(..., description="Estonian personal ID code")
    loan_amount: int = Field(..., description="Requested loan amount in euros")
    loan_period: int = Field(..., description="Requested loan period in months")


class DecisionResponse(BaseModel):
    """Response for POST /v1/loan/decision"""

    loan_amount: Optional[int] = None
    loan_period: Optional[int] = None
    error_message: Optional[str] = None

    @classmethod
    def from_decision(cls, decision: Decision) -> "DecisionResponse":
        return cls(
            loan_amount=decision.loan_amount,
            loan_period=decision.loan_period,
            error_message=decision.error_message,
        )
