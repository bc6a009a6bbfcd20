"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request

from loan_gateway.config import settings
from loan_gateway.domain.engine import DecisionEngine


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache
def get_decision_engine() -> DecisionEngine:
    """Provide the process-wide decision engine, configured once from settings"""
    return DecisionEngine(
        age_restriction=settings.age_restriction(),
        limits=settings.loan_limits(),
    )
