"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from loan_gateway.api.main import create_app
from loan_gateway.api.dependencies import get_decision_engine
from loan_gateway.domain.engine import DecisionEngine


# All personal codes below are checksum-valid and encode a birth date of 1990-02-01
# unless stated otherwise. Last four digits select the segment.
DEBT_CODE = "49002010965"  # 0965 -> DEBT
SEGMENT_1_CODE = "49002013008"  # 3008 -> SEGMENT_1 (modifier 100)
SEGMENT_2_CODE = "49002016000"  # 6000 -> SEGMENT_2 (modifier 300)
SEGMENT_3_CODE = "49002018004"  # 8004 -> SEGMENT_3 (modifier 1000)
UNDERAGE_CODE = "61001018007"  # born 2010-01-01, SEGMENT_3
SENIOR_CODE = "35501018005"  # born 1955-01-01, SEGMENT_3
LEAP_DAY_CODE = "60802298003"  # born 2008-02-29, SEGMENT_3

TODAY = date(2026, 10, 19)


@pytest.fixture
def today() -> date:
    """Fixed reference date so ages are stable"""
    return TODAY


@pytest.fixture
def engine(today: date) -> DecisionEngine:
    """Decision engine with default limits, Baltic age policy and a fixed clock"""
    return DecisionEngine(today=lambda: today)


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client with the fixed-clock engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)
