"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from decision_engine.api.main import create_app


# Fixed personal codes with preassigned segments
DEBT_CODE = "49002010965"
SEGMENT_1_CODE = "49002010976"
SEGMENT_2_CODE = "49002010987"
SEGMENT_3_CODE = "49002010998"

# Valid personal codes resolved by their last four digits
RULE_DEBT_CODE = "39001011008"
RULE_SEGMENT_1_CODE = "39001013002"
RULE_SEGMENT_2_CODE = "39001016004"
RULE_SEGMENT_3_CODE = "39001019006"


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def loan_payload() -> dict:
    """Valid request body for a segment 3 customer"""
    return {
        "personal_code": SEGMENT_3_CODE,
        "loan_amount": 4000,
        "loan_period": 12,
        "age": 30,
    }
