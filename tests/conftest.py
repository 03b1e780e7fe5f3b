"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from emi_calculator.api.main import create_app
from emi_calculator.api.dependencies import get_settings
from emi_calculator.config import Settings
from emi_calculator.domain.models import FormFields, FormState


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with default settings"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def strict_rate_client() -> TestClient:
    """Test client that rejects a zero interest rate"""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: Settings(allow_zero_rate=False)
    return TestClient(app)


@pytest.fixture
def filled_state() -> FormState:
    """Form holding a typical car loan, not yet calculated"""
    return FormState(fields=FormFields(principal="100000", annual_rate="12", tenure="12"))
