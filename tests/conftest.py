"""Shared fixtures for clause engine tests."""

import pytest
from unittest.mock import MagicMock

from services.clause_extractor import ClauseExtractor


SERVICE_AGREEMENT = """SERVICE AGREEMENT

1. PAYMENT TERMS. The Client shall pay each invoice within thirty days. Late payment incurs a fee.
2. TERMINATION. Either party may terminate this Agreement upon sixty days written notice; termination does not cancel accrued obligations.
3. LIMITATION OF LIABILITY. Neither party shall be liable for indirect damages, and total liability is capped at the fees paid.
4. CONFIDENTIALITY. Each party shall keep all confidential and proprietary information secret and protect it from disclosure.
5. INTELLECTUAL PROPERTY. All intellectual property, including copyright, patent and trademark rights, remains with the Provider.
"""

PAYMENT_TEXT = "Payment shall be made within 30 days. All payments must be in USD."


@pytest.fixture
def service_agreement() -> str:
    return SERVICE_AGREEMENT


@pytest.fixture
def payment_text() -> str:
    return PAYMENT_TEXT


@pytest.fixture
def extractor() -> ClauseExtractor:
    return ClauseExtractor()


@pytest.fixture
def loaded_model() -> MagicMock:
    """Inference backend stub that reports itself ready."""
    model = MagicMock()
    model.is_loaded = True
    return model
