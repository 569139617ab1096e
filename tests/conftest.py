"""Pytest configuration and shared fixtures."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.ontology import DEFAULT_ONTOLOGY, Ontology


@pytest.fixture
def test_client() -> TestClient:
    """Create FastAPI test client.

    Returns:
        TestClient: FastAPI test client instance
    """
    return TestClient(app)


@pytest.fixture(autouse=True)
def clear_dependency_overrides():
    """Ensure FastAPI dependency overrides are reset between tests."""
    app.dependency_overrides = {}
    yield
    app.dependency_overrides = {}


@pytest.fixture
def ontology() -> Ontology:
    """Shared read-only ontology.

    Returns:
        Ontology: Default insurance ontology
    """
    return DEFAULT_ONTOLOGY


@pytest.fixture
def health_policy_text() -> str:
    """Short health insurance policy text.

    Returns:
        str: Document text with type, policy number, coverage and expiry
    """
    return (
        "Health insurance policy. Policy Number: HI-4821. "
        "Coverage Amount: $50,000. Valid until 12/31/2025."
    )


@pytest.fixture
def full_policy_text() -> str:
    """Multi-section auto policy that exercises every scoring factor.

    Returns:
        str: Document text
    """
    return (
        "AUTO INSURANCE POLICY - Page 1\n"
        "Policy Number: AX-99812345\n"
        "Type of Insurance: Comprehensive\n"
        "Insured Amount: $125,000\n"
        "Annual premium payable by the insured. Beneficiary: Jane Doe\n"
        "Coverage effective from 01/01/2025\n"
        "Expiration: 01/01/2026\n"
        "Section 2 - Terms and Conditions apply.\n"
        "Issued by Acme Insurer. Contact: claims@acme.example, phone 555-0100\n"
        "Signature: ____________\n"
    )


@pytest.fixture
def reference_date() -> date:
    """Fixed reference date for expiration checks.

    Returns:
        date: 2025-06-30
    """
    return date(2025, 6, 30)
