"""Pytest fixtures for testing"""

import pytest
from pathlib import Path
from fastapi.testclient import TestClient
from transaction_insights.api.main import create_app
from transaction_insights.domain.models import Transaction


SAMPLE_DATASET = Path(__file__).resolve().parents[1] / "transactions.json"


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def sample_dataset_path() -> Path:
    """JSON export shipped at the repository root"""
    return SAMPLE_DATASET


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Small dataset with interleaved beneficiaries and mixed issue states"""
    return [
        Transaction(
            mtn=1,
            amount=120.0,
            sender_full_name="Tom Shelby",
            beneficiary_full_name="Alfie Solomons",
            issue_id=10,
            issue_solved=False,
            issue_message="Looks like money laundering",
        ),
        Transaction(
            mtn=2,
            amount=40.5,
            sender_full_name="Arthur Shelby",
            beneficiary_full_name="Grace Burgess",
            issue_id=11,
            issue_solved=True,
            issue_message="Never gonna give you up",
        ),
        Transaction(
            mtn=3,
            amount=300.0,
            sender_full_name="Grace Burgess",
            beneficiary_full_name="Alfie Solomons",
        ),
        Transaction(
            mtn=4,
            amount=200.0,
            sender_full_name="tom shelby",
            beneficiary_full_name="Arthur Shelby",
            issue_id=None,
            issue_solved=True,
        ),
        Transaction(
            mtn=5,
            amount=20.0,
            sender_full_name="Arthur Shelby",
            beneficiary_full_name="Grace Burgess",
            issue_id=12,
            issue_solved=True,
            issue_message="Never gonna let you down",
        ),
    ]


@pytest.fixture
def example_transactions() -> list[Transaction]:
    """Three-transaction worked example: A->X 10, B->X 20, A->Y 5"""
    return [
        Transaction(mtn=1, amount=10.0, sender_full_name="A", beneficiary_full_name="X"),
        Transaction(mtn=2, amount=20.0, sender_full_name="B", beneficiary_full_name="X"),
        Transaction(mtn=3, amount=5.0, sender_full_name="A", beneficiary_full_name="Y"),
    ]
