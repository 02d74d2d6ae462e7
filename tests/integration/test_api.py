"""Integration tests for API endpoints"""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def transactions_payload():
    """Request payload in the export's camelCase format"""
    return [
        {"mtn": 1, "amount": 120.0, "senderFullName": "Tom Shelby", "beneficiaryFullName": "Alfie Solomons",
         "issueId": 10, "issueSolved": False, "issueMessage": "Looks like money laundering"},
        {"mtn": 2, "amount": 40.5, "senderFullName": "Arthur Shelby", "beneficiaryFullName": "Grace Burgess",
         "issueId": 11, "issueSolved": True, "issueMessage": "Never gonna give you up"},
        {"mtn": 3, "amount": 300.0, "senderFullName": "Grace Burgess", "beneficiaryFullName": "Alfie Solomons"},
        {"mtn": 4, "amount": 200.0, "senderFullName": "tom shelby", "beneficiaryFullName": "Arthur Shelby",
         "issueId": None, "issueSolved": True},
    ]


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_request_id_header_is_echoed(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"


def test_report_endpoint(client: TestClient, transactions_payload):
    """Test POST /v1/report with explicit sender and client"""
    response = client.post(
        "/v1/report",
        json={
            "transactions": transactions_payload,
            "sender_full_name": "Tom Shelby",
            "client_full_name": "Alfie Solomons",
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["transaction_count"] == 4
    assert data["total_amount"] == pytest.approx(660.5)
    assert data["total_amount_sent_by_sender"] == pytest.approx(320.0)
    assert data["max_amount"] == 300.0
    assert data["unique_client_count"] == 5
    assert data["client_open_issue_count"] == 1
    assert data["client_has_no_open_issues"] is False
    assert list(data["transactions_by_beneficiary"]) == ["Alfie Solomons", "Grace Burgess", "Arthur Shelby"]
    assert data["unsolved_issue_ids"] == [1]
    assert data["solved_issue_messages"] == ["Never gonna give you up"]
    assert [t["mtn"] for t in data["top_transactions"]] == [3, 4, 1]
    assert data["top_sender"] == {"name": "Tom Shelby", "total_amount": 320.0}


def test_report_endpoint_uses_configured_defaults(client: TestClient, transactions_payload):
    response = client.post("/v1/report", json={"transactions": transactions_payload})

    assert response.status_code == 200
    data = response.json()
    assert data["sender_full_name"] == "Tom Shelby"
    assert data["client_full_name"] == "Alfie Solomons"


def test_report_endpoint_empty_dataset(client: TestClient):
    response = client.post("/v1/report", json={"transactions": []})
    assert response.status_code == 422


def test_report_endpoint_insufficient_data(client: TestClient, transactions_payload):
    response = client.post("/v1/report", json={"transactions": transactions_payload[:2]})

    assert response.status_code == 422
    assert "only 2 available" in response.json()["detail"]


def test_report_endpoint_rejects_negative_amount(client: TestClient, transactions_payload):
    transactions_payload[0]["amount"] = -5
    response = client.post("/v1/report", json={"transactions": transactions_payload})
    assert response.status_code == 422


def test_by_beneficiary_endpoint(client: TestClient, transactions_payload):
    """Test POST /v1/transactions/by-beneficiary"""
    response = client.post("/v1/transactions/by-beneficiary", json={"transactions": transactions_payload})

    assert response.status_code == 200
    groups = response.json()["beneficiaries"]
    assert {name: [t["mtn"] for t in group] for name, group in groups.items()} == {
        "Alfie Solomons": [1, 3],
        "Grace Burgess": [2],
        "Arthur Shelby": [4],
    }
    assert groups["Alfie Solomons"][0]["senderFullName"] == "Tom Shelby"


def test_top_transactions_endpoint(client: TestClient, transactions_payload):
    """Test POST /v1/transactions/top with default and explicit limit"""
    response = client.post("/v1/transactions/top", json={"transactions": transactions_payload})
    assert response.status_code == 200
    assert response.json()["limit"] == 3
    assert [t["amount"] for t in response.json()["transactions"]] == [300.0, 200.0, 120.0]

    response = client.post("/v1/transactions/top?limit=4", json={"transactions": transactions_payload})
    assert [t["mtn"] for t in response.json()["transactions"]] == [3, 4, 1, 2]


def test_top_transactions_endpoint_limit_too_large(client: TestClient, transactions_payload):
    response = client.post("/v1/transactions/top?limit=5", json={"transactions": transactions_payload})
    assert response.status_code == 422


def test_top_sender_endpoint(client: TestClient, transactions_payload):
    """Test POST /v1/senders/top returns name and total"""
    response = client.post("/v1/senders/top", json={"transactions": transactions_payload})

    assert response.status_code == 200
    assert response.json() == {"name": "Tom Shelby", "total_amount": 320.0}


def test_metrics_endpoint(client: TestClient, transactions_payload):
    """Test Prometheus metrics endpoint"""
    client.post("/v1/report", json={"transactions": transactions_payload})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "insights_reports_total" in response.text
    assert "insights_dataset_size" in response.text
