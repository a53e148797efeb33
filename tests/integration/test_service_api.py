"""Integration tests for service endpoints and middleware"""

import uuid

from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "finance-api"}


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post(
        "/api/debts",
        json={"description": "TV", "totalAmount": 300, "category": "Casa", "totalInstallments": 3},
    )

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "finance_records_written_total" in response.text
    assert "finance_installment_schedules_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health")
    assert response.headers["X-Request-ID"]

    echoed = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert echoed.headers["X-Request-ID"] == "abc-123"


def test_root_redirects_to_docs(client: TestClient):
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/api/docs"


def test_request_metrics_use_route_template(client: TestClient):
    client.get(f"/api/debts/{uuid.uuid4()}")

    response = client.get("/metrics")
    assert 'endpoint="/api/debts/{debt_id}"' in response.text
