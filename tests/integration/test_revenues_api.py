"""Integration tests for /api/revenues"""

import uuid
import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration

REVENUE = {
    "description": "Salário",
    "amount": 3000,
    "category": "Trabalho",
    "date": "2024-05-05",
}


def _create(client: TestClient, **overrides) -> dict:
    response = client.post("/api/revenues", json={**REVENUE, **overrides})
    assert response.status_code == 201
    return response.json()


def test_create_revenue(client: TestClient):
    data = _create(client)

    assert data["amount"] == 3000
    assert data["yearMonth"] == "2024-05"
    assert "type" not in data


def test_create_revenue_trims_description(client: TestClient):
    assert _create(client, description="  Bônus  ")["description"] == "Bônus"


def test_create_revenue_blank_description(client: TestClient):
    response = client.post("/api/revenues", json={**REVENUE, "description": "   "})
    assert response.status_code == 400


def test_create_revenue_bad_date(client: TestClient):
    response = client.post("/api/revenues", json={**REVENUE, "date": "not-a-date"})
    assert response.status_code == 400


def test_get_revenue_of_other_owner_is_not_found(client: TestClient, other_client: TestClient):
    created = _create(client)

    response = other_client.get(f"/api/revenues/{created['id']}")
    assert response.status_code == 404
    assert response.json() == {"error": "Receita não encontrada."}


def test_replace_revenue(client: TestClient):
    created = _create(client)
    response = client.put(
        f"/api/revenues/{created['id']}",
        json={"description": "Salário reajustado", "amount": 3300, "category": "Trabalho", "date": "2024-06-05"},
    )

    assert response.status_code == 200
    assert response.json()["amount"] == 3300
    assert response.json()["yearMonth"] == "2024-06"


def test_replace_revenue_not_found(client: TestClient):
    response = client.put(f"/api/revenues/{uuid.uuid4()}", json=REVENUE)
    assert response.status_code == 404


def test_patch_revenue_date_moves_bucket(client: TestClient):
    created = _create(client)
    response = client.patch(f"/api/revenues/{created['id']}", json={"date": "2023-12-31"})

    assert response.status_code == 200
    assert response.json()["yearMonth"] == "2023-12"
    assert response.json()["description"] == "Salário"


def test_delete_revenue(client: TestClient):
    created = _create(client)

    response = client.delete(f"/api/revenues/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Receita excluída com sucesso."}

    assert client.delete(f"/api/revenues/{created['id']}").status_code == 404
