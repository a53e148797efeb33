"""Integration tests for /api/debts"""

import uuid
import pytest
from datetime import date
from fastapi.testclient import TestClient

from finance_api.utils.date_utils import add_months

pytestmark = pytest.mark.integration

DEBT = {
    "description": "Carro",
    "totalAmount": 20000,
    "category": "Transporte",
    "totalInstallments": 24,
}


def _create(client: TestClient, **overrides) -> dict:
    response = client.post("/api/debts", json={**DEBT, **overrides})
    assert response.status_code == 201
    return response.json()


def test_create_debt_generates_installments(client: TestClient, owner):
    data = _create(client)

    assert data["description"] == "Carro"
    assert data["totalAmount"] == 20000
    assert data["currentInstallment"] == 1
    assert data["ownerId"] == str(owner.id)
    assert len(data["installments"]) == 24
    assert data["installments"][0]["amount"] == 833.33
    assert sum(i["amount"] for i in data["installments"]) == pytest.approx(20000)
    assert all(i["isPaid"] is False and i["paymentDate"] is None for i in data["installments"])


def test_create_debt_due_dates_are_monthly_from_today(client: TestClient):
    data = _create(client, totalInstallments=3, totalAmount=300)
    today = date.today()

    assert [i["dueDate"] for i in data["installments"]] == [
        add_months(today, n).isoformat() for n in range(3)
    ]


def test_create_debt_missing_total_amount(client: TestClient):
    body = {k: v for k, v in DEBT.items() if k != "totalAmount"}
    response = client.post("/api/debts", json=body)
    assert response.status_code == 400


@pytest.mark.parametrize("count", [0, -3])
def test_create_debt_rejects_non_positive_installments(client: TestClient, count: int):
    response = client.post("/api/debts", json={**DEBT, "totalInstallments": count})
    assert response.status_code == 400


def test_create_debt_rejects_oversized_installment_count(client: TestClient):
    response = client.post("/api/debts", json={**DEBT, "totalInstallments": 120000})
    assert response.status_code == 400
    assert response.json()["error"] == "Erro de validação."

    assert client.get("/api/debts").json() == []


def test_create_debt_accepts_maximum_installment_count(client: TestClient):
    data = _create(client, totalAmount=6000, totalInstallments=600)
    assert len(data["installments"]) == 600


def test_list_debts(client: TestClient):
    assert client.get("/api/debts").json() == []
    _create(client, description="Empréstimo", totalAmount=5000, totalInstallments=10)

    response = client.get("/api/debts")
    assert response.status_code == 200
    assert len(response.json()) == 1
    assert response.json()[0]["description"] == "Empréstimo"


def test_get_debt(client: TestClient):
    created = _create(client, description="Moto", totalAmount=12000, totalInstallments=12)
    response = client.get(f"/api/debts/{created['id']}")

    assert response.status_code == 200
    assert response.json()["description"] == "Moto"
    assert len(response.json()["installments"]) == 12


def test_get_debt_not_found(client: TestClient):
    response = client.get(f"/api/debts/{uuid.uuid4()}")
    assert response.status_code == 404
    assert response.json() == {"error": "Dívida não encontrada."}


def test_debt_of_other_owner_is_not_found(client: TestClient, other_client: TestClient):
    created = _create(client, description="Dívida de Outro", totalAmount=100, totalInstallments=1)
    path = f"/api/debts/{created['id']}"

    assert other_client.get("/api/debts").json() == []
    assert other_client.get(path).status_code == 404
    assert other_client.put(path, json={"totalAmount": 1}).status_code == 404
    assert other_client.delete(path).status_code == 404
    assert client.get(path).json()["totalAmount"] == 100


def test_update_category_keeps_installments(client: TestClient):
    created = _create(client, description="TV", totalAmount=3000, category="Eletrônicos", totalInstallments=3)

    response = client.put(f"/api/debts/{created['id']}", json={"category": "Casa"})

    assert response.status_code == 200
    data = response.json()
    assert data["category"] == "Casa"
    assert data["installments"] == created["installments"]


def test_update_total_amount_regenerates_installments(client: TestClient):
    created = _create(client, description="TV", totalAmount=3000, totalInstallments=3)

    response = client.put(
        f"/api/debts/{created['id']}",
        json={"description": "TV 4K", "totalAmount": 3500},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["description"] == "TV 4K"
    assert data["totalAmount"] == 3500
    assert len(data["installments"]) == 3
    assert [i["amount"] for i in data["installments"]] == [1166.66, 1166.66, 1166.68]


def test_update_installment_count_regenerates_installments(client: TestClient):
    created = _create(client, totalAmount=1200, totalInstallments=12)

    response = client.put(f"/api/debts/{created['id']}", json={"totalInstallments": 6})

    data = response.json()
    assert len(data["installments"]) == 6
    assert all(i["amount"] == 200 for i in data["installments"])


def test_update_current_installment(client: TestClient):
    created = _create(client, totalAmount=1200, totalInstallments=12)

    response = client.put(f"/api/debts/{created['id']}", json={"currentInstallment": 4})

    assert response.json()["currentInstallment"] == 4
    assert response.json()["installments"] == created["installments"]


def test_update_debt_not_found(client: TestClient):
    response = client.put(f"/api/debts/{uuid.uuid4()}", json={"description": "Não Encontrado"})
    assert response.status_code == 404
    assert response.json() == {"error": "Dívida não encontrada para atualização."}


def test_update_debt_rejects_zero_installments(client: TestClient):
    created = _create(client)
    response = client.put(f"/api/debts/{created['id']}", json={"totalInstallments": 0})
    assert response.status_code == 400


def test_update_debt_rejects_oversized_installment_count(client: TestClient):
    created = _create(client)
    response = client.put(f"/api/debts/{created['id']}", json={"totalInstallments": 120000})
    assert response.status_code == 400
    assert response.json()["error"] == "Erro de validação."

    unchanged = client.get(f"/api/debts/{created['id']}").json()
    assert unchanged["totalInstallments"] == 24
    assert len(unchanged["installments"]) == 24


def test_delete_debt(client: TestClient):
    created = _create(client, description="Viagem", totalAmount=5000, totalInstallments=5)

    response = client.delete(f"/api/debts/{created['id']}")
    assert response.status_code == 200
    assert response.json() == {"message": "Dívida excluída com sucesso."}
    assert client.get(f"/api/debts/{created['id']}").status_code == 404


def test_delete_debt_not_found(client: TestClient):
    response = client.delete(f"/api/debts/{uuid.uuid4()}")
    assert response.status_code == 404
