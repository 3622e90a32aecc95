"""Integration tests for API endpoints"""

from datetime import date
from fastapi.testclient import TestClient


def test_health_endpoint(client: TestClient):
    """Test health check endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_metrics_endpoint(client: TestClient):
    """Test Prometheus metrics endpoint"""
    client.post("/clientes/1/transacoes", json={"valor": 10, "tipo": "c", "descricao": "dep"})

    response = client.get("/metrics")
    assert response.status_code == 200
    assert "ledger_transactions_total" in response.text


def test_request_id_header(client: TestClient):
    response = client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers["X-Request-ID"] == "abc-123"

    response = client.get("/health")
    assert response.headers["X-Request-ID"]


def test_create_transaction_credit_then_debit(client: TestClient):
    """Test POST /clientes/{id}/transacoes happy path"""
    response = client.post(
        "/clientes/1/transacoes",
        json={"valor": 500, "tipo": "c", "descricao": "dep"},
    )
    assert response.status_code == 200
    assert response.json() == {"limite": 1000, "saldo": 500}

    response = client.post(
        "/clientes/1/transacoes",
        json={"valor": 1400, "tipo": "d", "descricao": "buy"},
    )
    assert response.status_code == 200
    assert response.json() == {"limite": 1000, "saldo": -900}


def test_create_transaction_insufficient_funds(client: TestClient):
    response = client.post(
        "/clientes/1/transacoes",
        json={"valor": 1001, "tipo": "d", "descricao": "too much"},
    )
    assert response.status_code == 422

    statement = client.get("/clientes/1/extrato").json()
    assert statement["saldo"]["total"] == 0
    assert statement["ultimas_transacoes"] == []


def test_create_transaction_unknown_customer(client: TestClient):
    response = client.post(
        "/clientes/99/transacoes",
        json={"valor": 10, "tipo": "c", "descricao": "x"},
    )
    assert response.status_code == 404


def test_create_transaction_unknown_customer_wins_over_bad_type(client: TestClient):
    response = client.post(
        "/clientes/6/transacoes",
        json={"valor": 10, "tipo": "x", "descricao": "x"},
    )
    assert response.status_code == 404


def test_create_transaction_invalid_attributes(client: TestClient):
    bad_bodies = [
        {"valor": 10, "tipo": "x", "descricao": "dep"},
        {"valor": 10, "tipo": "c", "descricao": "this description is too long"},
        {"valor": 10, "tipo": "c", "descricao": ""},
        {"valor": 0, "tipo": "c", "descricao": "dep"},
    ]
    for body in bad_bodies:
        response = client.post("/clientes/1/transacoes", json=body)
        assert response.status_code == 422, body


def test_create_transaction_malformed_body(client: TestClient):
    """Bodies that fail deserialization are unprocessable too"""
    bad_bodies = [
        {"valor": 1.5, "tipo": "c", "descricao": "dep"},
        {"valor": 10, "tipo": "c", "descricao": None},
        {"valor": 10, "tipo": "c"},
        {"valor": 1.0, "tipo": "c", "descricao": "dep"},
        {"valor": "100", "tipo": "c", "descricao": "dep"},
        {"valor": True, "tipo": "c", "descricao": "dep"},
    ]
    for body in bad_bodies:
        response = client.post("/clientes/1/transacoes", json=body)
        assert response.status_code == 422, body

    statement = client.get("/clientes/1/extrato").json()
    assert statement["saldo"]["total"] == 0
    assert statement["ultimas_transacoes"] == []


def test_create_transaction_only_single_letter_types(client: TestClient):
    """Wire accepts 'c' and 'd' only; spelled-out names are rejected"""
    for tipo in ("credit", "debit", "C", "x"):
        response = client.post(
            "/clientes/1/transacoes",
            json={"valor": 10, "tipo": tipo, "descricao": "dep"},
        )
        assert response.status_code == 422, tipo

    statement = client.get("/clientes/1/extrato").json()
    assert statement["saldo"]["total"] == 0


def test_get_statement(client: TestClient):
    """Test GET /clientes/{id}/extrato after a few transactions"""
    client.post("/clientes/2/transacoes", json={"valor": 100, "tipo": "c", "descricao": "first"})
    client.post("/clientes/2/transacoes", json={"valor": 40, "tipo": "d", "descricao": "second"})

    response = client.get("/clientes/2/extrato")

    assert response.status_code == 200
    data = response.json()
    assert data["saldo"]["total"] == 60
    assert data["saldo"]["limite"] == 80000
    date.fromisoformat(data["saldo"]["data_extrato"])

    transactions = data["ultimas_transacoes"]
    assert [t["descricao"] for t in transactions] == ["second", "first"]
    assert transactions[0]["tipo"] == "d"
    assert transactions[0]["valor"] == 40
    assert transactions[1]["tipo"] == "c"
    # Date-only precision on the wire
    assert len(transactions[0]["realizada_em"]) == 10


def test_get_statement_caps_at_ten(client: TestClient):
    for i in range(12):
        client.post("/clientes/3/transacoes", json={"valor": i + 1, "tipo": "c", "descricao": f"n{i}"})

    data = client.get("/clientes/3/extrato").json()

    assert len(data["ultimas_transacoes"]) == 10
    assert data["ultimas_transacoes"][0]["descricao"] == "n11"
    assert data["saldo"]["total"] == sum(range(1, 13))


def test_get_statement_not_found(client: TestClient):
    response = client.get("/clientes/99/extrato")
    assert response.status_code == 404
