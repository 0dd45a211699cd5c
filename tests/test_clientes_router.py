from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from clientes_api.app import create_app

CLIENTE = {
    "nome": "Ana Maria",
    "email": "ana.maria@mail.com",
    "cpf": "123.456.789-10",
    "dataNascimento": "1985-01-01",
    "telefone": "(11) 91234-5678",
}


@pytest.fixture()
def client(temp_db):
    return TestClient(create_app())


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_criar_cliente_valido(client):
    resp = client.post("/clientes", json=CLIENTE)
    assert resp.status_code == 201
    body = resp.json()
    assert body["dataNascimento"] == "1985-01-01"
    assert body["enderecos"] == []
    assert body["idade"] >= 18
    assert client.get(f"/clientes/{body['id']}").status_code == 200
    assert len(client.get("/clientes").json()) == 1


def test_criar_cliente_invalido_400(client):
    resp = client.post("/clientes", json={**CLIENTE, "nome": "", "cpf": "11111111111"})
    assert resp.status_code == 400
    errors = resp.json()["errors"]
    assert {"field": "nome", "message": "Nome é obrigatório"} in errors
    assert {"field": "cpf", "message": "CPF deve seguir o formato XXX.XXX.XXX-XX"} in errors
    assert client.get("/clientes").json() == []


def test_data_malformada_400(client):
    resp = client.post("/clientes", json={**CLIENTE, "dataNascimento": "01/01/1985"})
    assert resp.status_code == 400
    assert resp.json()["errors"][0]["field"] == "dataNascimento"


def test_cliente_duplicado_400(client):
    client.post("/clientes", json=CLIENTE)
    resp = client.post("/clientes", json=CLIENTE)
    assert resp.status_code == 400
    assert {"field": "email", "message": "Email já cadastrado"} in resp.json()["errors"]


def test_atualizar_cliente(client):
    cliente_id = client.post("/clientes", json=CLIENTE).json()["id"]
    resp = client.put(f"/clientes/{cliente_id}", json={**CLIENTE, "nome": "Ana Maria Souza"})
    assert resp.status_code == 200
    assert resp.json()["nome"] == "Ana Maria Souza"
    assert client.put("/clientes/999", json=CLIENTE).status_code == 404


def test_remover_cliente_remove_enderecos(client):
    cliente_id = client.post("/clientes", json=CLIENTE).json()["id"]
    client.post(
        f"/clientes/{cliente_id}/enderecos",
        json={"rua": "Rua A", "numero": "1", "bairro": "Centro", "cidade": "Recife", "estado": "PE", "cep": "50000-000"},
    )
    assert client.delete(f"/clientes/{cliente_id}").status_code == 204
    assert client.get(f"/clientes/{cliente_id}").status_code == 404
    assert client.get(f"/clientes/{cliente_id}/enderecos").status_code == 404
    assert client.delete(f"/clientes/{cliente_id}").status_code == 404
