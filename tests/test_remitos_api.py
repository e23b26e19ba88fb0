from decimal import Decimal

import pytest


@pytest.fixture
def pedido(crear_cliente, crear_producto, crear_pedido):
    cliente = crear_cliente()
    producto = crear_producto()
    return crear_pedido(cliente["id"], [{"productoId": producto["id"], "cantidad": "2", "precioUnitario": "1500"}])


def test_crear_remito_con_fecha_por_defecto(client, pedido):
    resp = client.post("/api/remitos", json={"numeroRemito": 1700000000000, "pedidoId": pedido["id"], "valorTotal": "3000"})
    assert resp.status_code == 201
    remito = resp.json()
    assert remito["numeroRemito"] == 1700000000000
    assert Decimal(remito["valorTotal"]) == Decimal("3000")
    assert remito["fechaEmision"]


def test_un_remito_por_pedido_409(client, pedido):
    body = {"numeroRemito": 1, "pedidoId": pedido["id"], "valorTotal": "3000"}
    assert client.post("/api/remitos", json=body).status_code == 201
    resp = client.post("/api/remitos", json={**body, "numeroRemito": 2})
    assert resp.status_code == 409
    assert "violación de restricción" in resp.json()["detail"]


def test_remito_de_pedido_inexistente_400(client):
    resp = client.post("/api/remitos", json={"numeroRemito": 1, "pedidoId": 999, "valorTotal": "1"})
    assert resp.status_code == 400


def test_actualizar_y_buscar_remito(client, pedido):
    remito = client.post("/api/remitos", json={"numeroRemito": 10, "pedidoId": pedido["id"], "valorTotal": "3000"}).json()

    resp = client.put(f"/api/remitos/{remito['id']}", json={"numeroRemito": 11, "valorTotal": "2900"})
    assert resp.status_code == 200
    assert resp.json()["numeroRemito"] == 11
    assert resp.json()["fechaEmision"] == remito["fechaEmision"]

    encontrados = client.get("/api/remitos/all", params={"search": f"pedidoId:{pedido['id']}"}).json()
    assert [r["id"] for r in encontrados] == [remito["id"]]
    assert client.get("/api/remitos/all", params={"search": "pedidoId:999"}).json() == []


def test_eliminar_remito(client, pedido):
    remito = client.post("/api/remitos", json={"numeroRemito": 10, "pedidoId": pedido["id"], "valorTotal": "1"}).json()
    assert client.delete(f"/api/remitos/{remito['id']}").status_code == 204
    assert client.get(f"/api/remitos/{remito['id']}").status_code == 404
