from decimal import Decimal

import pytest


@pytest.fixture
def base(crear_cliente, crear_producto):
    return crear_cliente(), crear_producto("Tomate", "kg", "1500.00")


def test_crear_pedido_calcula_monto_y_defaults(client, base, crear_pedido):
    cliente, producto = base
    pedido = crear_pedido(
        cliente["id"],
        [
            {"productoId": producto["id"], "cantidad": "2", "precioUnitario": "1500.00"},
            {"nombrePersonalizado": "Bolsa de hojas", "cantidad": "1", "precioUnitario": "350.50"},
        ],
    )
    assert pedido["estado"] == "PENDIENTE"
    assert pedido["remitoGenerado"] is False
    assert Decimal(pedido["montoTotal"]) == Decimal("3350.50")
    assert pedido["fechaCreacion"]

    subtotales = [Decimal(d["subtotal"]) for d in pedido["detalles"]]
    assert subtotales == [Decimal("3000.00"), Decimal("350.50")]
    assert pedido["detalles"][1]["productoId"] is None
    assert pedido["detalles"][1]["nombrePersonalizado"] == "Bolsa de hojas"


def test_monto_informado_se_respeta(base, crear_pedido):
    cliente, producto = base
    pedido = crear_pedido(
        cliente["id"],
        [{"productoId": producto["id"], "cantidad": "1", "precioUnitario": "1500"}],
        montoTotal="1400.00",
    )
    assert Decimal(pedido["montoTotal"]) == Decimal("1400.00")


def test_pedido_sin_lineas_ni_monto_400(client, base):
    cliente, _ = base
    resp = client.post("/api/pedidos", json={"clienteId": cliente["id"], "detalles": []})
    assert resp.status_code == 400


def test_linea_con_producto_y_nombre_422(client, base):
    cliente, producto = base
    resp = client.post(
        "/api/pedidos",
        json={
            "clienteId": cliente["id"],
            "detalles": [{"productoId": producto["id"], "nombrePersonalizado": "x", "cantidad": "1", "precioUnitario": "1"}],
        },
    )
    assert resp.status_code == 422


def test_cliente_o_producto_inexistente_400(client, base):
    cliente, producto = base
    resp = client.post(
        "/api/pedidos",
        json={"clienteId": 999, "detalles": [{"productoId": producto["id"], "cantidad": "1", "precioUnitario": "1"}]},
    )
    assert resp.status_code == 400

    resp = client.post(
        "/api/pedidos",
        json={"clienteId": cliente["id"], "detalles": [{"productoId": 999, "cantidad": "1", "precioUnitario": "1"}]},
    )
    assert resp.status_code == 400


def test_actualizar_solo_campos_editables(client, base, crear_pedido):
    cliente, producto = base
    pedido = crear_pedido(cliente["id"], [{"productoId": producto["id"], "cantidad": "1", "precioUnitario": "1500"}])

    # La app móvil reenvía el pedido completo con el estado nuevo
    cuerpo = {**pedido, "estado": "ENTREGADO", "clienteId": 999, "detalles": []}
    resp = client.put(f"/api/pedidos/{pedido['id']}", json=cuerpo)
    assert resp.status_code == 200
    body = resp.json()
    assert body["estado"] == "ENTREGADO"
    assert body["clienteId"] == cliente["id"]
    assert len(body["detalles"]) == 1


def test_estado_invalido_422(client, base, crear_pedido):
    cliente, producto = base
    pedido = crear_pedido(cliente["id"], [{"productoId": producto["id"], "cantidad": "1", "precioUnitario": "1"}])
    resp = client.put(f"/api/pedidos/{pedido['id']}", json={"estado": "PERDIDO"})
    assert resp.status_code == 422


def test_busqueda_por_estado(client, base, crear_pedido):
    cliente, producto = base
    linea = [{"productoId": producto["id"], "cantidad": "1", "precioUnitario": "1"}]
    crear_pedido(cliente["id"], linea)
    segundo = crear_pedido(cliente["id"], linea, estado="ENVIADO")

    resp = client.get("/api/pedidos/all", params={"search": "estado:enviado"})
    assert [p["id"] for p in resp.json()] == [segundo["id"]]


def test_eliminar_pedido_borra_sus_detalles(client, base, crear_pedido):
    cliente, producto = base
    pedido = crear_pedido(cliente["id"], [{"productoId": producto["id"], "cantidad": "1", "precioUnitario": "1"}])
    assert client.delete(f"/api/pedidos/{pedido['id']}").status_code == 204
    assert client.get("/api/detalles-pedido/all").json() == []


def test_eliminar_pedido_con_remito_409(client, base, crear_pedido):
    cliente, producto = base
    pedido = crear_pedido(cliente["id"], [{"productoId": producto["id"], "cantidad": "1", "precioUnitario": "1"}])
    resp = client.post("/api/remitos", json={"numeroRemito": 1, "pedidoId": pedido["id"], "valorTotal": "1"})
    assert resp.status_code == 201

    resp = client.delete(f"/api/pedidos/{pedido['id']}")
    assert resp.status_code == 409
    assert client.get(f"/api/pedidos/{pedido['id']}").status_code == 200


def test_endpoints_de_detalles(client, base, crear_pedido):
    cliente, producto = base
    pedido = crear_pedido(cliente["id"], [{"productoId": producto["id"], "cantidad": "1", "precioUnitario": "1500"}])

    resp = client.post(
        "/api/detalles-pedido",
        json={"pedidoId": pedido["id"], "nombrePersonalizado": "Zapallo", "cantidad": "1.5", "precioUnitario": "1000"},
    )
    assert resp.status_code == 201
    detalle = resp.json()
    assert Decimal(detalle["subtotal"]) == Decimal("1500.00")

    resp = client.get("/api/detalles-pedido/all", params={"pedidoId": pedido["id"]})
    assert len(resp.json()) == 2

    resp = client.put(
        f"/api/detalles-pedido/{detalle['id']}",
        json={"nombrePersonalizado": "Zapallo anco", "cantidad": "2", "precioUnitario": "1000"},
    )
    assert resp.status_code == 200
    assert resp.json()["nombrePersonalizado"] == "Zapallo anco"
    assert Decimal(resp.json()["subtotal"]) == Decimal("2000.00")

    assert client.delete(f"/api/detalles-pedido/{detalle['id']}").status_code == 204
    assert client.get(f"/api/detalles-pedido/{detalle['id']}").status_code == 404


def test_detalle_de_pedido_inexistente_404(client):
    resp = client.post(
        "/api/detalles-pedido",
        json={"pedidoId": 999, "nombrePersonalizado": "x", "cantidad": "1", "precioUnitario": "1"},
    )
    assert resp.status_code == 404


def test_detalles_desde_el_cliente_http(servicios, base, crear_pedido):
    cliente, producto = base
    pedido = crear_pedido(cliente["id"], [{"productoId": producto["id"], "cantidad": "2", "precioUnitario": "1500"}])
    detalle_id = pedido["detalles"][0]["id"]

    detalle = servicios.detalles.get_by_id(detalle_id)
    assert detalle.pedido_id == pedido["id"]
    assert detalle.subtotal == Decimal("3000")
    assert [d.id for d in servicios.detalles.get_all()] == [detalle_id]
