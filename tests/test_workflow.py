from datetime import datetime

import pytest

from verduleria.api.shared.schemas import EstadoPedidoEnum as E
from verduleria.client.http_client import ApiError
from verduleria.client.workflow import (
    PedidoWorkflow,
    TransicionInvalidaError,
    estados_siguientes,
    puede_transicionar,
)

AHORA = datetime(2026, 10, 19, 11, 30)


@pytest.fixture
def workflow(servicios):
    return PedidoWorkflow(servicios, reloj=lambda: AHORA, numerador=lambda: 1760000000000)


@pytest.fixture
def pedido(servicios, crear_cliente, crear_producto, crear_pedido):
    cliente = crear_cliente()
    producto = crear_producto()
    creado = crear_pedido(cliente["id"], [{"productoId": producto["id"], "cantidad": "2", "precioUnitario": "1500"}])
    return servicios.pedidos.get_by_id(creado["id"])


def test_tabla_de_transiciones():
    assert puede_transicionar(E.PENDIENTE, E.EN_PREPARACION)
    assert puede_transicionar("EN_PREPARACION", "ENVIADO")
    assert puede_transicionar(E.ENVIADO, E.ENTREGADO)
    assert not puede_transicionar(E.PENDIENTE, E.ENVIADO)
    assert not puede_transicionar(E.ENTREGADO, E.CANCELADO)
    assert estados_siguientes(E.PENDIENTE) == [E.EN_PREPARACION, E.CANCELADO]
    assert estados_siguientes(E.CANCELADO) == []


def test_transicion_invalida_no_llama_a_la_api(workflow, pedido, servicios):
    with pytest.raises(TransicionInvalidaError):
        workflow.cambiar_estado(pedido, E.ENTREGADO)
    assert servicios.pedidos.get_by_id(pedido.id).estado == E.PENDIENTE


def test_enviar_emite_remito(workflow, pedido, servicios):
    pedido = workflow.cambiar_estado(pedido, E.EN_PREPARACION)
    pedido = workflow.cambiar_estado(pedido, E.ENVIADO)

    assert pedido.estado == E.ENVIADO
    assert pedido.remito_generado is True
    remitos = servicios.remitos.get_all()
    assert len(remitos) == 1
    assert remitos[0].pedido_id == pedido.id
    assert remitos[0].numero_remito == 1760000000000
    assert remitos[0].valor_total == pedido.monto_total
    assert remitos[0].fecha_emision == AHORA


def test_enviar_con_remito_existente_no_duplica(workflow, pedido, servicios):
    pedido = workflow.cambiar_estado(pedido, E.EN_PREPARACION)
    workflow.generar_remito(pedido)
    pedido = servicios.pedidos.get_by_id(pedido.id)
    pedido = workflow.cambiar_estado(pedido, E.ENVIADO)
    assert len(servicios.remitos.get_all()) == 1
    assert pedido.remito_generado is True


def test_cancelar_borra_el_remito(workflow, pedido, servicios):
    pedido = workflow.cambiar_estado(pedido, E.EN_PREPARACION)
    pedido = workflow.cambiar_estado(pedido, E.ENVIADO)
    pedido = workflow.cambiar_estado(pedido, E.CANCELADO, servicios.remitos.get_all())

    assert pedido.estado == E.CANCELADO
    assert pedido.remito_generado is False
    assert servicios.remitos.get_all() == []


def test_cancelar_sin_remito(workflow, pedido, servicios):
    pedido = workflow.cambiar_estado(pedido, E.CANCELADO)
    assert pedido.estado == E.CANCELADO
    assert servicios.remitos.get_all() == []


def test_generar_remito_dos_veces(workflow, pedido):
    workflow.generar_remito(pedido)
    with pytest.raises(TransicionInvalidaError):
        workflow.generar_remito(pedido)


def test_cancelar_con_error_en_el_pedido_conserva_el_remito(workflow, pedido, servicios, monkeypatch):
    pedido = workflow.cambiar_estado(pedido, E.EN_PREPARACION)
    pedido = workflow.cambiar_estado(pedido, E.ENVIADO)

    def falla(*args, **kwargs):
        raise ApiError("No se pudo conectar con el servidor")

    monkeypatch.setattr(servicios.pedidos, "update", falla)
    with pytest.raises(ApiError):
        workflow.cambiar_estado(pedido, E.CANCELADO)

    assert len(servicios.remitos.get_all()) == 1
    assert servicios.pedidos.get_by_id(pedido.id).estado == E.ENVIADO
