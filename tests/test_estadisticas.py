from datetime import date, datetime
from decimal import Decimal

import pytest

from verduleria.api.pedidos.schemas.schema_pedido import DetallePedidoOut, PedidoOut
from verduleria.api.productos.schemas.schema_producto import ProductoOut
from verduleria.client.pages.base import FormularioInvalidoError
from verduleria.client.pages.estadisticas import PaginaEstadisticas, Periodo, calcular_resumen, rango_periodo

HOY = date(2026, 10, 21)  # miércoles


def test_rangos_de_periodo():
    assert rango_periodo(Periodo.HOY, HOY) == (HOY, HOY)
    assert rango_periodo(Periodo.SEMANA, HOY) == (date(2026, 10, 18), date(2026, 10, 24))
    assert rango_periodo(Periodo.SEMANA, date(2026, 10, 18)) == (date(2026, 10, 18), date(2026, 10, 24))
    assert rango_periodo(Periodo.MES, HOY) == (date(2026, 10, 1), date(2026, 10, 31))
    assert rango_periodo(Periodo.MES, date(2028, 2, 10)) == (date(2028, 2, 1), date(2028, 2, 29))
    assert rango_periodo(Periodo.TRIMESTRE, HOY) == (date(2026, 10, 1), date(2026, 12, 31))
    assert rango_periodo(Periodo.TRIMESTRE, date(2026, 5, 5)) == (date(2026, 4, 1), date(2026, 6, 30))


def _detalle(id, producto_id=None, nombre=None, cantidad="1", precio="100"):
    cantidad, precio = Decimal(cantidad), Decimal(precio)
    return DetallePedidoOut(
        id=id, pedido_id=1, producto_id=producto_id, nombre_personalizado=nombre,
        cantidad=cantidad, precio_unitario=precio, subtotal=cantidad * precio,
    )


def _pedido(id, fecha, monto, cliente_id=1, estado="ENTREGADO", detalles=()):
    return PedidoOut(
        id=id, cliente_id=cliente_id, fecha_creacion=fecha, estado=estado,
        remito_generado=False, monto_total=Decimal(monto), detalles=list(detalles),
    )


PRODUCTOS = {1: ProductoOut(id=1, nombre="Tomate", unidad_medida="kg", precio_venta=Decimal("100"))}

PEDIDOS = [
    _pedido(1, datetime(2026, 10, 21, 9, 15), "1000", detalles=[_detalle(1, producto_id=1, cantidad="3")]),
    _pedido(2, datetime(2026, 10, 21, 9, 45), "500", cliente_id=2, detalles=[_detalle(2, nombre="Huevos", cantidad="5")]),
    _pedido(3, datetime(2026, 10, 21, 17, 0), "300", detalles=[_detalle(3, producto_id=1, cantidad="4")]),
    _pedido(4, datetime(2026, 10, 21, 18, 0), "9999", estado="CANCELADO"),
    _pedido(5, datetime(2026, 10, 2, 12, 0), "200", cliente_id=3),
]


def test_resumen_de_hoy():
    resumen = calcular_resumen(PEDIDOS, PRODUCTOS, HOY, HOY, por_hora=True)
    assert resumen.total_pedidos == 3
    assert resumen.ventas_totales == Decimal("1800")
    assert resumen.ticket_promedio == Decimal("600.00")
    assert resumen.clientes_unicos == 2
    assert [(h.clave, h.pedidos, h.ventas) for h in resumen.ventas_por_hora] == [
        (9, 2, Decimal("1500")),
        (17, 1, Decimal("300")),
    ]
    assert [(p.nombre, p.cantidad) for p in resumen.top_productos] == [
        ("Tomate", Decimal("7")),
        ("Huevos", Decimal("5")),
    ]


def test_resumen_del_mes_agrupa_por_dia():
    resumen = calcular_resumen(PEDIDOS, PRODUCTOS, date(2026, 10, 1), date(2026, 10, 31))
    assert resumen.total_pedidos == 4
    assert resumen.ventas_por_hora == []
    assert [(d.clave, d.pedidos) for d in resumen.ventas_por_dia] == [
        (date(2026, 10, 2), 1),
        (date(2026, 10, 21), 3),
    ]


def test_resumen_vacio():
    resumen = calcular_resumen([], PRODUCTOS, HOY, HOY)
    assert resumen.total_pedidos == 0
    assert resumen.ticket_promedio == Decimal("0")
    assert resumen.top_productos == []


def test_pagina_estadisticas(servicios, crear_cliente, crear_producto, crear_pedido):
    cliente = crear_cliente()
    producto = crear_producto("Papa", "kg", "800")
    crear_pedido(
        cliente["id"],
        [{"productoId": producto["id"], "cantidad": "2", "precioUnitario": "800"}],
        fechaCreacion=datetime(2026, 10, 21, 10, 0),
    )
    crear_pedido(
        cliente["id"],
        [{"productoId": producto["id"], "cantidad": "1", "precioUnitario": "800"}],
        fechaCreacion=datetime(2026, 7, 1, 10, 0),
    )

    pagina = PaginaEstadisticas(servicios, hoy=lambda: HOY)
    assert pagina.cargar()
    assert pagina.periodo is Periodo.MES

    resumen = pagina.seleccionar_periodo(Periodo.HOY)
    assert resumen.total_pedidos == 1
    assert resumen.ventas_totales == Decimal("1600")
    assert resumen.top_productos[0].nombre == "Papa"
    assert len(resumen.ventas_por_hora) == 1

    resumen = pagina.seleccionar_periodo(Periodo.PERSONALIZADO, date(2026, 7, 1), date(2026, 10, 31))
    assert resumen.total_pedidos == 2

    with pytest.raises(FormularioInvalidoError):
        pagina.seleccionar_periodo(Periodo.PERSONALIZADO, date(2026, 10, 31), date(2026, 7, 1))
