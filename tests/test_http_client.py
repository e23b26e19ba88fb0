from decimal import Decimal

import httpx
import pytest

from verduleria.api.productos.schemas.schema_producto import ProductoIn
from verduleria.client.http_client import ApiClient, ApiError, es_violacion_restriccion
from verduleria.client.formatters import formatear_fecha, formatear_moneda


def _api(handler, **kwargs) -> ApiClient:
    return ApiClient(base_url="http://api.test/api", client=httpx.Client(transport=httpx.MockTransport(handler)), **kwargs)


def test_envia_header_de_api_key():
    vistos = []

    def handler(request):
        vistos.append(request.headers.get("X-APP-KEY"))
        return httpx.Response(200, json=[])

    _api(handler, api_key="clave").get("/pedidos/all")
    _api(handler).get("/pedidos/all")
    assert vistos == ["clave", None]


def test_error_http_usa_el_detail():
    api = _api(lambda request: httpx.Response(409, json={"detail": "Registro duplicado: violación de restricción de unicidad"}))
    with pytest.raises(ApiError) as exc:
        api.post("/clientes", {"cuitDni": "1"})
    assert exc.value.status_code == 409
    assert "Registro duplicado" in exc.value.mensaje
    assert es_violacion_restriccion(exc.value)


def test_error_de_validacion_422_se_resume():
    detalle = [{"field": "body.precioVenta", "message": "Input should be greater than or equal to 0.01"}]
    api = _api(lambda request: httpx.Response(422, json={"detail": detalle}))
    with pytest.raises(ApiError) as exc:
        api.post("/productos", {})
    assert "precioVenta" in exc.value.mensaje
    assert not es_violacion_restriccion(exc.value)


def test_falla_de_conexion():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ApiError) as exc:
        _api(handler).get("/productos/all")
    assert exc.value.status_code is None


def test_204_devuelve_none():
    assert _api(lambda request: httpx.Response(204)).delete("/productos/1") is None


def test_servicios_contra_la_api(servicios):
    creado = servicios.productos.create(ProductoIn(nombre="Banana", unidad_medida="kg", precio_venta=Decimal("1200")))
    assert creado.id
    assert servicios.productos.get_by_id(creado.id).nombre == "Banana"
    assert [p.nombre for p in servicios.productos.get_all(search="nombre:ban")] == ["Banana"]

    actualizado = servicios.productos.update(creado.id, {"nombre": "Banana ecuador", "unidadMedida": "kg", "precioVenta": "1300"})
    assert actualizado.precio_venta == Decimal("1300")

    servicios.productos.delete(creado.id)
    with pytest.raises(ApiError) as exc:
        servicios.productos.get_by_id(creado.id)
    assert exc.value.status_code == 404


def test_formatear_moneda():
    assert formatear_moneda(Decimal("1234.5")) == "$ 1.234,50"
    assert formatear_moneda(0) == "$ 0,00"
    assert formatear_moneda("1000000") == "$ 1.000.000,00"
    assert formatear_moneda(Decimal("-15.256")) == "-$ 15,26"


def test_formatear_fecha():
    from datetime import datetime
    assert formatear_fecha(datetime(2026, 10, 19, 9, 5)) == "19 de octubre de 2026, 09:05"
