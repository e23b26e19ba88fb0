import os
import tempfile

# Configuración de pruebas: debe quedar definida antes de importar la app
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_API_KEY"] = ""
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="verduleria-logs-"))
os.environ["QR_BASE_URL"] = "http://verduleria.test"

from datetime import datetime  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from verduleria.main import app  # noqa: E402
from verduleria.database import init_db  # noqa: E402,F401
from verduleria.database.db_connection import Base, engine  # noqa: E402
from verduleria.client.http_client import ApiClient  # noqa: E402
from verduleria.client.notifications import Notificador  # noqa: E402
from verduleria.client.services import Servicios  # noqa: E402


@pytest.fixture(autouse=True)
def base_limpia():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def servicios(client):
    # TestClient es un httpx.Client: el cliente de escritorio habla con la app en memoria
    return Servicios(ApiClient(base_url="http://testserver/api", client=client))


@pytest.fixture
def notificador():
    return Notificador()


# ───────────────────────── datos ─────────────────────────
@pytest.fixture
def crear_producto(client):
    def _crear(nombre="Tomate", unidad="kg", precio="1500.00"):
        resp = client.post("/api/productos", json={"nombre": nombre, "unidadMedida": unidad, "precioVenta": precio})
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _crear


@pytest.fixture
def crear_cliente(client):
    def _crear(razon_social="Almacén Don Pepe", cuit_dni="20123456789", **extra):
        body = {"razonSocial": razon_social, "cuitDni": cuit_dni, "direccion": "San Martín 123", **extra}
        resp = client.post("/api/clientes", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _crear


@pytest.fixture
def crear_pedido(client):
    def _crear(cliente_id, detalles, **extra):
        body = {"clienteId": cliente_id, "detalles": detalles, **extra}
        if isinstance(body.get("fechaCreacion"), datetime):
            body["fechaCreacion"] = body["fechaCreacion"].isoformat()
        resp = client.post("/api/pedidos", json=body)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _crear
