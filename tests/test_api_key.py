import pytest

from verduleria.config import settings


@pytest.fixture
def con_api_key(monkeypatch):
    monkeypatch.setattr(settings, "APP_API_KEY", "secreta")


def test_rutas_abiertas_sin_clave_configurada(client):
    assert client.get("/api/productos/all").status_code == 200


def test_clave_requerida_cuando_esta_configurada(client, con_api_key):
    assert client.get("/api/productos/all").status_code == 401
    assert client.get("/api/productos/all", headers={"X-APP-KEY": "otra"}).status_code == 401
    assert client.get("/api/productos/all", headers={"X-APP-KEY": "secreta"}).status_code == 200


def test_health_y_metricas_no_requieren_clave(client, con_api_key):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").status_code == 200
    assert client.get("/api/monitoring/metrics").status_code == 200
