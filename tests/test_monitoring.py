from verduleria.utils.logger import logger
from verduleria.utils.prometheus_metrics import normalize_endpoint


def test_metricas_prometheus(client):
    client.get("/api/productos/all")
    resp = client.get("/api/monitoring/metrics")
    assert resp.status_code == 200
    assert "verduleria_http_requests_total" in resp.text
    assert "verduleria_log_messages_total" in resp.text


def test_logs_json_parsea_el_formato_del_logger(client):
    logger.info("[Test] mensaje de prueba para monitoreo")
    resp = client.get("/api/monitoring/logs/json", params={"search": "mensaje de prueba", "lines": 1000})
    assert resp.status_code == 200
    logs = resp.json()["logs"]
    assert logs
    assert logs[-1]["level"] == "INFO"
    assert logs[-1]["logger"] == "verduleria"
    assert "mensaje de prueba" in logs[-1]["message"]


def test_normalize_endpoint():
    assert normalize_endpoint("/api/pedidos/123") == "/api/pedidos/{id}"
    assert normalize_endpoint("/api/pedidos/all") == "/api/pedidos/all"
