"""
Métricas Prometheus de la API (requests, duración, errores y logs).
"""
import re
from time import time
from typing import Callable

from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

METRICS_PATH = "/api/monitoring/metrics"

http_requests_total = Counter(
    'verduleria_http_requests_total',
    'Total de requests HTTP',
    ['method', 'endpoint', 'status_code']
)

http_request_duration_seconds = Histogram(
    'verduleria_http_request_duration_seconds',
    'Duración de los requests HTTP en segundos',
    ['method', 'endpoint'],
    buckets=[0.01, 0.05, 0.1, 0.5, 1.0, 2.5, 5.0]
)

http_errors_total = Counter(
    'verduleria_http_errors_total',
    'Total de respuestas HTTP con error',
    ['method', 'endpoint', 'status_code']
)

active_connections = Gauge(
    'verduleria_active_connections',
    'Requests en curso'
)

log_messages_total = Counter(
    'verduleria_log_messages_total',
    'Total de mensajes de log',
    ['level']
)


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware que registra métricas por request."""

    async def dispatch(self, request: Request, call_next: Callable):
        if request.url.path.startswith("/api/monitoring"):
            return await call_next(request)

        method = request.method
        endpoint = normalize_endpoint(request.url.path)

        start_time = time()
        active_connections.inc()
        try:
            response = await call_next(request)
        except Exception:
            http_requests_total.labels(method=method, endpoint=endpoint, status_code=500).inc()
            http_errors_total.labels(method=method, endpoint=endpoint, status_code=500).inc()
            raise
        finally:
            active_connections.dec()

        status_code = response.status_code
        http_requests_total.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
        http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(time() - start_time)
        if status_code >= 400:
            http_errors_total.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
        return response


def normalize_endpoint(endpoint: str) -> str:
    """
    Reemplaza IDs numéricos para evitar alta cardinalidad.
    Ej: /api/pedidos/123 -> /api/pedidos/{id}
    """
    return re.sub(r'/\d+', '/{id}', endpoint)


def get_metrics() -> bytes:
    """Retorna las métricas en formato de exposición Prometheus."""
    return generate_latest()


def record_log(level: str):
    log_messages_total.labels(level=level).inc()


__all__ = ["PrometheusMiddleware", "get_metrics", "record_log", "CONTENT_TYPE_LATEST", "normalize_endpoint"]
