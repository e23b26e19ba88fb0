"""
Cliente HTTP de la API REST (escritorio y app móvil).

Envoltorio delgado sobre ``httpx``: devuelve el JSON decodificado y
convierte cualquier respuesta no 2xx o falla de transporte en ``ApiError``.
"""
from typing import Any, Optional

import httpx

from verduleria.config import settings
from verduleria.utils.logger import logger

API_KEY_HEADER = "X-APP-KEY"

# Fragmentos que delatan una violación de constraint en el mensaje del backend
MARCAS_RESTRICCION = (
    "violación de restricción",
    "violacion de restriccion",
    "constraint",
    "foreign key",
    "referenciado",
)


class ApiError(Exception):
    def __init__(self, mensaje: str, status_code: Optional[int] = None):
        super().__init__(mensaje)
        self.mensaje = mensaje
        self.status_code = status_code

    @classmethod
    def from_response(cls, response: httpx.Response) -> "ApiError":
        try:
            body = response.json()
        except ValueError:
            body = None
        detail = body.get("detail") if isinstance(body, dict) else None
        if isinstance(detail, list):
            # 422: lista de errores de validación
            detail = "; ".join(f"{e.get('field')}: {e.get('message')}" for e in detail if isinstance(e, dict))
        mensaje = detail or response.text or f"HTTP {response.status_code}"
        return cls(str(mensaje), status_code=response.status_code)

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.mensaje}"
        return self.mensaje


def es_violacion_restriccion(error: Exception) -> bool:
    """
    Heurística por texto: True si el error parece una violación de
    restricción (borrar un cliente/producto referenciado, CUIT duplicado).
    """
    mensaje = str(getattr(error, "mensaje", error)).lower()
    return any(marca in mensaje for marca in MARCAS_RESTRICCION)


class ApiClient:
    """
    Args:
        base_url: raíz de la API, ej.: ``http://localhost:8080/api``.
        api_key: valor del header X-APP-KEY (app móvil). None = no se envía.
        timeout: segundos por request.
        client: ``httpx.Client`` ya construido (tests, sesiones compartidas).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.api_key = api_key
        self._client = client or httpx.Client(timeout=timeout or settings.API_TIMEOUT_SECONDS)

    def get(self, path: str, params: Optional[dict] = None) -> Any:
        return self._request("GET", path, params=params)

    def post(self, path: str, data: Any = None) -> Any:
        return self._request("POST", path, json=data)

    def put(self, path: str, data: Any = None) -> Any:
        return self._request("PUT", path, json=data)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = {API_KEY_HEADER: self.api_key} if self.api_key else None
        try:
            response = self._client.request(method, url, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"[ApiClient] Error de conexión {method} {url}: {e}")
            raise ApiError(f"No se pudo conectar con el servidor: {e}") from e

        if response.is_error:
            error = ApiError.from_response(response)
            logger.warning(f"[ApiClient] {method} {url} -> {error}")
            raise error

        if response.status_code == 204 or not response.content:
            return None
        return response.json()
