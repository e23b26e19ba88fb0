from typing import Callable, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from verduleria.client.http_client import ApiError, es_violacion_restriccion
from verduleria.client.notifications import Notificador
from verduleria.client.services import Servicios

M = TypeVar("M", bound=BaseModel)

Confirmacion = Callable[[str], bool]


class FormularioInvalidoError(Exception):
    """Errores de validación de un formulario, por campo."""

    def __init__(self, errores: Dict[str, str]):
        self.errores = errores
        super().__init__("; ".join(f"{campo}: {msg}" for campo, msg in errores.items()))


def validar_formulario(schema: Type[M], datos: dict) -> M:
    try:
        return schema.model_validate(datos)
    except ValidationError as e:
        errores = {}
        for err in e.errors():
            campo = ".".join(str(loc) for loc in err["loc"]) or "formulario"
            errores[campo] = err["msg"]
        raise FormularioInvalidoError(errores) from e


class PaginaBase:
    def __init__(self, servicios: Servicios, notificador: Optional[Notificador] = None):
        self.servicios = servicios
        self.notificador = notificador or Notificador()

    def _error_api(self, titulo: str, error: ApiError, mensaje_restriccion: Optional[str] = None) -> None:
        """Las violaciones de restricción se muestran como advertencia, el resto como error."""
        if es_violacion_restriccion(error):
            self.notificador.advertencia(titulo, mensaje_restriccion or error.mensaje)
        else:
            self.notificador.error(titulo, error.mensaje)
