"""
Servicios por recurso sobre ``ApiClient``: mismas rutas para productos,
clientes, pedidos, remitos y detalles, parseando la respuesta camelCase
a los schemas de la API.
"""
from typing import Generic, List, Optional, Type, TypeVar, Union

from pydantic import BaseModel

from verduleria.api.clientes.schemas.schema_cliente import ClienteOut
from verduleria.api.pedidos.schemas.schema_pedido import DetallePedidoOut, PedidoOut
from verduleria.api.productos.schemas.schema_producto import ProductoOut
from verduleria.api.remitos.schemas.schema_remito import RemitoOut
from verduleria.client.http_client import ApiClient

T = TypeVar("T", bound=BaseModel)


def a_payload(data: Union[BaseModel, dict]) -> dict:
    """Modelo pydantic -> dict JSON con claves camelCase."""
    if isinstance(data, BaseModel):
        return data.model_dump(by_alias=True, mode="json", exclude_none=True)
    return data


class ResourceService(Generic[T]):
    def __init__(self, api: ApiClient, recurso: str, schema: Type[T]):
        self.api = api
        self.recurso = recurso
        self.schema = schema

    def get_all(self, search: str = "") -> List[T]:
        params = {"search": search} if search else None
        data = self.api.get(f"/{self.recurso}/all", params=params)
        return [self.schema.model_validate(item) for item in data or []]

    def get_by_id(self, id: int) -> T:
        return self.schema.model_validate(self.api.get(f"/{self.recurso}/{id}"))

    def create(self, data: Union[BaseModel, dict]) -> T:
        return self.schema.model_validate(self.api.post(f"/{self.recurso}", a_payload(data)))

    def update(self, id: int, data: Union[BaseModel, dict]) -> T:
        return self.schema.model_validate(self.api.put(f"/{self.recurso}/{id}", a_payload(data)))

    def delete(self, id: int) -> None:
        self.api.delete(f"/{self.recurso}/{id}")


class Servicios:
    """Agrupa los servicios de todos los recursos sobre un mismo ApiClient."""

    def __init__(self, api: Optional[ApiClient] = None):
        self.api = api or ApiClient()
        self.productos = ResourceService(self.api, "productos", ProductoOut)
        self.clientes = ResourceService(self.api, "clientes", ClienteOut)
        self.pedidos = ResourceService(self.api, "pedidos", PedidoOut)
        self.remitos = ResourceService(self.api, "remitos", RemitoOut)
        self.detalles = ResourceService(self.api, "detalles-pedido", DetallePedidoOut)
