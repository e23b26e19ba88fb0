from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base de los schemas de la API: atributos en snake_case y JSON en camelCase
    (``precio_venta`` <-> ``precioVenta``), igual que los clientes existentes.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
