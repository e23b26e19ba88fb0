"""
Schemas compartidos entre los distintos recursos
"""

from verduleria.api.shared.schemas.schema_base import CamelModel
from verduleria.api.shared.schemas.schema_shared_enums import (
    EstadoPedidoEnum,
    ESTADO_PEDIDO_LABELS,
)

__all__ = [
    "CamelModel",
    "EstadoPedidoEnum",
    "ESTADO_PEDIDO_LABELS",
]
