from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from verduleria.api.shared.schemas import CamelModel


class RemitoIn(CamelModel):
    numero_remito: int = Field(..., ge=1)
    pedido_id: int
    valor_total: Decimal = Field(..., ge=Decimal("0"))
    fecha_emision: Optional[datetime] = None


class RemitoUpdate(CamelModel):
    numero_remito: int = Field(..., ge=1)
    valor_total: Decimal = Field(..., ge=Decimal("0"))
    fecha_emision: Optional[datetime] = None


class RemitoOut(CamelModel):
    id: int
    numero_remito: int
    pedido_id: int
    valor_total: Decimal
    fecha_emision: datetime
