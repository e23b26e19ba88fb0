from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import Field, constr, model_validator

from verduleria.api.shared.schemas import CamelModel, EstadoPedidoEnum


class DetallePedidoIn(CamelModel):
    """Línea de pedido: producto del catálogo o nombre personalizado"""
    producto_id: Optional[int] = None
    nombre_personalizado: Optional[constr(strip_whitespace=True, max_length=120)] = None
    cantidad: Decimal = Field(..., ge=Decimal("0.01"))
    precio_unitario: Decimal = Field(..., ge=Decimal("0.01"))

    @model_validator(mode='after')
    def producto_o_nombre(self):
        if self.nombre_personalizado == "":
            self.nombre_personalizado = None
        if (self.producto_id is None) == (self.nombre_personalizado is None):
            raise ValueError("Indique un producto del catálogo o un nombre personalizado (sólo uno)")
        return self

    @property
    def subtotal(self) -> Decimal:
        return self.cantidad * self.precio_unitario


class DetallePedidoCreate(DetallePedidoIn):
    """Alta de una línea suelta (endpoint de detalles)"""
    pedido_id: int


class DetallePedidoOut(CamelModel):
    id: int
    pedido_id: int
    producto_id: Optional[int] = None
    nombre_personalizado: Optional[str] = None
    cantidad: Decimal
    precio_unitario: Decimal
    subtotal: Decimal


class PedidoIn(CamelModel):
    cliente_id: int
    fecha_creacion: Optional[datetime] = None
    estado: EstadoPedidoEnum = EstadoPedidoEnum.PENDIENTE
    remito_generado: bool = False
    detalles: List[DetallePedidoIn] = Field(default_factory=list)
    # Si no se informa se calcula a partir de los detalles
    monto_total: Optional[Decimal] = Field(None, ge=Decimal("0.01"))


class PedidoUpdate(CamelModel):
    """
    Campos editables de un pedido. El resto del cuerpo se ignora
    (la app móvil reenvía el pedido completo con el estado nuevo).
    """
    estado: Optional[EstadoPedidoEnum] = None
    remito_generado: Optional[bool] = None
    monto_total: Optional[Decimal] = Field(None, ge=Decimal("0.01"))


class PedidoOut(CamelModel):
    id: int
    cliente_id: int
    fecha_creacion: datetime
    estado: EstadoPedidoEnum
    remito_generado: bool
    monto_total: Decimal
    detalles: List[DetallePedidoOut] = Field(default_factory=list)
