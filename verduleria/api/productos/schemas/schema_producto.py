from decimal import Decimal

from pydantic import Field, constr

from verduleria.api.shared.schemas import CamelModel


class ProductoIn(CamelModel):
    """Schema de alta/edición de producto"""
    nombre: constr(strip_whitespace=True, min_length=1, max_length=120)
    unidad_medida: constr(strip_whitespace=True, min_length=1, max_length=30)
    precio_venta: Decimal = Field(..., ge=Decimal("0.01"), max_digits=12, decimal_places=2)


class ProductoOut(CamelModel):
    id: int
    nombre: str
    unidad_medida: str
    precio_venta: Decimal
