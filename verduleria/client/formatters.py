"""
Formatos es-AR para montos y fechas, y fechas locales del negocio.
"""
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from verduleria.utils.database_utils import now_trimmed

MESES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)


def formatear_moneda(monto: Union[Decimal, float, int, str, None]) -> str:
    """1234.5 -> '$ 1.234,50'"""
    valor = Decimal(str(monto or 0)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    signo = "-" if valor < 0 else ""
    entero, decimales = f"{abs(valor):.2f}".split(".")
    entero = f"{int(entero):,}".replace(",", ".")
    return f"{signo}$ {entero},{decimales}"


def formatear_fecha(fecha: datetime) -> str:
    """'19 de octubre de 2026, 14:05'"""
    return f"{fecha.day} de {MESES[fecha.month - 1]} de {fecha.year}, {fecha:%H:%M}"


def fecha_hora_local() -> datetime:
    return now_trimmed()


def fecha_local(fecha: Optional[datetime] = None) -> date:
    return (fecha or now_trimmed()).date()
