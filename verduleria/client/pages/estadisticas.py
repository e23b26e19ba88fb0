"""
Estadísticas de ventas por período, calculadas sobre los pedidos cargados.

Los pedidos CANCELADO no cuentan como venta.
"""
import calendar
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from verduleria.api.pedidos.schemas.schema_pedido import PedidoOut
from verduleria.api.productos.schemas.schema_producto import ProductoOut
from verduleria.api.shared.schemas import EstadoPedidoEnum
from verduleria.client.formatters import fecha_local
from verduleria.client.http_client import ApiError
from verduleria.client.pages.base import FormularioInvalidoError, PaginaBase

TOP_PRODUCTOS = 10
CERO = Decimal("0.00")


class Periodo(str, Enum):
    HOY = "hoy"
    SEMANA = "semana"
    MES = "mes"
    TRIMESTRE = "trimestre"
    PERSONALIZADO = "personalizado"


PERIODO_LABELS = {
    Periodo.HOY: "Hoy",
    Periodo.SEMANA: "Esta Semana",
    Periodo.MES: "Este Mes",
    Periodo.TRIMESTRE: "Este Trimestre",
    Periodo.PERSONALIZADO: "Período Personalizado",
}


def rango_periodo(periodo: Periodo, hoy: date) -> Tuple[date, date]:
    """Fechas inicio/fin (inclusive) del período que contiene ``hoy``. La semana va de domingo a sábado."""
    if periodo is Periodo.HOY:
        return hoy, hoy
    if periodo is Periodo.SEMANA:
        inicio = hoy - timedelta(days=(hoy.weekday() + 1) % 7)
        return inicio, inicio + timedelta(days=6)
    if periodo is Periodo.MES:
        return hoy.replace(day=1), hoy.replace(day=calendar.monthrange(hoy.year, hoy.month)[1])
    if periodo is Periodo.TRIMESTRE:
        mes_inicio = (hoy.month - 1) // 3 * 3 + 1
        mes_fin = mes_inicio + 2
        return (
            date(hoy.year, mes_inicio, 1),
            date(hoy.year, mes_fin, calendar.monthrange(hoy.year, mes_fin)[1]),
        )
    raise ValueError("El período personalizado requiere fechas explícitas")


@dataclass
class VentaAgrupada:
    clave: object
    pedidos: int = 0
    ventas: Decimal = CERO


@dataclass
class ProductoVendido:
    nombre: str
    cantidad: Decimal = CERO
    ingresos: Decimal = CERO


@dataclass
class ResumenVentas:
    inicio: date
    fin: date
    ventas_totales: Decimal = CERO
    total_pedidos: int = 0
    ticket_promedio: Decimal = CERO
    clientes_unicos: int = 0
    ventas_por_dia: List[VentaAgrupada] = field(default_factory=list)
    ventas_por_hora: List[VentaAgrupada] = field(default_factory=list)
    top_productos: List[ProductoVendido] = field(default_factory=list)


def calcular_resumen(
    pedidos: List[PedidoOut],
    productos: Dict[int, ProductoOut],
    inicio: date,
    fin: date,
    por_hora: bool = False,
) -> ResumenVentas:
    en_periodo = [
        p for p in pedidos
        if p.estado != EstadoPedidoEnum.CANCELADO and inicio <= p.fecha_creacion.date() <= fin
    ]
    resumen = ResumenVentas(inicio=inicio, fin=fin)
    resumen.total_pedidos = len(en_periodo)
    resumen.ventas_totales = sum((p.monto_total for p in en_periodo), CERO)
    if en_periodo:
        resumen.ticket_promedio = (resumen.ventas_totales / len(en_periodo)).quantize(Decimal("0.01"))
    resumen.clientes_unicos = len({p.cliente_id for p in en_periodo})

    por_dia: Dict[date, VentaAgrupada] = {}
    horas: Dict[int, VentaAgrupada] = {}
    vendidos: Dict[object, ProductoVendido] = {}
    for pedido in en_periodo:
        dia = por_dia.setdefault(pedido.fecha_creacion.date(), VentaAgrupada(pedido.fecha_creacion.date()))
        dia.pedidos += 1
        dia.ventas += pedido.monto_total
        if por_hora:
            hora = horas.setdefault(pedido.fecha_creacion.hour, VentaAgrupada(pedido.fecha_creacion.hour))
            hora.pedidos += 1
            hora.ventas += pedido.monto_total

        for d in pedido.detalles:
            if d.producto_id is not None:
                clave = d.producto_id
                producto = productos.get(d.producto_id)
                nombre = producto.nombre if producto else f"Producto #{d.producto_id}"
            else:
                clave = nombre = d.nombre_personalizado
            vendido = vendidos.setdefault(clave, ProductoVendido(nombre))
            vendido.cantidad += d.cantidad
            vendido.ingresos += d.subtotal

    resumen.ventas_por_dia = [por_dia[k] for k in sorted(por_dia)]
    resumen.ventas_por_hora = [horas[k] for k in sorted(horas)]
    resumen.top_productos = sorted(vendidos.values(), key=lambda v: v.cantidad, reverse=True)[:TOP_PRODUCTOS]
    return resumen


class PaginaEstadisticas(PaginaBase):
    def __init__(self, servicios, notificador=None, hoy: Callable[[], date] = fecha_local):
        super().__init__(servicios, notificador)
        self.hoy = hoy
        self.pedidos: List[PedidoOut] = []
        self.productos: Dict[int, ProductoOut] = {}
        self.total_clientes = 0
        self.periodo = Periodo.MES
        self.inicio, self.fin = rango_periodo(self.periodo, self.hoy())

    def cargar(self) -> bool:
        try:
            self.pedidos = self.servicios.pedidos.get_all()
            self.productos = {p.id: p for p in self.servicios.productos.get_all()}
            self.total_clientes = len(self.servicios.clientes.get_all())
        except ApiError as e:
            self.notificador.error("Error", f"No se pudieron cargar los datos: {e.mensaje}")
            return False
        return True

    def seleccionar_periodo(
        self,
        periodo: Periodo,
        inicio: Optional[date] = None,
        fin: Optional[date] = None,
    ) -> ResumenVentas:
        periodo = Periodo(periodo)
        if periodo is Periodo.PERSONALIZADO:
            if inicio is None or fin is None:
                raise FormularioInvalidoError({"fechas": "Indique fecha de inicio y de fin"})
            if inicio > fin:
                raise FormularioInvalidoError({"fechas": "La fecha de inicio es posterior a la de fin"})
            self.inicio, self.fin = inicio, fin
        else:
            self.inicio, self.fin = rango_periodo(periodo, self.hoy())
        self.periodo = periodo
        return self.resumen()

    def resumen(self) -> ResumenVentas:
        return calcular_resumen(
            self.pedidos,
            self.productos,
            self.inicio,
            self.fin,
            por_hora=self.periodo is Periodo.HOY,
        )
