from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Optional

from verduleria.client.formatters import fecha_local
from verduleria.client.http_client import ApiError
from verduleria.client.pages.base import PaginaBase


@dataclass
class EstadisticasDashboard:
    total_productos: int = 0
    total_clientes: int = 0
    pedidos_hoy: int = 0
    ventas_hoy: Decimal = Decimal("0.00")


class Dashboard(PaginaBase):
    def __init__(self, servicios, notificador=None, hoy: Callable[[], date] = fecha_local):
        super().__init__(servicios, notificador)
        self.hoy = hoy
        self.stats = EstadisticasDashboard()

    def cargar(self) -> Optional[EstadisticasDashboard]:
        """Las ventas del día salen de los remitos emitidos hoy."""
        try:
            productos = self.servicios.productos.get_all()
            clientes = self.servicios.clientes.get_all()
            pedidos = self.servicios.pedidos.get_all()
            remitos = self.servicios.remitos.get_all()
        except ApiError as e:
            self.notificador.error("Error", f"No se pudieron cargar las estadísticas: {e.mensaje}")
            return None

        hoy = self.hoy()
        self.stats = EstadisticasDashboard(
            total_productos=len(productos),
            total_clientes=len(clientes),
            pedidos_hoy=sum(1 for p in pedidos if p.fecha_creacion.date() == hoy),
            ventas_hoy=sum((r.valor_total for r in remitos if r.fecha_emision.date() == hoy), Decimal("0.00")),
        )
        return self.stats
