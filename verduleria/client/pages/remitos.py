from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Dict, List, Optional

from verduleria.api.clientes.schemas.schema_cliente import ClienteOut
from verduleria.api.pedidos.schemas.schema_pedido import PedidoOut
from verduleria.api.productos.schemas.schema_producto import ProductoOut
from verduleria.api.remitos.schemas.schema_remito import RemitoOut
from verduleria.api.shared.schemas import EstadoPedidoEnum
from verduleria.client.filtros import filtrar_remitos
from verduleria.client.formatters import fecha_local
from verduleria.client.http_client import ApiError
from verduleria.client.pages.base import PaginaBase
from verduleria.client.qr import construir_url_confirmacion, qr_svg
from verduleria.client.remito_pdf import generar_pdf_remito


@dataclass
class FilaRemito:
    remito: RemitoOut
    pedido: Optional[PedidoOut]
    cliente: Optional[ClienteOut]

    @property
    def estado_entrega(self) -> str:
        if self.pedido and self.pedido.estado == EstadoPedidoEnum.ENTREGADO:
            return "Entregado"
        return "Pendiente"


class PaginaRemitos(PaginaBase):
    def __init__(self, servicios, notificador=None, qr_base_url: Optional[str] = None):
        super().__init__(servicios, notificador)
        self.qr_base_url = qr_base_url
        self.remitos: List[RemitoOut] = []
        self.pedidos: Dict[int, PedidoOut] = {}
        self.clientes: Dict[int, ClienteOut] = {}
        self.productos: Dict[int, ProductoOut] = {}
        self.search = ""

    def cargar(self) -> bool:
        try:
            self.remitos = self.servicios.remitos.get_all()
            self.pedidos = {p.id: p for p in self.servicios.pedidos.get_all()}
            self.clientes = {c.id: c for c in self.servicios.clientes.get_all()}
            self.productos = {p.id: p for p in self.servicios.productos.get_all()}
        except ApiError as e:
            self.notificador.error("Error", f"No se pudieron cargar los remitos: {e.mensaje}")
            return False
        return True

    def buscar(self, texto: str) -> List[FilaRemito]:
        self.search = texto
        return self.filas

    @property
    def filas(self) -> List[FilaRemito]:
        filas = []
        for remito in filtrar_remitos(self.remitos, self.pedidos, self.clientes, self.search):
            pedido = self.pedidos.get(remito.pedido_id)
            cliente = self.clientes.get(pedido.cliente_id) if pedido else None
            filas.append(FilaRemito(remito, pedido, cliente))
        return filas

    def total_del_dia(self, dia: Optional[date] = None) -> Decimal:
        dia = dia or fecha_local()
        return sum(
            (r.valor_total for r in self.remitos if r.fecha_emision.date() == dia),
            Decimal("0.00"),
        )

    def url_qr(self, remito: RemitoOut) -> str:
        return construir_url_confirmacion(remito.pedido_id, self.qr_base_url)

    def qr(self, remito: RemitoOut) -> str:
        return qr_svg(self.url_qr(remito))

    def imprimir(self, remito: RemitoOut) -> Optional[bytes]:
        """PDF del remito con el detalle del pedido y el QR de entrega."""
        pedido = self.pedidos.get(remito.pedido_id)
        if pedido is None:
            try:
                pedido = self.servicios.pedidos.get_by_id(remito.pedido_id)
            except ApiError as e:
                self._error_api("Error al imprimir el remito", e)
                return None
        cliente = self.clientes.get(pedido.cliente_id)
        return generar_pdf_remito(remito, pedido, cliente, self.productos, self.qr_base_url)
