"""
Confirmación de entrega desde la app móvil: escanear el QR del remito,
mostrar el pedido y marcarlo ENTREGADO con un único PUT.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional

import httpx

from verduleria.api.clientes.schemas.schema_cliente import ClienteOut
from verduleria.api.pedidos.schemas.schema_pedido import PedidoOut, PedidoUpdate
from verduleria.api.productos.schemas.schema_producto import ProductoOut
from verduleria.api.shared.schemas import EstadoPedidoEnum
from verduleria.client.http_client import ApiClient, ApiError
from verduleria.client.notifications import Notificador
from verduleria.client.qr import QRInvalidoError, extraer_pedido_id
from verduleria.client.services import Servicios
from verduleria.client.workflow import TransicionInvalidaError
from verduleria.config import settings
from verduleria.utils.logger import logger


@dataclass
class LineaEntrega:
    nombre: str
    cantidad: Decimal
    precio_unitario: Decimal
    subtotal: Decimal


@dataclass
class FichaEntrega:
    pedido: PedidoOut
    cliente: Optional[ClienteOut]
    productos: Dict[int, ProductoOut] = field(default_factory=dict)

    @property
    def entregado(self) -> bool:
        return self.pedido.estado == EstadoPedidoEnum.ENTREGADO

    @property
    def lineas(self) -> List[LineaEntrega]:
        lineas = []
        for d in self.pedido.detalles:
            producto = self.productos.get(d.producto_id) if d.producto_id else None
            nombre = d.nombre_personalizado or (producto.nombre if producto else f"Producto #{d.producto_id}")
            lineas.append(LineaEntrega(nombre, d.cantidad, d.precio_unitario, d.subtotal))
        return lineas


def servicios_moviles(base_url: Optional[str] = None, client: Optional[httpx.Client] = None) -> Servicios:
    """La app móvil siempre manda X-APP-KEY cuando hay clave configurada."""
    return Servicios(ApiClient(base_url=base_url, api_key=settings.APP_API_KEY or None, client=client))


class ConfirmarEntrega:
    def __init__(self, servicios: Servicios, notificador: Optional[Notificador] = None):
        self.servicios = servicios
        self.notificador = notificador or Notificador()
        self.ficha: Optional[FichaEntrega] = None

    def escanear(self, texto_qr: str) -> Optional[FichaEntrega]:
        """Texto leído del QR -> ficha del pedido. QRInvalidoError si no es un QR de remito."""
        try:
            pedido_id = extraer_pedido_id(texto_qr)
        except QRInvalidoError as e:
            self.notificador.error("QR inválido", str(e))
            raise
        logger.info(f"[Entrega] QR leído, pedido {pedido_id}")
        return self.cargar(pedido_id)

    def cargar(self, pedido_id: int) -> Optional[FichaEntrega]:
        """None (con toast de error) si no se pudo traer el pedido."""
        self.ficha = None
        try:
            pedido = self.servicios.pedidos.get_by_id(pedido_id)
            productos = {p.id: p for p in self.servicios.productos.get_all()}
            cliente = self.servicios.clientes.get_by_id(pedido.cliente_id)
        except ApiError as e:
            logger.warning(f"[Entrega] No se pudo cargar el pedido {pedido_id}: {e}")
            self.notificador.error("Error", f"No se pudo cargar la información del pedido: {e.mensaje}")
            return None
        self.ficha = FichaEntrega(pedido=pedido, cliente=cliente, productos=productos)
        return self.ficha

    def confirmar(self) -> bool:
        """
        Marca el pedido cargado como ENTREGADO.

        Devuelve False (sin llamar a la API) si ya estaba entregado.
        Un pedido cancelado no se puede entregar.
        """
        if self.ficha is None:
            raise RuntimeError("No hay pedido cargado para confirmar")
        pedido = self.ficha.pedido
        if self.ficha.entregado:
            self.notificador.advertencia("Pedido ya entregado", f"El pedido #{pedido.id} ya figura como entregado")
            return False
        if pedido.estado == EstadoPedidoEnum.CANCELADO:
            raise TransicionInvalidaError(f"El pedido #{pedido.id} está cancelado")

        try:
            actualizado = self.servicios.pedidos.update(pedido.id, PedidoUpdate(estado=EstadoPedidoEnum.ENTREGADO))
        except ApiError as e:
            self.notificador.error("Error al confirmar la entrega", str(e))
            raise
        self.ficha.pedido = actualizado
        self.notificador.exito("Entrega confirmada", f"Pedido #{pedido.id} entregado")
        return True
