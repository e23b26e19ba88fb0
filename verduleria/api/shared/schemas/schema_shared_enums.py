from enum import Enum


class EstadoPedidoEnum(str, Enum):
    PENDIENTE = "PENDIENTE"
    EN_PREPARACION = "EN_PREPARACION"
    ENVIADO = "ENVIADO"
    ENTREGADO = "ENTREGADO"
    CANCELADO = "CANCELADO"


ESTADO_PEDIDO_LABELS = {
    EstadoPedidoEnum.PENDIENTE: "Pendiente",
    EstadoPedidoEnum.EN_PREPARACION: "En Preparación",
    EstadoPedidoEnum.ENVIADO: "Enviado",
    EstadoPedidoEnum.ENTREGADO: "Entregado",
    EstadoPedidoEnum.CANCELADO: "Cancelado",
}
