"""
Flujo de estados de un pedido (página Pedidos).

    PENDIENTE      -> EN_PREPARACION | CANCELADO
    EN_PREPARACION -> ENVIADO | CANCELADO
    ENVIADO        -> ENTREGADO | CANCELADO
    ENTREGADO, CANCELADO: terminales

Pasar a ENVIADO emite el remito si el pedido no tiene uno; cancelar
borra el remito existente. Las transiciones inválidas se rechazan acá,
sin llamar a la API.
"""
from time import time
from typing import Callable, Dict, FrozenSet, List, Optional

from verduleria.api.pedidos.schemas.schema_pedido import PedidoOut, PedidoUpdate
from verduleria.api.remitos.schemas.schema_remito import RemitoIn, RemitoOut
from verduleria.api.shared.schemas import ESTADO_PEDIDO_LABELS, EstadoPedidoEnum
from verduleria.client.services import Servicios
from verduleria.utils.database_utils import now_trimmed
from verduleria.utils.logger import logger

E = EstadoPedidoEnum

TRANSICIONES: Dict[EstadoPedidoEnum, FrozenSet[EstadoPedidoEnum]] = {
    E.PENDIENTE: frozenset({E.EN_PREPARACION, E.CANCELADO}),
    E.EN_PREPARACION: frozenset({E.ENVIADO, E.CANCELADO}),
    E.ENVIADO: frozenset({E.ENTREGADO, E.CANCELADO}),
    E.ENTREGADO: frozenset(),
    E.CANCELADO: frozenset(),
}


class TransicionInvalidaError(Exception):
    pass


def puede_transicionar(actual, nuevo) -> bool:
    return E(nuevo) in TRANSICIONES[E(actual)]


def estados_siguientes(actual) -> List[EstadoPedidoEnum]:
    return sorted(TRANSICIONES[E(actual)], key=lambda e: list(E).index(e))


def numero_remito_por_reloj() -> int:
    """Número de remito = epoch en milisegundos."""
    return int(time() * 1000)


class PedidoWorkflow:
    def __init__(
        self,
        servicios: Servicios,
        reloj: Callable = now_trimmed,
        numerador: Callable[[], int] = numero_remito_por_reloj,
    ):
        self.servicios = servicios
        self.reloj = reloj
        self.numerador = numerador

    def cambiar_estado(
        self,
        pedido: PedidoOut,
        nuevo,
        remitos: Optional[List[RemitoOut]] = None,
    ) -> PedidoOut:
        """
        Aplica la transición y sus efectos sobre el remito.

        ``remitos`` es la colección ya cargada por la página; si no se
        pasa se consulta la API por el remito del pedido.
        """
        actual, nuevo = E(pedido.estado), E(nuevo)
        if not puede_transicionar(actual, nuevo):
            raise TransicionInvalidaError(
                f"No se puede cambiar el pedido #{pedido.id} de "
                f"'{ESTADO_PEDIDO_LABELS[actual]}' a '{ESTADO_PEDIDO_LABELS[nuevo]}'"
            )

        remito_generado = pedido.remito_generado
        remito_a_anular = None
        if nuevo is E.ENVIADO:
            if self.buscar_remito(pedido.id, remitos) is None:
                self._emitir_remito(pedido)
            remito_generado = True
        elif nuevo is E.CANCELADO:
            remito_a_anular = self.buscar_remito(pedido.id, remitos)
            remito_generado = False

        actualizado = self.servicios.pedidos.update(
            pedido.id, PedidoUpdate(estado=nuevo, remito_generado=remito_generado)
        )
        logger.info(f"[Workflow] Pedido {pedido.id}: {actual.value} -> {nuevo.value}")

        # el remito se borra recién con el pedido ya cancelado
        if remito_a_anular is not None:
            self.servicios.remitos.delete(remito_a_anular.id)
            logger.info(
                f"[Workflow] Remito {remito_a_anular.numero_remito} anulado por cancelación del pedido {pedido.id}"
            )
        return actualizado

    def generar_remito(self, pedido: PedidoOut, remitos: Optional[List[RemitoOut]] = None) -> RemitoOut:
        """Emite el remito de un pedido que todavía no lo tiene."""
        if E(pedido.estado) is E.CANCELADO:
            raise TransicionInvalidaError(f"El pedido #{pedido.id} está cancelado")
        if self.buscar_remito(pedido.id, remitos) is not None:
            raise TransicionInvalidaError(f"El pedido #{pedido.id} ya tiene remito")
        remito = self._emitir_remito(pedido)
        self.servicios.pedidos.update(pedido.id, PedidoUpdate(remito_generado=True))
        return remito

    def buscar_remito(self, pedido_id: int, remitos: Optional[List[RemitoOut]] = None) -> Optional[RemitoOut]:
        if remitos is None:
            remitos = self.servicios.remitos.get_all(search=f"pedidoId:{pedido_id}")
        return next((r for r in remitos if r.pedido_id == pedido_id), None)

    def _emitir_remito(self, pedido: PedidoOut) -> RemitoOut:
        remito = self.servicios.remitos.create(
            RemitoIn(
                numero_remito=self.numerador(),
                pedido_id=pedido.id,
                valor_total=pedido.monto_total,
                fecha_emision=self.reloj(),
            )
        )
        logger.info(f"[Workflow] Remito {remito.numero_remito} emitido para pedido {pedido.id}")
        return remito
