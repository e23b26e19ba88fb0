from decimal import Decimal
from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from verduleria.api.clientes.repositories.repo_cliente import ClienteRepository
from verduleria.api.pedidos.repositories.repo_pedido import PedidoRepository
from verduleria.api.pedidos.schemas.schema_pedido import (
    DetallePedidoCreate,
    DetallePedidoIn,
    DetallePedidoOut,
    PedidoIn,
    PedidoOut,
    PedidoUpdate,
)
from verduleria.api.productos.repositories.repo_producto import ProductoRepository
from verduleria.utils.database_utils import now_trimmed
from verduleria.utils.logger import logger

CENTAVOS = Decimal("0.01")


class PedidoService:
    def __init__(self, db: Session):
        self.repo = PedidoRepository(db)
        self.repo_cliente = ClienteRepository(db)
        self.repo_producto = ProductoRepository(db)

    # ───────────────────────── Pedidos ─────────────────────────
    def listar(self, search: Optional[str] = None) -> List[PedidoOut]:
        return [PedidoOut.model_validate(p) for p in self.repo.list(search)]

    def get(self, pedido_id: int) -> PedidoOut:
        return PedidoOut.model_validate(self._get_or_404(pedido_id))

    def crear(self, payload: PedidoIn) -> PedidoOut:
        if not self.repo_cliente.get_by_id(payload.cliente_id):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Cliente {payload.cliente_id} inexistente")
        for d in payload.detalles:
            self._validar_producto(d)

        monto = payload.monto_total
        if monto is None:
            monto = sum((d.subtotal for d in payload.detalles), Decimal("0")).quantize(CENTAVOS)
            if monto < CENTAVOS:
                raise HTTPException(
                    status.HTTP_400_BAD_REQUEST,
                    "El monto total debe ser mayor a 0 (agregue al menos una línea)",
                )

        pedido = self.repo.create(
            detalles=[d.model_dump() for d in payload.detalles],
            cliente_id=payload.cliente_id,
            fecha_creacion=payload.fecha_creacion or now_trimmed(),
            estado=payload.estado.value,
            remito_generado=payload.remito_generado,
            monto_total=monto,
        )
        logger.info(
            f"[Pedidos] Pedido creado id={pedido.id} cliente={pedido.cliente_id} "
            f"lineas={len(pedido.detalles)} total={pedido.monto_total}"
        )
        return PedidoOut.model_validate(pedido)

    def actualizar(self, pedido_id: int, payload: PedidoUpdate) -> PedidoOut:
        pedido = self._get_or_404(pedido_id)
        cambios = payload.model_dump(exclude_none=True)
        if "estado" in cambios:
            cambios["estado"] = payload.estado.value
        estado_anterior = pedido.estado
        pedido = self.repo.update(pedido, **cambios)
        if pedido.estado != estado_anterior:
            logger.info(f"[Pedidos] Pedido {pedido_id}: {estado_anterior} -> {pedido.estado}")
        return PedidoOut.model_validate(pedido)

    def eliminar(self, pedido_id: int) -> None:
        pedido = self.repo.get(pedido_id)
        if not pedido:
            raise HTTPException(
                status.HTTP_404_NOT_FOUND,
                f"Pedido con ID {pedido_id} no encontrado para eliminar.",
            )
        self.repo.delete(pedido)
        logger.info(f"[Pedidos] Pedido eliminado id={pedido_id}")

    # ───────────────────────── Detalles ─────────────────────────
    def listar_detalles(self, pedido_id: Optional[int] = None) -> List[DetallePedidoOut]:
        return [DetallePedidoOut.model_validate(d) for d in self.repo.list_detalles(pedido_id)]

    def get_detalle(self, detalle_id: int) -> DetallePedidoOut:
        return DetallePedidoOut.model_validate(self._get_detalle_or_404(detalle_id))

    def crear_detalle(self, payload: DetallePedidoCreate) -> DetallePedidoOut:
        self._get_or_404(payload.pedido_id)
        self._validar_producto(payload)
        detalle = self.repo.add_detalle(**payload.model_dump())
        logger.info(f"[Pedidos] Detalle {detalle.id} agregado al pedido {detalle.pedido_id}")
        return DetallePedidoOut.model_validate(detalle)

    def actualizar_detalle(self, detalle_id: int, payload: DetallePedidoIn) -> DetallePedidoOut:
        detalle = self._get_detalle_or_404(detalle_id)
        self._validar_producto(payload)
        detalle = self.repo.update_detalle(detalle, **payload.model_dump())
        return DetallePedidoOut.model_validate(detalle)

    def eliminar_detalle(self, detalle_id: int) -> None:
        detalle = self.repo.get_detalle(detalle_id)
        if not detalle:
            raise HTTPException(
                status.HTTP_404_NOT_FOUND,
                f"Detalle con ID {detalle_id} no encontrado para eliminar.",
            )
        self.repo.delete_detalle(detalle)

    # ───────────────────────── Helpers ─────────────────────────
    def _validar_producto(self, detalle: DetallePedidoIn) -> None:
        if detalle.producto_id is not None and not self.repo_producto.get_by_id(detalle.producto_id):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Producto {detalle.producto_id} inexistente")

    def _get_or_404(self, pedido_id: int):
        pedido = self.repo.get(pedido_id)
        if not pedido:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Pedido no encontrado")
        return pedido

    def _get_detalle_or_404(self, detalle_id: int):
        detalle = self.repo.get_detalle(detalle_id)
        if not detalle:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Detalle de pedido no encontrado")
        return detalle
