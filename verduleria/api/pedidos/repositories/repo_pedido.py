from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from verduleria.api.pedidos.models.model_pedido import PedidoModel, DetallePedidoModel
from verduleria.utils.search_spec import build_filtro

CAMPOS_BUSQUEDA = {
    "id": PedidoModel.id,
    "clienteId": PedidoModel.cliente_id,
    "estado": PedidoModel.estado,
    "remitoGenerado": PedidoModel.remito_generado,
    "montoTotal": PedidoModel.monto_total,
}


class PedidoRepository:
    def __init__(self, db: Session):
        self.db = db

    # -------- Pedido --------
    def get(self, pedido_id: int) -> Optional[PedidoModel]:
        return (
            self.db.query(PedidoModel)
            .options(selectinload(PedidoModel.detalles))
            .filter(PedidoModel.id == pedido_id)
            .first()
        )

    def list(self, search: Optional[str] = None) -> List[PedidoModel]:
        stmt = select(PedidoModel).options(selectinload(PedidoModel.detalles))
        filtro = build_filtro(search, CAMPOS_BUSQUEDA)
        if filtro is not None:
            stmt = stmt.where(filtro)
        stmt = stmt.order_by(PedidoModel.id)
        return self.db.execute(stmt).scalars().all()

    def create(self, detalles: List[dict], **data) -> PedidoModel:
        pedido = PedidoModel(**data)
        pedido.detalles = [DetallePedidoModel(**d) for d in detalles]
        self.db.add(pedido)
        self._commit()
        self.db.refresh(pedido)
        return pedido

    def update(self, pedido: PedidoModel, **data) -> PedidoModel:
        for k, v in data.items():
            setattr(pedido, k, v)
        self._commit()
        self.db.refresh(pedido)
        return pedido

    def delete(self, pedido: PedidoModel) -> None:
        self.db.delete(pedido)
        self._commit()

    # -------- Detalles --------
    def get_detalle(self, detalle_id: int) -> Optional[DetallePedidoModel]:
        return self.db.query(DetallePedidoModel).filter(DetallePedidoModel.id == detalle_id).first()

    def list_detalles(self, pedido_id: Optional[int] = None) -> List[DetallePedidoModel]:
        query = self.db.query(DetallePedidoModel)
        if pedido_id is not None:
            query = query.filter(DetallePedidoModel.pedido_id == pedido_id)
        return query.order_by(DetallePedidoModel.id).all()

    def add_detalle(self, **data) -> DetallePedidoModel:
        detalle = DetallePedidoModel(**data)
        self.db.add(detalle)
        self._commit()
        self.db.refresh(detalle)
        return detalle

    def update_detalle(self, detalle: DetallePedidoModel, **data) -> DetallePedidoModel:
        for k, v in data.items():
            setattr(detalle, k, v)
        self._commit()
        self.db.refresh(detalle)
        return detalle

    def delete_detalle(self, detalle: DetallePedidoModel) -> None:
        self.db.delete(detalle)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
