from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from verduleria.api.remitos.models.model_remito import RemitoModel
from verduleria.utils.search_spec import build_filtro

CAMPOS_BUSQUEDA = {
    "id": RemitoModel.id,
    "numeroRemito": RemitoModel.numero_remito,
    "pedidoId": RemitoModel.pedido_id,
    "valorTotal": RemitoModel.valor_total,
}


class RemitoRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, id: int) -> Optional[RemitoModel]:
        return self.db.query(RemitoModel).filter(RemitoModel.id == id).first()

    def get_by_pedido_id(self, pedido_id: int) -> Optional[RemitoModel]:
        return self.db.query(RemitoModel).filter(RemitoModel.pedido_id == pedido_id).first()

    def list(self, search: Optional[str] = None) -> List[RemitoModel]:
        stmt = select(RemitoModel)
        filtro = build_filtro(search, CAMPOS_BUSQUEDA)
        if filtro is not None:
            stmt = stmt.where(filtro)
        stmt = stmt.order_by(RemitoModel.id)
        return self.db.execute(stmt).scalars().all()

    def create(self, **data) -> RemitoModel:
        obj = RemitoModel(**data)
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(obj)
        return obj

    def update(self, db_obj: RemitoModel, **data) -> RemitoModel:
        for k, v in data.items():
            setattr(db_obj, k, v)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: RemitoModel) -> None:
        self.db.delete(db_obj)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
