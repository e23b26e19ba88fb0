from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from verduleria.api.productos.models.model_producto import ProductoModel
from verduleria.utils.search_spec import build_filtro

CAMPOS_BUSQUEDA = {
    "id": ProductoModel.id,
    "nombre": ProductoModel.nombre,
    "unidadMedida": ProductoModel.unidad_medida,
    "precioVenta": ProductoModel.precio_venta,
}


class ProductoRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, id: int) -> Optional[ProductoModel]:
        return self.db.query(ProductoModel).filter(ProductoModel.id == id).first()

    def list(self, search: Optional[str] = None) -> List[ProductoModel]:
        stmt = select(ProductoModel)
        filtro = build_filtro(search, CAMPOS_BUSQUEDA)
        if filtro is not None:
            stmt = stmt.where(filtro)
        stmt = stmt.order_by(ProductoModel.id)
        return self.db.execute(stmt).scalars().all()

    def create(self, **data) -> ProductoModel:
        obj = ProductoModel(**data)
        self.db.add(obj)
        self._commit()
        self.db.refresh(obj)
        return obj

    def update(self, db_obj: ProductoModel, **data) -> ProductoModel:
        for k, v in data.items():
            setattr(db_obj, k, v)
        self._commit()
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: ProductoModel) -> None:
        self.db.delete(db_obj)
        self._commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
