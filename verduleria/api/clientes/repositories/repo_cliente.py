from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from verduleria.api.clientes.models.model_cliente import ClienteModel
from verduleria.utils.search_spec import build_filtro

CAMPOS_BUSQUEDA = {
    "id": ClienteModel.id,
    "razonSocial": ClienteModel.razon_social,
    "cuitDni": ClienteModel.cuit_dni,
    "telefono": ClienteModel.telefono,
    "direccion": ClienteModel.direccion,
    "email": ClienteModel.email,
}


class ClienteRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, id: int) -> Optional[ClienteModel]:
        return self.db.query(ClienteModel).filter(ClienteModel.id == id).first()

    def get_by_cuit_dni(self, cuit_dni: str) -> Optional[ClienteModel]:
        return self.db.query(ClienteModel).filter_by(cuit_dni=cuit_dni).first()

    def list(self, search: Optional[str] = None) -> List[ClienteModel]:
        stmt = select(ClienteModel)
        filtro = build_filtro(search, CAMPOS_BUSQUEDA)
        if filtro is not None:
            stmt = stmt.where(filtro)
        stmt = stmt.order_by(ClienteModel.id)
        return self.db.execute(stmt).scalars().all()

    def create(self, **data) -> ClienteModel:
        obj = ClienteModel(**data)
        self.db.add(obj)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(obj)
        return obj

    def update(self, db_obj: ClienteModel, **data) -> ClienteModel:
        for k, v in data.items():
            setattr(db_obj, k, v)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(db_obj)
        return db_obj

    def delete(self, db_obj: ClienteModel) -> None:
        self.db.delete(db_obj)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
