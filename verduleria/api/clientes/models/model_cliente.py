from sqlalchemy import Column, Integer, String, Index

from verduleria.database.db_connection import Base


class ClienteModel(Base):
    __tablename__ = "clientes"
    __table_args__ = (
        Index("idx_clientes_razon_social", "razon_social"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    razon_social = Column(String(150), nullable=False)
    cuit_dni = Column(String(20), nullable=False, unique=True)
    telefono = Column(String(30), nullable=True)
    direccion = Column(String(200), nullable=False)
    email = Column(String(120), nullable=True)
