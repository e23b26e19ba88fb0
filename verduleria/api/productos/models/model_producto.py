from sqlalchemy import CheckConstraint, Column, Integer, String, Numeric

from verduleria.database.db_connection import Base


class ProductoModel(Base):
    __tablename__ = "productos"
    __table_args__ = (
        CheckConstraint("precio_venta >= 0.01", name="ck_productos_precio_venta_positivo"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    nombre = Column(String(120), nullable=False)
    unidad_medida = Column(String(30), nullable=False)  # kg, unidad, atado...
    precio_venta = Column(Numeric(12, 2), nullable=False)
