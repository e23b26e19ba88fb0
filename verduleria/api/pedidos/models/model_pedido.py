# verduleria/api/pedidos/models/model_pedido.py
from decimal import Decimal

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship

from verduleria.database.db_connection import Base
from verduleria.utils.database_utils import now_trimmed


class PedidoModel(Base):
    __tablename__ = "pedidos"
    __table_args__ = (
        Index("idx_pedidos_cliente", "cliente_id"),
        Index("idx_pedidos_estado", "estado"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    fecha_creacion = Column(DateTime, default=now_trimmed, nullable=False)

    cliente_id = Column(Integer, ForeignKey("clientes.id", ondelete="RESTRICT"), nullable=False)
    cliente = relationship("ClienteModel", lazy="select")

    # PENDIENTE, EN_PREPARACION, ENVIADO, ENTREGADO, CANCELADO
    estado = Column(String(20), nullable=False, default="PENDIENTE")
    remito_generado = Column(Boolean, nullable=False, default=False)
    monto_total = Column(Numeric(12, 2), nullable=False)

    detalles = relationship(
        "DetallePedidoModel",
        back_populates="pedido",
        cascade="all, delete-orphan",
        order_by="DetallePedidoModel.id",
    )


class DetallePedidoModel(Base):
    __tablename__ = "detalle_pedido"
    __table_args__ = (
        CheckConstraint(
            "(CASE WHEN producto_id IS NOT NULL THEN 1 ELSE 0 END + "
            "CASE WHEN nombre_personalizado IS NOT NULL THEN 1 ELSE 0 END) = 1",
            name="ck_detalle_pedido_producto_o_nombre",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)

    pedido_id = Column(Integer, ForeignKey("pedidos.id", ondelete="CASCADE"), nullable=False)
    pedido = relationship("PedidoModel", back_populates="detalles")

    # Producto del catálogo o, en su defecto, un nombre cargado a mano
    producto_id = Column(Integer, ForeignKey("productos.id", ondelete="RESTRICT"), nullable=True)
    producto = relationship("ProductoModel", lazy="select")
    nombre_personalizado = Column(String(120), nullable=True)

    cantidad = Column(Numeric(12, 2), nullable=False)
    precio_unitario = Column(Numeric(12, 2), nullable=False)

    @property
    def subtotal(self) -> Decimal:
        if self.cantidad is None or self.precio_unitario is None:
            return Decimal("0")
        return (Decimal(self.cantidad) * Decimal(self.precio_unitario)).quantize(Decimal("0.01"))
