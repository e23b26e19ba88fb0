from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, Integer, Numeric
from sqlalchemy.orm import relationship

from verduleria.database.db_connection import Base
from verduleria.utils.database_utils import now_trimmed


class RemitoModel(Base):
    __tablename__ = "remitos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    numero_remito = Column(BigInteger, nullable=False)

    # Un remito por pedido
    pedido_id = Column(Integer, ForeignKey("pedidos.id", ondelete="RESTRICT"), nullable=False, unique=True)
    pedido = relationship("PedidoModel", lazy="select")

    valor_total = Column(Numeric(12, 2), nullable=False)
    fecha_emision = Column(DateTime, default=now_trimmed, nullable=False)
