"""Create productos, clientes, pedidos, detalle_pedido and remitos tables

Revision ID: 20261019_create_verduleria_tables
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261019_create_verduleria_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "productos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("nombre", sa.String(120), nullable=False),
        sa.Column("unidad_medida", sa.String(30), nullable=False),
        sa.Column("precio_venta", sa.Numeric(12, 2), nullable=False),
        sa.CheckConstraint("precio_venta >= 0.01", name="ck_productos_precio_venta_positivo"),
    )

    op.create_table(
        "clientes",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("razon_social", sa.String(150), nullable=False),
        sa.Column("cuit_dni", sa.String(20), nullable=False, unique=True),
        sa.Column("telefono", sa.String(30), nullable=True),
        sa.Column("direccion", sa.String(200), nullable=False),
        sa.Column("email", sa.String(120), nullable=True),
    )
    op.create_index("idx_clientes_razon_social", "clientes", ["razon_social"])

    op.create_table(
        "pedidos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("fecha_creacion", sa.DateTime, nullable=False),
        sa.Column("cliente_id", sa.Integer, sa.ForeignKey("clientes.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("estado", sa.String(20), nullable=False, server_default="PENDIENTE"),
        sa.Column("remito_generado", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("monto_total", sa.Numeric(12, 2), nullable=False),
    )
    op.create_index("idx_pedidos_cliente", "pedidos", ["cliente_id"])
    op.create_index("idx_pedidos_estado", "pedidos", ["estado"])

    # Línea de pedido: producto del catálogo o nombre personalizado (exactamente uno)
    op.create_table(
        "detalle_pedido",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("pedido_id", sa.Integer, sa.ForeignKey("pedidos.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("producto_id", sa.Integer, sa.ForeignKey("productos.id", ondelete="RESTRICT"), nullable=True, index=True),
        sa.Column("nombre_personalizado", sa.String(120), nullable=True),
        sa.Column("cantidad", sa.Numeric(12, 2), nullable=False),
        sa.Column("precio_unitario", sa.Numeric(12, 2), nullable=False),
        sa.CheckConstraint(
            "(CASE WHEN producto_id IS NOT NULL THEN 1 ELSE 0 END + "
            "CASE WHEN nombre_personalizado IS NOT NULL THEN 1 ELSE 0 END) = 1",
            name="ck_detalle_pedido_producto_o_nombre",
        ),
    )

    op.create_table(
        "remitos",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("numero_remito", sa.BigInteger, nullable=False),
        sa.Column("pedido_id", sa.Integer, sa.ForeignKey("pedidos.id", ondelete="RESTRICT"), nullable=False, unique=True),
        sa.Column("valor_total", sa.Numeric(12, 2), nullable=False),
        sa.Column("fecha_emision", sa.DateTime, nullable=False),
    )


def downgrade() -> None:
    op.drop_table("remitos")
    op.drop_table("detalle_pedido")
    op.drop_index("idx_pedidos_estado", table_name="pedidos")
    op.drop_index("idx_pedidos_cliente", table_name="pedidos")
    op.drop_table("pedidos")
    op.drop_index("idx_clientes_razon_social", table_name="clientes")
    op.drop_table("clientes")
    op.drop_table("productos")
