from verduleria.database.db_connection import engine, Base
from verduleria.utils.logger import logger

# Importar los models garantiza que queden registrados en Base.metadata
from verduleria.api.productos.models.model_producto import ProductoModel  # noqa: F401
from verduleria.api.clientes.models.model_cliente import ClienteModel  # noqa: F401
from verduleria.api.pedidos.models.model_pedido import PedidoModel, DetallePedidoModel  # noqa: F401
from verduleria.api.remitos.models.model_remito import RemitoModel  # noqa: F401


def crear_tablas():
    """Crea las tablas que falten (no altera las existentes)."""
    Base.metadata.create_all(bind=engine)


def inicializar_base():
    try:
        crear_tablas()
        logger.info("[DB] Tablas verificadas/creadas correctamente.")
    except Exception as e:
        logger.error(f"[DB] Error al inicializar la base: {e}")
        raise


if __name__ == "__main__":
    inicializar_base()
