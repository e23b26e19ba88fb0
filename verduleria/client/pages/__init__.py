from verduleria.client.pages.base import FormularioInvalidoError
from verduleria.client.pages.clientes import PaginaClientes
from verduleria.client.pages.dashboard import Dashboard
from verduleria.client.pages.estadisticas import PaginaEstadisticas, Periodo
from verduleria.client.pages.nuevo_pedido import NuevoPedido
from verduleria.client.pages.pedidos import PaginaPedidos
from verduleria.client.pages.productos import PaginaProductos
from verduleria.client.pages.remitos import PaginaRemitos

__all__ = [
    "FormularioInvalidoError",
    "PaginaClientes",
    "Dashboard",
    "PaginaEstadisticas",
    "Periodo",
    "NuevoPedido",
    "PaginaPedidos",
    "PaginaProductos",
    "PaginaRemitos",
]
