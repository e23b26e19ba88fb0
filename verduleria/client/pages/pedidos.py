from typing import Dict, List, Optional

from verduleria.api.clientes.schemas.schema_cliente import ClienteOut
from verduleria.api.pedidos.schemas.schema_pedido import PedidoOut
from verduleria.api.remitos.schemas.schema_remito import RemitoOut
from verduleria.api.shared.schemas import ESTADO_PEDIDO_LABELS, EstadoPedidoEnum
from verduleria.client.filtros import (
    TAB_TODOS,
    TABS_PEDIDOS,
    TAMANO_PAGINA,
    Pagina,
    contar_tabs,
    filtrar_pedidos,
    paginar,
)
from verduleria.client.http_client import ApiError
from verduleria.client.pages.base import Confirmacion, PaginaBase
from verduleria.client.workflow import PedidoWorkflow, TransicionInvalidaError, estados_siguientes


class PaginaPedidos(PaginaBase):
    """
    Listado de pedidos con tabs (todos / pendientes / entregados), búsqueda,
    paginación de a 5 y cambio de estado.
    """

    def __init__(self, servicios, notificador=None, workflow: Optional[PedidoWorkflow] = None):
        super().__init__(servicios, notificador)
        self.workflow = workflow or PedidoWorkflow(servicios)
        self.pedidos: List[PedidoOut] = []
        self.clientes: Dict[int, ClienteOut] = {}
        self.remitos: List[RemitoOut] = []
        self.search = ""
        self.tab = TAB_TODOS
        self.pagina = 1

    def cargar(self) -> bool:
        try:
            self.pedidos = self.servicios.pedidos.get_all()
            self.clientes = {c.id: c for c in self.servicios.clientes.get_all()}
            self.remitos = self.servicios.remitos.get_all()
        except ApiError as e:
            self.notificador.error("Error", f"No se pudieron cargar los pedidos: {e.mensaje}")
            return False
        return True

    # ── vista ──
    def buscar(self, texto: str) -> Pagina:
        self.search = texto
        self.pagina = 1
        return self.vista()

    def cambiar_tab(self, tab: str) -> Pagina:
        if tab not in TABS_PEDIDOS:
            raise ValueError(f"Tab desconocido: {tab}")
        self.tab = tab
        self.pagina = 1
        return self.vista()

    def ir_a_pagina(self, numero: int) -> Pagina:
        pagina = paginar(self.filtrados, numero, TAMANO_PAGINA)
        self.pagina = pagina.numero
        return pagina

    @property
    def filtrados(self) -> List[PedidoOut]:
        return filtrar_pedidos(self.pedidos, self.clientes, self.search, self.tab)

    @property
    def tabs(self) -> Dict[str, int]:
        return contar_tabs(self.pedidos)

    def vista(self) -> Pagina:
        return paginar(self.filtrados, self.pagina, TAMANO_PAGINA)

    def nombre_cliente(self, pedido: PedidoOut) -> str:
        cliente = self.clientes.get(pedido.cliente_id)
        return cliente.razon_social if cliente else f"Cliente #{pedido.cliente_id}"

    @staticmethod
    def etiqueta_estado(pedido: PedidoOut) -> str:
        return ESTADO_PEDIDO_LABELS[EstadoPedidoEnum(pedido.estado)]

    @staticmethod
    def opciones_estado(pedido: PedidoOut) -> List[EstadoPedidoEnum]:
        return estados_siguientes(pedido.estado)

    # ── acciones ──
    def cambiar_estado(self, pedido: PedidoOut, nuevo) -> Optional[PedidoOut]:
        try:
            actualizado = self.workflow.cambiar_estado(pedido, nuevo, self.remitos)
        except TransicionInvalidaError as e:
            self.notificador.error("Cambio de estado no permitido", str(e))
            return None
        except ApiError as e:
            self._error_api("Error al cambiar el estado", e)
            return None
        self.notificador.exito(
            "Estado actualizado",
            f"Pedido #{pedido.id}: {ESTADO_PEDIDO_LABELS[EstadoPedidoEnum(nuevo)]}",
        )
        self.cargar()
        return actualizado

    def generar_remito(self, pedido: PedidoOut) -> Optional[RemitoOut]:
        try:
            remito = self.workflow.generar_remito(pedido, self.remitos)
        except TransicionInvalidaError as e:
            self.notificador.advertencia("No se generó el remito", str(e))
            return None
        except ApiError as e:
            self._error_api("No se pudo generar el remito", e)
            return None
        self.notificador.exito("Remito generado", f"Remito #{remito.numero_remito} creado exitosamente")
        self.cargar()
        return remito

    def eliminar(self, pedido: PedidoOut, confirmar: Optional[Confirmacion] = None) -> bool:
        if confirmar and not confirmar(f"¿Eliminar el pedido #{pedido.id}?"):
            return False
        try:
            self.servicios.pedidos.delete(pedido.id)
        except ApiError as e:
            self._error_api("No se puede eliminar el pedido", e, f"El pedido #{pedido.id} tiene un remito emitido")
            return False
        self.notificador.exito("Pedido eliminado", f"Pedido #{pedido.id}")
        self.cargar()
        return True
