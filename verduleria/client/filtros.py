"""
Búsqueda en memoria y paginación de las páginas de listado.

Cada página carga la colección completa y filtra por substring en
minúsculas sobre un conjunto fijo de campos.
"""
from dataclasses import dataclass
from decimal import Decimal
from math import ceil
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, TypeVar

from verduleria.api.clientes.schemas.schema_cliente import ClienteOut
from verduleria.api.pedidos.schemas.schema_pedido import PedidoOut
from verduleria.api.productos.schemas.schema_producto import ProductoOut
from verduleria.api.remitos.schemas.schema_remito import RemitoOut
from verduleria.api.shared.schemas import ESTADO_PEDIDO_LABELS, EstadoPedidoEnum

T = TypeVar("T")

TAMANO_PAGINA = 5

TAB_TODOS = "todos"
TAB_PENDIENTES = "pendientes"
TAB_ENTREGADOS = "entregados"

TABS_PEDIDOS: Dict[str, Optional[frozenset]] = {
    TAB_TODOS: None,
    TAB_PENDIENTES: frozenset({EstadoPedidoEnum.PENDIENTE, EstadoPedidoEnum.EN_PREPARACION}),
    TAB_ENTREGADOS: frozenset({EstadoPedidoEnum.ENVIADO, EstadoPedidoEnum.ENTREGADO}),
}


def _texto(valor) -> str:
    if valor is None:
        return ""
    if isinstance(valor, Decimal):
        # 1500.00 tiene que coincidir con "1500.00" y con "1500"
        return f"{valor} {valor.normalize():f}".lower()
    return str(valor).lower()


def coincide(search: Optional[str], *campos) -> bool:
    termino = (search or "").strip().lower()
    if not termino:
        return True
    return any(termino in _texto(c) for c in campos)


def filtrar_productos(productos: Iterable[ProductoOut], search: Optional[str]) -> List[ProductoOut]:
    return [p for p in productos if coincide(search, p.nombre, p.unidad_medida)]


def filtrar_clientes(clientes: Iterable[ClienteOut], search: Optional[str]) -> List[ClienteOut]:
    return [
        c for c in clientes
        if coincide(search, c.razon_social, c.cuit_dni, c.telefono, c.email, c.direccion)
    ]


def en_tab(pedido: PedidoOut, tab: str) -> bool:
    if tab not in TABS_PEDIDOS:
        raise ValueError(f"Tab desconocido: {tab}")
    estados = TABS_PEDIDOS[tab]
    return estados is None or EstadoPedidoEnum(pedido.estado) in estados


def filtrar_pedidos(
    pedidos: Iterable[PedidoOut],
    clientes: Mapping[int, ClienteOut],
    search: Optional[str],
    tab: str = TAB_TODOS,
) -> List[PedidoOut]:
    resultado = []
    for pedido in pedidos:
        if not en_tab(pedido, tab):
            continue
        cliente = clientes.get(pedido.cliente_id)
        if coincide(
            search,
            pedido.id,
            cliente.razon_social if cliente else None,
            pedido.monto_total,
            ESTADO_PEDIDO_LABELS[EstadoPedidoEnum(pedido.estado)],
        ):
            resultado.append(pedido)
    return resultado


def contar_tabs(pedidos: Sequence[PedidoOut]) -> Dict[str, int]:
    return {tab: sum(1 for p in pedidos if en_tab(p, tab)) for tab in TABS_PEDIDOS}


def filtrar_remitos(
    remitos: Iterable[RemitoOut],
    pedidos: Mapping[int, PedidoOut],
    clientes: Mapping[int, ClienteOut],
    search: Optional[str],
) -> List[RemitoOut]:
    resultado = []
    for remito in remitos:
        pedido = pedidos.get(remito.pedido_id)
        cliente = clientes.get(pedido.cliente_id) if pedido else None
        if coincide(
            search,
            remito.numero_remito,
            remito.pedido_id,
            cliente.razon_social if cliente else None,
            remito.valor_total,
        ):
            resultado.append(remito)
    return resultado


@dataclass
class Pagina:
    items: list
    numero: int
    total_paginas: int
    total_items: int

    @property
    def tiene_anterior(self) -> bool:
        return self.numero > 1

    @property
    def tiene_siguiente(self) -> bool:
        return self.numero < self.total_paginas


def paginar(items: Sequence[T], numero: int = 1, tamano: int = TAMANO_PAGINA) -> Pagina:
    """
    Página ``numero`` (desde 1). Un número fuera de rango se lleva al
    rango válido; una colección vacía tiene una sola página vacía.
    """
    if tamano < 1:
        raise ValueError("El tamaño de página debe ser mayor a 0")
    total_paginas = max(1, ceil(len(items) / tamano))
    numero = min(max(numero, 1), total_paginas)
    inicio = (numero - 1) * tamano
    return Pagina(
        items=list(items[inicio:inicio + tamano]),
        numero=numero,
        total_paginas=total_paginas,
        total_items=len(items),
    )
