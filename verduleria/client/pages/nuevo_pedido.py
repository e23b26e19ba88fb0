from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional, Union

from verduleria.api.clientes.schemas.schema_cliente import ClienteOut
from verduleria.api.pedidos.schemas.schema_pedido import PedidoIn, PedidoOut
from verduleria.api.productos.schemas.schema_producto import ProductoOut
from verduleria.api.shared.schemas import EstadoPedidoEnum
from verduleria.client.formatters import fecha_hora_local, formatear_moneda
from verduleria.client.http_client import ApiError
from verduleria.client.pages.base import FormularioInvalidoError, PaginaBase, validar_formulario

Numero = Union[Decimal, int, float, str]

CENTAVOS = Decimal("0.01")
LARGO_NOMBRE_PERSONALIZADO = 120


@dataclass
class LineaPedido:
    cantidad: Decimal
    precio_unitario: Decimal
    producto_id: Optional[int] = None
    nombre_personalizado: Optional[str] = None

    @property
    def subtotal(self) -> Decimal:
        return (self.cantidad * self.precio_unitario).quantize(CENTAVOS)


def _decimal(valor: Numero, campo: str) -> Decimal:
    try:
        numero = Decimal(str(valor))
    except ArithmeticError:
        raise FormularioInvalidoError({campo: "Debe ser un número"})
    if not numero.is_finite() or numero < CENTAVOS:
        raise FormularioInvalidoError({campo: "Debe ser mayor o igual a 0.01"})
    return numero


class NuevoPedido(PaginaBase):
    """
    Armado de un pedido: cliente, líneas del catálogo o personalizadas,
    total acumulado. Se crea siempre como PENDIENTE.
    """

    def __init__(self, servicios, notificador=None):
        super().__init__(servicios, notificador)
        self.clientes: List[ClienteOut] = []
        self.productos: Dict[int, ProductoOut] = {}
        self.cliente_id: Optional[int] = None
        self.lineas: List[LineaPedido] = []

    def cargar(self) -> bool:
        try:
            self.clientes = self.servicios.clientes.get_all()
            self.productos = {p.id: p for p in self.servicios.productos.get_all()}
        except ApiError as e:
            self.notificador.error("Error", f"No se pudieron cargar clientes y productos: {e.mensaje}")
            return False
        return True

    def seleccionar_cliente(self, cliente_id: int) -> None:
        if not any(c.id == cliente_id for c in self.clientes):
            raise FormularioInvalidoError({"clienteId": f"Cliente {cliente_id} inexistente"})
        self.cliente_id = cliente_id

    def agregar_producto(self, producto_id: int, cantidad: Numero = 1) -> LineaPedido:
        producto = self.productos.get(producto_id)
        if producto is None:
            raise FormularioInvalidoError({"productoId": f"Producto {producto_id} inexistente"})
        linea = LineaPedido(
            cantidad=_decimal(cantidad, "cantidad"),
            precio_unitario=producto.precio_venta,
            producto_id=producto.id,
        )
        self.lineas.append(linea)
        return linea

    def agregar_personalizado(self, nombre: str, precio_unitario: Numero, cantidad: Numero = 1) -> LineaPedido:
        nombre = (nombre or "").strip()
        if not nombre:
            raise FormularioInvalidoError({"nombrePersonalizado": "Ingrese un nombre"})
        if len(nombre) > LARGO_NOMBRE_PERSONALIZADO:
            raise FormularioInvalidoError(
                {"nombrePersonalizado": f"Máximo {LARGO_NOMBRE_PERSONALIZADO} caracteres"}
            )
        linea = LineaPedido(
            cantidad=_decimal(cantidad, "cantidad"),
            precio_unitario=_decimal(precio_unitario, "precioUnitario"),
            nombre_personalizado=nombre,
        )
        self.lineas.append(linea)
        return linea

    def cambiar_cantidad(self, indice: int, cantidad: Numero) -> LineaPedido:
        linea = self.lineas[indice]
        linea.cantidad = _decimal(cantidad, "cantidad")
        return linea

    def quitar(self, indice: int) -> None:
        del self.lineas[indice]

    def nombre_linea(self, linea: LineaPedido) -> str:
        if linea.nombre_personalizado:
            return linea.nombre_personalizado
        producto = self.productos.get(linea.producto_id)
        return producto.nombre if producto else f"Producto #{linea.producto_id}"

    @property
    def total(self) -> Decimal:
        return sum((l.subtotal for l in self.lineas), Decimal("0.00"))

    def guardar(self) -> Optional[PedidoOut]:
        errores = {}
        if self.cliente_id is None:
            errores["clienteId"] = "Debe seleccionar un cliente"
        if not self.lineas:
            errores["detalles"] = "Debe agregar al menos un producto"
        if errores:
            raise FormularioInvalidoError(errores)

        payload = validar_formulario(PedidoIn, {
            "cliente_id": self.cliente_id,
            "fecha_creacion": fecha_hora_local(),
            "estado": EstadoPedidoEnum.PENDIENTE,
            "monto_total": self.total,
            "detalles": [
                {
                    "producto_id": l.producto_id,
                    "nombre_personalizado": l.nombre_personalizado,
                    "cantidad": l.cantidad,
                    "precio_unitario": l.precio_unitario,
                }
                for l in self.lineas
            ],
        })
        try:
            pedido = self.servicios.pedidos.create(payload)
        except ApiError as e:
            self._error_api("Error al crear el pedido", e)
            return None
        self.notificador.exito("Pedido creado", f"Pedido #{pedido.id} por {formatear_moneda(pedido.monto_total)}")
        self.cliente_id = None
        self.lineas = []
        return pedido
