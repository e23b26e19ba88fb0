from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import List, Optional, Union

from verduleria.api.productos.schemas.schema_producto import ProductoIn, ProductoOut
from verduleria.client.filtros import filtrar_productos
from verduleria.client.http_client import ApiError
from verduleria.client.pages.base import Confirmacion, PaginaBase, validar_formulario


@dataclass
class FormularioProducto:
    nombre: str = ""
    unidad_medida: str = ""
    precio_venta: Union[Decimal, str] = ""
    id: Optional[int] = None


class PaginaProductos(PaginaBase):
    def __init__(self, servicios, notificador=None):
        super().__init__(servicios, notificador)
        self.todos: List[ProductoOut] = []
        self.search = ""
        self.formulario = FormularioProducto()

    def cargar(self) -> bool:
        try:
            self.todos = self.servicios.productos.get_all()
        except ApiError as e:
            self.notificador.error("Error", f"No se pudieron cargar los productos: {e.mensaje}")
            return False
        return True

    def buscar(self, texto: str) -> List[ProductoOut]:
        self.search = texto
        return self.filtrados

    @property
    def filtrados(self) -> List[ProductoOut]:
        return filtrar_productos(self.todos, self.search)

    def nuevo(self) -> FormularioProducto:
        self.formulario = FormularioProducto()
        return self.formulario

    def editar(self, producto: ProductoOut) -> FormularioProducto:
        self.formulario = FormularioProducto(
            nombre=producto.nombre,
            unidad_medida=producto.unidad_medida,
            precio_venta=producto.precio_venta,
            id=producto.id,
        )
        return self.formulario

    def guardar(self, formulario: Optional[FormularioProducto] = None) -> Optional[ProductoOut]:
        """
        Crea o actualiza según el formulario tenga id.
        FormularioInvalidoError si faltan campos; los errores de la API quedan como toast.
        """
        formulario = formulario or self.formulario
        datos = asdict(formulario)
        producto_id = datos.pop("id")
        payload = validar_formulario(ProductoIn, datos)
        try:
            if producto_id:
                producto = self.servicios.productos.update(producto_id, payload)
                self.notificador.exito("Producto actualizado", producto.nombre)
            else:
                producto = self.servicios.productos.create(payload)
                self.notificador.exito("Producto creado", producto.nombre)
        except ApiError as e:
            self._error_api("Error al guardar el producto", e)
            return None
        self.nuevo()
        self.cargar()
        return producto

    def eliminar(self, producto: ProductoOut, confirmar: Optional[Confirmacion] = None) -> bool:
        if confirmar and not confirmar(f"¿Eliminar el producto {producto.nombre}?"):
            return False
        try:
            self.servicios.productos.delete(producto.id)
        except ApiError as e:
            self._error_api(
                "No se puede eliminar el producto",
                e,
                f"{producto.nombre} está incluido en pedidos existentes",
            )
            return False
        self.notificador.exito("Producto eliminado", producto.nombre)
        self.cargar()
        return True
