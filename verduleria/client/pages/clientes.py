from dataclasses import asdict, dataclass
from typing import List, Optional

from verduleria.api.clientes.schemas.schema_cliente import ClienteIn, ClienteOut
from verduleria.client.filtros import filtrar_clientes
from verduleria.client.http_client import ApiError
from verduleria.client.pages.base import (
    Confirmacion,
    FormularioInvalidoError,
    PaginaBase,
    validar_formulario,
)


@dataclass
class FormularioCliente:
    razon_social: str = ""
    cuit_dni: str = ""
    telefono: str = ""
    direccion: str = ""
    email: str = ""
    id: Optional[int] = None


class PaginaClientes(PaginaBase):
    def __init__(self, servicios, notificador=None):
        super().__init__(servicios, notificador)
        self.todos: List[ClienteOut] = []
        self.search = ""
        self.formulario = FormularioCliente()

    def cargar(self) -> bool:
        try:
            self.todos = self.servicios.clientes.get_all()
        except ApiError as e:
            self.notificador.error("Error", f"No se pudieron cargar los clientes: {e.mensaje}")
            return False
        return True

    def buscar(self, texto: str) -> List[ClienteOut]:
        self.search = texto
        return self.filtrados

    @property
    def filtrados(self) -> List[ClienteOut]:
        return filtrar_clientes(self.todos, self.search)

    def nuevo(self) -> FormularioCliente:
        self.formulario = FormularioCliente()
        return self.formulario

    def editar(self, cliente: ClienteOut) -> FormularioCliente:
        self.formulario = FormularioCliente(
            razon_social=cliente.razon_social,
            cuit_dni=cliente.cuit_dni,
            telefono=cliente.telefono or "",
            direccion=cliente.direccion,
            email=cliente.email or "",
            id=cliente.id,
        )
        return self.formulario

    def cuit_duplicado(self, cuit_dni: str, excluir_id: Optional[int] = None) -> bool:
        cuit = cuit_dni.strip()
        return any(c.cuit_dni == cuit and c.id != excluir_id for c in self.todos)

    def guardar(self, formulario: Optional[FormularioCliente] = None) -> Optional[ClienteOut]:
        formulario = formulario or self.formulario
        datos = asdict(formulario)
        cliente_id = datos.pop("id")
        payload = validar_formulario(ClienteIn, datos)
        if self.cuit_duplicado(payload.cuit_dni, excluir_id=cliente_id):
            self.notificador.advertencia("CUIT/DNI duplicado", f"Ya existe un cliente con CUIT/DNI {payload.cuit_dni}")
            raise FormularioInvalidoError({"cuitDni": "Ya existe un cliente con ese CUIT/DNI"})
        try:
            if cliente_id:
                cliente = self.servicios.clientes.update(cliente_id, payload)
                self.notificador.exito("Cliente actualizado", cliente.razon_social)
            else:
                cliente = self.servicios.clientes.create(payload)
                self.notificador.exito("Cliente creado", cliente.razon_social)
        except ApiError as e:
            self._error_api("Error al guardar el cliente", e)
            return None
        self.nuevo()
        self.cargar()
        return cliente

    def eliminar(self, cliente: ClienteOut, confirmar: Optional[Confirmacion] = None) -> bool:
        if confirmar and not confirmar(f"¿Eliminar el cliente {cliente.razon_social}?"):
            return False
        try:
            self.servicios.clientes.delete(cliente.id)
        except ApiError as e:
            self._error_api(
                "No se puede eliminar el cliente",
                e,
                f"{cliente.razon_social} tiene pedidos asociados",
            )
            return False
        self.notificador.exito("Cliente eliminado", cliente.razon_social)
        self.cargar()
        return True
