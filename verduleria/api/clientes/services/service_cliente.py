from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from verduleria.api.clientes.repositories.repo_cliente import ClienteRepository
from verduleria.api.clientes.schemas.schema_cliente import ClienteIn, ClienteOut
from verduleria.utils.logger import logger


class ClienteService:
    def __init__(self, db: Session):
        self.repo = ClienteRepository(db)

    def listar(self, search: Optional[str] = None) -> List[ClienteOut]:
        return [ClienteOut.model_validate(c) for c in self.repo.list(search)]

    def get(self, cliente_id: int) -> ClienteOut:
        return ClienteOut.model_validate(self._get_or_404(cliente_id))

    def crear(self, payload: ClienteIn) -> ClienteOut:
        if self.repo.get_by_cuit_dni(payload.cuit_dni):
            logger.warning(f"[Clientes] CUIT/DNI duplicado: {payload.cuit_dni}")
            raise HTTPException(
                status.HTTP_409_CONFLICT,
                f"Ya existe un cliente con CUIT/DNI {payload.cuit_dni} (violación de restricción de unicidad)",
            )
        cliente = self.repo.create(**payload.model_dump())
        logger.info(f"[Clientes] Cliente creado id={cliente.id}")
        return ClienteOut.model_validate(cliente)

    def actualizar(self, cliente_id: int, payload: ClienteIn) -> ClienteOut:
        cliente = self._get_or_404(cliente_id)
        existente = self.repo.get_by_cuit_dni(payload.cuit_dni)
        if existente and existente.id != cliente_id:
            raise HTTPException(
                status.HTTP_409_CONFLICT,
                f"Ya existe un cliente con CUIT/DNI {payload.cuit_dni} (violación de restricción de unicidad)",
            )
        cliente = self.repo.update(cliente, **payload.model_dump())
        logger.info(f"[Clientes] Cliente actualizado id={cliente_id}")
        return ClienteOut.model_validate(cliente)

    def eliminar(self, cliente_id: int) -> None:
        cliente = self.repo.get_by_id(cliente_id)
        if not cliente:
            raise HTTPException(
                status.HTTP_404_NOT_FOUND,
                f"Cliente con ID {cliente_id} no encontrado para eliminar.",
            )
        self.repo.delete(cliente)
        logger.info(f"[Clientes] Cliente eliminado id={cliente_id}")

    def _get_or_404(self, cliente_id: int):
        cliente = self.repo.get_by_id(cliente_id)
        if not cliente:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Cliente no encontrado")
        return cliente
