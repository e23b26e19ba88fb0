from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from verduleria.api.pedidos.repositories.repo_pedido import PedidoRepository
from verduleria.api.remitos.repositories.repo_remito import RemitoRepository
from verduleria.api.remitos.schemas.schema_remito import RemitoIn, RemitoOut, RemitoUpdate
from verduleria.utils.database_utils import now_trimmed
from verduleria.utils.logger import logger


class RemitoService:
    def __init__(self, db: Session):
        self.repo = RemitoRepository(db)
        self.repo_pedido = PedidoRepository(db)

    def listar(self, search: Optional[str] = None) -> List[RemitoOut]:
        return [RemitoOut.model_validate(r) for r in self.repo.list(search)]

    def get(self, remito_id: int) -> RemitoOut:
        return RemitoOut.model_validate(self._get_or_404(remito_id))

    def crear(self, payload: RemitoIn) -> RemitoOut:
        if not self.repo_pedido.get(payload.pedido_id):
            raise HTTPException(status.HTTP_400_BAD_REQUEST, f"Pedido {payload.pedido_id} inexistente")
        if self.repo.get_by_pedido_id(payload.pedido_id):
            logger.warning(f"[Remitos] El pedido {payload.pedido_id} ya tiene remito")
            raise HTTPException(
                status.HTTP_409_CONFLICT,
                f"El pedido {payload.pedido_id} ya tiene un remito (violación de restricción de unicidad)",
            )
        data = payload.model_dump()
        data["fecha_emision"] = payload.fecha_emision or now_trimmed()
        remito = self.repo.create(**data)
        logger.info(f"[Remitos] Remito {remito.numero_remito} emitido para pedido {remito.pedido_id}")
        return RemitoOut.model_validate(remito)

    def actualizar(self, remito_id: int, payload: RemitoUpdate) -> RemitoOut:
        remito = self._get_or_404(remito_id)
        remito = self.repo.update(remito, **payload.model_dump(exclude_none=True))
        return RemitoOut.model_validate(remito)

    def eliminar(self, remito_id: int) -> None:
        remito = self.repo.get_by_id(remito_id)
        if not remito:
            raise HTTPException(
                status.HTTP_404_NOT_FOUND,
                f"Remito con ID {remito_id} no encontrado para eliminar.",
            )
        self.repo.delete(remito)
        logger.info(f"[Remitos] Remito eliminado id={remito_id}")

    def _get_or_404(self, remito_id: int):
        remito = self.repo.get_by_id(remito_id)
        if not remito:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Remito no encontrado")
        return remito
