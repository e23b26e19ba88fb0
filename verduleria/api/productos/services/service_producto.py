from typing import List, Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from verduleria.api.productos.repositories.repo_producto import ProductoRepository
from verduleria.api.productos.schemas.schema_producto import ProductoIn, ProductoOut
from verduleria.utils.logger import logger


class ProductoService:
    def __init__(self, db: Session):
        self.repo = ProductoRepository(db)

    def listar(self, search: Optional[str] = None) -> List[ProductoOut]:
        return [ProductoOut.model_validate(p) for p in self.repo.list(search)]

    def get(self, producto_id: int) -> ProductoOut:
        return ProductoOut.model_validate(self._get_or_404(producto_id))

    def crear(self, payload: ProductoIn) -> ProductoOut:
        producto = self.repo.create(**payload.model_dump())
        logger.info(f"[Productos] Producto creado id={producto.id} nombre={producto.nombre}")
        return ProductoOut.model_validate(producto)

    def actualizar(self, producto_id: int, payload: ProductoIn) -> ProductoOut:
        producto = self._get_or_404(producto_id)
        producto = self.repo.update(producto, **payload.model_dump())
        logger.info(f"[Productos] Producto actualizado id={producto_id}")
        return ProductoOut.model_validate(producto)

    def eliminar(self, producto_id: int) -> None:
        producto = self.repo.get_by_id(producto_id)
        if not producto:
            raise HTTPException(
                status.HTTP_404_NOT_FOUND,
                f"Producto con ID {producto_id} no encontrado para eliminar.",
            )
        self.repo.delete(producto)
        logger.info(f"[Productos] Producto eliminado id={producto_id}")

    def _get_or_404(self, producto_id: int):
        producto = self.repo.get_by_id(producto_id)
        if not producto:
            raise HTTPException(status.HTTP_404_NOT_FOUND, "Producto no encontrado")
        return producto
