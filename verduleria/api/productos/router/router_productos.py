from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from verduleria.api.productos.schemas.schema_producto import ProductoIn, ProductoOut
from verduleria.api.productos.services.service_producto import ProductoService
from verduleria.core.api_key import verificar_app_key
from verduleria.database.db_connection import get_db

router = APIRouter(
    prefix="/api/productos",
    tags=["Productos"],
    dependencies=[Depends(verificar_app_key)],
)


@router.get("/all", response_model=List[ProductoOut])
def listar_productos(
    search: Optional[str] = Query(None, description="Criterios clave:valor separados por coma, ej.: nombre:papa"),
    db: Session = Depends(get_db),
):
    return ProductoService(db).listar(search)


@router.get("/{producto_id}", response_model=ProductoOut)
def obtener_producto(producto_id: int = Path(...), db: Session = Depends(get_db)):
    return ProductoService(db).get(producto_id)


@router.post("", response_model=ProductoOut, status_code=status.HTTP_201_CREATED)
def crear_producto(payload: ProductoIn, db: Session = Depends(get_db)):
    return ProductoService(db).crear(payload)


@router.put("/{producto_id}", response_model=ProductoOut)
def actualizar_producto(payload: ProductoIn, producto_id: int = Path(...), db: Session = Depends(get_db)):
    return ProductoService(db).actualizar(producto_id, payload)


@router.delete("/{producto_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_producto(producto_id: int = Path(...), db: Session = Depends(get_db)):
    """
    Falla con 409 si el producto figura en algún detalle de pedido.
    """
    ProductoService(db).eliminar(producto_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
