from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from verduleria.api.pedidos.schemas.schema_pedido import (
    DetallePedidoCreate,
    DetallePedidoIn,
    DetallePedidoOut,
)
from verduleria.api.pedidos.services.service_pedido import PedidoService
from verduleria.core.api_key import verificar_app_key
from verduleria.database.db_connection import get_db

router = APIRouter(
    prefix="/api/detalles-pedido",
    tags=["Detalles de pedido"],
    dependencies=[Depends(verificar_app_key)],
)


@router.get("/all", response_model=List[DetallePedidoOut])
def listar_detalles(
    pedido_id: Optional[int] = Query(None, alias="pedidoId"),
    db: Session = Depends(get_db),
):
    return PedidoService(db).listar_detalles(pedido_id)


@router.get("/{detalle_id}", response_model=DetallePedidoOut)
def obtener_detalle(detalle_id: int = Path(...), db: Session = Depends(get_db)):
    return PedidoService(db).get_detalle(detalle_id)


@router.post("", response_model=DetallePedidoOut, status_code=status.HTTP_201_CREATED)
def crear_detalle(payload: DetallePedidoCreate, db: Session = Depends(get_db)):
    return PedidoService(db).crear_detalle(payload)


@router.put("/{detalle_id}", response_model=DetallePedidoOut)
def actualizar_detalle(payload: DetallePedidoIn, detalle_id: int = Path(...), db: Session = Depends(get_db)):
    return PedidoService(db).actualizar_detalle(detalle_id, payload)


@router.delete("/{detalle_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_detalle(detalle_id: int = Path(...), db: Session = Depends(get_db)):
    PedidoService(db).eliminar_detalle(detalle_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
