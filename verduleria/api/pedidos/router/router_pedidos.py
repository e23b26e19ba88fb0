from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from verduleria.api.pedidos.schemas.schema_pedido import PedidoIn, PedidoOut, PedidoUpdate
from verduleria.api.pedidos.services.service_pedido import PedidoService
from verduleria.core.api_key import verificar_app_key
from verduleria.database.db_connection import get_db

router = APIRouter(
    prefix="/api/pedidos",
    tags=["Pedidos"],
    dependencies=[Depends(verificar_app_key)],
)


@router.get("/all", response_model=List[PedidoOut])
def listar_pedidos(
    search: Optional[str] = Query(None, description="ej.: estado:PENDIENTE,clienteId:2"),
    db: Session = Depends(get_db),
):
    return PedidoService(db).listar(search)


@router.get("/{pedido_id}", response_model=PedidoOut)
def obtener_pedido(pedido_id: int = Path(...), db: Session = Depends(get_db)):
    return PedidoService(db).get(pedido_id)


@router.post("", response_model=PedidoOut, status_code=status.HTTP_201_CREATED)
def crear_pedido(payload: PedidoIn, db: Session = Depends(get_db)):
    """
    Crea el pedido con sus líneas. Si no viene `montoTotal` se calcula
    sumando los subtotales.
    """
    return PedidoService(db).crear(payload)


@router.put("/{pedido_id}", response_model=PedidoOut)
def actualizar_pedido(payload: PedidoUpdate, pedido_id: int = Path(...), db: Session = Depends(get_db)):
    """
    Sólo actualiza `estado`, `remitoGenerado` y `montoTotal`.
    El flujo de estados lo controla el cliente, no este endpoint.
    """
    return PedidoService(db).actualizar(pedido_id, payload)


@router.delete("/{pedido_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_pedido(pedido_id: int = Path(...), db: Session = Depends(get_db)):
    PedidoService(db).eliminar(pedido_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
