from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from verduleria.api.remitos.schemas.schema_remito import RemitoIn, RemitoOut, RemitoUpdate
from verduleria.api.remitos.services.service_remito import RemitoService
from verduleria.core.api_key import verificar_app_key
from verduleria.database.db_connection import get_db

router = APIRouter(
    prefix="/api/remitos",
    tags=["Remitos"],
    dependencies=[Depends(verificar_app_key)],
)


@router.get("/all", response_model=List[RemitoOut])
def listar_remitos(
    search: Optional[str] = Query(None, description="ej.: pedidoId:3 o valorTotal>1000"),
    db: Session = Depends(get_db),
):
    return RemitoService(db).listar(search)


@router.get("/{remito_id}", response_model=RemitoOut)
def obtener_remito(remito_id: int = Path(...), db: Session = Depends(get_db)):
    return RemitoService(db).get(remito_id)


@router.post("", response_model=RemitoOut, status_code=status.HTTP_201_CREATED)
def crear_remito(payload: RemitoIn, db: Session = Depends(get_db)):
    """
    Emite el remito de un pedido. Un pedido admite un solo remito (409 si ya tiene).
    """
    return RemitoService(db).crear(payload)


@router.put("/{remito_id}", response_model=RemitoOut)
def actualizar_remito(payload: RemitoUpdate, remito_id: int = Path(...), db: Session = Depends(get_db)):
    return RemitoService(db).actualizar(remito_id, payload)


@router.delete("/{remito_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_remito(remito_id: int = Path(...), db: Session = Depends(get_db)):
    RemitoService(db).eliminar(remito_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
