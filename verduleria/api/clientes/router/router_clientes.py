from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from verduleria.api.clientes.schemas.schema_cliente import ClienteIn, ClienteOut
from verduleria.api.clientes.services.service_cliente import ClienteService
from verduleria.core.api_key import verificar_app_key
from verduleria.database.db_connection import get_db

router = APIRouter(
    prefix="/api/clientes",
    tags=["Clientes"],
    dependencies=[Depends(verificar_app_key)],
)


@router.get("/all", response_model=List[ClienteOut])
def listar_clientes(
    search: Optional[str] = Query(None, description="ej.: razonSocial:gomez,cuitDni:20"),
    db: Session = Depends(get_db),
):
    return ClienteService(db).listar(search)


@router.get("/{cliente_id}", response_model=ClienteOut)
def obtener_cliente(cliente_id: int = Path(...), db: Session = Depends(get_db)):
    return ClienteService(db).get(cliente_id)


@router.post("", response_model=ClienteOut, status_code=status.HTTP_201_CREATED)
def crear_cliente(payload: ClienteIn, db: Session = Depends(get_db)):
    """
    Crea un cliente. El CUIT/DNI es único: un duplicado devuelve 409.
    """
    return ClienteService(db).crear(payload)


@router.put("/{cliente_id}", response_model=ClienteOut)
def actualizar_cliente(payload: ClienteIn, cliente_id: int = Path(...), db: Session = Depends(get_db)):
    return ClienteService(db).actualizar(cliente_id, payload)


@router.delete("/{cliente_id}", status_code=status.HTTP_204_NO_CONTENT)
def eliminar_cliente(cliente_id: int = Path(...), db: Session = Depends(get_db)):
    """
    Un cliente con pedidos no se puede borrar (409).
    """
    ClienteService(db).eliminar(cliente_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
