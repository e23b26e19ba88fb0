"""
Exception handlers globales: registran el error en el log y devuelven
siempre un JSON con ``detail`` (el cliente extrae el mensaje de ahí).
"""
import json
import traceback

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from verduleria.utils.logger import logger


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Errores de validación (422) de FastAPI/Pydantic.
    """
    error_details = []
    for error in exc.errors():
        error_details.append({
            "field": ".".join(str(loc) for loc in error.get("loc", [])),
            "type": error.get("type", "unknown"),
            "message": error.get("msg", "Error de validación"),
            "input": jsonable_encoder(error.get("input"), custom_encoder={Exception: str}),
        })

    logger.error(
        f"[VALIDATION ERROR 422] {request.method} {request.url.path} - "
        f"{json.dumps(error_details, indent=2, ensure_ascii=False, default=str)}"
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": error_details,
            "message": "Error de validación en los datos enviados",
        },
    )


async def http_exception_handler(request: Request, exc):
    status_code = exc.status_code
    log_message = f"[HTTP ERROR {status_code}] {request.method} {request.url.path} - Detalle: {exc.detail}"
    if status_code >= 500:
        logger.error(log_message)
    elif status_code >= 400:
        logger.warning(log_message)

    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc.detail), "status_code": status_code},
        headers=getattr(exc, "headers", None),
    )


async def integrity_exception_handler(request: Request, exc: IntegrityError):
    """
    Violaciones de constraints de la base (FK RESTRICT, UNIQUE) -> 409.
    """
    mensaje_db = str(exc.orig).lower()
    if "unique" in mensaje_db or "duplicate" in mensaje_db:
        detail = "Registro duplicado: violación de restricción de unicidad"
    elif "check" in mensaje_db:
        detail = "Datos inválidos: violación de restricción de validación"
    else:
        detail = (
            "No se puede completar la operación: el registro está referenciado "
            "por otros datos (violación de restricción de integridad)"
        )
    logger.warning(f"[INTEGRITY ERROR 409] {request.method} {request.url.path} - {exc.orig}")
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": detail, "status_code": status.HTTP_409_CONFLICT},
    )


async def general_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"[UNHANDLED EXCEPTION] {request.method} {request.url.path} - "
        f"{type(exc).__name__}: {exc}\n{traceback.format_exc()}"
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "Error interno del servidor",
            "error_type": type(exc).__name__,
        },
    )
