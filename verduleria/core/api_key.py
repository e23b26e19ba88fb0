# verduleria/core/api_key.py

import secrets
from typing import Optional

from fastapi import Header, HTTPException, status

from verduleria.config import settings
from verduleria.utils.logger import logger

API_KEY_HEADER = "X-APP-KEY"


def verificar_app_key(x_app_key: Optional[str] = Header(None, alias=API_KEY_HEADER)) -> None:
    """
    Exige el header X-APP-KEY cuando APP_API_KEY está configurada.
    Sin clave configurada las rutas quedan abiertas (uso local del escritorio).
    """
    esperada = settings.APP_API_KEY
    if not esperada:
        return
    if not x_app_key or not secrets.compare_digest(x_app_key, esperada):
        logger.warning("[ApiKey] Request rechazado: X-APP-KEY ausente o inválida")
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "X-APP-KEY inválida o ausente")
