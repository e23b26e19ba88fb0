"""
Router de monitoreo: métricas Prometheus y lectura de logs.
"""
import re
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from verduleria.core.api_key import verificar_app_key
from verduleria.utils.logger import LOG_FILE, logger
from verduleria.utils.prometheus_metrics import CONTENT_TYPE_LATEST, get_metrics

LOG_LINE_PATTERN = re.compile(r'\[(.*?)\] \[(.*?)\] (.*?): (.*)')

router = APIRouter(prefix="/api/monitoring", tags=["Monitoreo"])


@router.get("/metrics")
def metrics():
    """Métricas Prometheus (pública)."""
    return Response(content=get_metrics(), media_type=CONTENT_TYPE_LATEST)


@router.get("/logs/json", dependencies=[Depends(verificar_app_key)])
def get_logs_json(
    lines: int = Query(100, ge=1, le=1000),
    level: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
):
    """
    Últimas líneas de ``logs/app.log`` parseadas a JSON.
    Filtros opcionales por nivel (INFO, WARNING, ERROR) y por texto.
    """
    if not LOG_FILE.exists():
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Archivo de log no encontrado")

    try:
        with open(LOG_FILE, 'r', encoding='utf-8') as f:
            log_lines = f.readlines()[-lines:]
    except OSError as e:
        logger.error(f"[Monitoreo] Error al leer logs: {e}")
        raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Error al leer logs: {e}")

    if level:
        log_lines = [line for line in log_lines if f"[{level.upper()}]" in line.upper()]
    if search:
        log_lines = [line for line in log_lines if search.lower() in line.lower()]

    parsed_logs = []
    for line in log_lines:
        line = line.strip()
        if not line:
            continue
        match = LOG_LINE_PATTERN.match(line)
        if match:
            timestamp, log_level, logger_name, message = match.groups()
            parsed_logs.append({
                "timestamp": timestamp,
                "level": log_level,
                "logger": logger_name,
                "message": message,
            })
        else:
            parsed_logs.append({"raw": line})

    return {
        "total": len(parsed_logs),
        "lines": lines,
        "filters": {"level": level, "search": search},
        "logs": parsed_logs,
    }
