"""
Logger central de la aplicación.

Formato: ``[timestamp] [LEVEL] nombre: mensaje`` (el endpoint de
monitoreo parsea este formato al leer ``logs/app.log``).
"""
import logging
from logging.handlers import RotatingFileHandler

from verduleria.config.settings import LOG_DIR, LOG_LEVEL
from verduleria.utils.prometheus_metrics import record_log

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = LOG_DIR / "app.log"


class PrometheusLogHandler(logging.Handler):
    """Cuenta mensajes de log por nivel en las métricas."""

    def emit(self, record: logging.LogRecord) -> None:
        record_log(record.levelname)


def _configurar_logger() -> logging.Logger:
    log = logging.getLogger("verduleria")
    if log.handlers:
        return log

    log.setLevel(LOG_LEVEL)
    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    log.addHandler(console)

    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(formatter)
        log.addHandler(file_handler)
    except OSError as e:
        log.warning(f"No se pudo abrir el archivo de log {LOG_FILE}: {e}")

    log.addHandler(PrometheusLogHandler())
    return log


logger = _configurar_logger()
