from datetime import datetime
from zoneinfo import ZoneInfo

from verduleria.config.settings import TIMEZONE


def now_trimmed():
    """Retorna la fecha/hora actual local (Argentina), sin microsegundos ni offset"""
    tz_local = ZoneInfo(TIMEZONE)
    return datetime.now(tz_local).replace(microsecond=0, tzinfo=None)
