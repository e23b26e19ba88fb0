"""
Preferencias locales del escritorio (modo oscuro), guardadas como JSON.
"""
import json
from pathlib import Path
from typing import Optional

from verduleria.config import settings
from verduleria.utils.logger import logger

CLAVE_MODO_OSCURO = "darkMode"


class Preferencias:
    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path or settings.PREFERENCIAS_PATH)
        self._datos = self._leer()

    @property
    def modo_oscuro(self) -> bool:
        return bool(self._datos.get(CLAVE_MODO_OSCURO, True))

    @modo_oscuro.setter
    def modo_oscuro(self, valor: bool) -> None:
        self._datos[CLAVE_MODO_OSCURO] = bool(valor)
        self._guardar()

    def alternar_modo_oscuro(self) -> bool:
        self.modo_oscuro = not self.modo_oscuro
        return self.modo_oscuro

    def _leer(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            datos = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"[Preferencias] No se pudo leer {self.path}: {e}")
            return {}
        return datos if isinstance(datos, dict) else {}

    def _guardar(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._datos, indent=2), encoding="utf-8")
