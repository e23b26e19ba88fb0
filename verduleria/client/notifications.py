"""
Notificaciones tipo toast de las páginas.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List

from verduleria.utils.database_utils import now_trimmed
from verduleria.utils.logger import logger


class VarianteToast(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"


@dataclass
class Toast:
    titulo: str
    descripcion: str = ""
    variante: VarianteToast = VarianteToast.SUCCESS
    creado: datetime = field(default_factory=now_trimmed)


class Notificador:
    def __init__(self):
        self.toasts: List[Toast] = []

    def notificar(self, titulo: str, descripcion: str = "", variante: VarianteToast = VarianteToast.SUCCESS) -> Toast:
        toast = Toast(titulo=titulo, descripcion=descripcion, variante=VarianteToast(variante))
        self.toasts.append(toast)
        if toast.variante is VarianteToast.ERROR:
            logger.error(f"[Toast] {titulo}: {descripcion}")
        elif toast.variante is VarianteToast.WARNING:
            logger.warning(f"[Toast] {titulo}: {descripcion}")
        else:
            logger.info(f"[Toast] {titulo}: {descripcion}")
        return toast

    def exito(self, titulo: str, descripcion: str = "") -> Toast:
        return self.notificar(titulo, descripcion, VarianteToast.SUCCESS)

    def error(self, titulo: str, descripcion: str = "") -> Toast:
        return self.notificar(titulo, descripcion, VarianteToast.ERROR)

    def advertencia(self, titulo: str, descripcion: str = "") -> Toast:
        return self.notificar(titulo, descripcion, VarianteToast.WARNING)

    @property
    def ultimo(self):
        return self.toasts[-1] if self.toasts else None

    def descartar(self, toast: Toast) -> None:
        if toast in self.toasts:
            self.toasts.remove(toast)

    def limpiar(self) -> None:
        self.toasts.clear()
