"""
Código QR de confirmación de entrega.

El remito impreso lleva un QR con la URL ``{QR_BASE_URL}/#/confirmar/{id}``;
la app móvil lee el texto del QR y extrae el id del pedido.
"""
import re
from typing import Optional

from reportlab.graphics import renderSVG
from reportlab.graphics.barcode.qr import QrCodeWidget
from reportlab.graphics.shapes import Drawing

from verduleria.config import settings

PATRON_CONFIRMACION = re.compile(r"confirmar/(\d+)")


class QRInvalidoError(ValueError):
    pass


def construir_url_confirmacion(pedido_id: int, base_url: Optional[str] = None) -> str:
    base = (base_url or settings.QR_BASE_URL).rstrip("/")
    return f"{base}/#/confirmar/{pedido_id}"


def extraer_pedido_id(texto: Optional[str]) -> int:
    match = PATRON_CONFIRMACION.search(texto or "")
    if not match:
        raise QRInvalidoError("QR inválido: no corresponde a un pedido")
    return int(match.group(1))


def dibujo_qr(contenido: str, tamano: float = 120) -> Drawing:
    widget = QrCodeWidget(contenido)
    x1, y1, x2, y2 = widget.getBounds()
    ancho, alto = x2 - x1, y2 - y1
    dibujo = Drawing(tamano, tamano, transform=[tamano / ancho, 0, 0, tamano / alto, 0, 0])
    dibujo.add(widget)
    return dibujo


def qr_svg(contenido: str, tamano: float = 120) -> str:
    """QR como SVG, para mostrarlo en pantalla."""
    return renderSVG.drawToString(dibujo_qr(contenido, tamano))
