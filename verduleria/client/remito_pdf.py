"""
PDF imprimible de un remito, con el QR de confirmación de entrega.
"""
from io import BytesIO
from typing import Mapping, Optional

from reportlab.graphics import renderPDF
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, Table, TableStyle

from verduleria.api.clientes.schemas.schema_cliente import ClienteOut
from verduleria.api.pedidos.schemas.schema_pedido import PedidoOut
from verduleria.api.productos.schemas.schema_producto import ProductoOut
from verduleria.api.remitos.schemas.schema_remito import RemitoOut
from verduleria.client.formatters import formatear_fecha, formatear_moneda
from verduleria.client.qr import construir_url_confirmacion, dibujo_qr


def generar_pdf_remito(
    remito: RemitoOut,
    pedido: PedidoOut,
    cliente: Optional[ClienteOut] = None,
    productos: Optional[Mapping[int, ProductoOut]] = None,
    qr_base_url: Optional[str] = None,
) -> bytes:
    productos = productos or {}
    buffer = BytesIO()
    p = canvas.Canvas(buffer, pagesize=A4)
    p.setTitle(f"Remito {remito.numero_remito}")
    width, height = A4
    style_normal = getSampleStyleSheet()["Normal"]

    p.setFont("Helvetica-Bold", 16)
    p.drawString(2 * cm, height - 2 * cm, f"REMITO N°: {remito.numero_remito}")
    p.setFont("Helvetica", 10)
    p.drawString(2 * cm, height - 2.7 * cm, f"Fecha de emisión: {formatear_fecha(remito.fecha_emision)}")
    p.drawString(2 * cm, height - 3.2 * cm, f"Pedido N°: {pedido.id}")

    # QR arriba a la derecha
    qr = dibujo_qr(construir_url_confirmacion(pedido.id, qr_base_url), tamano=3.5 * cm)
    renderPDF.draw(qr, p, width - 5.5 * cm, height - 5 * cm)

    y = height - 4.5 * cm
    if cliente:
        p.setFont("Helvetica-Bold", 12)
        p.drawString(2 * cm, y, "Cliente:")
        p.setFont("Helvetica", 10)
        p.drawString(2 * cm, y - 0.5 * cm, cliente.razon_social)
        p.drawString(2 * cm, y - 1.0 * cm, f"CUIT/DNI: {cliente.cuit_dni}")
        p.drawString(2 * cm, y - 1.5 * cm, cliente.direccion)
        if cliente.telefono:
            p.drawString(2 * cm, y - 2.0 * cm, f"Tel.: {cliente.telefono}")
        y -= 2.8 * cm

    p.line(2 * cm, y, width - 2 * cm, y)
    y -= 0.8 * cm

    data = [["Cant.", "Producto", "P. Unit.", "Subtotal"]]
    for detalle in pedido.detalles:
        producto = productos.get(detalle.producto_id) if detalle.producto_id else None
        nombre = detalle.nombre_personalizado or (producto.nombre if producto else f"Producto #{detalle.producto_id}")
        data.append([
            f"{detalle.cantidad.normalize():f}",
            Paragraph(nombre, style_normal),
            formatear_moneda(detalle.precio_unitario),
            formatear_moneda(detalle.subtotal),
        ])

    if len(data) > 1:
        table = Table(data, colWidths=[2 * cm, 8.5 * cm, 3 * cm, 3.5 * cm])
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), colors.darkgreen),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.whitesmoke),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("ALIGN", (0, 1), (0, -1), "RIGHT"),
            ("ALIGN", (2, 1), (3, -1), "RIGHT"),
            ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
            ("GRID", (0, 0), (-1, -1), 0.5, colors.grey),
        ]))
        table.wrapOn(p, width - 4 * cm, y)
        table.drawOn(p, 2 * cm, y - table._height)
        y -= table._height + 0.8 * cm

    p.setFont("Helvetica-Bold", 12)
    p.drawRightString(width - 2 * cm, y, f"TOTAL: {formatear_moneda(remito.valor_total)}")

    p.setFont("Helvetica", 8)
    p.drawString(2 * cm, 2 * cm, "Escanee el código QR para confirmar la entrega.")

    p.showPage()
    p.save()
    return buffer.getvalue()
