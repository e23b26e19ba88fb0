"""
Router del contexto de Pedidos: pedidos y sus líneas (detalles).
"""
from fastapi import APIRouter

from verduleria.api.pedidos.router.router_detalles import router as router_detalles
from verduleria.api.pedidos.router.router_pedidos import router as router_pedidos

api_pedidos = APIRouter()

api_pedidos.include_router(router_pedidos)
api_pedidos.include_router(router_detalles)
