from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from verduleria.config.settings import BASE_URL, CORS_ALLOW_ALL, CORS_ORIGINS, ENABLE_DOCS
from verduleria.core.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    integrity_exception_handler,
    validation_exception_handler,
)
from verduleria.utils.logger import logger
from verduleria.utils.prometheus_metrics import PrometheusMiddleware

from verduleria.api.clientes.router.router_clientes import router as clientes_router
from verduleria.api.monitoring.router import router as monitoring_router
from verduleria.api.pedidos.router.router import api_pedidos
from verduleria.api.productos.router.router_productos import router as productos_router
from verduleria.api.remitos.router.router_remitos import router as remitos_router

# ──────────────────────────
# Instancia FastAPI
# ──────────────────────────
app = FastAPI(
    title="API Verdulería",
    version="1.0.0",
    description="Productos, clientes, pedidos y remitos",
    docs_url=("/swagger" if ENABLE_DOCS else None),
    redoc_url=("/redoc" if ENABLE_DOCS else None),
    openapi_url=("/openapi.json" if ENABLE_DOCS else None),
    servers=([{"url": BASE_URL, "description": "Base URL del entorno"}] if BASE_URL else None),
    redirect_slashes=False,
)

# ───────────────────────────
# Exception Handlers globales
# ───────────────────────────
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(IntegrityError, integrity_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ───────────────────────────
# Middlewares (el último agregado se ejecuta primero)
# ───────────────────────────
app.add_middleware(PrometheusMiddleware)

if CORS_ALLOW_ALL:
    allowed_origins = ["*"]
    allow_credentials = False
else:
    allowed_origins = CORS_ORIGINS or ["*"]
    allow_credentials = bool(CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ───────────────────────────
# Startup
# ───────────────────────────
@app.on_event("startup")
async def startup():
    from verduleria.database.init_db import inicializar_base

    logger.info("Iniciando API y base de datos...")
    inicializar_base()
    logger.info("API iniciada.")


# ───────────────────────────
# Rutas
# ───────────────────────────
@app.get("/")
async def root():
    return {"status": "ok", "message": "API is running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


app.include_router(monitoring_router)
app.include_router(productos_router)
app.include_router(clientes_router)
app.include_router(api_pedidos)
app.include_router(remitos_router)
