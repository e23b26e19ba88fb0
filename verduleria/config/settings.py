import os
from dotenv import load_dotenv
from pathlib import Path

# Carga el .env manualmente si no corre dentro de Docker
if not os.getenv("RUNNING_IN_DOCKER"):
    dotenv_path = Path(__file__).resolve().parents[2] / ".env"
    load_dotenv(dotenv_path=dotenv_path)

BASE_DIR = Path(__file__).resolve().parents[2]

# Conexión a la base. DATABASE_URL tiene prioridad; si no, PostgreSQL por DB_*
DB_CONFIG = {
    'database': os.getenv('DB_NAME'),
    'user': os.getenv('DB_USER'),
    'password': os.getenv('DB_PASSWORD'),
    'host': os.getenv('DB_HOST'),
    'port': int(os.getenv('DB_PORT', 5432)),
}
DB_SSL_MODE = os.getenv('DB_SSL_MODE')  # ej.: require, verify-ca, verify-full
DATABASE_URL = os.getenv("DATABASE_URL", "")

# Zona horaria del negocio (las fechas se guardan en hora local, sin offset)
TIMEZONE = os.getenv("TIMEZONE", "America/Argentina/Buenos_Aires")

# CORS
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]
CORS_ALLOW_ALL = os.getenv("CORS_ALLOW_ALL", "false").lower() in ("1", "true", "yes")

# FastAPI / App
BASE_URL = os.getenv("BASE_URL", "")
ENABLE_DOCS = os.getenv("ENABLE_DOCS", "true").lower() in ("1", "true", "yes")

# Clave compartida con la app móvil (header X-APP-KEY). Vacía = rutas abiertas
APP_API_KEY = os.getenv("APP_API_KEY", "")

# Cliente de escritorio / móvil
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080/api")
API_TIMEOUT_SECONDS = float(os.getenv("API_TIMEOUT_SECONDS", 10))
QR_BASE_URL = os.getenv("QR_BASE_URL", "http://localhost:5173")
PREFERENCIAS_PATH = Path(os.getenv("PREFERENCIAS_PATH", str(BASE_DIR / "preferencias.json")))

# Logs
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.getenv("LOG_DIR", str(BASE_DIR / "logs")))
