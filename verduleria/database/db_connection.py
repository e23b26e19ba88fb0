# verduleria/database/db_connection.py

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from verduleria.config.settings import BASE_DIR, DATABASE_URL, DB_CONFIG, DB_SSL_MODE
from verduleria.utils.logger import logger

# Base única para todos los models
Base = declarative_base()


def _connection_string() -> str:
    if DATABASE_URL:
        return DATABASE_URL
    if DB_CONFIG.get('host'):
        missing = [k for k in ('database', 'user', 'password', 'host', 'port') if not DB_CONFIG.get(k)]
        if missing:
            raise RuntimeError(f"Configuración de la base inválida, faltan variables: {', '.join(missing)}")
        ssl_query = f"?sslmode={DB_SSL_MODE}" if DB_SSL_MODE else ""
        return (
            f"postgresql://{DB_CONFIG['user']}:{DB_CONFIG['password']}"
            f"@{DB_CONFIG['host']}:{DB_CONFIG['port']}/{DB_CONFIG['database']}{ssl_query}"
        )
    return f"sqlite:///{BASE_DIR / 'verduleria.db'}"


connection_string = _connection_string()

if connection_string.startswith("sqlite"):
    engine_kwargs = {"connect_args": {"check_same_thread": False}}
    # Base en memoria: una sola conexión compartida
    if connection_string in ("sqlite://", "sqlite:///:memory:"):
        engine_kwargs["poolclass"] = StaticPool
    engine = create_engine(connection_string, **engine_kwargs)

    @event.listens_for(engine, "connect")
    def _activar_foreign_keys(dbapi_connection, connection_record):
        # SQLite no valida FKs salvo que se active por conexión
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()
else:
    engine = create_engine(connection_string, pool_pre_ping=True)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# Dependency para FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


logger.debug(f"[DB] Engine configurado para {engine.url.get_backend_name()}")
