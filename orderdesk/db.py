"""Database connection and session management for SQLAlchemy."""

from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, text, inspect
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool
import logging

from .config import Settings

logger = logging.getLogger("uvicorn")

# Base class for all models
Base = declarative_base()


def mask_database_url(database_url: str) -> str:
    """Retorna a URL do banco com a senha mascarada, para logs."""
    try:
        return make_url(database_url).render_as_string(hide_password=True)
    except Exception:
        return "(URL format not recognized)"


class Database:
    """
    Engine e fábrica de sessões da aplicação.

    Criado explicitamente pela composição da aplicação (create_app) e
    descartado no shutdown; não existe engine global no módulo.
    """

    def __init__(self, settings: Settings, engine: Optional[Engine] = None):
        self.settings = settings
        self.engine = engine or self._create_engine(settings)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    @staticmethod
    def _create_engine(settings: Settings) -> Engine:
        url = make_url(settings.database_url)
        if url.get_backend_name() == "sqlite":
            kwargs = {"connect_args": {"check_same_thread": False}}
            # Banco em memória precisa de uma única conexão compartilhada
            if url.database in (None, "", ":memory:"):
                kwargs["poolclass"] = StaticPool
            return create_engine(settings.database_url, echo=settings.sql_echo, **kwargs)

        # Create SQLAlchemy engine with connection pooling
        return create_engine(
            settings.database_url,
            pool_size=5,
            max_overflow=10,
            pool_timeout=30,
            pool_recycle=1800,  # Recycle connections after 30 minutes
            pool_pre_ping=True,  # Check connection validity before using
            poolclass=QueuePool,
            echo=settings.sql_echo,
        )

    def create_all(self) -> None:
        """Cria as tabelas a partir dos modelos (testes e bancos locais)."""
        from . import models  # noqa: F401  registra os modelos no metadata

        Base.metadata.create_all(bind=self.engine)

    def check_connection(self) -> bool:
        """Verifica a conexão com o banco de dados e lista as tabelas existentes."""
        logger.info("Connecting to database: %s", mask_database_url(self.settings.database_url))
        try:
            with self.engine.connect() as conn:
                row = conn.execute(text("SELECT 1 AS test")).fetchone()
                if row and row[0] == 1:
                    logger.info("Database connection test successful")
            tables = inspect(self.engine).get_table_names()
            logger.info("Tables found: %s", tables)
            if "users" not in tables:
                logger.warning("Table 'users' not found! Run the migrations first.")
            return True
        except Exception as e:
            logger.error("Database connection error: %s", str(e))
            return False

    def session(self) -> Session:
        return self.SessionLocal()

    def dispose(self) -> None:
        self.engine.dispose()


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Iterator[Session]:
    """
    Dependency for FastAPI routes that need database access.

    Usage:
        @router.get("/items/")
        def read_items(db: Session = Depends(get_db)):
            return db.query(models.Item).all()
    """
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
