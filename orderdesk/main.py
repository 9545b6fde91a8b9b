from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, Dict, Optional
import logging

import anyio
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .config import Settings, get_settings
from .db import Database, mask_database_url
from .exceptions import Internal
from .middleware import SecurityHeadersMiddleware
from .routers import auth_router, orders_router, customers_router, admin_router
from .services import PasswordHasher, TokenService
from .version import read_version

logger = logging.getLogger("uvicorn")

APP_VERSION = read_version()


def _internal_error_response(request: Request, exc: Exception, settings: Settings) -> JSONResponse:
    logger.error(
        "Unhandled %s on %s %s: %s",
        type(exc).__name__, request.method, request.url.path, str(exc),
        exc_info=exc,
    )
    # Detalhes do erro só chegam ao cliente em desenvolvimento
    detail = str(exc) if settings.is_development else Internal.default_detail
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": detail},
    )


def _register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(SQLAlchemyError)
    async def _database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        return _internal_error_response(request, exc, settings)

    @app.exception_handler(Exception)
    async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        return _internal_error_response(request, exc, settings)


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Monta a aplicação: configurações, banco, serviços de token e senha,
    middlewares e routers.

    Args:
        settings: Configurações (padrão: lidas do ambiente)
        database: Banco já construído (testes); por padrão criado a partir de settings
    """
    settings = settings or get_settings()
    database = database or Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("🚀 Order Desk API starting - version=%s environment=%s", APP_VERSION, settings.environment)
        logger.info("📊 Database URL: %s", mask_database_url(settings.database_url))
        await anyio.to_thread.run_sync(database.check_connection)
        yield
        database.dispose()
        logger.info("Order Desk API stopped")

    # Inicializar a aplicação FastAPI
    app = FastAPI(
        title="Order Desk API",
        description="API de pedidos e clientes com controle de acesso por papéis",
        version=APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.token_service = TokenService(settings.jwt_secret)
    app.state.password_hasher = PasswordHasher(settings.bcrypt_rounds)

    # Configurar CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)

    _register_exception_handlers(app, settings)

    # Incluir routers
    app.include_router(auth_router)
    app.include_router(orders_router)
    app.include_router(customers_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        """Basic health check endpoint with status summary."""
        db_ok = await anyio.to_thread.run_sync(_check_db_sync, database)
        return {
            "status": "ok" if db_ok else "down",
            "version": APP_VERSION,
            "db_ok": db_ok,
            "time": datetime.now().isoformat(),
        }

    return app


def _check_db_sync(database: Database) -> bool:
    """Check if the database is ready by executing a simple query."""
    try:
        with database.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception:
        logger.warning("Health check: database unreachable")
        return False


app = create_app()
