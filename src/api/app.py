import asyncio
import logging
import time
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from starlette.middleware.base import BaseHTTPMiddleware

import src.domain.entities  # noqa: F401  # register tables on SQLModel.metadata
from src.adapter.services.notification_gateway import build_notification_gateway
from src.adapter.services.reset_token_sweeper import run_reset_token_sweeper
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.auth import SeedDefaultUserUseCase
from .error import ClientError, ServerError

logger = logging.getLogger(__name__)


def _error_body(message: str) -> dict:
    return {"success": False, "message": message}


async def handle_client_error(request: Request, exc: ClientError):
    logger.warning(f"Client error: {exc.base_error.code} on {request.url.path}")
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.base_error.message))


async def handle_server_error(request: Request, exc: ServerError):
    logger.error(f"Server error: {exc.base_error.code} ({exc.base_error.message})")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(exc.public_message),
    )


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request body"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        if first.get("type") == "missing":
            message = f"Missing required field: {field}" if field else "Request body is required"
        elif field:
            message = f"Invalid value for {field}: {first.get('msg')}"
    logger.warning(f"Request validation failed on {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(message))


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=_error_body("Server error")
    )


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Log method, path, response status and latency. Bodies are never logged."""

    async def dispatch(self, request: Request, call_next) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s | status=%d latency=%.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response


async def seed_default_user(app: FastAPI) -> None:
    config = app.state.config
    async with app.state.session_factory() as session:
        await SeedDefaultUserUseCase(SqlAlchemyUnitOfWork(session)).execute(
            name=config.SEED_USER_NAME,
            email=config.SEED_USER_EMAIL,
            password=config.SEED_USER_PASSWORD,
        )


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = app.state.config

    async with app.state.engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    if config.SEED_DEFAULT_USER:
        await seed_default_user(app)

    sweeper = None
    if config.RESET_TOKEN_SWEEP_INTERVAL_SECONDS > 0:
        sweeper = asyncio.create_task(
            run_reset_token_sweeper(
                app.state.session_factory, config.RESET_TOKEN_SWEEP_INTERVAL_SECONDS
            )
        )

    yield

    if sweeper is not None:
        sweeper.cancel()
        with suppress(asyncio.CancelledError):
            await sweeper
    await app.state.engine.dispose()


def create_app(ApplicationConfig) -> FastAPI:
    if not ApplicationConfig.DB_URI:
        logger.critical("Missing DB_URI. Set it in the environment or env.yaml")
        raise SystemExit("Missing DB_URI")

    app = FastAPI(title="Salon Directory API", version="0.1.0", lifespan=lifespan)

    engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
    app.state.config = ApplicationConfig
    app.state.engine = engine
    app.state.session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    app.state.notifier = build_notification_gateway(ApplicationConfig)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ApplicationConfig.CORS_ORIGINS,
        allow_credentials=ApplicationConfig.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if ApplicationConfig.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(RequestLogMiddleware)

    from src.api.routes import auth, health_check, salons

    app.include_router(health_check.router, tags=["Health"])
    app.include_router(auth.router, tags=["Authentication"])
    app.include_router(salons.router, tags=["Salons"])

    app.add_exception_handler(ClientError, handle_client_error)
    app.add_exception_handler(ServerError, handle_server_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    return app
