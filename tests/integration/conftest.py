from contextlib import asynccontextmanager

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_notification_gateway, get_unit_of_work
from tests.fixtures.fake_notifier import RecordingNotificationGateway
from tests.fixtures.json_loader import TestDataLoader

TEST_DB_URI = "sqlite+aiosqlite:///./test.db"


class IntegrationConfig(ApplicationConfig):
    DB_URI = TEST_DB_URI
    CORS_ORIGINS = ["*"]
    ENABLE_LOGGING_MIDDLEWARE = False
    JWT_SECRET = "integration-test-secret"
    FRONTEND_URL = "http://frontend.example.com"
    RESET_TOKEN_TTL_MINUTES = 30
    RESET_TOKEN_SWEEP_INTERVAL_SECONDS = 0
    EXPOSE_RESET_TOKEN = False
    SEED_DEFAULT_USER = False


class DevConfig(IntegrationConfig):
    EXPOSE_RESET_TOKEN = True


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DB_URI)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def notifier():
    return RecordingNotificationGateway()


@asynccontextmanager
async def build_client(config, db_session, notifier):
    from src.api.app import create_app

    app = create_app(config)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_notification_gateway] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(db_session, notifier):
    async with build_client(IntegrationConfig, db_session, notifier) as ac:
        yield ac


@pytest_asyncio.fixture
async def dev_client(db_session, notifier):
    """Client whose forgot-password response echoes the raw token"""
    async with build_client(DevConfig, db_session, notifier) as ac:
        yield ac
