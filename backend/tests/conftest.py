"""
Shared fixtures.

Unit tests run the services against the in-memory store from tests.fakes;
integration tests use a throwaway SQLite database file per test.
"""
import os

# Keep the module-level application engine away from the working directory
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import init_db
from app.repositories import SQLAlchemyUserRepository, SQLAlchemyMeasurementLogRepository
from app.services.identity_service import IdentityService
from app.services.measurement_service import MeasurementService
from app.services.user_service import UserService
from tests.fakes import InMemoryStore, InMemoryUserRepository, InMemoryMeasurementLogRepository


def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests that hit a real database"
    )


# =============================================================================
# IN-MEMORY STORE
# =============================================================================

@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def user_repo(store):
    return InMemoryUserRepository(store)


@pytest.fixture
def log_repo(store):
    return InMemoryMeasurementLogRepository(store)


@pytest.fixture
def identity_service(user_repo, log_repo):
    return IdentityService(user_repo, log_repo)


@pytest.fixture
def user_service(user_repo):
    return UserService(user_repo)


@pytest.fixture
def measurement_service(user_repo, log_repo):
    return MeasurementService(user_repo, log_repo)


# =============================================================================
# SQLITE DATABASE
# =============================================================================

@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'bmi_tracker_test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def sql_services(session_factory):
    """
    Factory opening a session and returning (session, identity, users, measurements)
    services bound to it. The caller commits.
    """
    def build():
        session = session_factory()
        users = SQLAlchemyUserRepository(session)
        logs = SQLAlchemyMeasurementLogRepository(session)
        return (
            session,
            IdentityService(users, logs),
            UserService(users),
            MeasurementService(users, logs),
        )

    return build
