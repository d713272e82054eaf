"""Pytest configuration for async testing.

This configuration ensures:
1. Async tests run under pytest-asyncio auto mode (see pyproject.toml)
2. Each integration test gets its own SQLite database file
3. Unit tests share lightweight logger / event bus doubles
"""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

from tenant_identity.domain.protocols.unit_of_work_protocol import UnitOfWorkFactory
from tenant_identity.infrastructure.events.broadcast_event_bus import (
    BroadcastEventBus,
)
from tenant_identity.infrastructure.persistence.database import Database
from tenant_identity.infrastructure.persistence.unit_of_work import (
    SqlAlchemyUnitOfWork,
)

# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real SQLite database"
    )
    config.addinivalue_line("markers", "api: API endpoint tests through TestClient")


# =============================================================================
# Test doubles
# =============================================================================


@pytest.fixture
def mock_logger() -> MagicMock:
    """Logger double; bind() returns the same mock so calls stay inspectable."""
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def mock_event_bus() -> AsyncMock:
    """Event bus double whose publish() reports success."""
    bus = AsyncMock()
    bus.publish.return_value = True
    return bus


# =============================================================================
# Real infrastructure (integration)
# =============================================================================


@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """Fresh SQLite database file with the schema created."""
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'identity.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest.fixture
def uow_factory(database: Database) -> UnitOfWorkFactory:
    """Unit of work factory bound to the test database."""
    return lambda: SqlAlchemyUnitOfWork(database)


@pytest.fixture
def event_bus(mock_logger: MagicMock) -> BroadcastEventBus:
    """Real broadcast bus with a small buffer."""
    return BroadcastEventBus(capacity=10, logger=mock_logger)


class FakeUnitOfWork:
    """In-memory stand-in for SqlAlchemyUnitOfWork.

    Repositories and commit are AsyncMocks, so tests configure return
    values / side effects and assert on calls.
    """

    def __init__(self) -> None:
        self.users = AsyncMock()
        self.profiles = AsyncMock()
        self.tenants = AsyncMock()
        self.permissions = AsyncMock()
        self.commit = AsyncMock()
        self.rollback = AsyncMock()

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Single fake unit of work shared by every factory call in a test."""
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning the shared fake unit of work."""
    return lambda: fake_uow
