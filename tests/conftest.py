"""
Test Configuration and Fixtures

This module provides:
- Environment setup (SQLite database file, test log directory, secret key)
- Database lifecycle per test: tables created from ORM metadata, dropped after
- An httpx AsyncClient bound to the app with dependency injection wired

Architecture:
- Unit tests (tests/**/unit/): mocked repositories, no database
- Integration tests (tests/**/integration/): real SQLite database through the HTTP API
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru config read environment variables at import time
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    db_dir = Path(tempfile.mkdtemp(prefix='hotel_booking_test_'))
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_dir / "test.db"}'
    os.environ['SECRET_KEY'] = 'test_secret_key_for_hotel_booking_service'
    os.environ.setdefault('DB_ECHO', 'false')

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()


# =============================================================================
# Imports (after environment setup)
# =============================================================================
from httpx import ASGITransport, AsyncClient  # noqa: E402
import pytest_asyncio  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.platform.database.orm_db_setting import Database  # noqa: E402


@pytest_asyncio.fixture(scope='function')
async def database():
    """Fresh schema for each test on the container's database."""
    db: Database = container.database()
    await db.create_all()

    yield db

    await db.drop_all()
    await db.dispose()


@pytest_asyncio.fixture(scope='function')
async def client(database):
    """Create async test client."""
    from src.main import app

    container.wire(modules=WIRE_MODULES)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as async_client:
        yield async_client

    container.unwire()
