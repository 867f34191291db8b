"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from httpx import ASGITransport, AsyncClient


@pytest.fixture
async def sqlite_db(tmp_path: Path) -> AsyncGenerator[Path, None]:
    """Migrated temporary database wired into the global connection pool."""
    import buildops.infrastructure.storage.sqlite.connection as conn_module
    from buildops.infrastructure.storage.sqlite.migrations.migrator import (
        initialize_database,
    )

    db_path = tmp_path / "buildops_test.db"
    await initialize_database(db_path)

    conn_module._pool = None
    mock_settings = MagicMock()
    mock_settings.storage.db_path = db_path
    mock_settings.storage.pool_size = 2
    mock_settings.storage.busy_timeout = 5000

    with patch.object(conn_module, "get_settings", return_value=mock_settings):
        try:
            yield db_path
        finally:
            await conn_module.close_pool()


@pytest.fixture
async def api_client(sqlite_db: Path) -> AsyncGenerator[AsyncClient, None]:
    """Async client against the app, backed by the temporary database."""
    from buildops.api.main import app
    from buildops.application.services import reset_services

    reset_services()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    reset_services()


@pytest.fixture
def sample_item_data() -> dict:
    """Inventory item payload."""
    return {
        "name": "Cement bags",
        "category": "Materials",
        "quantity": 5,
        "warehouse": "Main Yard",
    }


@pytest.fixture
def sample_account_data() -> dict:
    """Bank account payload."""
    return {
        "name": "Operating",
        "bank_name": "First Builders Bank",
        "account_number": "0001-2345",
        "initial_balance": 10000.0,
    }
