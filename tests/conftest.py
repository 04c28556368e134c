"""Shared fixtures for data source tests."""

from unittest.mock import MagicMock

import pytest

from adapters import DatabaseAdapter
from config import REQUIRED_ENV_VARS, ConnectionConfig
from datasource import DataSource


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Start every test without credentials and away from any real .env file."""
    for name in REQUIRED_ENV_VARS.values():
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def kodus_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("API_PG_DB_USERNAME", "kodus")
    monkeypatch.setenv("API_PG_DB_PASSWORD", "secret")
    monkeypatch.setenv("API_PG_DB_DATABASE", "kodus_db")


@pytest.fixture
def connection_config() -> ConnectionConfig:
    return ConnectionConfig(username="kodus", password="secret", database="kodus_db")


@pytest.fixture
def connection() -> MagicMock:
    """A psycopg2-like connection usable as a context manager."""
    conn = MagicMock()
    conn.__enter__.return_value = conn
    cursor = MagicMock()
    cursor.__enter__.return_value = cursor
    conn.cursor.return_value = cursor
    return conn


@pytest.fixture
def adapter(connection: MagicMock) -> MagicMock:
    adapter = MagicMock(spec=DatabaseAdapter)
    adapter.connect.return_value = connection
    return adapter


@pytest.fixture
def datasource(connection_config: ConnectionConfig, adapter: MagicMock, tmp_path) -> DataSource:
    return DataSource(connection_config, adapter, tmp_path)


@pytest.fixture
def make_file(tmp_path):
    """Create a file under tmp_path, parents included."""

    def _make(relative: str, content: str = "module.exports = {};\n"):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _make
