"""
Database Adapter Factory.
Creates the adapter and data source for a connection config.
"""

import logging
from pathlib import Path

from adapters import DatabaseAdapter, PostgresAdapter
from config import ConnectionConfig
from datasource import DataSource
from exceptions import ConfigurationError

logger = logging.getLogger("kodus-datasource")


def create_adapter(config: ConnectionConfig) -> DatabaseAdapter:
    """Create the database adapter for the configured engine type."""
    logger.info(f"Initializing database adapter: {config.type}")

    if config.type == "postgres":
        logger.debug(f"Connecting to PostgreSQL at {config.host}:{config.port}")
        return PostgresAdapter(config)

    raise ConfigurationError(f"Unsupported database type: {config.type}")


def create_datasource(config: ConnectionConfig, root: str | Path = ".") -> DataSource:
    """Create a data source bound to config, resolving file patterns under root."""
    return DataSource(config, create_adapter(config), root)
