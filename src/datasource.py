"""
Data source: consumes a ConnectionConfig and owns connection and file discovery.
"""

import logging
from contextlib import closing
from pathlib import Path
from typing import Any

from adapters import DatabaseAdapter
from config import ConnectionConfig
from discovery import discover_entities, discover_migrations

logger = logging.getLogger("kodus-datasource")


class DataSource:
    """
    Binds a connection record to an adapter and a project root.
    Entity and migration patterns are resolved relative to the root.
    """

    def __init__(self, config: ConnectionConfig, adapter: DatabaseAdapter, root: str | Path = "."):
        self.config = config
        self.adapter = adapter
        self.root = Path(root)
        self._initialized = False

    @property
    def options(self) -> ConnectionConfig:
        return self.config

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> "DataSource":
        """Open a connection and check it answers. Driver errors propagate."""
        if self._initialized:
            return self

        logger.info(f"Initializing data source {self.config.host}:{self.config.port}/{self.config.database}")
        with closing(self.adapter.connect()) as conn, conn.cursor() as cursor:
            cursor.execute("SELECT 1")

        self._initialized = True
        logger.info("Data source initialized")
        return self

    def test_connection(self) -> dict[str, Any]:
        """
        Test the database connection.
        Returns dict with success status or error message.
        """
        logger.debug("Testing database connection")
        try:
            with closing(self.adapter.connect()) as conn, conn.cursor() as cursor:
                cursor.execute("SELECT 1")
            logger.info("Database connection test successful")
            return {"success": True, "message": "Connection successful"}
        except Exception as e:
            logger.error(f"Database connection test failed: {e}")
            return {"success": False, "error": str(e)}

    def entity_files(self) -> list[dict[str, Any]]:
        return discover_entities(self.config.entities, self.root)

    def migration_files(self) -> list[dict[str, Any]]:
        return discover_migrations(self.config.migrations, self.root)

    def list_tables(self) -> list[dict[str, Any]]:
        return self.adapter.list_tables()

    def describe(self) -> dict[str, Any]:
        """Redacted config plus the number of discovered files."""
        return {
            "config": self.config.redacted(),
            "root": str(self.root),
            "entity_count": len(self.entity_files()),
            "migration_count": len(self.migration_files()),
            "initialized": self._initialized,
        }
