"""
Kodus Data Source Server
A Model Context Protocol server exposing the API's PostgreSQL data source:
connection settings, connectivity, and the entity and migration files it maps.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from config import load_connection_config
from datasource import DataSource
from exceptions import MissingConfigurationError
from factory import create_datasource
from logging_config import parse_level, setup_logging

logger = logging.getLogger("kodus-datasource")


def format_config_summary(datasource: DataSource) -> str:
    """Human-readable summary of the redacted connection config."""
    config = datasource.options.redacted()
    return f"""DATA SOURCE CONFIGURATION
=========================
Type: {config["type"]}
Host: {config["host"]}:{config["port"]}
Database: {config["database"] or "(unset)"}
Username: {config["username"] or "(unset)"}
Password: {config["password"] or "(unset)"}
SSL: {config["ssl"]}

ENTITY PATTERNS:
{chr(10).join(["  - " + p for p in config["entities"]])}

MIGRATION PATTERNS:
{chr(10).join(["  - " + p for p in config["migrations"]])}
"""


def build_server(datasource: DataSource) -> FastMCP:
    """Create the MCP server bound to an already configured data source."""
    mcp = FastMCP("Kodus-DataSource")

    # --- RESOURCES ---

    @mcp.resource("datasource://config")
    def resource_config() -> str:
        """Returns a formatted summary of the connection config."""
        return format_config_summary(datasource)

    @mcp.resource("datasource://schema")
    def resource_schema() -> str:
        """Returns the current database schema as DDL."""
        return datasource.adapter.get_schema() or "(No tables found)"

    # --- TOOLS ---

    @mcp.tool()
    def connection_info() -> dict[str, Any]:
        """
        Show the connection config (password masked) and discovered file counts.
        """
        return datasource.describe()

    @mcp.tool()
    def test_connection() -> dict[str, Any]:
        """
        Test the database connection.
        Returns dict with success status or error message.
        """
        return datasource.test_connection()

    @mcp.tool()
    def list_entities() -> list[dict[str, Any]]:
        """
        List entity mapping files matched by the configured entity patterns.
        """
        return datasource.entity_files()

    @mcp.tool()
    def list_migrations() -> list[dict[str, Any]]:
        """
        List migration files matched by the configured migration patterns, oldest first.
        Migrations are only located here; they are run by the ORM.
        """
        return datasource.migration_files()

    @mcp.tool()
    def list_tables() -> dict[str, Any]:
        """
        List tables in the public schema with their column counts.
        """
        try:
            tables = datasource.list_tables()
        except Exception as e:
            logger.error(f"Listing tables failed: {e}")
            return {"success": False, "error": str(e)}
        return {"success": True, "tables": tables, "table_count": len(tables)}

    return mcp


def main() -> None:
    logger = setup_logging(parse_level(os.environ.get("LOG_LEVEL")))

    try:
        config = load_connection_config()
    except MissingConfigurationError as e:
        logger.critical(f"Cannot start: {e}")
        sys.exit(1)

    datasource = create_datasource(config, Path.cwd())
    logger.info(f"Connection config loaded: {config.redacted()}")

    mcp = build_server(datasource)
    logger.info("Starting Kodus data source server")
    mcp.run()


if __name__ == "__main__":
    main()
