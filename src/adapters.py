"""
Database Adapters for the Kodus data source.
Provides the abstract base class and the PostgreSQL implementation.
"""

from abc import ABC, abstractmethod
from contextlib import closing
from typing import Any

import psycopg2
from psycopg2.extras import RealDictCursor

from config import ConnectionConfig


class DatabaseAdapter(ABC):
    """Abstract base class for database adapters."""

    @abstractmethod
    def connect(self):
        """Return a database connection."""
        pass

    @abstractmethod
    def get_schema(self) -> str:
        """Get the database schema as DDL."""
        pass

    @abstractmethod
    def list_tables(self) -> list[dict[str, Any]]:
        """List all tables in the database."""
        pass


class PostgresAdapter(DatabaseAdapter):
    """PostgreSQL database adapter."""

    def __init__(self, config: ConnectionConfig):
        self.config = config.connect_kwargs()

    def connect(self):
        return psycopg2.connect(**self.config)

    def get_schema(self) -> str:
        with closing(self.connect()) as conn, conn.cursor() as cur:
            cur.execute("""
                    SELECT table_name
                    FROM information_schema.tables
                    WHERE table_schema = 'public' AND table_type = 'BASE TABLE'
                    ORDER BY table_name
                """)
            tables = [r[0] for r in cur.fetchall()]

            ddl_statements = []
            for table in tables:
                cur.execute(
                    """
                        SELECT column_name, data_type, is_nullable, column_default
                        FROM information_schema.columns
                        WHERE table_schema = 'public' AND table_name = %s
                        ORDER BY ordinal_position
                    """,
                    (table,),
                )
                col_defs = []
                for name, data_type, is_nullable, default in cur.fetchall():
                    col_def = f"  {name} {data_type}"
                    if is_nullable == "NO":
                        col_def += " NOT NULL"
                    if default:
                        col_def += f" DEFAULT {default}"
                    col_defs.append(col_def)

                ddl_statements.append(f"CREATE TABLE {table} (\n" + ",\n".join(col_defs) + "\n);")

        return "\n\n".join(ddl_statements)

    def list_tables(self) -> list[dict[str, Any]]:
        with closing(self.connect()) as conn, conn.cursor(cursor_factory=RealDictCursor) as cur:
            cur.execute("""
                    SELECT
                        t.table_name,
                        (SELECT COUNT(*) FROM information_schema.columns c
                         WHERE c.table_schema = t.table_schema
                           AND c.table_name = t.table_name) as column_count
                    FROM information_schema.tables t
                    WHERE t.table_schema = 'public' AND t.table_type = 'BASE TABLE'
                    ORDER BY t.table_name
                """)
            return [dict(row) for row in cur.fetchall()]
