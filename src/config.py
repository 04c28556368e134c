"""Connection configuration for the Kodus PostgreSQL data source."""

import logging
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from exceptions import MissingConfigurationError

logger = logging.getLogger("kodus-datasource")

DB_TYPE = "postgres"
DB_HOST = "db_kodus_postgres"
DB_PORT = 5432
DB_SSL = False
ENTITIES_PATTERNS = ("./dist/modules/**/infra/typeorm/entities/*.js",)
MIGRATIONS_PATTERNS = ("./dist/config/database/typeorm/migrations/*.js",)

# record field -> environment variable
REQUIRED_ENV_VARS = {
    "username": "API_PG_DB_USERNAME",
    "password": "API_PG_DB_PASSWORD",
    "database": "API_PG_DB_DATABASE",
}

PASSWORD_MASK = "********"


class Settings(BaseSettings):
    """Environment-sourced credentials for the API database."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    api_pg_db_username: str = ""
    api_pg_db_password: str = ""
    api_pg_db_database: str = ""


class ConnectionConfig(BaseModel):
    """Immutable description of how to reach the database and find its mappings."""

    model_config = ConfigDict(frozen=True)

    type: Literal["postgres"] = DB_TYPE
    host: str = DB_HOST
    port: int = DB_PORT
    username: str
    password: str = Field(repr=False)
    database: str
    ssl: bool = DB_SSL
    entities: tuple[str, ...] = ENTITIES_PATTERNS
    migrations: tuple[str, ...] = MIGRATIONS_PATTERNS

    def connect_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for psycopg2.connect()."""
        return {
            "host": self.host,
            "port": self.port,
            "dbname": self.database,
            "user": self.username,
            "password": self.password,
            "sslmode": "require" if self.ssl else "disable",
        }

    def redacted(self) -> dict[str, Any]:
        """Plain dict of the record with the password masked."""
        data = self.model_dump()
        data["password"] = PASSWORD_MASK if self.password else ""
        data["entities"] = list(self.entities)
        data["migrations"] = list(self.migrations)
        return data


def load_connection_config(settings: Settings | None = None, *, strict: bool = True) -> ConnectionConfig:
    """
    Build the connection record from the environment.

    Args:
        settings: Pre-built settings; read from the environment (and .env) when omitted.
        strict: Raise MissingConfigurationError when a required variable is
            absent or empty. When False, log a warning and build the record anyway.

    Returns:
        A frozen ConnectionConfig.
    """
    if settings is None:
        settings = Settings()

    values = {
        "username": settings.api_pg_db_username,
        "password": settings.api_pg_db_password,
        "database": settings.api_pg_db_database,
    }
    missing = [REQUIRED_ENV_VARS[field] for field, value in values.items() if not value.strip()]

    if missing:
        if strict:
            raise MissingConfigurationError(missing)
        logger.warning(f"Building connection config without: {', '.join(missing)}")

    return ConnectionConfig(**values)
