"""Connection settings for the SOA database."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from sqlalchemy.engine import URL

from .env import optional_env_var, optional_int_env_var, require_env_vars

DEFAULT_PORT: Final[str] = "1433"
DEFAULT_DATABASE: Final[str] = "SOADB"
DEFAULT_ODBC_DRIVER: Final[str] = "ODBC Driver 18 for SQL Server"
DEFAULT_SCHEMA: Final[str] = "dbo"
DEFAULT_USER_ID: Final[int] = 1


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    """Holds the values needed to reach the database and act on it."""

    server: str
    username: str
    password: str
    port: str = DEFAULT_PORT
    database: str = DEFAULT_DATABASE
    driver: str = DEFAULT_ODBC_DRIVER
    schema: str = DEFAULT_SCHEMA
    user_id: int = DEFAULT_USER_ID
    uri_override: str | None = None

    def database_url(self) -> URL | str:
        """Return the SQLAlchemy URL, honouring ``DATABASE_URI`` overrides."""

        if self.uri_override:
            return self.uri_override
        return URL.create(
            "mssql+pyodbc",
            username=self.username,
            password=self.password,
            host=self.server,
            port=int(self.port),
            database=self.database,
            query={"driver": self.driver, "TrustServerCertificate": "yes"},
        )


def get_provider_config() -> ProviderConfig:
    uri_override = os.getenv("DATABASE_URI") or None
    if uri_override is not None:
        # local runs against sqlite need no credentials
        return ProviderConfig(
            server="",
            username="",
            password="",
            schema=optional_env_var("SOASTATE_SCHEMA", ""),
            user_id=optional_int_env_var("SOASTATE_USER_ID", DEFAULT_USER_ID),
            uri_override=uri_override,
        )

    values = require_env_vars(("SOASTATE_SERVER", "SOASTATE_USERNAME", "SOASTATE_PASSWORD"))
    return ProviderConfig(
        server=values["SOASTATE_SERVER"],
        username=values["SOASTATE_USERNAME"],
        password=values["SOASTATE_PASSWORD"],
        port=optional_env_var("SOASTATE_PORT", DEFAULT_PORT),
        database=optional_env_var("SOASTATE_DATABASE", DEFAULT_DATABASE),
        driver=optional_env_var("SOASTATE_ODBC_DRIVER", DEFAULT_ODBC_DRIVER),
        schema=optional_env_var("SOASTATE_SCHEMA", DEFAULT_SCHEMA),
        user_id=optional_int_env_var("SOASTATE_USER_ID", DEFAULT_USER_ID),
    )
