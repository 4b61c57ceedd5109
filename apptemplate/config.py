"""Application settings read from the environment."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Mapping

DB_CONNECTION_MYSQL = "mysql"

DEFAULT_HTTP_PORT = "8080"
DEFAULT_HTTP_TIMEOUT = 120

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class DBConfig:
    """Credentials and location of one database."""

    username: str = ""
    password: str = ""
    port: str = ""
    database: str = ""
    host: str = ""


@dataclass(frozen=True)
class AppConfig:
    """Name, version and run mode of the application."""

    app_name: str = ""
    run_mode: str = ""
    app_version: str = ""


@dataclass(frozen=True)
class HTTPConfig:
    """Settings of the HTTP listener."""

    http_port: str = DEFAULT_HTTP_PORT
    http_timeout: int = DEFAULT_HTTP_TIMEOUT


@dataclass(frozen=True)
class DBConnectionPool:
    """Connection pool limits; zero means unset."""

    max_open_connection: int = 0
    max_idle_connection: int = 0
    max_idle_time_connection: int = 0
    max_life_time_connection: int = 0


@dataclass(frozen=True)
class AllConfig:
    """Every setting the application needs."""

    db_config: dict[str, DBConfig] = field(default_factory=dict)
    app_config: AppConfig = field(default_factory=AppConfig)
    http_config: HTTPConfig = field(default_factory=HTTPConfig)
    db_connection_pool: DBConnectionPool = field(default_factory=DBConnectionPool)


def _parse_int(text: str | None) -> int | None:
    """Parse a signed decimal 64-bit integer; None when it is not one."""
    if text is None or not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        return None
    return value


def _env(environ: Mapping[str, str] | None) -> Mapping[str, str]:
    return os.environ if environ is None else environ


def set_connection_pool(environ: Mapping[str, str] | None = None) -> DBConnectionPool:
    """Read pool limits, leaving a limit at zero when its variable is not an integer."""
    env = _env(environ)

    def read(name: str) -> int:
        value = _parse_int(env.get(name))
        return 0 if value is None else value

    return DBConnectionPool(
        max_open_connection=read("MAX_OPEN_CONNECTION"),
        max_idle_connection=read("MAX_IDDLE_CONNECTION"),
        max_idle_time_connection=read("DB_MAX_IDLE_TIME_CONN_SECONDS"),
        max_life_time_connection=read("DB_MAX_LIFE_TIME_CONN_SECONDS"),
    )


def init_config(environ: Mapping[str, str] | None = None) -> AllConfig:
    """Build the full configuration from environment variables."""
    env = _env(environ)

    app_config = AppConfig(
        app_name=env.get("APP_NAME", ""),
        app_version=env.get("APP_VERSION", ""),
        run_mode=env.get("RUN_MODE", ""),
    )

    db_configs = {
        DB_CONNECTION_MYSQL: DBConfig(
            username=env.get("DB_MYSQL_USERNAME", ""),
            password=env.get("DB_MYSQL_PASSWORD", ""),
            host=env.get("DB_MYSQL_HOST", ""),
            port=env.get("DB_MYSQL_PORT", ""),
            database=env.get("DB_MYSQL_DBNAME", ""),
        )
    }

    http_config = HTTPConfig(
        http_port=env.get("HTTP_PORT") or DEFAULT_HTTP_PORT,
        http_timeout=DEFAULT_HTTP_TIMEOUT,
    )

    return AllConfig(
        db_config=db_configs,
        app_config=app_config,
        http_config=http_config,
        db_connection_pool=set_connection_pool(env),
    )