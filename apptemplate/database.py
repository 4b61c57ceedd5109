"""Database connection setup."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine

from apptemplate.config import DB_CONNECTION_MYSQL, AllConfig, DBConfig


@dataclass(frozen=True)
class Connection:
    """Open database engines of the application."""

    mysql: Engine


def build_dsn(db_config: DBConfig) -> str:
    """Build the MySQL connection URL; raises ValueError for a non-numeric port."""
    port = db_config.port.strip()
    if port and not port.isdigit():
        raise ValueError(f"invalid database port: {db_config.port!r}")
    url = URL.create(
        "mysql+pymysql",
        username=db_config.username or None,
        password=db_config.password or None,
        host=db_config.host or None,
        port=int(port) if port else None,
        database=db_config.database or None,
    )
    return url.render_as_string(hide_password=False)


def connect(conf: AllConfig, url: str | None = None) -> Connection:
    """Open the MySQL engine from the configuration (or the given URL) and ping it."""
    engine = create_engine(url or build_dsn(conf.db_config.get(DB_CONNECTION_MYSQL, DBConfig())), echo=True)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:
        engine.dispose()
        raise
    return Connection(mysql=engine)