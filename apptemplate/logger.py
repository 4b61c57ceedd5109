"""Rotating, compressed file logger."""

from __future__ import annotations

import gzip
import json
import logging
import os
import re
import shutil
import time
from datetime import date, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from apptemplate.config import AppConfig

_BARE = re.compile(r"[A-Za-z0-9\-._/@^+]*")


def _quote(value: str) -> str:
    return value if _BARE.fullmatch(value) else json.dumps(value, ensure_ascii=False)


class KeyValueFormatter(logging.Formatter):
    """Formats records as time=... level=... msg=... lines."""

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="seconds")
        message = record.getMessage()
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return f"time={_quote(stamp)} level={record.levelname.lower()} msg={_quote(message)}"


def _compress(source: str, dest: str) -> None:
    with open(source, "rb") as src, gzip.open(dest, "wb") as dst:
        shutil.copyfileobj(src, dst)
    os.remove(source)
    cutoff = time.time() - 30 * 24 * 60 * 60
    base = Path(source)
    for backup in base.parent.glob(base.name + ".*.gz"):
        if backup.stat().st_mtime < cutoff:
            backup.unlink(missing_ok=True)


def new_logger(
    app_config: AppConfig,
    base_dir: str | os.PathLike | None = None,
    today: date | None = None,
) -> logging.Logger:
    """Create a logger writing to log/<app name>_<DDMMYY>.log under base_dir."""
    day = today or date.today()
    log_path = Path(base_dir or Path.cwd()) / "log" / f"{app_config.app_name}_{day:%d%m%y}.log"
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        log_path, maxBytes=5 * 1024 * 1024, backupCount=10, encoding="utf-8", delay=True
    )
    handler.namer = lambda name: name + ".gz"
    handler.rotator = _compress
    handler.setFormatter(KeyValueFormatter())

    logger = logging.Logger(app_config.app_name or "apptemplate", level=logging.INFO)
    logger.addHandler(handler)
    return logger