import gzip
import os
import re
import time
from datetime import date
from pathlib import Path

import pytest

from apptemplate.config import AppConfig
from apptemplate.logger import new_logger


@pytest.fixture
def logger(tmp_path):
    log = new_logger(AppConfig(app_name="demo"), tmp_path, date(2024, 3, 5))
    yield log
    for handler in log.handlers:
        handler.close()


def _handler(log):
    (handler,) = log.handlers
    return handler


def test_log_file_name_uses_app_name_and_day(logger, tmp_path):
    assert Path(_handler(logger).baseFilename) == tmp_path / "log" / "demo_050324.log"


def test_writes_key_value_lines(logger):
    logger.info("hello world")
    logger.error("broken")
    _handler(logger).flush()
    lines = Path(_handler(logger).baseFilename).read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert re.fullmatch(r'time="[^"]+" level=info msg="hello world"', lines[0])
    assert lines[1].endswith("level=error msg=broken")


def test_debug_is_filtered(logger):
    logger.debug("hidden")
    logger.info("shown")
    _handler(logger).flush()
    content = Path(_handler(logger).baseFilename).read_text(encoding="utf-8")
    assert "hidden" not in content
    assert "msg=shown" in content


def test_rollover_compresses_backup(logger):
    logger.info("first")
    handler = _handler(logger)
    handler.doRollover()
    base = Path(handler.baseFilename)
    backup = Path(str(base) + ".1.gz")
    assert backup.exists()
    assert not base.exists()
    with gzip.open(backup, "rt", encoding="utf-8") as stream:
        assert "msg=first" in stream.read()


def test_rollover_removes_expired_backups(logger):
    handler = _handler(logger)
    base = Path(handler.baseFilename)
    base.parent.mkdir(parents=True, exist_ok=True)
    stale = Path(str(base) + ".5.gz")
    stale.write_bytes(b"")
    old = time.time() - 40 * 24 * 60 * 60
    os.utime(stale, (old, old))
    logger.info("fresh")
    handler.doRollover()
    assert not stale.exists()
    assert Path(str(base) + ".1.gz").exists()