"""Tests for the logging helpers."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from datagen.core.log import get_logger, init_logging, log_context, shutdown_logging, timeit
from datagen.core.log.context import ContextFilter


@pytest.fixture()
def clean_context():
    log_context.clear()
    yield
    log_context.clear()


def _record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("datagen.test", logging.INFO, __file__, 1, message, None, None)


def test_context_filter_prefixes_bound_values(clean_context) -> None:
    log_context.bind(run="demo", skipped=None)
    record = _record()

    ContextFilter().filter(record)

    assert record.context == "run=demo "


def test_scoped_context_is_restored(clean_context) -> None:
    log_context.bind(run="demo")

    with log_context.scoped(stage="prices"):
        assert log_context.as_dict() == {"run": "demo", "stage": "prices"}

    assert log_context.as_dict() == {"run": "demo"}
    log_context.unbind("run")
    assert log_context.as_dict() == {}


def test_timeit_logs_duration_and_rows(caplog) -> None:
    logger = logging.getLogger("datagen.test.timer")

    with caplog.at_level(logging.INFO, logger="datagen.test.timer"):
        with timeit("prices", logger=logger) as timer:
            timer.add(250)

    assert timer.count == 250
    assert timer.elapsed >= 0
    assert "prices completed in" in caplog.text
    assert "250 rows" in caplog.text


def test_timeit_logs_failures(caplog) -> None:
    logger = logging.getLogger("datagen.test.timer")

    with caplog.at_level(logging.INFO, logger="datagen.test.timer"):
        with pytest.raises(RuntimeError):
            with timeit("users", logger=logger):
                raise RuntimeError("nope")

    assert "users failed after" in caplog.text


def test_init_logging_writes_log_file(tmp_path: Path, clean_context) -> None:
    log_file = tmp_path / "logs" / "run.log"
    init_logging(level="DEBUG", log_file=log_file, console=False, rich_tracebacks=False)
    try:
        log_context.bind(run="file-test")
        get_logger("datagen.test").info("written to disk")
    finally:
        shutdown_logging()

    content = log_file.read_text(encoding="utf-8")
    assert "run=file-test written to disk" in content
    assert "| INFO     | datagen.test |" in content


def test_init_logging_rejects_unknown_options() -> None:
    with pytest.raises(TypeError):
        init_logging(colour=True)
