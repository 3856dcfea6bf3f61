"""Logging for the generator: rich console output, optional log file and progress bars."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from threading import RLock
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback

from .context import ContextFilter, log_context
from .progress import progress_manager
from .timing import timeit

__all__ = [
    "LoggingConfig",
    "init_logging",
    "get_logger",
    "shutdown_logging",
    "log_context",
    "progress_manager",
    "timeit",
]


@dataclass
class LoggingConfig:
    """Runtime configuration for the logging subsystem."""

    app_name: str = "datagen"
    level: str | int = "INFO"
    log_file: Optional[Path] = None
    console: bool = True
    rich_tracebacks: bool = True
    progress: bool = True


_config_lock = RLock()
_config: LoggingConfig | None = None
_context_filter = ContextFilter()


def _parse_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), logging.INFO)


def _build_handlers(cfg: LoggingConfig, level: int) -> list[logging.Handler]:
    handlers: list[logging.Handler] = []

    if cfg.rich_tracebacks:
        install_rich_traceback(show_locals=False)

    console = Console(stderr=True)
    progress_manager.use_console(console)
    progress_manager.enabled = cfg.progress

    if cfg.console:
        rich_handler = RichHandler(
            console=console,
            rich_tracebacks=cfg.rich_tracebacks,
            show_level=True,
            show_path=False,
            markup=False,
            log_time_format="%Y-%m-%d %H:%M:%S",
        )
        rich_handler.setLevel(level)
        rich_handler.setFormatter(logging.Formatter("%(context)s%(message)s"))
        rich_handler.addFilter(_context_filter)
        handlers.append(rich_handler)

    if cfg.log_file:
        log_file = Path(cfg.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)-8s | %(name)s | %(context)s%(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        file_handler.addFilter(_context_filter)
        handlers.append(file_handler)

    return handlers


def init_logging(**kwargs: object) -> None:
    """Install the shared handlers on the root logger.

    Repeated calls with the same options are no-ops; different options
    replace the previous handlers.
    """

    with _config_lock:
        global _config

        cfg = LoggingConfig()
        for key, value in kwargs.items():
            if not hasattr(cfg, key):
                raise TypeError(f"Unknown logging option: {key}")
            setattr(cfg, key, value)

        if _config is not None:
            if _config == cfg:
                return
            _teardown_locked()

        root = logging.getLogger()
        root.setLevel(logging.NOTSET)
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in _build_handlers(cfg, _parse_level(cfg.level)):
            root.addHandler(handler)

        _config = cfg


def _teardown_locked() -> None:
    global _config
    _config = None
    progress_manager.reset_console()
    progress_manager.enabled = True
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def shutdown_logging() -> None:
    """Remove and close all handlers, intended for tests."""

    with _config_lock:
        _teardown_locked()


def get_logger(name: str | None = None) -> logging.Logger:
    cfg = _config or LoggingConfig()
    return logging.getLogger(name or cfg.app_name)
