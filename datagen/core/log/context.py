"""Context helpers that prefix log records with run metadata."""
from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Dict, Iterator

_context_var: contextvars.ContextVar[dict[str, object]] = contextvars.ContextVar(
    "datagen_log_context", default={}
)


class LogContext:
    """Bind key/value pairs that are rendered in front of every log line."""

    def bind(self, **values: object) -> None:
        current = dict(_context_var.get())
        current.update({k: v for k, v in values.items() if v is not None})
        _context_var.set(current)

    def unbind(self, *keys: str) -> None:
        current = dict(_context_var.get())
        for key in keys:
            current.pop(key, None)
        _context_var.set(current)

    @contextmanager
    def scoped(self, **values: object) -> Iterator[None]:
        token = _context_var.set({**_context_var.get(), **{k: v for k, v in values.items() if v is not None}})
        try:
            yield
        finally:
            _context_var.reset(token)

    def clear(self) -> None:
        _context_var.set({})

    def as_dict(self) -> Dict[str, object]:
        return dict(_context_var.get())


class ContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        context = _context_var.get()
        record.context = "".join(f"{k}={v} " for k, v in context.items())
        return True


log_context = LogContext()
