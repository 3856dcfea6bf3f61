"""Exception types raised by the generation pipeline."""
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when run configuration or reference data is unusable."""


class NoMoreRowsError(LookupError):
    """Raised when a row is requested from an exhausted generator."""


class UnsupportedValueError(TypeError):
    """Raised when the record codec cannot render a value."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unsupported value type: {type(value).__name__}")
        self.value = value


class OutputDirectoryError(RuntimeError):
    """Raised when the output location cannot be used for a run."""


class StageError(RuntimeError):
    """Wrap a fatal failure inside one pipeline stage."""

    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"{stage}: {message}")
        self.stage = stage
