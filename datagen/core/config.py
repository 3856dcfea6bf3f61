"""Run configuration for the generator, validated with pydantic."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from datagen.core.paths import default_output_dir
from datagen.errors import ConfigurationError

ENV_PREFIX = "DATAGEN_"


class GenerationConfig(BaseModel):
    """Parameters of one generation run."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date
    asset_count: int = Field(gt=0)
    user_count: int = Field(gt=0)
    output_dir: Path
    seed: Optional[int] = None
    join_after_start_rate: float = Field(default=30.0, ge=0.0, le=100.0)
    departure_rate: float = Field(default=20.0, ge=0.0, le=100.0)
    initial_price: float = Field(default=100.0, gt=0.0)

    @field_validator("output_dir")
    @classmethod
    def _output_dir_not_blank(cls, value: Path) -> Path:
        if not str(value).strip():
            raise ValueError("output_dir cannot be blank")
        return value

    @model_validator(mode="after")
    def _end_not_before_start(self) -> "GenerationConfig":
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date} must not be before start_date {self.start_date}"
            )
        return self

    @property
    def day_count(self) -> int:
        return (self.end_date - self.start_date).days + 1

    @classmethod
    def build(cls, **values: object) -> "GenerationConfig":
        """Validate ``values`` and report problems as :class:`ConfigurationError`."""

        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc


def _load_env() -> None:
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)


@dataclass(frozen=True, slots=True)
class Settings:
    """Defaults for the command line, overridable from the environment."""

    start_date: date = date(2020, 1, 1)
    end_date: date = date(2022, 1, 1)
    asset_count: int = 100
    user_count: int = 1000
    output_dir: Optional[Path] = None
    seed: Optional[int] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        _load_env()

        def _get_env(name: str) -> Optional[str]:
            value = os.getenv(f"{ENV_PREFIX}{name}")
            return value.strip() if value and value.strip() else None

        def _parse(name: str, parser, default):
            raw = _get_env(name)
            if raw is None:
                return default
            try:
                return parser(raw)
            except ValueError as exc:
                raise ConfigurationError(f"Invalid {ENV_PREFIX}{name}: {raw!r}") from exc

        defaults = cls()
        return cls(
            start_date=_parse("START_DATE", date.fromisoformat, defaults.start_date),
            end_date=_parse("END_DATE", date.fromisoformat, defaults.end_date),
            asset_count=_parse("ASSET_COUNT", int, defaults.asset_count),
            user_count=_parse("USER_COUNT", int, defaults.user_count),
            output_dir=_parse("OUTPUT_DIR", Path, None),
            seed=_parse("SEED", int, None),
            log_level=_get_env("LOG_LEVEL") or defaults.log_level,
        )

    def resolved_output_dir(self) -> Path:
        return self.output_dir or default_output_dir()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings.from_env()
