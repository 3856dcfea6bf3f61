"""Tests for run configuration and environment settings."""
from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import pytest
from pydantic import ValidationError

from datagen.core.config import GenerationConfig, Settings, get_settings
from datagen.core.paths import default_output_dir, run_dir_name
from datagen.errors import ConfigurationError

ENV_NAMES = (
    "DATAGEN_START_DATE",
    "DATAGEN_END_DATE",
    "DATAGEN_ASSET_COUNT",
    "DATAGEN_USER_COUNT",
    "DATAGEN_OUTPUT_DIR",
    "DATAGEN_SEED",
    "DATAGEN_LOG_LEVEL",
)


@pytest.fixture()
def clean_env(monkeypatch, tmp_path: Path):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def _values(**overrides) -> dict[str, object]:
    values: dict[str, object] = dict(
        start_date=date(2020, 1, 1),
        end_date=date(2020, 12, 31),
        asset_count=10,
        user_count=20,
        output_dir=Path("out"),
    )
    values.update(overrides)
    return values


def test_defaults_are_applied() -> None:
    config = GenerationConfig(**_values())

    assert config.seed is None
    assert config.join_after_start_rate == 30.0
    assert config.departure_rate == 20.0
    assert config.initial_price == 100.0
    assert config.day_count == 366


def test_single_day_window_is_valid() -> None:
    config = GenerationConfig(**_values(end_date=date(2020, 1, 1)))

    assert config.day_count == 1


@pytest.mark.parametrize(
    "overrides",
    [
        {"end_date": date(2019, 12, 31)},
        {"asset_count": 0},
        {"user_count": -3},
        {"departure_rate": 120.0},
        {"join_after_start_rate": -0.5},
        {"initial_price": 0.0},
        {"output_dir": Path("  ")},
    ],
)
def test_invalid_values_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        GenerationConfig(**_values(**overrides))


def test_build_reports_configuration_error() -> None:
    with pytest.raises(ConfigurationError, match="end_date"):
        GenerationConfig.build(**_values(end_date=date(2019, 1, 1)))


def test_config_is_frozen() -> None:
    config = GenerationConfig(**_values())

    with pytest.raises(ValidationError):
        config.asset_count = 5  # type: ignore[misc]


def test_settings_defaults(clean_env) -> None:
    settings = get_settings()

    assert settings == Settings()
    assert settings.asset_count == 100
    assert settings.user_count == 1000
    assert settings.start_date == date(2020, 1, 1)
    assert settings.end_date == date(2022, 1, 1)


def test_settings_read_environment(clean_env) -> None:
    clean_env.setenv("DATAGEN_START_DATE", "2019-05-01")
    clean_env.setenv("DATAGEN_ASSET_COUNT", "12")
    clean_env.setenv("DATAGEN_SEED", "99")
    clean_env.setenv("DATAGEN_OUTPUT_DIR", "/tmp/mock-out")

    settings = Settings.from_env()

    assert settings.start_date == date(2019, 5, 1)
    assert settings.asset_count == 12
    assert settings.seed == 99
    assert settings.resolved_output_dir() == Path("/tmp/mock-out")


def test_settings_read_dotenv_file(clean_env, tmp_path: Path) -> None:
    # Make sure the value loaded from .env is removed again afterwards.
    clean_env.setenv("DATAGEN_USER_COUNT", "0")
    clean_env.delenv("DATAGEN_USER_COUNT")
    (tmp_path / ".env").write_text("DATAGEN_USER_COUNT=321\n", encoding="utf-8")

    assert Settings.from_env().user_count == 321


def test_invalid_environment_value(clean_env) -> None:
    clean_env.setenv("DATAGEN_USER_COUNT", "many")

    with pytest.raises(ConfigurationError, match="DATAGEN_USER_COUNT"):
        Settings.from_env()


def test_run_dir_name_is_timestamped() -> None:
    moment = datetime(2024, 6, 7, 14, 5)

    assert run_dir_name(moment) == "mock_data_jun_07_14_05"
    assert default_output_dir(Path("base"), moment) == Path("base/mock_data_jun_07_14_05")
