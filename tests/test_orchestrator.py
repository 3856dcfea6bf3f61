"""End-to-end tests for the generation pipeline."""
from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from datagen.core.config import GenerationConfig
from datagen.errors import OutputDirectoryError, StageError
from datagen.models import SENTINEL_DATE, CustomerStatus
from datagen.pipeline import DataOrchestrator, OutputFile, RunSummary, StageResult
from datagen.storage import FileRecordParser, SaveError


def _config(output_dir: Path, **overrides) -> GenerationConfig:
    values = dict(
        start_date=date(2021, 1, 1),
        end_date=date(2021, 3, 31),
        asset_count=5,
        user_count=40,
        output_dir=output_dir,
        seed=7,
    )
    values.update(overrides)
    return GenerationConfig(**values)


def _rows(directory: Path, output_file: OutputFile) -> list[list[str]]:
    return FileRecordParser(output_file.path_in(directory)).read()


def test_full_run_produces_consistent_files(tmp_path: Path) -> None:
    out = tmp_path / "run"
    summary = DataOrchestrator(_config(out)).generate()

    assets = _rows(out, OutputFile.ASSETS)
    prices = _rows(out, OutputFile.PRICES)
    users = _rows(out, OutputFile.USERS)
    transactions = _rows(out, OutputFile.TRANSACTIONS)
    holdings = _rows(out, OutputFile.HOLDINGS)

    assert [stage.name for stage in summary.stages] == [
        "assets",
        "prices",
        "users",
        "transactions",
        "holdings",
    ]
    assert summary.rows_by_stage["assets"] == len(assets) == 5
    assert summary.rows_by_stage["prices"] == len(prices) == 5 * 90
    assert summary.rows_by_stage["users"] == len(users) == 40
    assert summary.rows_by_stage["transactions"] == len(transactions)
    assert summary.warnings == ()

    asset_ids = {row[0] for row in assets}
    user_ids = {row[0] for row in users}
    assert {row[0] for row in prices} == asset_ids
    assert all(Decimal(row[2]) > 0 for row in prices)
    assert {row[1] for row in transactions} <= user_ids
    assert {row[2] for row in transactions} <= asset_ids
    assert {row[0] for row in holdings} <= user_ids
    assert {row[1] for row in holdings} <= asset_ids

    for row in users:
        join, departure, status = row[4], row[5], row[6]
        if status == CustomerStatus.ACTIVE.value:
            assert departure == SENTINEL_DATE.isoformat()
        else:
            assert status == CustomerStatus.DEPARTED.value
            assert departure > join


def test_holdings_match_net_transaction_amounts(tmp_path: Path) -> None:
    out = tmp_path / "run"
    DataOrchestrator(_config(out, user_count=60)).generate()

    net: dict[tuple[str, str, str], Decimal] = defaultdict(Decimal)
    for row in _rows(out, OutputFile.TRANSACTIONS):
        amount = Decimal(row[4])
        net[(row[1], row[2], row[5])] += amount if row[3] == "BUY" else -amount
    expected = {key: value for key, value in net.items() if value > 0}

    holdings = {(row[0], row[1], row[3]): Decimal(row[2]) for row in _rows(out, OutputFile.HOLDINGS)}

    assert holdings == expected


def test_single_day_single_user_run(tmp_path: Path) -> None:
    out = tmp_path / "tiny"
    config = _config(out, start_date=date(2022, 6, 1), end_date=date(2022, 6, 1), asset_count=1, user_count=1)

    summary = DataOrchestrator(config).generate()

    assert summary.rows_by_stage == {
        "assets": 1,
        "prices": 1,
        "users": 1,
        "transactions": 0,
        "holdings": 0,
    }
    [user] = _rows(out, OutputFile.USERS)
    assert user[4] == "2022-06-01"
    assert user[6] == "ACTIVE"


def test_same_seed_reproduces_the_dataset(tmp_path: Path) -> None:
    DataOrchestrator(_config(tmp_path / "a")).generate()
    DataOrchestrator(_config(tmp_path / "b")).generate()

    for output_file in OutputFile:
        first = output_file.path_in(tmp_path / "a").read_text(encoding="utf-8")
        second = output_file.path_in(tmp_path / "b").read_text(encoding="utf-8")
        assert first == second


def test_existing_output_files_are_not_overwritten(tmp_path: Path) -> None:
    out = tmp_path / "run"
    out.mkdir()
    existing = OutputFile.USERS.path_in(out)
    existing.write_text("keep me\n", encoding="utf-8")

    with pytest.raises(OutputDirectoryError, match="users.txt"):
        DataOrchestrator(_config(out)).generate()

    assert existing.read_text(encoding="utf-8") == "keep me\n"


def test_failed_stage_removes_all_output(tmp_path: Path, monkeypatch) -> None:
    out = tmp_path / "run"

    def _explode(self):
        raise RuntimeError("holdings exploded")

    monkeypatch.setattr(DataOrchestrator, "_holdings_generator", _explode)

    with pytest.raises(StageError, match="holdings exploded") as excinfo:
        DataOrchestrator(_config(out)).generate()

    assert excinfo.value.stage == "holdings"
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert not out.exists()


def test_failure_keeps_a_pre_existing_directory(tmp_path: Path, monkeypatch) -> None:
    out = tmp_path / "run"
    out.mkdir()
    (out / "notes.md").write_text("unrelated", encoding="utf-8")

    def _explode(self):
        raise RuntimeError("boom")

    monkeypatch.setattr(DataOrchestrator, "_transaction_generator", _explode)

    with pytest.raises(StageError):
        DataOrchestrator(_config(out)).generate()

    assert sorted(p.name for p in out.iterdir()) == ["notes.md"]


def test_output_path_that_is_a_file_is_rejected(tmp_path: Path) -> None:
    target = tmp_path / "occupied"
    target.write_text("", encoding="utf-8")

    with pytest.raises(OutputDirectoryError):
        DataOrchestrator(_config(target)).generate()


def test_summary_reports_saved_rows_per_stage(tmp_path: Path, caplog) -> None:
    errors = (SaveError("bad row", ("x",)), SaveError("bad row", ("y",)))
    stage = StageResult(name="transactions", rows=1200, elapsed=0.25, errors=errors)
    summary = RunSummary(output_dir=tmp_path, stages=(stage,), elapsed=0.3)

    with caplog.at_level(logging.INFO, logger="datagen.pipeline.orchestrator"):
        DataOrchestrator(_config(tmp_path))._log_summary(summary)

    assert stage.saved_rows == 1198
    assert "1,200 rows" in caplog.text
    assert "1,198 saved" in caplog.text
    assert "2 rows could not be saved" in caplog.text


def test_unwritable_output_directory_is_reported_and_cleaned_up(tmp_path: Path, monkeypatch) -> None:
    out = tmp_path / "run"

    def _refuse(self, *args, **kwargs):
        raise OSError("disk full")

    monkeypatch.setattr(Path, "mkdir", _refuse)

    with pytest.raises(OutputDirectoryError, match="disk full") as excinfo:
        DataOrchestrator(_config(out)).generate()

    assert isinstance(excinfo.value.__cause__, OSError)
    assert not out.exists()
    for output_file in OutputFile:
        assert not output_file.path_in(out).exists()
