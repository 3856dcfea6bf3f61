"""Run the five generation stages and manage the output directory."""
from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from time import perf_counter
from typing import Callable, Optional, Type, TypeVar

from datagen.catalogs.asset_classes import get_asset_class
from datagen.catalogs.market_trends import MarketTrendCalendar, default_calendar
from datagen.core.config import GenerationConfig
from datagen.core.log import get_logger, log_context
from datagen.errors import OutputDirectoryError, StageError
from datagen.generators import (
    AssetDataGenerator,
    AssetPriceIndex,
    DataGenerator,
    HoldingsAggregator,
    PriceSeriesGenerator,
    TransactionDataGenerator,
    UserDataGenerator,
)
from datagen.models import Asset, PricePoint, Transaction, User
from datagen.pipeline.files import OutputFile
from datagen.pipeline.service import StageResult, generate_and_save
from datagen.storage import (
    ASSET_SCHEMA,
    PRICE_SCHEMA,
    TRANSACTION_SCHEMA,
    USER_SCHEMA,
    FileRecordParser,
    FileRecordSink,
    RecordSchema,
    SaveError,
)

logger = get_logger(__name__)

M = TypeVar("M")

STAGE_COUNT = 5
MAX_LOGGED_WARNINGS = 20


@dataclass(frozen=True, slots=True)
class RunSummary:
    """What a completed run produced."""

    output_dir: Path
    stages: tuple[StageResult, ...]
    elapsed: float

    @property
    def warnings(self) -> tuple[SaveError, ...]:
        return tuple(error for stage in self.stages for error in stage.errors)

    @property
    def rows_by_stage(self) -> dict[str, int]:
        return {stage.name: stage.rows for stage in self.stages}


class DataOrchestrator:
    """Generate assets, prices, users, transactions and holdings in order.

    Every stage writes its records to the output directory. Later stages read
    those files back rather than sharing objects in memory, so each file is
    checked by the parser before anything depends on it. When a stage fails
    all files of the run are removed and the error is raised again.
    """

    def __init__(
        self,
        config: GenerationConfig,
        rng: Optional[random.Random] = None,
        trends: Optional[MarketTrendCalendar] = None,
    ) -> None:
        self.config = config
        self._rng = rng or random.Random(config.seed)
        self._trends = trends or default_calendar()
        self._created_dir = False

    @property
    def output_dir(self) -> Path:
        return Path(self.config.output_dir)

    def path_for(self, output_file: OutputFile) -> Path:
        return output_file.path_in(self.output_dir)

    def generate(self) -> RunSummary:
        self._check_output_dir()
        started = perf_counter()
        with log_context.scoped(run=self.output_dir.name):
            logger.info(
                "Generating %s assets and %s users from %s to %s into %s",
                self.config.asset_count,
                self.config.user_count,
                self.config.start_date,
                self.config.end_date,
                self.output_dir,
            )
            try:
                self._create_output_dir()
                stages = (
                    self._run_stage(1, "assets", OutputFile.ASSETS, self._asset_generator),
                    self._run_stage(2, "prices", OutputFile.PRICES, self._price_generator),
                    self._run_stage(3, "users", OutputFile.USERS, self._user_generator),
                    self._run_stage(4, "transactions", OutputFile.TRANSACTIONS, self._transaction_generator),
                    self._run_stage(5, "holdings", OutputFile.HOLDINGS, self._holdings_generator),
                )
            except Exception as exc:
                logger.error("Data generation failed after %.2fs: %s", perf_counter() - started, exc)
                self._cleanup()
                raise

            summary = RunSummary(output_dir=self.output_dir, stages=stages, elapsed=perf_counter() - started)
            self._log_summary(summary)
        return summary

    def _check_output_dir(self) -> None:
        directory = self.output_dir
        if directory.exists() and not directory.is_dir():
            raise OutputDirectoryError(f"Output path exists and is not a directory: {directory}")
        existing = [f.value for f in OutputFile if self.path_for(f).exists()]
        if existing:
            raise OutputDirectoryError(
                f"Output directory {directory} already contains {', '.join(existing)}"
            )

    def _create_output_dir(self) -> None:
        directory = self.output_dir
        if directory.is_dir():
            return
        try:
            directory.mkdir(parents=True)
        except OSError as exc:
            raise OutputDirectoryError(f"Could not create output directory {directory}: {exc}") from exc
        self._created_dir = True

    def _run_stage(
        self,
        step: int,
        name: str,
        output_file: OutputFile,
        build: Callable[[], DataGenerator],
    ) -> StageResult:
        logger.info("Step %s/%s: generating %s", step, STAGE_COUNT, name)
        with log_context.scoped(stage=name):
            try:
                generator = build()
                result = generate_and_save(name, generator, FileRecordSink(self.path_for(output_file)))
            except StageError:
                raise
            except Exception as exc:
                raise StageError(name, str(exc)) from exc

            logger.info(
                "Step %s completed in %sms - %s rows generated (%s warnings)",
                step,
                result.elapsed_ms,
                f"{result.rows:,}",
                len(result.errors),
            )
            for error in result.errors[:MAX_LOGGED_WARNINGS]:
                logger.warning("Row not saved: %s", error.message)
        return result

    def _load(self, output_file: OutputFile, schema: RecordSchema, model: Type[M]) -> list[M]:
        parser = FileRecordParser(self.path_for(output_file))
        return [model.from_row(schema.convert(fields)) for fields in parser.iter_rows()]  # type: ignore[attr-defined]

    def _asset_generator(self) -> DataGenerator:
        return AssetDataGenerator(self.config.asset_count, self._rng)

    def _price_generator(self) -> DataGenerator:
        assets = self._load(OutputFile.ASSETS, ASSET_SCHEMA, Asset)
        volatility = {asset.asset_id: get_asset_class(asset.asset_class_id).volatility for asset in assets}
        return PriceSeriesGenerator(
            asset_ids=[asset.asset_id for asset in assets],
            start_date=self.config.start_date,
            end_date=self.config.end_date,
            volatility_by_asset=volatility,
            trends=self._trends,
            rng=self._rng,
            initial_price=self.config.initial_price,
        )

    def _user_generator(self) -> DataGenerator:
        return UserDataGenerator(
            self.config.user_count,
            self.config.start_date,
            self.config.end_date,
            self._rng,
            join_after_start_rate=self.config.join_after_start_rate,
            departure_rate=self.config.departure_rate,
        )

    def _transaction_generator(self) -> DataGenerator:
        users = self._load(OutputFile.USERS, USER_SCHEMA, User)
        prices = AssetPriceIndex(self._load(OutputFile.PRICES, PRICE_SCHEMA, PricePoint))
        return TransactionDataGenerator(users, prices, self._rng)

    def _holdings_generator(self) -> DataGenerator:
        return HoldingsAggregator(self._load(OutputFile.TRANSACTIONS, TRANSACTION_SCHEMA, Transaction))

    def _cleanup(self) -> None:
        for output_file in OutputFile:
            path = self.path_for(output_file)
            try:
                path.unlink(missing_ok=True)
            except OSError as exc:
                logger.warning("Could not delete %s during cleanup: %s", path, exc)
        if self._created_dir:
            try:
                self.output_dir.rmdir()
            except OSError as exc:
                logger.warning("Left output directory %s in place: %s", self.output_dir, exc)
        logger.info("Removed partial output from %s", self.output_dir)

    def _log_summary(self, summary: RunSummary) -> None:
        for stage in summary.stages:
            logger.info(
                "%-13s %10s rows %10s saved %8sms",
                stage.name,
                f"{stage.rows:,}",
                f"{stage.saved_rows:,}",
                stage.elapsed_ms,
            )
        warnings = summary.warnings
        if warnings:
            logger.warning("%s rows could not be saved", len(warnings))
        logger.info("Total time: %.2fs, output in %s", summary.elapsed, summary.output_dir)
