"""Command line entry point for generating a mock dataset."""
from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from datagen.core.config import GenerationConfig, Settings, get_settings
from datagen.core.log import get_logger, init_logging, log_context
from datagen.errors import ConfigurationError
from datagen.pipeline import DataOrchestrator

logger = get_logger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> argparse.Namespace:
    settings = settings or get_settings()

    parser = argparse.ArgumentParser(description="Generate a mock financial dataset.")
    parser.add_argument("--assets", type=int, default=settings.asset_count, help="Number of assets to create")
    parser.add_argument("--users", type=int, default=settings.user_count, help="Number of users to create")
    parser.add_argument(
        "--start", type=date.fromisoformat, default=settings.start_date, help="First price date (YYYY-MM-DD)"
    )
    parser.add_argument(
        "--end", type=date.fromisoformat, default=settings.end_date, help="Last price date (YYYY-MM-DD)"
    )
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed for reproducibility")
    parser.add_argument("--output", type=Path, default=None, help="Output directory (default: timestamped)")
    parser.add_argument("--log-level", default=settings.log_level, help="Console log level")
    parser.add_argument("--log-file", type=Path, default=None, help="Also append log lines to this file")
    parser.add_argument("--no-progress", action="store_true", help="Disable progress bars")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        init_logging()
        logger.error("Invalid environment: %s", exc)
        return 1

    args = parse_args(argv, settings)
    init_logging(level=args.log_level, log_file=args.log_file, progress=not args.no_progress)
    log_context.bind(job="generate_mock_data")

    try:
        config = GenerationConfig.build(
            start_date=args.start,
            end_date=args.end,
            asset_count=args.assets,
            user_count=args.users,
            output_dir=args.output or settings.resolved_output_dir(),
            seed=args.seed,
        )
    except ConfigurationError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 1

    try:
        summary = DataOrchestrator(config).generate()
    except Exception:
        logger.exception("Data generation aborted")
        return 1

    logger.info(
        "Generated %s",
        ", ".join(f"{name}: {rows:,}" for name, rows in summary.rows_by_stage.items()),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
