"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import os
import random
from collections.abc import Sequence
from pathlib import Path

from broadside.game.app.controller import GameController
from broadside.game.infra.app_data import ensure_app_data_dirs
from broadside.game.infra.config import GameConfig, load_default_env_files
from broadside.game.infra.logging import setup_logging, shutdown_logging
from broadside.game.saves.repository import SaveRepository
from broadside.game.saves.service import SaveService
from broadside.game.scores.repository import ScoreRepository
from broadside.game.scores.service import ScoreService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Single-player console Battleship.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible ship placement.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="App-data directory for saves, scores and logs.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Run the Broadside application."""
    args = build_parser().parse_args(argv)
    load_default_env_files()
    if args.data_dir is not None:
        os.environ["BROADSIDE_APP_DATA_DIR"] = str(args.data_dir.resolve())
    paths = ensure_app_data_dirs()
    setup_logging()
    config = GameConfig.from_env()
    seed = args.seed if args.seed is not None else config.seed
    logger.info(
        "app_data_paths root=%s logs=%s saves=%s scores=%s seed=%s",
        paths["root"],
        paths["logs"],
        paths["saves"],
        paths["scores"],
        seed,
    )
    controller = GameController(
        config=config,
        rng=random.Random(seed),
        save_service=SaveService(SaveRepository(paths["saves"] / config.save_file)),
        score_service=ScoreService(ScoreRepository(paths["scores"] / config.score_file)),
    )
    try:
        controller.run()
    finally:
        shutdown_logging()


if __name__ == "__main__":
    main()
