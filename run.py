"""Entry point running the tick-loop demo against a configured dispatcher."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Optional

from core.config_loader import configure_logging, load_config
from core.dispatcher import Dispatcher
from demo.tick_loop import run_ticks

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simple events demo loop")
    parser.add_argument("--ticks", type=int, default=5, help="Number of ticks to simulate")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> None:
    args = parse_args(argv)
    if args.ticks < 0:
        raise SystemExit("--ticks must be non-negative")
    config = load_config(config_path=args.config)
    configure_logging(config)
    dispatcher = Dispatcher.from_config(config.dispatcher)
    board = run_ticks(dispatcher, args.ticks)
    for line in board.log:
        LOGGER.info(line)


if __name__ == "__main__":
    main()
