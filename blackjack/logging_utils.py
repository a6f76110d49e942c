"""Logging setup shared by the CLI and the engine."""

import logging

from blackjack.config import config


def setup_logging(level: str | None = None) -> None:
    """Call once at program start (cli.main)."""
    level = (level or config.logging.level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
