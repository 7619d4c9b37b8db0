"""
Runtime settings for the headless runner.

Game rules are fixed in domain/constants.py; only runner knobs come from the
environment (or a .env file).
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_LEVEL = os.getenv("SNAKE_LOG_LEVEL", "INFO")


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"SNAKE_SEED must be an integer, got {raw!r}")


SEED = _parse_seed(os.getenv("SNAKE_SEED"))


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )
