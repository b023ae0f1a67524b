"""Runtime settings from the environment; a local .env is loaded without overriding it."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def log_level() -> str:
    return os.getenv("BINPACK3D_LOG_LEVEL", "WARNING").strip().upper()


def default_catalog() -> str:
    return os.getenv("BINPACK3D_CATALOG", "standard").strip()


def configure_logging(level: Optional[str] = None) -> None:
    """Set up root logging once; ``level`` overrides BINPACK3D_LOG_LEVEL."""
    name = (level or log_level()).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level '{name}'")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
