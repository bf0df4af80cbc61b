"""Runtime configuration loaded from the environment and an optional .env file."""

import logging
import os
from decimal import Decimal

from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


CHECKOUT_DELAY_SECONDS = float(os.getenv("CHECKOUT_DELAY_SECONDS", "1.0"))

AUTO_ADVANCE_ENABLED = _get_bool("AUTO_ADVANCE_ENABLED", True)
AUTO_ADVANCE_MIN_SECONDS = float(os.getenv("AUTO_ADVANCE_MIN_SECONDS", "8.0"))
AUTO_ADVANCE_MAX_SECONDS = float(os.getenv("AUTO_ADVANCE_MAX_SECONDS", "15.0"))

SEED_DEMO_ORDERS = _get_bool("SEED_DEMO_ORDERS", True)
TAX_RATE = Decimal(os.getenv("TAX_RATE", "0.08"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-here")
PORT = int(os.getenv("PORT", 5000))
DEBUG = _get_bool("DEBUG", False)


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
