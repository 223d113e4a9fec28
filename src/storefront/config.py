"""Configuration for the storefront.

Directory paths, password hashing cost, navigation paths and logging.
Values can be overridden via environment variables or a ``.env`` file.
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# --- Directory Configuration ---

# Project root (src/storefront/config.py -> repo root)
ROOT_DIR = Path(__file__).resolve().parents[2]

DATA_DIR = Path(os.getenv("STOREFRONT_DATA_DIR", str(ROOT_DIR / "data")))

USERS_COLLECTION = "users"
PRODUCTS_COLLECTION = "products"
ORDERS_COLLECTION = "orders"

# --- Security ---

# bcrypt cost factor, fixed per deployment
BCRYPT_ROUNDS: int = int(os.getenv("STOREFRONT_BCRYPT_ROUNDS", "10"))

# --- Navigation ---

LOGIN_PATH = "/login"
PRODUCTS_PATH = "/products"

# --- Logging ---

LOG_LEVEL: str = os.getenv("STOREFRONT_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Install the root handler used by the CLI."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
