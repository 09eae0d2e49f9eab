# catalog/config.py
"""Runtime settings, read from the environment on each call."""
import os

DEFAULT_DATABASE_URL = "sqlite:///catalog.db"

def database_url() -> str:
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)

def log_level() -> str:
    return os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()

def host() -> str:
    return os.getenv("CATALOG_HOST", "127.0.0.1")

def port() -> int:
    return int(os.getenv("CATALOG_PORT", "8000"))
