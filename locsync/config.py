"""Configuration: env, API binding, snapshot storage location."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of locsync package)
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")

DATA_DIR = Path(os.getenv("LOCSYNC_DATA_DIR", str(BASE_DIR / "data")))

# Snapshot persistence (one JSON document under a fixed key)
STORAGE_KEY = os.getenv("LOCSYNC_STORAGE_KEY", "ship-companion-data")
SNAPSHOT_PATH = DATA_DIR / f"{STORAGE_KEY}.json"

# API
API_HOST = os.getenv("LOCSYNC_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("LOCSYNC_API_PORT", "8000"))
# Browser editor origin(s), comma separated; "*" allows any
WEB_ORIGINS = [o.strip() for o in os.getenv("LOCSYNC_WEB_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOCSYNC_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
