"""Configuration and settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# Paths
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = Path(os.getenv("DATA_DIR", str(PROJECT_ROOT / "data")))
OUTPUT_DIR = Path(os.getenv("OUTPUT_DIR", str(PROJECT_ROOT / "output")))
INBOX_PATH = Path(os.getenv("INBOX_PATH", str(DATA_DIR / "inbox.json")))

# Ensure directories exist
DATA_DIR.mkdir(parents=True, exist_ok=True)
OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

# Database
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DATA_DIR / 'inbox_assist.sqlite'}")

# Logging
LOG_DIR = OUTPUT_DIR / "logs"
LOG_FILE = LOG_DIR / "app.jsonl"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
VERBOSE_LOGGING = os.getenv("VERBOSE_LOGGING", "false").lower() == "true"

# Ensure log directory exists
LOG_DIR.mkdir(parents=True, exist_ok=True)

# Server
SERVER_PORT = int(os.getenv("SERVER_PORT", "8000"))

# Reply tracker pagination
TRACKER_PAGE_SIZE = max(1, int(os.getenv("TRACKER_PAGE_SIZE", "20")))

# Thread hydration cache (stale-while-revalidate).
# Entries older than the TTL are served stale while a background refetch runs.
HYDRATION_TTL_SECONDS = float(os.getenv("HYDRATION_TTL_SECONDS", "60"))
# How long a request waits for a first fetch before answering with the loading view.
HYDRATION_WAIT_SECONDS = float(os.getenv("HYDRATION_WAIT_SECONDS", "5.0"))

# Delay after which the empty-state refresh control drops its loading indicator
REFRESH_RESET_MS = int(os.getenv("REFRESH_RESET_MS", "1000"))
