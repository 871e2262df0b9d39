"""Test environment: temp SQLite file, temp output dir, fixture mailbox."""

import os
import tempfile
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"
INBOX_FIXTURE = FIXTURES_DIR / "inbox.json"

# Must be set before inbox_assist.config is imported.
_tmp_dir = Path(tempfile.mkdtemp(prefix="inbox_assist_tests_"))
os.environ["DATABASE_URL"] = f"sqlite:///{_tmp_dir / 'test.sqlite'}"
os.environ["DATA_DIR"] = str(_tmp_dir)
os.environ["OUTPUT_DIR"] = str(_tmp_dir)
os.environ["INBOX_PATH"] = str(INBOX_FIXTURE)
os.environ["VERBOSE_LOGGING"] = "false"
os.environ["TRACKER_PAGE_SIZE"] = "20"
os.environ["HYDRATION_WAIT_SECONDS"] = "5"


@pytest.fixture(autouse=True)
def _empty_tracker_table():
    """Every test starts with no thread trackers."""
    from sqlalchemy import delete

    from inbox_assist.db import get_session
    from inbox_assist.db.models import ThreadTracker

    with get_session() as session:
        session.execute(delete(ThreadTracker))
    yield
