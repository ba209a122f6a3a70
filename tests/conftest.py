import os
import shutil
import sqlite3
import sys
import tempfile
from pathlib import Path

import pytest

# Ensure project root on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

# Settings are read at import time, so point them at a temp DB before the app loads
_TMP_DIR = Path(tempfile.mkdtemp(prefix="bmi-tracker-test-"))
DB_PATH = _TMP_DIR / "bmi_tracker_test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["DB_AUTO_CREATE"] = "1"


@pytest.fixture(scope="session")
def client():
    from fastapi.testclient import TestClient
    from bmi_tracker.main import app

    # Entering the client runs the lifespan: engine, ping, tables
    with TestClient(app) as c:
        yield c
    shutil.rmtree(_TMP_DIR, ignore_errors=True)


@pytest.fixture()
def db():
    """Direct connection to the test DB, for seeding rows the API cannot create."""
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(autouse=True)
def _clean_db(client):
    # Safety: only ever wipe the temp DB
    assert str(DB_PATH).startswith(str(_TMP_DIR))
    conn = sqlite3.connect(DB_PATH)
    try:
        for table in ("weights", "meal_checklist"):
            conn.execute(f"DELETE FROM {table}")
        conn.commit()
    finally:
        conn.close()
    yield
