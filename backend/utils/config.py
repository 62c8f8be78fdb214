"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "8001"))

# When TESTING=true, use test DB URL so tests never touch the real store.
if os.environ.get("TESTING") == "true":
    DATABASE_URL = os.environ.get("TESTING_DATABASE_URL", "sqlite:///:memory:")
else:
    DATABASE_URL = os.environ.get(
        "DATABASE_URL",
        "sqlite:///./spotfinder_db.sqlite",
    )

# Seconds a writer waits on a locked SQLite file before failing.
SQLITE_TIMEOUT_S = float(os.environ.get("SQLITE_TIMEOUT_S", "30"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
