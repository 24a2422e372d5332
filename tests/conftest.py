"""Root conftest — shared test configuration."""

import os

# Keep tests on the in-memory store with readable logs
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
