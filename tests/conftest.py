"""Root conftest — shared test configuration."""

import os

# Ensure tests never pick up a real store or credential
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("DATABASE_PASSWORD", "test-password")
