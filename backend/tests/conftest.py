"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("STATIC_DIR", "__no_static_in_tests__")
