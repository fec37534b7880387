"""Shared test setup.

The application database defaults to Postgres; tests point it at SQLite
before anything under src is imported.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
