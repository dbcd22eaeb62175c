from __future__ import annotations

from contextlib import contextmanager

from alembic import op
from sqlalchemy import inspect, text
from sqlalchemy.engine import Connection


# --- Dialect helpers ---------------------------------------------------------

def get_connection() -> Connection:
    bind = op.get_bind()
    assert bind is not None, "Alembic op has no bind connection"
    return bind


def get_dialect_name() -> str:
    return get_connection().dialect.name


# --- Existence checks --------------------------------------------------------

def table_exists(table_name: str) -> bool:
    return table_name in inspect(get_connection()).get_table_names()


# --- SQLite cleanup ----------------------------------------------------------

def sqlite_cleanup_temp_tables() -> list[str]:
    """Drop `_alembic_tmp_*` tables left behind by an interrupted batch op.

    No-op on PostgreSQL. Returns the names that were dropped.
    """
    if get_dialect_name() != "sqlite":
        return []

    leftovers = sorted(
        name for name in inspect(get_connection()).get_table_names()
        if name.startswith("_alembic_tmp_")
    )
    for table in leftovers:
        print(f"🧹 Dropping leftover SQLite temp table: {table}")
        op.execute(text(f'DROP TABLE IF EXISTS "{table}"'))
    return leftovers


@contextmanager
def with_sqlite_cleanup():
    """Run SQLite temp-table cleanup before the wrapped upgrade block."""
    sqlite_cleanup_temp_tables()
    yield
