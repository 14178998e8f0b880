#!/usr/bin/env python3
"""Migration script to normalize stored transaction month keys.

Older rows may carry month keys without zero-padding ("2025-1") or keys that
disagree with the transaction date. This migration rewrites every
``vehicle_transactions.month`` value to the canonical ``YYYY-MM`` form derived
from the row's ``date``. Rows that are already canonical are left untouched,
so running it twice is harmless.

Usage:
    python migrations/migrate_normalize_month_keys.py [--db-path PATH]
"""

import os
import sys

from sqlalchemy import create_engine, inspect
from fleetledger.database.factories import (
    DB_PATH_ENV_VAR,
    create_sqlite_database,
    default_database_path,
)


def migrate_database(database_path: str | None = None) -> int:
    """Normalize month keys in place.

    Args:
        database_path: Path to database file. If None, uses default location.

    Returns:
        Number of rows rewritten

    Raises:
        Exception: If migration fails
    """
    database_path = database_path or os.environ.get(DB_PATH_ENV_VAR) or default_database_path()

    # Inspect before building the database, which would create missing tables
    engine = create_engine(f"sqlite:///{database_path}")
    try:
        tables = inspect(engine).get_table_names()
    finally:
        engine.dispose()
    if "vehicle_transactions" not in tables:
        raise Exception(
            "Table 'vehicle_transactions' does not exist. Please initialize the database schema first."
        )

    db = create_sqlite_database(database_path=database_path)
    db.connect()

    try:
        print("Starting migration: normalizing transaction month keys...")
        changed = db.normalize_month_keys()
        if changed:
            print(f"  Rewrote month key of {changed} transaction{'s' if changed != 1 else ''}")
        else:
            print("  All month keys already canonical")
        print("Migration completed successfully!")
        return changed

    except Exception as e:
        print(f"Migration failed: {e}")
        raise
    finally:
        db.disconnect()


def main():
    """Main entry point for migration script."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Normalize transaction month keys to YYYY-MM"
    )
    parser.add_argument(
        "--db-path",
        type=str,
        help="Path to database file (overrides FLEETLEDGER_DB_PATH environment variable)",
    )
    args = parser.parse_args()

    try:
        migrate_database(database_path=args.db_path)
        return 0
    except Exception as e:
        print(f"\nMigration failed: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
