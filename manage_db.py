#!/usr/bin/env python3
"""
Database management script for the taskboard backend.
Creates or drops the schema for the configured database.
"""

import sys
from pathlib import Path
from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from taskboard.infrastructure.db.database import Base, engine as default_engine
from taskboard.infrastructure.db.models import create_all_tables


def init_database(db_engine: Engine) -> None:
    """Create every missing table and index."""
    print(f"Creating tables on {db_engine.url.render_as_string(hide_password=True)}...")
    create_all_tables(db_engine)


def drop_database(db_engine: Engine) -> None:
    """Drop every table. WARNING: this removes all data!"""
    Base.metadata.drop_all(bind=db_engine)


def reset_database(db_engine: Engine, confirmed: bool = False) -> bool:
    """Drop and recreate the schema. Returns False if the reset was cancelled."""
    if not confirmed:
        response = input("This will drop ALL data. Type 'yes' to continue: ")
        if response.lower() != 'yes':
            print("Database reset cancelled.")
            return False

    print("Resetting database...")
    drop_database(db_engine)
    create_all_tables(db_engine)
    return True


def list_tables(db_engine: Engine) -> List[str]:
    """Names of the tables present in the database."""
    return sorted(inspect(db_engine).get_table_names())


def main(argv: Optional[List[str]] = None, db_engine: Optional[Engine] = None) -> int:
    """Main CLI function."""
    argv = sys.argv[1:] if argv is None else argv
    db_engine = db_engine or default_engine

    if not argv:
        print("Usage: python manage_db.py [command]")
        print("Commands:")
        print("  init           - Create missing tables")
        print("  reset [--yes]  - Drop and recreate all tables (WARNING: drops all data)")
        print("  tables         - List existing tables")
        return 1

    command_name = argv[0]

    if command_name == "init":
        init_database(db_engine)
    elif command_name == "reset":
        reset_database(db_engine, confirmed="--yes" in argv[1:])
    elif command_name == "tables":
        for name in list_tables(db_engine):
            print(name)
    else:
        print(f"Unknown command: {command_name}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
