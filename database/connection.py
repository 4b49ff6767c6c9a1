"""
Database connection management.
Handles per-context connections, initialization, and teardown.
"""

import sqlite3
import os
from contextlib import contextmanager
from flask import g, current_app


def get_db():
    """
    Get the database connection for the current application context.

    Returns:
        sqlite3.Connection: Database connection object
    """
    if 'db' not in g:
        db_path = current_app.config.get('DATABASE_PATH', 'instance/suite_reservations.db')
        if db_path != ':memory:':
            directory = os.path.dirname(db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)
        g.db = sqlite3.connect(
            db_path,
            timeout=current_app.config.get('DATABASE_TIMEOUT', 5.0)
        )
        g.db.row_factory = sqlite3.Row
        # Enable foreign key constraints
        g.db.execute('PRAGMA foreign_keys = ON')
        # Enable WAL mode so readers don't block the single writer
        g.db.execute('PRAGMA journal_mode = WAL')
    return g.db


def close_db(e=None):
    """
    Close database connection.

    Args:
        e: Exception if any (from Flask teardown context)
    """
    db = g.pop('db', None)
    if db is not None:
        db.close()


def init_db(seed: bool = False):
    """
    Initialize database: drop existing tables and create the schema.
    WARNING: This will delete all existing data!

    Args:
        seed: Also insert the demo customers and suites
    """
    from database.schema import drop_tables, create_tables, create_indexes
    from database.seed import seed_database

    db = get_db()

    # Drop existing tables (in reverse order of dependencies)
    drop_tables(db)

    # Create all tables
    create_tables(db)

    # Create indexes
    create_indexes(db)

    if seed:
        seed_database(db)

    db.commit()


@contextmanager
def immediate_transaction():
    """
    Run a block as a single-writer transaction.

    BEGIN IMMEDIATE takes the database write lock before any read, so
    check-then-write sequences from concurrent requests are serialized.
    Waiting for the lock is bounded by DATABASE_TIMEOUT; when it expires
    sqlite3.OperationalError ("database is locked") propagates to the caller.

    Yields:
        sqlite3.Cursor: Cursor bound to the open transaction
    """
    db = get_db()
    cursor = db.cursor()
    cursor.execute('BEGIN IMMEDIATE')
    try:
        yield cursor
        db.commit()
    except BaseException:
        db.rollback()
        raise
