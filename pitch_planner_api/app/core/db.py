"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations on application start
(``init_db``).  Applied migration versions are stored in the
``migrations`` table and new migrations are executed in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            login TEXT NOT NULL UNIQUE,
            email TEXT,
            password TEXT NOT NULL,
            activated INTEGER NOT NULL DEFAULT 1,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        -- The profile shares its primary key with the owning user.
        CREATE TABLE IF NOT EXISTS user_profiles (
            id INTEGER PRIMARY KEY,
            created TIMESTAMP,
            name TEXT NOT NULL,
            profile_pic TEXT,
            profile_pic_content_type TEXT,
            gender TEXT,
            location TEXT,
            position TEXT,
            referee INTEGER,
            FOREIGN KEY(id) REFERENCES users(id) ON DELETE CASCADE
        );

        CREATE TABLE IF NOT EXISTS teams (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            location TEXT,
            owner_id INTEGER UNIQUE,
            FOREIGN KEY(owner_id) REFERENCES user_profiles(id) ON DELETE SET NULL
        );

        CREATE TABLE IF NOT EXISTS pitch_bookings (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            booking_date DATE NOT NULL,
            start_time TIMESTAMP NOT NULL,
            end_time TIMESTAMP NOT NULL
        );

        CREATE TABLE IF NOT EXISTS available_dates (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            from_time TIMESTAMP NOT NULL,
            to_time TIMESTAMP NOT NULL,
            is_available INTEGER NOT NULL DEFAULT 0,
            user_profile_id INTEGER,
            team_id INTEGER,
            FOREIGN KEY(user_profile_id) REFERENCES user_profiles(id) ON DELETE SET NULL,
            FOREIGN KEY(team_id) REFERENCES teams(id) ON DELETE SET NULL
        );

        CREATE TABLE IF NOT EXISTS contacts (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            phone TEXT,
            message TEXT
        );
        """,
    ),
    # Migration 2: Indexes for the lookup queries used by the resources
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_pitch_bookings_booking_date ON pitch_bookings(booking_date);
        CREATE INDEX IF NOT EXISTS idx_user_profiles_name ON user_profiles(name COLLATE NOCASE);
        CREATE INDEX IF NOT EXISTS idx_teams_name ON teams(name COLLATE NOCASE);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # pitch_planner_api/
    return str((base_dir / db_url).resolve())


def _casefold(value):
    return value.casefold() if isinstance(value, str) else value


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` objects so columns can be
    accessed by name.  No type detection is enabled; dates come back as
    the ISO strings they were stored as and are parsed by the schemas.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    # SQLite's LOWER() only folds ASCII; name searches use this instead.
    conn.create_function("casefold", 1, _casefold, deterministic=True)
    # Foreign key support is off by default in SQLite and must be
    # enabled per connection.
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  To add a migration, append it with an incremented
    version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
