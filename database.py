"""
SQLite connection and schema management for Neon Snake.

This is the default store for the best score. The database path is
environment-aware: SNAKE_DB_PATH wins, otherwise the file lives next to
this module.
"""

import os
import sqlite3
from pathlib import Path

BEST_SCORES_SCHEMA = """
    CREATE TABLE IF NOT EXISTS best_scores (
        profile TEXT PRIMARY KEY,
        score INTEGER NOT NULL DEFAULT 0 CHECK(score >= 0),
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""


def get_database_path() -> str:
    """
    Determine the SQLite database path.

    Returns:
        - SNAKE_DB_PATH if set (parent directories are created)
        - otherwise <project>/neon_snake.db
    """
    db_path = os.getenv('SNAKE_DB_PATH')
    if db_path:
        parent = os.path.dirname(db_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        return db_path

    return str(Path(__file__).parent / 'neon_snake.db')


def get_connection() -> sqlite3.Connection:
    """
    Get a database connection with appropriate settings.

    Returns:
        sqlite3.Connection: Database connection with row factory enabled.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row  # Enable column access by name
    return conn


def init_database() -> None:
    """
    Initialize the schema. Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn = get_connection()
    cursor = conn.cursor()

    try:
        cursor.execute(BEST_SCORES_SCHEMA)
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cursor.close()
        conn.close()


if __name__ == "__main__":
    init_database()
    print(f"Database ready at: {get_database_path()}")
