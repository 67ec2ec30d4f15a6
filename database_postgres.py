"""
PostgreSQL connection and schema management.

Connects using DATABASE_URL (preferred) or individual
PGHOST/PGPORT/PGUSER/PGPASSWORD/PGDATABASE environment variables.
Used instead of SQLite whenever one of those is configured, so a hosted
deployment can share the best score across machines.
"""

import os
import logging

import psycopg2
from psycopg2.extras import RealDictCursor
from dotenv import load_dotenv

from database import BEST_SCORES_SCHEMA

load_dotenv()
logger = logging.getLogger(__name__)


def is_configured() -> bool:
    """True when enough environment is present to reach PostgreSQL."""
    if os.getenv('DATABASE_URL'):
        return True
    return all(os.getenv(var) for var in ('PGHOST', 'PGUSER', 'PGPASSWORD', 'PGDATABASE'))


def get_connection_string() -> str:
    """
    Get the PostgreSQL connection string.

    Priority:
    1. DATABASE_URL environment variable
    2. Individual PG* environment variables

    Raises:
        ValueError: If no valid connection configuration is found
    """
    database_url = os.getenv('DATABASE_URL')
    if database_url:
        return database_url

    pghost = os.getenv('PGHOST')
    pgport = os.getenv('PGPORT', '5432')
    pguser = os.getenv('PGUSER')
    pgpassword = os.getenv('PGPASSWORD')
    pgdatabase = os.getenv('PGDATABASE')

    if pghost and pguser and pgpassword and pgdatabase:
        return f"postgresql://{pguser}:{pgpassword}@{pghost}:{pgport}/{pgdatabase}"

    raise ValueError(
        "Database connection not configured. "
        "Set DATABASE_URL or PGHOST/PGUSER/PGPASSWORD/PGDATABASE environment variables."
    )


def get_connection():
    """
    Get a database connection to PostgreSQL.

    Returns:
        psycopg2 connection with RealDictCursor (returns rows as dictionaries)
    """
    try:
        return psycopg2.connect(get_connection_string(), cursor_factory=RealDictCursor)
    except Exception as e:
        logger.error(f"Failed to connect to PostgreSQL: {e}")
        raise


def init_database() -> None:
    """Create the best_scores table if it does not exist."""
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
    print("Testing PostgreSQL connection...")
    init_database()
    print("[OK] best_scores table ready")
