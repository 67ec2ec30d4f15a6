"""
Best score repository for the best_scores table.
"""

from typing import Optional

from database import BEST_SCORES_SCHEMA
from .base import BaseRepository


class BestScoreRepository(BaseRepository):
    """
    Repository for per-profile best scores.

    A profile keys one record; the default profile is "default".
    """

    def ensure_schema(self) -> None:
        """Create the best_scores table if it is missing."""
        with self.connection() as (conn, cursor):
            cursor.execute(BEST_SCORES_SCHEMA)

    def get_best_score(self, profile: str = "default") -> Optional[int]:
        """
        Fetch the stored best score.

        Returns:
            The score, or None when the profile has no record yet.
        """
        p = self.placeholder
        with self.read_connection() as (conn, cursor):
            cursor.execute(f"SELECT score FROM best_scores WHERE profile = {p}", (profile,))
            row = cursor.fetchone()
            if row is None:
                return None
            return int(row["score"])

    def upsert_best_score(self, profile: str, score: int) -> None:
        """
        Store *score* for *profile* unless a higher score is already stored.

        The WHERE clause on the conflict branch keeps the stored record
        monotonically non-decreasing even if saves arrive out of order.
        """
        if score < 0:
            raise ValueError(f"Best score must be non-negative, got {score}")

        p = self.placeholder
        with self.connection() as (conn, cursor):
            cursor.execute(f"""
                INSERT INTO best_scores (profile, score, updated_at)
                VALUES ({p}, {p}, CURRENT_TIMESTAMP)
                ON CONFLICT (profile) DO UPDATE
                SET score = excluded.score, updated_at = CURRENT_TIMESTAMP
                WHERE excluded.score > best_scores.score
            """, (profile, int(score)))

    def delete_best_score(self, profile: str = "default") -> None:
        p = self.placeholder
        with self.connection() as (conn, cursor):
            cursor.execute(f"DELETE FROM best_scores WHERE profile = {p}", (profile,))
