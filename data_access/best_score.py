"""
Best score persistence collaborator.

The engine only ever calls ``load_best_score()`` at startup and
``save_best_score(score)`` when a run sets a new record. Storage failures
are logged here and never reach gameplay.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from .repositories import BestScoreRepository

logger = logging.getLogger(__name__)


class BestScoreStore:
    """
    Database-backed best score store.

    Args:
        profile: record key, so several players can share one database
        repository: injected for tests; defaults to a BestScoreRepository
        background: when True, saves run on a single worker thread and
            save_best_score returns immediately (fire-and-forget)
    """

    def __init__(
        self,
        profile: str = "default",
        repository: Optional[BestScoreRepository] = None,
        background: bool = False,
    ):
        self.profile = profile
        self.repository = repository or BestScoreRepository()
        self._executor = ThreadPoolExecutor(max_workers=1) if background else None
        self._schema_ready = False

    def _ensure_schema(self) -> None:
        if not self._schema_ready:
            self.repository.ensure_schema()
            self._schema_ready = True

    def load_best_score(self) -> int:
        try:
            self._ensure_schema()
            score = self.repository.get_best_score(self.profile)
        except Exception as e:
            logger.warning(f"Could not load best score for '{self.profile}': {e}")
            return 0
        return score if score is not None else 0

    def save_best_score(self, score: int) -> None:
        if self._executor is not None:
            self._executor.submit(self._save, score)
        else:
            self._save(score)

    def _save(self, score: int) -> None:
        try:
            self._ensure_schema()
            self.repository.upsert_best_score(self.profile, score)
            logger.info(f"Saved best score {score} for '{self.profile}'")
        except Exception as e:
            logger.warning(f"Could not save best score {score} for '{self.profile}': {e}")

    def close(self) -> None:
        """Wait for queued background saves to finish."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None


class InMemoryBestScoreStore:
    """Process-local store, used when nothing should touch the disk."""

    def __init__(self, initial: int = 0):
        self.best_score = initial
        self.saves = []

    def load_best_score(self) -> int:
        return self.best_score

    def save_best_score(self, score: int) -> None:
        self.saves.append(score)
        self.best_score = max(self.best_score, score)

    def close(self) -> None:
        pass
