"""
Data access layer for Neon Snake.

This module provides the best score persistence collaborator and the
repository it is built on.
"""

from .best_score import BestScoreStore, InMemoryBestScoreStore
from .repositories import BestScoreRepository

__all__ = [
    'BestScoreStore',
    'InMemoryBestScoreStore',
    'BestScoreRepository',
]
