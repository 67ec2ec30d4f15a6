"""
Replay recorder for simulation sessions.

Collects GameState snapshots during a run and writes them, together with
a metadata block, to a JSON file under completed_games/.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import Dict, List, Optional

from domain.game_state import GameState

logger = logging.getLogger(__name__)


class ReplayRecorder:
    """
    Args:
        every: keep one snapshot out of every *every* recorded ticks
        directory: output folder for replay files
    """

    def __init__(self, every: int = 1, directory: str = "completed_games"):
        if every < 1:
            raise ValueError(f"every must be at least 1, got {every}")
        self.every = every
        self.directory = directory
        self.frames: List[Dict] = []
        self._seen = 0
        self.start_time = datetime.now(timezone.utc)

    def record(self, state: GameState) -> None:
        if self._seen % self.every == 0:
            self.frames.append(state.to_dict())
        self._seen += 1

    def save(self, game_id: str, summary: Optional[Dict] = None) -> str:
        """Write the replay and return its path."""
        filename = f"snake_game_{game_id}.json"
        metadata = {
            "game_id": game_id,
            "start_time": self.start_time.isoformat(),
            "end_time": datetime.now(timezone.utc).isoformat(),
            "frames_recorded": len(self.frames),
            "sample_every": self.every,
        }
        if summary:
            metadata["summary"] = summary

        os.makedirs(self.directory, exist_ok=True)
        path = os.path.join(self.directory, filename)
        with open(path, "w") as f:
            json.dump({"metadata": metadata, "frames": self.frames}, f, indent=2)
        logger.info(f"Saved replay with {len(self.frames)} frames to {path}")
        return path
