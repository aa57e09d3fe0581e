"""
Best-time storage for Minesweeper.

Keeps the fastest wins per difficulty and optionally persists them
to a JSON file.
"""
import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional, Union

from .board import Difficulty
from .game import win_record
from .state import GameState


logger = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10


@dataclass(frozen=True)
class HighscoreEntry:
    """A single best time."""

    name: str
    time: int
    date: str


def _empty_table() -> Dict[Difficulty, List[HighscoreEntry]]:
    return {difficulty: [] for difficulty in Difficulty}


class HighscoreTable:
    """
    Top-N fastest times for each difficulty.

    Buckets are independent. Equal times are all kept, in the order
    they were recorded.
    """

    def __init__(
        self,
        path: Optional[Union[str, Path]] = None,
        max_entries: int = DEFAULT_MAX_ENTRIES,
    ) -> None:
        """
        Initialize the table.

        Args:
            path: JSON file to load from and save to; in-memory if None.
            max_entries: Entries kept per difficulty.
        """
        self.path = Path(path) if path is not None else None
        self.max_entries = max_entries
        self._scores = self._load()

    def save(self, difficulty: Difficulty, entry: HighscoreEntry) -> None:
        """Insert an entry and keep only the fastest times."""
        bucket = self._scores[Difficulty(difficulty)]
        bucket.append(entry)
        bucket.sort(key=lambda item: item.time)
        del bucket[self.max_entries:]
        self._persist()

    def record_win(
        self, state: GameState, name: str = "Anonymous"
    ) -> Optional[HighscoreEntry]:
        """Save the time of a won game; ignores any other state."""
        record = win_record(state)
        if record is None:
            return None
        entry = HighscoreEntry(
            name=name,
            time=record.elapsed_seconds,
            date=datetime.now(timezone.utc).isoformat(),
        )
        self.save(record.difficulty, entry)
        return entry

    def get(self, difficulty: Difficulty) -> List[HighscoreEntry]:
        """Entries for a difficulty, fastest first."""
        return list(self._scores[Difficulty(difficulty)])

    def clear(self, difficulty: Optional[Difficulty] = None) -> None:
        """Clear one difficulty, or every difficulty if none given."""
        if difficulty is None:
            self._scores = _empty_table()
        else:
            self._scores[Difficulty(difficulty)] = []
        self._persist()

    def to_dict(self) -> Dict[str, List[Dict[str, object]]]:
        """Convert to dictionary for serialization."""
        return {
            difficulty.value: [asdict(entry) for entry in entries]
            for difficulty, entries in self._scores.items()
        }

    # ========================================================================
    # Persistence
    # ========================================================================

    def _load(self) -> Dict[Difficulty, List[HighscoreEntry]]:
        scores = _empty_table()
        if self.path is None or not self.path.exists():
            return scores

        try:
            with open(self.path) as f:
                data = json.load(f)
            for difficulty in Difficulty:
                scores[difficulty] = [
                    HighscoreEntry(
                        name=str(item["name"]),
                        time=int(item["time"]),
                        date=str(item["date"]),
                    )
                    for item in data.get(difficulty.value, [])
                ]
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Could not load highscores from %s: %s", self.path, e)
            return _empty_table()
        return scores

    def _persist(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
