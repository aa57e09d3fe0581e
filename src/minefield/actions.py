"""
Player intents understood by the game reducer.
"""
from dataclasses import dataclass
from typing import Union

from .board import Difficulty
from .cell import CellKey


@dataclass(frozen=True)
class NewGame:
    """Start a new idle game with the given dimensions."""

    rows: int
    cols: int
    mines: int
    difficulty: Difficulty = Difficulty.BEGINNER


@dataclass(frozen=True)
class RevealCell:
    """Reveal a cell; the first reveal also places the mines."""

    key: CellKey


@dataclass(frozen=True)
class ToggleFlag:
    """Place or remove a flag."""

    key: CellKey


@dataclass(frozen=True)
class AutoOpen:
    """Open the unflagged neighbors of a satisfied number."""

    key: CellKey


@dataclass(frozen=True)
class GameWon:
    """Force the game into the won state."""


@dataclass(frozen=True)
class GameLost:
    """Force a loss, uncovering every mine."""

    key: CellKey


@dataclass(frozen=True)
class ResetGame:
    """Restart with the current dimensions and difficulty."""


GameAction = Union[
    NewGame, RevealCell, ToggleFlag, AutoOpen, GameWon, GameLost, ResetGame
]
