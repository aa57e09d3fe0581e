"""
Game state snapshot for Minesweeper.

The state is a frozen record that is replaced wholesale on every
transition; presentation code reads it but can never mutate it.
"""
import math
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .board import Board, Difficulty, empty_board


# ============================================================================
# Constants
# ============================================================================

class GameStatus(str, Enum):
    """Possible states of the game."""

    IDLE = "IDLE"
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"


TERMINAL_STATUSES = frozenset({GameStatus.WON, GameStatus.LOST})


# ============================================================================
# Game State
# ============================================================================

@dataclass(frozen=True)
class GameState:
    """
    Complete, immutable game state.

    Attributes:
        board: Flat tuple of cells (rows * cols, or empty).
        rows: Number of rows.
        cols: Number of columns.
        mines: Requested number of mines.
        status: Current game status.
        flags_placed: Number of flags on the board.
        start_time: Clock reading of the first reveal.
        end_time: Clock reading when the game was won or lost.
        difficulty: Difficulty tag the game was started with.
    """

    board: Board = ()
    rows: int = 9
    cols: int = 9
    mines: int = 10
    status: GameStatus = GameStatus.IDLE
    flags_placed: int = 0
    start_time: Optional[float] = None
    end_time: Optional[float] = None
    difficulty: Difficulty = Difficulty.BEGINNER

    @property
    def is_over(self) -> bool:
        """Check if game reached a terminal state."""
        return self.status in TERMINAL_STATUSES

    @property
    def mines_remaining(self) -> int:
        """Mine counter shown to the player; may go negative."""
        return self.mines - self.flags_placed


def create_initial_state(
    rows: int = 9,
    cols: int = 9,
    mines: int = 10,
    difficulty: Difficulty = Difficulty.BEGINNER,
) -> GameState:
    """
    Create a fresh idle game.

    The board holds placeholder cells only; mines are placed on the
    first reveal.
    """
    return GameState(
        board=empty_board(rows, cols),
        rows=rows,
        cols=cols,
        mines=mines,
        status=GameStatus.IDLE,
        difficulty=Difficulty(difficulty),
    )


# ============================================================================
# Timer
# ============================================================================

def elapsed_seconds(state: GameState, now: Optional[float] = None) -> int:
    """
    Whole seconds shown on the game timer.

    Counts from start_time to now while playing, and from start_time to
    end_time once the game is over. Idle games read 0.
    """
    if state.start_time is None:
        return 0
    if state.status == GameStatus.PLAYING:
        current = time.time() if now is None else now
        return max(0, math.floor(current - state.start_time))
    if state.end_time is not None:
        return max(0, math.floor(state.end_time - state.start_time))
    return 0
