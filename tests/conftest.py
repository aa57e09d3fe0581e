"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import (  # noqa: E402
    BoardConfig,
    Cell,
    Difficulty,
    Game,
    GameState,
    GameStatus,
    create_initial_state,
)
from minefield.board import get_neighbors  # noqa: E402


Key = Tuple[int, int]


# ============================================================================
# Helpers
# ============================================================================

class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def build_state(
    rows: int,
    cols: int,
    mines: Iterable[Key],
    revealed: Iterable[Key] = (),
    flagged: Iterable[Key] = (),
    status: GameStatus = GameStatus.PLAYING,
    start_time: Optional[float] = 1000.0,
    difficulty: Difficulty = Difficulty.CUSTOM,
) -> GameState:
    """Build a state with mines at fixed positions and exact counts."""
    mines = set(mines)
    revealed = set(revealed)
    flagged = set(flagged)
    board = []
    for row in range(rows):
        for col in range(cols):
            is_mine = (row, col) in mines
            count = 0
            if not is_mine:
                count = sum(
                    1 for n in get_neighbors(rows, cols, row, col) if n in mines
                )
            board.append(
                Cell(
                    row=row,
                    col=col,
                    is_mine=is_mine,
                    is_revealed=(row, col) in revealed,
                    is_flagged=(row, col) in flagged,
                    adjacent_mines=count,
                )
            )
    return GameState(
        board=tuple(board),
        rows=rows,
        cols=cols,
        mines=len(mines),
        status=status,
        flags_placed=len(flagged),
        start_time=start_time,
        difficulty=difficulty,
    )


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def clock() -> FakeClock:
    """Controllable clock."""
    return FakeClock()


@pytest.fixture
def state_factory() -> Callable[..., GameState]:
    """Factory for hand-built game states."""
    return build_state


@pytest.fixture
def idle_state() -> GameState:
    """Fresh beginner game."""
    return create_initial_state(9, 9, 10, Difficulty.BEGINNER)


@pytest.fixture
def corner_mine_state() -> GameState:
    """
    3x3 board with a mine at (2, 2):

        0 0 0
        0 1 1
        0 1 *
    """
    return build_state(3, 3, mines=[(2, 2)])


@pytest.fixture
def game(rng: random.Random, clock: FakeClock) -> Game:
    """Beginner game with seeded randomness and a fake clock."""
    return Game(Difficulty.BEGINNER, rng=rng, clock=clock)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def beginner_config() -> BoardConfig:
    """Beginner difficulty configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small 4x4 configuration with 2 mines."""
    return BoardConfig(4, 4, 2)
