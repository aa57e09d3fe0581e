"""
Board module for Minesweeper game.

Implements board generation with deferred mine placement, adjacency
counting and the flood-fill reveal. Boards are flat tuples of cells
indexed by ``row * cols + col`` and are never modified in place.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Set, Tuple

from .cell import Cell, CellKey


logger = logging.getLogger(__name__)

Board = Tuple[Cell, ...]


# ============================================================================
# Configuration
# ============================================================================

class Difficulty(str, Enum):
    """Difficulty tags; also the buckets for best times."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    EXPERT = "EXPERT"
    CUSTOM = "CUSTOM"


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    A mine count larger than the board can hold is accepted; the
    generator places as many mines as there are eligible cells.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.mines < 0:
            raise ValueError("Number of mines cannot be negative")


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

DIFFICULTY_CONFIGS: Dict[Difficulty, Optional[BoardConfig]] = {
    Difficulty.BEGINNER: BEGINNER,
    Difficulty.INTERMEDIATE: INTERMEDIATE,
    Difficulty.EXPERT: EXPERT,
    Difficulty.CUSTOM: None,
}


def config_for(
    difficulty: Difficulty, custom: Optional[BoardConfig] = None
) -> BoardConfig:
    """
    Resolve the board configuration for a difficulty.

    Args:
        difficulty: Requested difficulty.
        custom: Explicit configuration; takes precedence over presets.

    Returns:
        The configuration to use.

    Raises:
        ValueError: If CUSTOM is requested without a configuration.
    """
    if custom is not None:
        return custom
    config = DIFFICULTY_CONFIGS[Difficulty(difficulty)]
    if config is None:
        raise ValueError("Custom difficulty requires rows, cols and mines")
    return config


# ============================================================================
# Neighbor Utilities (Low-level)
# ============================================================================

def is_valid_position(rows: int, cols: int, row: int, col: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= row < rows and 0 <= col < cols


def get_neighbors(rows: int, cols: int, row: int, col: int) -> List[CellKey]:
    """
    Get valid neighboring cell positions.

    Args:
        rows: Board height.
        cols: Board width.
        row: Row index of center cell.
        col: Column index of center cell.

    Returns:
        List of (row, col) tuples for the up-to-8 neighbors.
    """
    neighbors = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if is_valid_position(rows, cols, new_row, new_col):
                neighbors.append((new_row, new_col))
    return neighbors


def cell_index(cols: int, key: CellKey) -> int:
    """Flat index of a (row, col) key."""
    row, col = key
    return row * cols + col


def get_cell(
    board: Sequence[Cell], rows: int, cols: int, key: CellKey
) -> Optional[Cell]:
    """Get cell at position, or None if invalid or board is empty."""
    row, col = key
    if not is_valid_position(rows, cols, row, col):
        return None
    index = row * cols + col
    if index >= len(board):
        return None
    return board[index]


# ============================================================================
# Board Generation
# ============================================================================

def empty_board(rows: int, cols: int) -> Board:
    """Create a board of clear, hidden cells in row-major order."""
    return tuple(
        Cell(row=row, col=col) for row in range(rows) for col in range(cols)
    )


def exclusion_zone(rows: int, cols: int, key: CellKey) -> Set[int]:
    """Indices of a cell and its in-bounds neighbors."""
    row, col = key
    zone = set()
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            new_row = row + delta_row
            new_col = col + delta_col
            if is_valid_position(rows, cols, new_row, new_col):
                zone.add(new_row * cols + new_col)
    return zone


def generate_board(
    rows: int,
    cols: int,
    mines: int,
    exclude: Optional[CellKey] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Generate a new board with mines and adjacency counts.

    The excluded cell and its neighbors never receive a mine, so the
    first click always opens a region. If more mines are requested than
    there are eligible cells, every eligible cell becomes a mine.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        mines: Requested number of mines.
        exclude: Optional (row, col) whose 3x3 zone stays mine-free.
        rng: Random source; defaults to the module-level generator.

    Returns:
        Flat tuple of cells.
    """
    excluded = (
        exclusion_zone(rows, cols, exclude) if exclude is not None else set()
    )
    available = [i for i in range(rows * cols) if i not in excluded]

    mine_count = min(max(mines, 0), len(available))
    if mine_count < mines:
        logger.debug(
            "Capped mine count from %d to %d on %dx%d board",
            mines, mine_count, rows, cols,
        )
    sampler = rng if rng is not None else random
    mine_indices = set(sampler.sample(available, mine_count))

    board = []
    for row in range(rows):
        for col in range(cols):
            index = row * cols + col
            if index in mine_indices:
                board.append(Cell(row=row, col=col, is_mine=True))
                continue
            count = sum(
                1
                for nr, nc in get_neighbors(rows, cols, row, col)
                if nr * cols + nc in mine_indices
            )
            board.append(Cell(row=row, col=col, adjacent_mines=count))

    logger.debug(
        "Generated %dx%d board with %d mines (exclude=%s)",
        rows, cols, mine_count, exclude,
    )
    return tuple(board)


# ============================================================================
# Reveal Operations
# ============================================================================

def reveal_flood(
    board: Sequence[Cell], rows: int, cols: int, start: CellKey
) -> Board:
    """
    Reveal the connected region around a cell.

    Zero-adjacency cells are expanded to all their neighbors; numbered
    cells are revealed but stop the expansion. Flagged cells and mines
    are never revealed. Uses an explicit stack so large boards cannot
    exhaust the recursion limit.

    Args:
        board: Current board; left untouched.
        rows: Number of rows.
        cols: Number of columns.
        start: (row, col) where the fill starts.

    Returns:
        A new board with the region revealed.
    """
    new_board = list(board)
    if get_cell(new_board, rows, cols, start) is None:
        return tuple(new_board)

    stack = [start]
    visited: Set[CellKey] = set()

    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)

        index = cell_index(cols, current)
        cell = new_board[index]

        if cell.is_flagged or cell.is_mine:
            continue

        if not cell.is_revealed:
            new_board[index] = cell.revealed()

        if cell.adjacent_mines > 0:
            continue

        for neighbor in get_neighbors(rows, cols, *current):
            if neighbor not in visited:
                stack.append(neighbor)

    return tuple(new_board)


def reveal_single(board: Sequence[Cell], cols: int, key: CellKey) -> Board:
    """Return a new board with only the given cell revealed."""
    new_board = list(board)
    index = cell_index(cols, key)
    new_board[index] = new_board[index].revealed()
    return tuple(new_board)


def count_adjacent_flags(
    board: Sequence[Cell], rows: int, cols: int, key: CellKey
) -> int:
    """Count flagged cells adjacent to position."""
    return sum(
        1
        for neighbor in get_neighbors(rows, cols, *key)
        if board[cell_index(cols, neighbor)].is_flagged
    )


def count_mines(board: Sequence[Cell]) -> int:
    """Number of mine cells on a board."""
    return sum(1 for cell in board if cell.is_mine)


def all_safe_cells_revealed(board: Sequence[Cell]) -> bool:
    """Check if every non-mine cell is revealed."""
    return all(cell.is_mine or cell.is_revealed for cell in board)
