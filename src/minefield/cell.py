"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their position,
content (mine/number) and visible state (hidden/revealed/flagged).
"""
import re
from dataclasses import dataclass, replace
from typing import Tuple, Union


# ============================================================================
# Keys
# ============================================================================

CellKey = Tuple[int, int]

_KEY_PATTERN = re.compile(r"^\s*(-?\d+)\s*[-, ]\s*(-?\d+)\s*$")


def parse_key(value: Union[str, CellKey]) -> CellKey:
    """
    Convert a cell identifier into a (row, col) key.

    Accepts either a (row, col) tuple or the "row-col" string form
    (also "row col" and "row,col"). Negative coordinates are kept, so
    "-1-2" parses to (-1, 2) and is later ignored as off the board.

    Raises:
        ValueError: If the string form cannot be parsed.
    """
    if isinstance(value, tuple):
        row, col = value
        return int(row), int(col)
    match = _KEY_PATTERN.match(value)
    if match is None:
        raise ValueError(f"Invalid cell id: {value!r}")
    return int(match.group(1)), int(match.group(2))


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells are immutable; every change produces a new instance so that
    previously published boards are never altered.

    Attributes:
        row: Row index of the cell.
        col: Column index of the cell.
        is_mine: Whether this cell contains a mine.
        is_revealed: Whether the player has uncovered this cell.
        is_flagged: Whether the player has flagged this cell.
        adjacent_mines: Count of mines in neighboring cells (0-8).
    """

    row: int
    col: int
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0

    @property
    def key(self) -> CellKey:
        """(row, col) key of this cell."""
        return self.row, self.col

    @property
    def id(self) -> str:
        """String identifier, e.g. "4-5"."""
        return f"{self.row}-{self.col}"

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not self.is_revealed and not self.is_flagged

    def revealed(self) -> "Cell":
        """Return a revealed copy of this cell."""
        return replace(self, is_revealed=True)

    def toggled(self) -> "Cell":
        """Return a copy with the flag flipped."""
        return replace(self, is_flagged=not self.is_flagged)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for automated players.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.is_flagged:
            return -2
        if not self.is_revealed:
            return -1
        if self.is_mine:
            return 9
        return self.adjacent_mines
