"""
Rule-based player for Minesweeper.

Uses single-cell deductions to flag certain mines and chord satisfied
numbers, falling back to a random reveal when nothing is certain.
"""
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .base_player import ACTION_CHORD, ACTION_FLAG, ACTION_REVEAL, BasePlayer


# ============================================================================
# Cell Analysis
# ============================================================================

@dataclass
class CellInfo:
    """Information about a revealed number for deduction."""

    row: int
    col: int
    adjacent_mines: int
    hidden_neighbors: List[Tuple[int, int]]
    flagged_neighbors: List[Tuple[int, int]]

    @property
    def remaining_mines(self) -> int:
        """Mines still to be found among hidden neighbors."""
        return self.adjacent_mines - len(self.flagged_neighbors)


# ============================================================================
# Rule Player
# ============================================================================

class RulePlayer(BasePlayer):
    """
    Player that applies the two basic Minesweeper rules.

    Strategy:
        1. If a number's hidden neighbors must all be mines, flag one.
        2. If a number already has all its flags, chord it.
        3. Otherwise reveal a random hidden cell.

    Flags are only placed by rule 1, so a chord never opens a mine.
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the rule player.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
            seed: Random seed for fallback guesses.
        """
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select the next action.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Encoded action.
        """
        for info in self._analyze(observation):
            if not info.hidden_neighbors:
                continue
            if info.remaining_mines == len(info.hidden_neighbors):
                row, col = info.hidden_neighbors[0]
                action = self.encode(ACTION_FLAG, row, col)
            elif info.remaining_mines == 0:
                action = self.encode(ACTION_CHORD, info.row, info.col)
            else:
                continue
            if valid_actions is None or valid_actions[action]:
                return action

        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)
        return self._random_reveal(valid_actions)

    def _analyze(self, observation: np.ndarray) -> List[CellInfo]:
        """Collect neighbor information for every revealed number."""
        infos = []
        for row in range(self.board_height):
            for col in range(self.board_width):
                value = int(observation[row, col])
                if value < 1 or value > 8:
                    continue
                hidden = []
                flagged = []
                for nr, nc in self._neighbors(row, col):
                    if observation[nr, nc] == -1:
                        hidden.append((nr, nc))
                    elif observation[nr, nc] == -2:
                        flagged.append((nr, nc))
                infos.append(CellInfo(row, col, value, hidden, flagged))
        return infos

    def _neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        neighbors = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = row + dr, col + dc
                if 0 <= nr < self.board_height and 0 <= nc < self.board_width:
                    neighbors.append((nr, nc))
        return neighbors

    def _random_reveal(self, valid_actions: np.ndarray) -> int:
        """Reveal a random valid cell."""
        reveals = np.where(valid_actions[: self.total_cells])[0]
        if len(reveals) == 0:
            return ACTION_REVEAL * self.total_cells
        return int(self.rng.choice(reveals))
