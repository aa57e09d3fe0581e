"""
Base player interface for automated Minesweeper play.

Defines the abstract interface that all players must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import numpy as np

from minefield.environment import (  # noqa: F401
    ACTION_CHORD,
    ACTION_FLAG,
    ACTION_REVEAL,
    NUM_ACTION_TYPES,
)


# ============================================================================
# Base Player Interface
# ============================================================================

class BasePlayer(ABC):
    """
    Abstract base class for Minesweeper players.

    Players pick one encoded action per step from the observation of a
    :class:`minefield.MinesweeperEnv`.
    """

    def __init__(self, board_height: int, board_width: int) -> None:
        """
        Initialize the player.

        Args:
            board_height: Number of rows in the board.
            board_width: Number of columns in the board.
        """
        self.board_height = board_height
        self.board_width = board_width
        self.total_cells = board_height * board_width

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Encoded action (type * cells + row * width + col).
        """

    def encode(self, action_type: int, row: int, col: int) -> int:
        """Encode an action type and position."""
        return action_type * self.total_cells + row * self.board_width + col

    def decode(self, action: int) -> Tuple[int, int, int]:
        """Decode an action into (type, row, col)."""
        action_type, index = divmod(action, self.total_cells)
        row, col = divmod(index, self.board_width)
        return action_type, row, col

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get reveal-only mask from observation.

        Args:
            observation: 2D array of cell states.

        Returns:
            Boolean mask over the full action space where only reveals
            of hidden cells (value -1) are True.
        """
        mask = np.zeros(NUM_ACTION_TYPES * self.total_cells, dtype=bool)
        mask[: self.total_cells] = observation.flatten() == -1
        return mask

    def reset(self) -> None:
        """Reset player state for a new game."""
