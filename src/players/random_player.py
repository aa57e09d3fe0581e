"""
Baseline player that guesses.
"""
from typing import Optional

import numpy as np

from .base_player import ACTION_REVEAL, BasePlayer


class RandomPlayer(BasePlayer):
    """
    Reveals a uniformly chosen hidden cell every turn.

    It never flags or chords, so any game it wins is won by luck alone.
    """

    def __init__(
        self,
        board_height: int = 9,
        board_width: int = 9,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__(board_height, board_width)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick a hidden cell to reveal.

        When a mask is given, only cells whose reveal it allows are
        candidates; otherwise every -1 cell in the observation is.
        """
        candidates = observation.reshape(-1) == -1
        if valid_actions is not None:
            start = ACTION_REVEAL * self.total_cells
            candidates &= valid_actions[start:start + self.total_cells]

        cells = np.flatnonzero(candidates)
        if cells.size == 0:
            # Nothing left to guess; the environment treats this as a no-op
            return self.encode(ACTION_REVEAL, 0, 0)

        row, col = divmod(int(self.rng.choice(cells)), self.board_width)
        return self.encode(ACTION_REVEAL, row, col)
