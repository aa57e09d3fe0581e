"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface so automated players can drive the
game through its reveal, flag and chord intents.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, Difficulty, get_neighbors
from .game import Game
from .render import get_observation, render_board
from .state import GameStatus


# ============================================================================
# Constants
# ============================================================================

ACTION_REVEAL = 0
ACTION_FLAG = 1
ACTION_CHORD = 2
NUM_ACTION_TYPES = 3


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine

    Actions:
        Discrete action space of size 3 * rows * cols.
        ``action // cells`` picks reveal, flag or chord and
        ``action % cells`` the cell at (i // cols, i % cols).

    Rewards:
        - +1 for an action that changed the board
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that did nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.game = Game(Difficulty.CUSTOM, self.config)
        self.render_mode = render_mode

        self._cells = self.config.rows * self.config.cols

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(NUM_ACTION_TYPES * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducible mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.game.rng = random.Random(seed)
        self.game.reset_game()
        self._steps = 0

        return get_observation(self.game.state), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Encoded action (type * cells + row * cols + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        action_type, key = self.decode_action(int(action))
        self._steps += 1

        before = self.game.state
        if action_type == ACTION_REVEAL:
            after = self.game.reveal_cell(key)
        elif action_type == ACTION_FLAG:
            after = self.game.toggle_flag(key)
        else:
            after = self.game.auto_open(key)

        reward = self._calculate_reward(after == before, after.status)
        terminated = after.is_over
        truncated = False

        return (
            get_observation(after),
            reward,
            terminated,
            truncated,
            self._get_info(),
        )

    def decode_action(self, action: int) -> Tuple[int, Tuple[int, int]]:
        """Split an action into (action type, (row, col))."""
        action_type, index = divmod(action, self._cells)
        return action_type, divmod(index, self.config.cols)

    def encode_action(self, action_type: int, row: int, col: int) -> int:
        """Inverse of decode_action."""
        return action_type * self._cells + row * self.config.cols + col

    def _calculate_reward(self, unchanged: bool, status: GameStatus) -> float:
        """Reward for the outcome of one action."""
        if unchanged:
            return -0.1
        if status == GameStatus.WON:
            return 10.0
        if status == GameStatus.LOST:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        state = self.game.state
        revealed = sum(1 for cell in state.board if cell.is_revealed)
        return {
            "steps": self._steps,
            "revealed": revealed,
            "flags": state.flags_placed,
            "game_state": state.status.value,
            "elapsed": self.game.elapsed_seconds(),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.game.state)
        if self.render_mode == "human":
            print(render_board(self.game.state))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that would change the game.

        Reveals are legal on hidden cells, flags on any unrevealed cell
        once the game is running, and chords on revealed numbers whose
        flag count is satisfied.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        state = self.game.state
        if state.is_over:
            return mask

        rows, cols = state.rows, state.cols
        playing = state.status == GameStatus.PLAYING
        for cell in state.board:
            index = cell.row * cols + cell.col
            if cell.is_hidden:
                mask[ACTION_REVEAL * self._cells + index] = True
            if playing and not cell.is_revealed:
                mask[ACTION_FLAG * self._cells + index] = True
            if playing and cell.is_revealed and cell.adjacent_mines > 0:
                neighbors = get_neighbors(rows, cols, cell.row, cell.col)
                cells = [state.board[r * cols + c] for r, c in neighbors]
                flags = sum(1 for n in cells if n.is_flagged)
                if flags == cell.adjacent_mines and any(
                    n.is_hidden for n in cells
                ):
                    mask[ACTION_CHORD * self._cells + index] = True
        return mask
