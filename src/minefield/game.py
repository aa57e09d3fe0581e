"""
Game controller for Minesweeper.

Wraps the reducer with the collaborators it needs (random source,
clock, win callback) and keeps the latest snapshot for hosts such as
the command line, the Gymnasium environment and the GUI-less demo.
"""
import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from .actions import (
    AutoOpen,
    GameAction,
    GameLost,
    GameWon,
    NewGame,
    ResetGame,
    RevealCell,
    ToggleFlag,
)
from .board import BoardConfig, Difficulty, config_for
from .cell import CellKey, parse_key
from .reducer import Clock, WinCallback, game_reducer
from .state import GameState, GameStatus, create_initial_state, elapsed_seconds


logger = logging.getLogger(__name__)

KeyLike = Union[str, CellKey]


# ============================================================================
# Win Record
# ============================================================================

@dataclass(frozen=True)
class WinRecord:
    """Result handed to best-time storage when a game is won."""

    difficulty: Difficulty
    elapsed_seconds: int


def win_record(state: GameState) -> Optional[WinRecord]:
    """Build the win record for a WON state, or None otherwise."""
    if state.status != GameStatus.WON or state.start_time is None:
        return None
    return WinRecord(state.difficulty, elapsed_seconds(state))


# ============================================================================
# Game Controller
# ============================================================================

class Game:
    """
    Stateful front end over the game reducer.

    Each intent replaces ``state`` with a new snapshot. Older snapshots
    stay valid, so callers may keep them for diffing.

    Not thread-safe: intents must be dispatched one at a time.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.BEGINNER,
        config: Optional[BoardConfig] = None,
        on_win: Optional[WinCallback] = None,
        rng: Optional[random.Random] = None,
        clock: Clock = time.time,
    ) -> None:
        """
        Initialize the game.

        Args:
            difficulty: Starting difficulty.
            config: Board configuration; required for CUSTOM.
            on_win: Called with the final state whenever a game is won.
            rng: Random source for mine placement.
            clock: Source of timestamps.
        """
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.on_win = on_win
        self.last_win: Optional[WinRecord] = None

        board_config = config_for(difficulty, config)
        self.state = create_initial_state(
            board_config.rows,
            board_config.cols,
            board_config.mines,
            difficulty,
        )

    # ========================================================================
    # Dispatch
    # ========================================================================

    def dispatch(self, action: GameAction) -> GameState:
        """
        Apply an action and store the resulting state.

        ``on_win`` runs only after the winning state is stored, so an
        error raised by the callback propagates without losing the win.
        """
        wins: List[GameState] = []
        self.state = game_reducer(
            self.state, action, wins.append, self.clock, self.rng
        )
        if wins:
            self.last_win = win_record(self.state)
            if self.on_win is not None:
                self.on_win(self.state)
        return self.state

    def _dispatch_at(
        self, make_action: Callable[[CellKey], GameAction], key: KeyLike
    ) -> GameState:
        """Dispatch a cell intent; malformed ids leave the state as is."""
        try:
            cell_key = parse_key(key)
        except ValueError:
            logger.debug("Ignoring malformed cell id %r", key)
            return self.state
        return self.dispatch(make_action(cell_key))

    # ========================================================================
    # Intents
    # ========================================================================

    def start_new_game(
        self,
        difficulty: Difficulty,
        config: Optional[BoardConfig] = None,
    ) -> GameState:
        """
        Start a new idle game.

        Args:
            difficulty: Difficulty tag for the new game.
            config: Custom dimensions; presets are used when omitted.

        Raises:
            ValueError: If CUSTOM is requested without a configuration.
        """
        board_config = config_for(difficulty, config)
        self.last_win = None
        logger.debug(
            "New %s game: %dx%d with %d mines",
            Difficulty(difficulty).value,
            board_config.rows,
            board_config.cols,
            board_config.mines,
        )
        return self.dispatch(
            NewGame(
                board_config.rows,
                board_config.cols,
                board_config.mines,
                Difficulty(difficulty),
            )
        )

    def reveal_cell(self, key: KeyLike) -> GameState:
        """Reveal a cell."""
        return self._dispatch_at(RevealCell, key)

    def toggle_flag(self, key: KeyLike) -> GameState:
        """Toggle the flag on a cell."""
        return self._dispatch_at(ToggleFlag, key)

    def auto_open(self, key: KeyLike) -> GameState:
        """Chord on a revealed number."""
        return self._dispatch_at(AutoOpen, key)

    def reset_game(self) -> GameState:
        """Restart with the current settings."""
        self.last_win = None
        return self.dispatch(ResetGame())

    def win(self) -> GameState:
        """Force a win; the win callback is not invoked."""
        return self.dispatch(GameWon())

    def lose(self, key: KeyLike) -> GameState:
        """Force a loss that uncovers every mine."""
        return self._dispatch_at(GameLost, key)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        """Current game status."""
        return self.state.status

    @property
    def is_over(self) -> bool:
        """Check if game reached a terminal state."""
        return self.state.is_over

    def elapsed_seconds(self) -> int:
        """Timer value for display."""
        return elapsed_seconds(self.state, self.clock())
