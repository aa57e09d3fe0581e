"""
Minesweeper game module.

Provides the core game logic: board generation, flood reveal,
auto-open and the reducer-driven game state machine.
"""
from .cell import Cell, CellKey, parse_key
from .board import (
    Board,
    BoardConfig,
    Difficulty,
    DIFFICULTY_CONFIGS,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    config_for,
    generate_board,
    reveal_flood,
)
from .state import GameState, GameStatus, create_initial_state, elapsed_seconds
from .actions import (
    NewGame,
    RevealCell,
    ToggleFlag,
    AutoOpen,
    GameWon,
    GameLost,
    ResetGame,
)
from .reducer import game_reducer, auto_open, check_win_condition
from .game import Game, WinRecord, win_record
from .highscores import HighscoreEntry, HighscoreTable
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellKey",
    "parse_key",
    "Board",
    "BoardConfig",
    "Difficulty",
    "DIFFICULTY_CONFIGS",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "config_for",
    "generate_board",
    "reveal_flood",
    "GameState",
    "GameStatus",
    "create_initial_state",
    "elapsed_seconds",
    "NewGame",
    "RevealCell",
    "ToggleFlag",
    "AutoOpen",
    "GameWon",
    "GameLost",
    "ResetGame",
    "game_reducer",
    "auto_open",
    "check_win_condition",
    "Game",
    "WinRecord",
    "win_record",
    "HighscoreEntry",
    "HighscoreTable",
    "MinesweeperEnv",
]
