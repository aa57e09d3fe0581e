"""
Automated Minesweeper players.

Provides players that drive a MinesweeperEnv:
- RandomPlayer: Baseline random reveals
- RulePlayer: Flags forced mines and chords satisfied numbers
"""
from .base_player import BasePlayer
from .random_player import RandomPlayer
from .rule_player import RulePlayer

__all__ = [
    "BasePlayer",
    "RandomPlayer",
    "RulePlayer",
]
