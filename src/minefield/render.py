"""
Plain-text rendering of a game snapshot.
"""
from typing import List

import numpy as np

from .state import GameState, GameStatus


STATUS_FACES = {
    GameStatus.IDLE: ":)",
    GameStatus.PLAYING: ":)",
    GameStatus.WON: "B)",
    GameStatus.LOST: "X(",
}


def format_counter(value: int) -> str:
    """
    Zero-pad a counter to three characters, e.g. 7 -> "007".

    The mine counter goes negative when there are more flags than mines;
    the sign takes one of the three places, so -3 -> "-03".
    """
    return f"{value:03d}"


def get_observation(state: GameState) -> np.ndarray:
    """
    Get board state as numpy array.

    Returns:
        2D numpy array where:
            -1 = hidden
            -2 = flagged
            0-8 = revealed with adjacent count
            9 = revealed mine
    """
    obs = np.full((state.rows, state.cols), -1, dtype=np.int8)
    for cell in state.board:
        obs[cell.row, cell.col] = cell.to_observation()
    return obs


def render_board(state: GameState) -> str:
    """Render board as ASCII string with row and column labels."""
    obs = get_observation(state)
    width = len(str(max(state.cols - 1, 0)))
    lines: List[str] = [
        " " * (width + 1)
        + " ".join(str(col).rjust(width) for col in range(state.cols))
    ]

    for row in range(state.rows):
        row_str = str(row).rjust(width) + " "
        symbols = []
        for col in range(state.cols):
            val = obs[row, col]
            if val == -1:
                symbol = "."
            elif val == -2:
                symbol = "F"
            elif val == 9:
                symbol = "*"
            elif val == 0:
                symbol = " "
            else:
                symbol = str(val)
            symbols.append(symbol.rjust(width))
        lines.append(row_str + " ".join(symbols))

    return "\n".join(lines)


def render_header(state: GameState, elapsed: int) -> str:
    """Mine counter, status face and timer on one line."""
    return (
        f"[{format_counter(state.mines_remaining)}]  "
        f"{STATUS_FACES[state.status]}  "
        f"[{format_counter(elapsed)}]"
    )
