"""
Game reducer for Minesweeper.

Every transition is a function from (state, action) to a new state.
Illegal actions return the state they were given, unchanged; nothing
in here raises for bad player input.
"""
import logging
import random
import time
from dataclasses import replace
from typing import Callable, Optional

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
from .board import (
    Board,
    all_safe_cells_revealed,
    cell_index,
    count_adjacent_flags,
    generate_board,
    get_cell,
    get_neighbors,
    reveal_flood,
    reveal_single,
)
from .cell import CellKey
from .state import GameState, GameStatus, create_initial_state


logger = logging.getLogger(__name__)

WinCallback = Callable[[GameState], None]
Clock = Callable[[], float]


# ============================================================================
# Reducer
# ============================================================================

def game_reducer(
    state: GameState,
    action: GameAction,
    on_win: Optional[WinCallback] = None,
    clock: Clock = time.time,
    rng: Optional[random.Random] = None,
) -> GameState:
    """
    Apply an action to a game state.

    Args:
        state: Current state; never modified.
        action: Intent to apply.
        on_win: Called once with the final state when a reveal wins.
        clock: Source of timestamps for start_time/end_time.
        rng: Random source used for mine placement.

    Returns:
        The next state, or ``state`` itself if the action was a no-op.
    """
    if isinstance(action, NewGame):
        return create_initial_state(
            action.rows, action.cols, action.mines, action.difficulty
        )
    if isinstance(action, RevealCell):
        return reveal_cell(state, action.key, on_win, clock, rng)
    if isinstance(action, ToggleFlag):
        return toggle_flag(state, action.key)
    if isinstance(action, AutoOpen):
        return auto_open(state, action.key, on_win, clock)
    if isinstance(action, GameWon):
        return replace(state, status=GameStatus.WON, end_time=clock())
    if isinstance(action, GameLost):
        return game_lost(state, action.key, clock)
    if isinstance(action, ResetGame):
        return create_initial_state(
            state.rows, state.cols, state.mines, state.difficulty
        )
    return state


# ============================================================================
# Transitions
# ============================================================================

def reveal_cell(
    state: GameState,
    key: CellKey,
    on_win: Optional[WinCallback] = None,
    clock: Clock = time.time,
    rng: Optional[random.Random] = None,
) -> GameState:
    """Reveal a cell, placing the mines first if the game is idle."""
    if state.is_over:
        return state

    row, col = key
    if not (0 <= row < state.rows and 0 <= col < state.cols):
        return state

    if not state.board or state.status == GameStatus.IDLE:
        return _first_reveal(state, key, on_win, clock, rng)

    cell = get_cell(state.board, state.rows, state.cols, key)
    if cell is None or cell.is_flagged or cell.is_revealed:
        return state

    if cell.is_mine:
        logger.info("Mine hit at %s; game lost", cell.id)
        return replace(
            state,
            board=reveal_single(state.board, state.cols, key),
            status=GameStatus.LOST,
            end_time=clock(),
        )

    board = _open(state, key, cell.adjacent_mines)
    return check_win_condition(replace(state, board=board), on_win, clock)


def _first_reveal(
    state: GameState,
    key: CellKey,
    on_win: Optional[WinCallback],
    clock: Clock,
    rng: Optional[random.Random],
) -> GameState:
    """Generate the board around the first click and start the game."""
    board = generate_board(state.rows, state.cols, state.mines, key, rng)
    started = replace(
        state, board=board, status=GameStatus.PLAYING, start_time=clock()
    )
    target = board[cell_index(state.cols, key)]
    return check_win_condition(
        replace(started, board=_open(started, key, target.adjacent_mines)),
        on_win,
        clock,
    )


def _open(state: GameState, key: CellKey, adjacent_mines: int) -> Board:
    """Flood reveal for empty cells, single reveal for numbered ones."""
    if adjacent_mines == 0:
        return reveal_flood(state.board, state.rows, state.cols, key)
    return reveal_single(state.board, state.cols, key)


def toggle_flag(state: GameState, key: CellKey) -> GameState:
    """Flip the flag on a hidden cell while the game is running."""
    if state.status != GameStatus.PLAYING:
        return state

    cell = get_cell(state.board, state.rows, state.cols, key)
    if cell is None or cell.is_revealed:
        return state

    board = list(state.board)
    board[cell_index(state.cols, key)] = cell.toggled()
    delta = -1 if cell.is_flagged else 1
    return replace(
        state, board=tuple(board), flags_placed=state.flags_placed + delta
    )


def auto_open(
    state: GameState,
    key: CellKey,
    on_win: Optional[WinCallback] = None,
    clock: Clock = time.time,
) -> GameState:
    """
    Chord: open every unflagged neighbor of a satisfied number.

    Only applies when the revealed numbered cell has exactly as many
    flagged neighbors as its adjacency count. Opening a mine loses the
    game without uncovering the other mines.
    """
    if state.status != GameStatus.PLAYING:
        return state

    cell = get_cell(state.board, state.rows, state.cols, key)
    if cell is None or not cell.is_revealed or cell.is_mine:
        return state
    if cell.adjacent_mines == 0:
        return state

    flagged = count_adjacent_flags(state.board, state.rows, state.cols, key)
    if flagged != cell.adjacent_mines:
        return state

    board = state.board
    hit_mine = False
    for neighbor_key in get_neighbors(state.rows, state.cols, *key):
        neighbor = board[cell_index(state.cols, neighbor_key)]
        if neighbor.is_revealed or neighbor.is_flagged:
            continue

        board = reveal_single(board, state.cols, neighbor_key)
        if neighbor.is_mine:
            hit_mine = True
        elif neighbor.adjacent_mines == 0:
            board = reveal_flood(board, state.rows, state.cols, neighbor_key)

    if hit_mine:
        logger.info("Auto-open from %s hit a mine; game lost", cell.id)
        return replace(
            state, board=board, status=GameStatus.LOST, end_time=clock()
        )

    return check_win_condition(replace(state, board=board), on_win, clock)


def game_lost(
    state: GameState, key: CellKey, clock: Clock = time.time
) -> GameState:
    """Lose the game and uncover every mine plus the triggering cell."""
    board = tuple(
        cell.revealed()
        if (cell.is_mine or cell.key == tuple(key)) and not cell.is_flagged
        else cell
        for cell in state.board
    )
    return replace(
        state, board=board, status=GameStatus.LOST, end_time=clock()
    )


# ============================================================================
# Win Detection
# ============================================================================

def check_win_condition(
    state: GameState,
    on_win: Optional[WinCallback] = None,
    clock: Clock = time.time,
) -> GameState:
    """
    Move a running game to WON once every safe cell is revealed.

    Does nothing unless the game is PLAYING, so the callback can fire
    at most once per game.
    """
    if state.status != GameStatus.PLAYING:
        return state

    if not all_safe_cells_revealed(state.board):
        return state

    won = replace(state, status=GameStatus.WON, end_time=clock())
    logger.info(
        "Game won on %s (%dx%d, %d mines)",
        won.difficulty.value, won.rows, won.cols, won.mines,
    )
    if on_win is not None:
        on_win(won)
    return won
