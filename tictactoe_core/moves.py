from __future__ import annotations

from .board import EMPTY, EMPTY_BOARD, check_cell, with_mark
from .state import GameState
from .winner import calculate_winner


def new_game() -> GameState:
    """Creates a game with only the empty board in its history."""
    return GameState(history=(EMPTY_BOARD,), step=0)


def is_move_allowed(state: GameState, cell: int) -> bool:
    """A move is ignored on an occupied square or once the viewed board has a winner."""
    cell = check_cell(cell)
    board = state.current()
    return calculate_winner(board) is None and board[cell] is EMPTY


def apply_move(state: GameState, cell: int) -> GameState:
    """
    Plays the current player's mark on `cell` and returns the new state.

    Snapshots after the viewed step are discarded first, so playing after a
    jump back in time starts a new branch. Clicks on filled squares or on a
    decided board return `state` itself. Raises ValueError if `cell` is not a
    board index.
    """
    if not is_move_allowed(state, cell):
        return state
    history = state.history[:state.step + 1]
    board = with_mark(history[-1], cell, state.next_player())
    history = history + (board,)
    return GameState(history=history, step=len(history) - 1)


def jump_to(state: GameState, step: int) -> GameState:
    """Views an earlier (or later) snapshot. History is kept until the next move."""
    if isinstance(step, bool) or not isinstance(step, int):
        raise ValueError(f'step must be an int, got {step!r}')
    if not 0 <= step <= state.last_step():
        raise ValueError(f'step out of range [0, {state.last_step()}]: {step}')
    return state.with_step(step)


def replay(cells) -> GameState:
    """Builds a game by applying the given cells in order from a new game."""
    state = new_game()
    for cell in cells:
        state = apply_move(state, cell)
    return state
