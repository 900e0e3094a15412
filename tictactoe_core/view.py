from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Mark, Snapshot
from .state import GameState
from .winner import winning_line


@dataclass(frozen=True)
class MoveEntry:
    """One entry of the move list a renderer shows as a time-travel button."""
    step: int
    label: str


@dataclass(frozen=True)
class GameView:
    """Read-only projection of a GameState that renderers pull after each transition."""
    board: Snapshot
    winner: Optional[Mark]
    next_player: Mark
    status: str
    step: int
    moves: Tuple[MoveEntry, ...]
    winning_line: Optional[Tuple[int, int, int]]


def move_label(step: int) -> str:
    return 'Go to move #%d' % step if step else 'Go to start'


def status_text(winner: Optional[Mark], next_player: Mark) -> str:
    if winner is not None:
        return f'Winner: {winner}'
    return f'Next player: {next_player}'


def project(state: GameState) -> GameView:
    board = state.current()
    line = winning_line(board)
    winner = board[line[0]] if line is not None else None
    next_player = state.next_player()
    return GameView(
        board=board,
        winner=winner,
        next_player=next_player,
        status=status_text(winner, next_player),
        step=state.step,
        moves=tuple(MoveEntry(step, move_label(step)) for step in range(len(state.history))),
        winning_line=line,
    )
