from __future__ import annotations

from typing import Optional, Tuple

from .board import EMPTY, Mark, Snapshot, WIN_LINES


def winning_line(board: Snapshot) -> Optional[Tuple[int, int, int]]:
    """
    Finds the first line, in WIN_LINES order, whose three cells hold the same mark.
    Order only matters for boards with several complete lines, which alternating
    play cannot produce.
    """
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not EMPTY and board[a] == board[b] == board[c]:
            return line
    return None


def calculate_winner(board: Snapshot) -> Optional[Mark]:
    """Returns the winning mark, or None while undecided. A full board without a line is also None."""
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]
