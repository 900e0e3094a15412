from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

Mark = str  # 'X' or 'O'
Cell = Optional[Mark]  # None is an empty square
Snapshot = Tuple[Cell, ...]  # row-major, length == SIZE * SIZE

X: Mark = 'X'
O: Mark = 'O'
EMPTY: Cell = None

SIZE = 3
CELLS = SIZE * SIZE

EMPTY_BOARD: Snapshot = (EMPTY,) * CELLS

# Evaluation order matters: the first matching line wins.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)


def index(r: int, c: int) -> int:
    """Calculates the 1D index for a given row and column."""
    return r * SIZE + c


def check_cell(cell: int) -> int:
    """Rejects anything that is not a board index."""
    if isinstance(cell, bool) or not isinstance(cell, int):
        raise ValueError(f'cell must be an int in [0, {CELLS - 1}], got {cell!r}')
    if not 0 <= cell < CELLS:
        raise ValueError(f'cell out of range [0, {CELLS - 1}]: {cell}')
    return cell


def with_mark(board: Snapshot, cell: int, mark: Mark) -> Snapshot:
    """Returns a copy of the board with one cell set."""
    grid = list(board)
    grid[cell] = mark
    return tuple(grid)


def empty_cells(board: Snapshot) -> List[int]:
    return [i for i, v in enumerate(board) if v is EMPTY]


def is_full(board: Snapshot) -> bool:
    return all(v is not EMPTY for v in board)


def pretty(board: Snapshot, highlight: Optional[Iterable[int]] = None) -> str:
    """Generates a human-readable grid; empty squares show their index, highlighted ones are bracketed."""
    marked = set(highlight or ())
    lines: List[str] = []
    for r in range(SIZE):
        row: List[str] = []
        for c in range(SIZE):
            i = index(r, c)
            cell = board[i]
            text = str(i) if cell is EMPTY else cell
            row.append(f'[{text}]' if i in marked else f' {text} ')
        lines.append('|'.join(row))
    return '\n---+---+---\n'.join(lines)
