from __future__ import annotations

# Facade module that re-exports the tic-tac-toe core.
# Used by the Flask app, the tests and "python game.py".
# Single-responsibility modules live under tictactoe_core/*.

from tictactoe_core.board import (  # noqa: F401
    CELLS,
    EMPTY,
    EMPTY_BOARD,
    O,
    WIN_LINES,
    X,
    Cell,
    Mark,
    Snapshot,
    empty_cells,
    is_full,
    pretty,
)
from tictactoe_core.state import GameState  # noqa: F401
from tictactoe_core.winner import calculate_winner, winning_line  # noqa: F401
from tictactoe_core.moves import (  # noqa: F401
    apply_move,
    is_move_allowed,
    jump_to,
    new_game,
    replay,
)
from tictactoe_core.view import GameView, MoveEntry, move_label, project  # noqa: F401
from tictactoe_core.session import GameSession  # noqa: F401


def main() -> None:
    # CLI driver delegated to tictactoe_core.cli
    from tictactoe_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
