"""
Tic-tac-toe core Python package.

Pure game logic consumed by the Flask app and the terminal client.
Modules:
- board.py: cell values, Snapshot, win lines and board helpers
- state.py: GameState (history + viewed step)
- winner.py: calculate_winner, winning_line
- moves.py: new_game, apply_move, jump_to
- view.py: GameView projection for renderers
- session.py: GameSession, notifies renderers after transitions
- cli.py: terminal client
"""
