from __future__ import annotations

import argparse
from typing import List, Optional

from .board import empty_cells, is_full, pretty
from .moves import replay
from .session import GameSession
from .view import GameView


def parse_moves(text: str) -> List[int]:
    """Parses '0,4,1' or '0 4 1' into cell indices."""
    sep = ',' if ',' in text else ' '
    return [int(t) for t in text.split(sep) if t.strip() != '']


def render(view: GameView) -> None:
    print(pretty(view.board, view.winning_line))
    print(view.status)


def prompt_text(view: GameView) -> str:
    cells = ','.join(str(i) for i in empty_cells(view.board)) if view.winner is None else ''
    return f"Cell [{cells}], 'jump N', 'history' or 'quit': "


def render_moves(view: GameView) -> None:
    for entry in view.moves:
        marker = '>' if entry.step == view.step else ' '
        print(f'{marker} {entry.step}: {entry.label}')


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Tic-tac-toe with move history and time travel')
    parser.add_argument('--moves', default='', help='Cells to play in order, e.g. 0,4,1')
    parser.add_argument('--jump', type=int, default=None, help='Step to view after replaying --moves')
    parser.add_argument('--play', action='store_true', help='Play interactively after replaying --moves')
    args = parser.parse_args(argv)

    try:
        state = replay(parse_moves(args.moves))
    except ValueError as e:
        parser.error(f'bad --moves: {e}')
    session = GameSession(state)
    if args.jump is not None:
        try:
            session.jump(args.jump)
        except ValueError as e:
            parser.error(f'bad --jump: {e}')

    if not args.play:
        view = session.view()
        render(view)
        render_moves(view)
        return

    # Interactive play: every accepted transition redraws the board
    session.subscribe(render)
    render(session.view())
    while True:
        try:
            text = input(prompt_text(session.view())).strip().lower()
        except EOFError:
            break
        if text in ('q', 'quit', 'exit'):
            break
        if text in ('h', 'history'):
            render_moves(session.view())
            continue
        parts = text.split()
        try:
            if len(parts) == 2 and parts[0] == 'jump':
                session.jump(int(parts[1]))
                continue
            cell = int(text)
        except ValueError as e:
            print(f'Could not parse: {e}. Try again.')
            continue
        try:
            played = session.play(cell)
        except ValueError as e:
            print(f'Illegal cell: {e}. Try again.')
            continue
        if not played:
            print('That square cannot be played.')
        elif session.view().winner is None and is_full(session.state.current()):
            print('No squares left.')
