from __future__ import annotations

from typing import Callable, List, Optional

from .moves import apply_move, jump_to, new_game
from .state import GameState
from .view import GameView, project

Listener = Callable[[GameView], None]


class GameSession:
    """
    Holds the single GameState of an interactive session and tells renderers
    when it changes.

    Listeners receive the fresh GameView after every transition that produced
    a different state. Ignored moves notify nobody. Not thread-safe: one
    writer drives it.
    """

    def __init__(self, state: Optional[GameState] = None):
        self.state = state if state is not None else new_game()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Registers a listener and returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def view(self) -> GameView:
        return project(self.state)

    def play(self, cell: int) -> bool:
        """Applies a move. Returns False when the move was ignored."""
        return self._transition(apply_move(self.state, cell))

    def jump(self, step: int) -> bool:
        return self._transition(jump_to(self.state, step))

    def _transition(self, next_state: GameState) -> bool:
        if next_state == self.state:
            return False
        self.state = next_state
        current = self.view()
        for listener in list(self._listeners):
            listener(current)
        return True
