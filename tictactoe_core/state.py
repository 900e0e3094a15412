from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .board import Mark, Snapshot, O, X


@dataclass(frozen=True)
class GameState:
    """Represents the whole game: every board snapshot so far and the step currently being viewed."""
    history: Tuple[Snapshot, ...]  # never empty, history[0] is the empty board
    step: int  # 0 <= step < len(history)

    def current(self) -> Snapshot:
        return self.history[self.step]

    def next_player(self) -> Mark:
        # Snapshot i was produced after i moves, X always moves first.
        return X if self.step % 2 == 0 else O

    def last_step(self) -> int:
        return len(self.history) - 1

    def with_step(self, step: int) -> 'GameState':
        return GameState(self.history, step)
