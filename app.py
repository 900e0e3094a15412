from __future__ import annotations

import logging
import os
import sys
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

# Ensure package imports work when executed directly from the repo root
if __package__ in (None, ""):
    sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from tictactoe_core.board import CELLS, EMPTY_BOARD, O, X, Snapshot
from tictactoe_core.moves import apply_move, jump_to, new_game
from tictactoe_core.state import GameState
from tictactoe_core.view import GameView, project
from tictactoe_core.winner import calculate_winner, winning_line

LOG_LEVEL = os.getenv("TICTACTOE_LOG_LEVEL", "INFO").upper()

app = Flask(__name__)
app.logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))


# ---------- JSON codec ----------

def board_to_json(b: Snapshot) -> List[Optional[str]]:
    return list(b)


def board_from_json(obj: Any) -> Snapshot:
    if not isinstance(obj, list) or len(obj) != CELLS:
        raise ValueError(f"board must be a list of {CELLS} cells")
    for v in obj:
        if v not in (X, O, None):
            raise ValueError(f"bad cell value: {v!r}")
    return tuple(obj)


def state_to_json(s: GameState) -> Dict[str, Any]:
    return {
        "history": [board_to_json(b) for b in s.history],
        "step": int(s.step),
    }


def json_to_state(obj: Dict[str, Any]) -> GameState:
    """Decodes and checks a client-supplied state; any inconsistency raises ValueError."""
    if not isinstance(obj, dict):
        raise ValueError("state must be an object")
    raw = obj["history"]
    if not isinstance(raw, list) or not raw:
        raise ValueError("history must be a non-empty list")
    history = tuple(board_from_json(b) for b in raw)
    if history[0] != EMPTY_BOARD:
        raise ValueError("history must start with an empty board")
    for n, (prev, cur) in enumerate(zip(history, history[1:])):
        if calculate_winner(prev) is not None:
            raise ValueError(f"snapshot {n + 1} follows a won board")
        changed = [i for i in range(CELLS) if prev[i] != cur[i]]
        mark = X if n % 2 == 0 else O
        if len(changed) != 1 or prev[changed[0]] is not None or cur[changed[0]] != mark:
            raise ValueError(f"snapshot {n + 1} is not one {mark} move after snapshot {n}")
    step = obj.get("step", len(history) - 1)
    state = GameState(history=history, step=len(history) - 1)
    return jump_to(state, step)


def view_to_json(v: GameView) -> Dict[str, Any]:
    return {
        "board": board_to_json(v.board),
        "winner": v.winner,
        "nextPlayer": v.next_player,
        "status": v.status,
        "step": v.step,
        "moves": [{"step": m.step, "label": m.label} for m in v.moves],
        "winningLine": list(v.winning_line) if v.winning_line is not None else None,
    }


def _payload(state: GameState) -> Dict[str, Any]:
    return {"state": state_to_json(state), "view": view_to_json(project(state))}


def _bad_request(error: str) -> Any:
    app.logger.warning("[api] rejected %s: %s", request.path, error)
    return jsonify({"ok": False, "error": error}), 400


# ---------- Game API ----------

@app.get("/api/health")
def api_health() -> Any:
    return jsonify({"ok": True})


@app.post("/api/new")
def api_new() -> Any:
    state = new_game()
    return jsonify({"ok": True, **_payload(state)})


@app.post("/api/view")
def api_view() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = json_to_state(body["state"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    return jsonify({"ok": True, "view": view_to_json(project(state))})


@app.post("/api/move")
def api_move() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = json_to_state(body["state"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    try:
        next_state = apply_move(state, body.get("cell"))
    except ValueError as e:
        return _bad_request(str(e))
    applied = next_state != state
    if not applied:
        app.logger.info("[api] move on cell %s ignored at step %d", body.get("cell"), state.step)
    return jsonify({"ok": True, "applied": applied, **_payload(next_state)})


@app.post("/api/jump")
def api_jump() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        state = json_to_state(body["state"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(f"bad state: {e}")
    try:
        next_state = jump_to(state, body.get("step"))
    except ValueError as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, **_payload(next_state)})


@app.post("/api/winner")
def api_winner() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    try:
        board = board_from_json(body.get("board"))
    except ValueError as e:
        return _bad_request(f"bad board: {e}")
    line = winning_line(board)
    return jsonify({
        "ok": True,
        "winner": calculate_winner(board),
        "line": list(line) if line is not None else None,
    })


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    app.run(host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "5000")), debug=debug)
