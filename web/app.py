from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from flask import Flask, jsonify, request

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from othello import AlphaBeta, Game, OthelloError, Player, readable_coordinates
from othello.config import DEFAULT_DEPTH, MAX_DEPTH, MIN_DEPTH

logger = logging.getLogger(__name__)


class BadRequest(ValueError):
    pass


def json_object() -> Dict[str, Any]:
    """The request JSON body, which must be an object when present."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadRequest("Expected a JSON object")
    return data


def integer_field(payload: Mapping[str, Any], name: str) -> int:
    try:
        value = payload[name]
    except KeyError:
        raise BadRequest(f"Missing {name}")
    # bool is an int subclass, floats would be truncated
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadRequest(f"{name} must be an integer")
    return value


def create_app(config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(
        OTHELLO_DEFAULT_DEPTH=DEFAULT_DEPTH,
        OTHELLO_MAX_DEPTH=MAX_DEPTH,
    )
    app.config.from_prefixed_env()
    if config:
        app.config.from_mapping(config)

    game = Game()
    state: Dict[str, Any] = {"human": Player.BLACK}
    # One AlphaBeta per depth, reused across moves
    computers: Dict[int, AlphaBeta] = {}

    def parse_depth(payload: Mapping[str, Any]) -> int:
        if "depth" in payload:
            depth = integer_field(payload, "depth")
        else:
            depth = int(app.config["OTHELLO_DEFAULT_DEPTH"])
        max_depth = int(app.config["OTHELLO_MAX_DEPTH"])
        if not MIN_DEPTH <= depth <= max_depth:
            raise BadRequest(f"Depth must be between {MIN_DEPTH} and {max_depth}")
        return depth

    def computer_for(depth: int) -> AlphaBeta:
        if depth not in computers:
            computers[depth] = AlphaBeta(depth)
        return computers[depth]

    def play_computer(depth: int) -> List[Dict[str, Any]]:
        """Let the computer play while it's its turn."""
        ai_moves: List[Dict[str, Any]] = []
        computer = computer_for(depth)
        while game.player() is not None and game.player() is not state["human"]:
            player = game.player()
            move = computer.compute_move(game.board, player)
            if move is None:
                # Can't happen while the game isn't over
                break
            x, y = move
            game.play(player, x, y)
            ai_moves.append({"x": x, "y": y, "cell": readable_coordinates(x, y)})
            logger.info("Computer (%s) played %s", player, readable_coordinates(x, y))
        return ai_moves

    def snapshot(ai_moves: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
        snap = game.snapshot()
        snap["human"] = state["human"].value
        snap["ai_moves"] = ai_moves or []
        return snap

    @app.errorhandler(BadRequest)
    def handle_bad_request(exc: BadRequest):
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(OthelloError)
    def handle_othello_error(exc: OthelloError):
        return jsonify({"error": str(exc)}), 400

    @app.get("/api/state")
    def api_state():
        return jsonify(snapshot())

    @app.post("/api/new")
    def api_new():
        data = json_object()
        color = data.get("color", "black")
        if not isinstance(color, str):
            raise BadRequest("color must be a string")
        color = color.lower()
        try:
            human = Player(color)
        except ValueError:
            raise BadRequest(f"Unknown color: {color}")
        depth = parse_depth(data)

        game.reset()
        state["human"] = human
        # Black opens: if the human chose white, the computer moves first
        ai_moves = play_computer(depth)
        return jsonify(snapshot(ai_moves))

    @app.post("/api/move")
    def api_move():
        payload = json_object()
        depth = parse_depth(payload)
        x = integer_field(payload, "x")
        y = integer_field(payload, "y")

        game.play(state["human"], x, y)
        ai_moves = play_computer(depth)
        return jsonify(snapshot(ai_moves))

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    create_app().run(host="0.0.0.0", port=5000, debug=True)
