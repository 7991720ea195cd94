"""
main.py — Algorithm Playback Visualizer Flask App
===================================================
JSON API over the playback engine.  A front-end picks an algorithm,
POSTs /api/run, then drives the transport and polls /api/state to draw
whatever Step the cursor is on.

Routes:
  GET  /api/algorithms         – registry listing
  POST /api/run                – materialize {algo, params} and load it
  POST /api/play               – start the playback timer
  POST /api/pause              – stop it
  POST /api/toggle             – play ⇄ pause
  POST /api/reset              – back to Step 0, paused
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step {index}
  POST /api/speed              – {ms} or {preset}
  GET  /api/state              – current state + current Step

State management:
  The Flask session cookie only carries a random session id.  The
  PlaybackController for that id lives in a server-side registry on the
  app (in-memory, single process).  Each controller runs on a
  MonotonicScheduler which every request polls, so ticks that came due
  between two requests are applied before the request is served.

  The registry is an LRU: it holds at most MAX_SESSIONS slots, and slots
  untouched for SESSION_IDLE_SECONDS are dropped on the next request.
"""

import logging
import secrets
import time
from collections import OrderedDict
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

from flask import Flask, current_app, jsonify, request, session

from algorithms import get_algorithm, list_algorithms
from config import DEFAULTS, setup_logging
from engine import (
    MonotonicScheduler,
    PlaybackController,
    Recorder,
    RunMetrics,
    UnknownAlgorithmError,
)
from graph import as_graph

logger = logging.getLogger(__name__)

SESSION_KEY   = "sid"
EXTENSION_KEY = "algoviz"

# parameters whose integer value scales the work done by a producer
_SIZE_PARAMS = ("n", "amount", "capacity", "table_size")
# parameters that describe a 2-D board
_BOARD_PARAMS = ("maze", "board")
# client-supplied budgets, capped by the config key they default to
_BUDGET_PARAMS = {
    ("sudoku", "max_steps"):        "SUDOKU_MAX_STEPS",
    ("counting_sort", "max_range"): "MAX_COUNT_RANGE",
}


# ---------------------------------------------------------------------------
# Per-session slot
# ---------------------------------------------------------------------------
@dataclass
class SessionSlot:
    controller: PlaybackController
    algo_key:   Optional[str]        = None
    metrics:    Optional[RunMetrics] = None
    params:     Dict[str, Any]       = field(default_factory=dict)
    last_seen:  float                = field(default_factory=time.monotonic)


class BadRequest(Exception):
    """Rejected input; becomes a 400 with {"error": message}."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env("ALGOVIZ")
    if overrides:
        app.config.from_mapping(overrides)
    if not app.config.get("SECRET_KEY"):
        app.config["SECRET_KEY"] = secrets.token_hex(32)

    app.extensions[EXTENSION_KEY] = OrderedDict()     # sid → SessionSlot, least recent first

    app.register_error_handler(BadRequest, _bad_request)
    _register_routes(app)
    return app


def _bad_request(exc: BadRequest):
    logger.warning("Rejected %s %s: %s", request.method, request.path, exc.message)
    return jsonify({"error": exc.message}), 400


# ---------------------------------------------------------------------------
# Session helpers
# ---------------------------------------------------------------------------
def get_slot() -> SessionSlot:
    """Return this browser's slot, creating it (and the session id) on first use."""
    slots: "OrderedDict[str, SessionSlot]" = current_app.extensions[EXTENSION_KEY]
    now = time.monotonic()
    drop_idle_slots(slots, now - current_app.config["SESSION_IDLE_SECONDS"])

    sid  = session.get(SESSION_KEY)
    slot = slots.get(sid) if sid is not None else None
    if slot is None:
        sid = sid or secrets.token_hex(16)
        session[SESSION_KEY] = sid
        slot = SessionSlot(
            controller=PlaybackController(
                scheduler=MonotonicScheduler(),
                speed_ms=current_app.config["DEFAULT_SPEED_MS"],
            )
        )
        slots[sid] = slot
        limit = max(1, int(current_app.config["MAX_SESSIONS"]))
        while len(slots) > limit:
            old_sid, old = slots.popitem(last=False)
            old.controller.unload()
            logger.debug("Evicted session %s: registry is full", old_sid)
    else:
        slots.move_to_end(sid)

    slot.last_seen = now
    slot.controller.scheduler.poll()
    return slot


def drop_idle_slots(slots: "OrderedDict[str, SessionSlot]", cutoff: float) -> None:
    """Remove slots last seen before *cutoff*; the oldest sit at the front."""
    while slots:
        sid, slot = next(iter(slots.items()))
        if slot.last_seen >= cutoff:
            return
        del slots[sid]
        slot.controller.unload()
        logger.debug("Evicted idle session %s", sid)


def state_payload(slot: SessionSlot) -> Dict[str, Any]:
    payload = slot.controller.snapshot()
    payload["algo"]    = slot.algo_key
    payload["metrics"] = asdict(slot.metrics) if slot.metrics else None
    return payload


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Request body must be a JSON object.")
    return data


# ---------------------------------------------------------------------------
# Input limits
# ---------------------------------------------------------------------------
def check_limits(algo_key: str, params: Dict[str, Any]) -> None:
    """Raise BadRequest when any parameter is larger than the configured limits."""
    config    = current_app.config
    max_len   = config["MAX_INPUT_LENGTH"]
    max_board = config["MAX_BOARD_SIZE"]

    for name, value in params.items():
        if name in _BOARD_PARAMS and isinstance(value, list):
            cols = max((len(row) for row in value if isinstance(row, list)), default=0)
            if len(value) > max_board or cols > max_board:
                raise BadRequest(f"'{name}' is larger than {max_board}×{max_board}.")
            continue
        size = _measure(value)
        if size > max_len:
            raise BadRequest(f"'{name}' is too large ({size} > {max_len}).")

    for name in _SIZE_PARAMS:
        value = params.get(name)
        if _is_number(value):
            limit = max_board if (algo_key == "n_queens" and name == "n") else max_len
            if value > limit:
                raise BadRequest(f"'{name}' must be at most {limit}.")

    for (key, name), config_key in _BUDGET_PARAMS.items():
        value = params.get(name)
        if key == algo_key and _is_number(value) and value > config[config_key]:
            raise BadRequest(f"'{name}' must be at most {config[config_key]}.")

    check_work(algo_key, params)


def check_work(algo_key: str, params: Dict[str, Any]) -> None:
    """Reject inputs that are short but would still produce a huge run."""
    config    = current_app.config
    max_cells = config["MAX_TABLE_CELLS"]

    if algo_key == "counting_sort":
        values = [v for v in params.get("array") or [] if _is_number(v)]
        if values and max(values) - min(values) + 1 > config["MAX_COUNT_RANGE"]:
            raise BadRequest(f"'array' values span more than {config['MAX_COUNT_RANGE']}.")

    cells = 0
    if algo_key in ("lcs", "edit_distance"):
        cells = (_measure(params.get("s1")) + 1) * (_measure(params.get("s2")) + 1)
    elif algo_key == "knapsack":
        capacity = params.get("capacity")
        cells = (_measure(params.get("weights")) + 1) * ((capacity if _is_number(capacity) else 0) + 1)
    elif algo_key == "lis":
        cells = _measure(params.get("array")) ** 2
    if cells > max_cells:
        raise BadRequest(f"The DP table would have {cells} cells (limit {max_cells}).")

    if algo_key == "floyd_warshall" and "graph" in params:
        try:
            nodes = as_graph(params["graph"], directed=bool(params.get("directed", True))).node_count()
        except (TypeError, ValueError) as exc:
            raise BadRequest(f"Invalid parameters for {algo_key}: {exc}") from exc
        if nodes > config["MAX_BOARD_SIZE"]:
            raise BadRequest(f"Floyd-Warshall accepts at most {config['MAX_BOARD_SIZE']} nodes.")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _measure(value: Any) -> int:
    if isinstance(value, (str, list, tuple)):
        return len(value)
    if isinstance(value, dict):
        # graph mappings: nodes plus every listed neighbour
        total = len(value)
        for item in value.values():
            if isinstance(item, (list, tuple)):
                total += len(item)
        return total
    return 0


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------
    @app.route("/api/algorithms", methods=["GET"])
    def api_algorithms():
        return jsonify({"algorithms": [info.to_dict() for info in list_algorithms()]})

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    def api_run():
        data     = json_body()
        algo_key = data.get("algo")
        params   = data.get("params") or {}

        if not isinstance(algo_key, str) or not algo_key:
            raise BadRequest("Missing 'algo'.")
        if not isinstance(params, dict):
            raise BadRequest("'params' must be a JSON object.")
        info = get_algorithm(algo_key)
        if info is None:
            raise BadRequest(f"Unknown algorithm: {algo_key}")
        check_limits(algo_key, params)

        for (key, name), config_key in _BUDGET_PARAMS.items():
            if key == algo_key and name not in params:
                params = {**params, name: current_app.config[config_key]}

        slot = get_slot()
        rec  = Recorder()
        try:
            rec.start(algo_key, **params)
            metrics = rec.run_to_completion()
        except UnknownAlgorithmError as exc:
            raise BadRequest(str(exc)) from exc
        except (TypeError, ValueError) as exc:
            raise BadRequest(f"Invalid parameters for {algo_key}: {exc}") from exc

        slot.controller.load(rec.sequence)
        slot.algo_key = algo_key
        slot.metrics  = metrics
        slot.params   = rec.params
        logger.info("Run %s: %d steps in %.2fms", algo_key, metrics.total_steps, metrics.wall_time_ms)
        return jsonify(state_payload(slot))

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------
    @app.route("/api/play", methods=["POST"])
    def api_play():
        slot = get_slot()
        slot.controller.play()
        return jsonify(state_payload(slot))

    @app.route("/api/pause", methods=["POST"])
    def api_pause():
        slot = get_slot()
        slot.controller.pause()
        return jsonify(state_payload(slot))

    @app.route("/api/toggle", methods=["POST"])
    def api_toggle():
        slot = get_slot()
        slot.controller.toggle_play()
        return jsonify(state_payload(slot))

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        slot = get_slot()
        slot.controller.reset()
        return jsonify(state_payload(slot))

    # ------------------------------------------------------------------
    # Step navigation
    # ------------------------------------------------------------------
    @app.route("/api/step/next", methods=["POST"])
    def api_step_next():
        slot = get_slot()
        slot.controller.step_forward()
        return jsonify(state_payload(slot))

    @app.route("/api/step/prev", methods=["POST"])
    def api_step_prev():
        slot = get_slot()
        slot.controller.step_backward()
        return jsonify(state_payload(slot))

    @app.route("/api/step/goto", methods=["POST"])
    def api_step_goto():
        data = json_body()
        if "index" not in data:
            raise BadRequest("Missing 'index'.")
        slot = get_slot()
        slot.controller.seek(data["index"])
        return jsonify(state_payload(slot))

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    @app.route("/api/speed", methods=["POST"])
    def api_speed():
        data = json_body()
        slot = get_slot()
        if "preset" in data:
            slot.controller.set_speed_preset(data["preset"])
        elif "ms" in data:
            slot.controller.set_speed(data["ms"])
        else:
            raise BadRequest("Provide 'ms' or 'preset'.")
        return jsonify(state_payload(slot))

    # ------------------------------------------------------------------
    # Polling
    # ------------------------------------------------------------------
    @app.route("/api/state", methods=["GET"])
    def api_state():
        return jsonify(state_payload(get_slot()))


def server_address(app: Flask) -> Tuple[str, int]:
    return app.config["HOST"], int(app.config["PORT"])


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    setup_logging(app.config["LOG_LEVEL"])
    host, port = server_address(app)
    logger.info("Algorithm Playback Visualizer on http://%s:%d", host, port)
    # controllers are plain in-memory objects: serve one request at a time
    app.run(host=host, port=port, debug=bool(app.config["DEBUG"]), threaded=False)
