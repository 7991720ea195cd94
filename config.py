"""
config.py — Settings & Logging
===============================
Defaults for the Flask app.  Every key can be overridden through the
environment with an ``ALGOVIZ_`` prefix, e.g. ``ALGOVIZ_PORT=8080`` or
``ALGOVIZ_DEBUG=true`` (values are parsed as JSON by Flask).
"""

import logging
import sys
from typing import Any, Dict


DEFAULTS: Dict[str, Any] = {
    "DEFAULT_SPEED_MS":     400,       # playback interval for new sessions
    "MAX_INPUT_LENGTH":     200,       # longest array / string / graph accepted by /api/run
    "MAX_BOARD_SIZE":       12,        # largest N-Queens N, grid side and Floyd-Warshall matrix
    "SUDOKU_MAX_STEPS":     50_000,    # Step budget before the Sudoku solver gives up
    "MAX_COUNT_RANGE":      1000,      # widest max - min accepted by counting sort
    "MAX_TABLE_CELLS":      2500,      # largest DP table (LCS, edit distance, knapsack, LIS)
    "MAX_SESSIONS":         256,       # playback controllers kept in memory at once
    "SESSION_IDLE_SECONDS": 1800,      # controllers unused this long are dropped
    "LOG_LEVEL":            "INFO",
    "HOST":                 "127.0.0.1",
    "PORT":                 5000,
    "DEBUG":                False,
    "SECRET_KEY":           None,      # random per process when unset
}

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LEVELS = {
    "DEBUG":    logging.DEBUG,
    "INFO":     logging.INFO,
    "WARNING":  logging.WARNING,
    "ERROR":    logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Install one stdout handler on the root logger and return it."""
    log_level = _LEVELS.get(str(level).upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers.clear()
    root.addHandler(handler)
    return root
