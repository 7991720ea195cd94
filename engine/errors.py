"""
errors.py — Engine Exceptions
==============================
Domain failures (bad parameters, unsolvable boards) never surface as
exceptions: producers report them inside a terminal Step.  The two
classes below are programming errors on the caller's side.
"""


class UnknownAlgorithmError(ValueError):
    """Raised when a registry key does not name a registered producer."""

    def __init__(self, key: str):
        super().__init__(f"Unknown algorithm: {key}")
        self.key = key


class EmptyProducerError(RuntimeError):
    """Raised when a producer finishes without yielding a single Step."""
