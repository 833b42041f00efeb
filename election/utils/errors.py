# election/utils/errors.py
from __future__ import annotations


class ElectionError(RuntimeError):
    """
    Base class for every contract violation raised by the simulator.
    These are caller errors: never retried, never clamped.
    """


class InvalidArgument(ElectionError, ValueError):
    """
    Malformed or out-of-range parameter: empty point set, non-positive count,
    rounds exceeding population, mismatched run lengths.
    """


class InvalidState(ElectionError):
    """
    The operation would drive a World below one point.

    `removals` holds the records completed before the failing round, so a
    caller running an elimination can still see how far it got.
    """

    def __init__(self, message: str, removals: list | None = None):
        super().__init__(message)
        self.removals = list(removals) if removals is not None else []


class SamplingExhausted(ElectionError):
    """Backward growth hit its caller-supplied attempt bound."""

    def __init__(self, message: str, attempts: int):
        super().__init__(message)
        self.attempts = attempts
