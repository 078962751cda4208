"""Exceptions raised by the circle geometry helpers."""
from __future__ import annotations


class CircleError(ValueError):
    """Base class for every error raised by :mod:`circle3d`."""


class DegenerateAxisError(CircleError):
    """Raised when an axis cannot be normalized (zero length or non-finite)."""


class UnknownDirectionError(CircleError, KeyError):
    """Raised when a direction name does not match any :class:`Direction`."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message instead.
        return str(self.args[0]) if self.args else ""


class SamplingExhaustedError(CircleError, RuntimeError):
    """Raised when rejection sampling hits its attempt cap."""

    def __init__(self, attempts: int) -> None:
        super().__init__(f"No sample accepted after {attempts} attempts")
        self.attempts = attempts
