"""Easing curves used to space points around a circle.

An ease is any callable ``ease(low, high, t)`` returning a value between
``low`` and ``high`` for a progress fraction ``t``. :class:`CustomEase`
binds an :class:`EaseType` to a strength so it can be passed around as
one object.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Protocol


class EaseFunction(Protocol):
    def __call__(self, low: float, high: float, t: float) -> float:
        ...


def clamp(value: float, minimum: float = 0.0, maximum: float = 1.0) -> float:
    return max(minimum, min(maximum, value))


def lerp(low: float, high: float, t: float) -> float:
    return low + (high - low) * t


def inverse_lerp(low: float, high: float, value: float) -> float:
    """Return where ``value`` sits between ``low`` and ``high`` (0 at low, 1 at high)."""

    if high == low:
        return 0.0
    return (value - low) / (high - low)


# //1.- Shape functions map [0, 1] onto [0, 1]; ``strength`` bends the curve.
def _linear(t: float, strength: float) -> float:
    return t


def _ease_in(t: float, strength: float) -> float:
    return t ** (1.0 + strength)


def _ease_out(t: float, strength: float) -> float:
    return 1.0 - (1.0 - t) ** (1.0 + strength)


def _ease_in_out(t: float, strength: float) -> float:
    if t < 0.5:
        return 0.5 * _ease_in(2.0 * t, strength)
    return 0.5 + 0.5 * _ease_out(2.0 * t - 1.0, strength)


def _ease_in_sine(t: float, strength: float) -> float:
    return (1.0 - math.cos(t * math.pi / 2.0)) ** strength


def _ease_out_sine(t: float, strength: float) -> float:
    return math.sin(t * math.pi / 2.0) ** strength


def _ease_in_out_sine(t: float, strength: float) -> float:
    if t < 0.5:
        return 0.5 * _ease_in_sine(2.0 * t, strength)
    return 0.5 + 0.5 * _ease_out_sine(2.0 * t - 1.0, strength)


class EaseType(Enum):
    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"
    EASE_IN_OUT = "ease_in_out"
    EASE_IN_SINE = "ease_in_sine"
    EASE_OUT_SINE = "ease_out_sine"
    EASE_IN_OUT_SINE = "ease_in_out_sine"

    def shape(self, t: float, strength: float = 1.0) -> float:
        """Return the eased fraction for progress ``t`` (clamped to [0, 1])."""
        return _SHAPES[self](clamp(t), strength)

    def ease(self, low: float, high: float, t: float, strength: float = 1.0) -> float:
        return lerp(low, high, self.shape(t, strength))

    def as_custom_ease(self, strength: float = 1.0) -> "CustomEase":
        return CustomEase(self, strength)


_SHAPES: Dict[EaseType, Callable[[float, float], float]] = {
    EaseType.LINEAR: _linear,
    EaseType.EASE_IN: _ease_in,
    EaseType.EASE_OUT: _ease_out,
    EaseType.EASE_IN_OUT: _ease_in_out,
    EaseType.EASE_IN_SINE: _ease_in_sine,
    EaseType.EASE_OUT_SINE: _ease_out_sine,
    EaseType.EASE_IN_OUT_SINE: _ease_in_out_sine,
}


@dataclass(frozen=True)
class CustomEase:
    """An :class:`EaseType` with its strength fixed."""

    ease_type: EaseType
    strength: float = 1.0

    def __post_init__(self) -> None:
        if not self.strength > 0.0 or math.isinf(self.strength):
            raise ValueError("Ease strength must be a positive finite number")

    def ease(self, low: float, high: float, t: float) -> float:
        return self.ease_type.ease(low, high, t, self.strength)

    __call__ = ease


DEFAULT_EASE_TYPE = EaseType.LINEAR


def default_ease() -> CustomEase:
    return CustomEase(DEFAULT_EASE_TYPE)


def with_strength(ease_type: EaseType | str, strength: float = 1.0) -> CustomEase:
    """Resolve an ease type (or its name) and a strength to a :class:`CustomEase`."""

    if isinstance(ease_type, str):
        try:
            ease_type = EaseType(ease_type.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown ease type {ease_type!r}") from None
    if not isinstance(ease_type, EaseType):
        raise TypeError(f"Expected an EaseType, got {type(ease_type).__name__}")
    return ease_type.as_custom_ease(float(strength))
