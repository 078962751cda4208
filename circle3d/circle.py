"""A circle of any orientation in 3D space.

The circle lies in the plane through ``centre`` perpendicular to
``axis``. Points on the circumference are parametrized by an angle in
degrees measured from ``ortho1 = axis x reference`` towards
``ortho2 = axis x ortho1`` (see :func:`circle3d.vector.orthonormal_basis`).

Interior points come from rejection sampling inside an axis-aligned cube
around the centre. A candidate is accepted when its projection onto the
circle's plane lies within the radius; the accepted point keeps its
off-plane component. The cube's half side is ``radius / sqrt(2)`` by
default. For an axis along a coordinate axis that cube only covers the
square inscribed in the disc and accepts every candidate; the
``circumscribed`` mode of :class:`~circle3d.config.SamplingConfig` grows
it to ``radius``, covering the whole disc and accepting ``pi / 4`` of the
candidates.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from .config import CUBE_CIRCUMSCRIBED, FALLBACK_RAISE, SamplingConfig
from .direction import Direction, resolve_to_vector
from .easing import (
    DEFAULT_EASE_TYPE,
    EaseFunction,
    EaseType,
    default_ease,
    inverse_lerp,
    with_strength,
)
from .errors import SamplingExhaustedError
from .random_source import RandomSource, create_random_source
from .vector import as_vector, normalize, orthonormal_basis

LOGGER = logging.getLogger(__name__)

ROOT_TWO = math.sqrt(2.0)

AxisLike = Union[Iterable[float], Direction, str]
EaseLike = Union[EaseFunction, EaseType, str, None]


@dataclass(frozen=True)
class CircumferenceOptions:
    """Bundled arguments for :meth:`Circle.points_from_options`."""

    count: int
    offset: float = 0.0
    ease: EaseLike = None
    strength: float = 1.0


@dataclass
class SamplingStats:
    """Counters collected while sampling points inside a circle."""

    accepted: int = 0
    attempts: int = 0
    exhausted: int = 0

    @property
    def acceptance_rate(self) -> float:
        if self.attempts == 0:
            return 0.0
        return self.accepted / self.attempts


def resolve_ease(ease: EaseLike = None, strength: Optional[float] = None) -> EaseFunction:
    """Turn the accepted ease forms into a single ``ease(low, high, t)`` callable."""

    if ease is None and strength is None:
        return default_ease()
    if ease is None:
        ease = DEFAULT_EASE_TYPE
    if isinstance(ease, (EaseType, str)):
        return with_strength(ease, 1.0 if strength is None else strength)
    if not callable(ease):
        raise TypeError(f"ease must be callable, got {type(ease).__name__}")
    return ease


class Circle:
    """Circle defined by a centre, a radius and a unit axis.

    ``centre`` and ``axis`` are returned as copies, so mutating a value read
    from the circle never changes it. The axis is normalized on every write
    and a zero-length axis raises :class:`~circle3d.errors.DegenerateAxisError`.
    The radius is not validated.
    """

    def __init__(
        self,
        centre: Iterable[float],
        radius: float,
        axis: AxisLike,
        *,
        random_source: Optional[RandomSource] = None,
        config: Optional[SamplingConfig] = None,
    ) -> None:
        self._centre = as_vector(centre, "centre")
        self._radius = float(radius)
        self._axis = self._normalize_axis(axis)
        self._config = config or SamplingConfig()
        self._random = random_source if random_source is not None else create_random_source(self._config)
        self.sampling_stats = SamplingStats()

    @classmethod
    def from_direction(
        cls,
        centre: Iterable[float],
        radius: float,
        direction: Union[Direction, str],
        **kwargs: object,
    ) -> "Circle":
        return cls(centre, radius, resolve_to_vector(direction), **kwargs)  # type: ignore[arg-type]

    @staticmethod
    def _normalize_axis(axis: AxisLike) -> np.ndarray:
        if axis is None:
            raise TypeError("axis must not be None")
        if isinstance(axis, (Direction, str)):
            return resolve_to_vector(axis)
        return normalize(axis)

    # -- Accessors --------------------------------------------------------

    @property
    def centre(self) -> np.ndarray:
        return self._centre.copy()

    @centre.setter
    def centre(self, value: Iterable[float]) -> None:
        self._centre = as_vector(value, "centre")

    @property
    def radius(self) -> float:
        return self._radius

    @radius.setter
    def radius(self, value: float) -> None:
        self._radius = float(value)

    @property
    def axis(self) -> np.ndarray:
        return self._axis.copy()

    @axis.setter
    def axis(self, value: AxisLike) -> None:
        self._axis = self._normalize_axis(value)

    @property
    def config(self) -> SamplingConfig:
        return self._config

    def copy(self) -> "Circle":
        """Return an independent circle sharing only the random source."""
        clone = Circle(self._centre, self._radius, self._axis, random_source=self._random, config=self._config)
        # Skip a second normalization so the clone compares equal.
        clone._axis = self._axis.copy()
        return clone

    def basis(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return the ``(ortho1, ortho2)`` pair spanning the circle's plane."""
        return orthonormal_basis(self._axis)

    # -- Circumference ----------------------------------------------------

    def point_on_circumference(self, angle: float, offset: float = 0.0) -> np.ndarray:
        """Return the point at ``angle + offset`` degrees around the axis."""

        phase = math.radians(angle) + math.radians(offset)
        ortho1, ortho2 = self.basis()
        return (
            self._centre
            + ortho1 * (self._radius * math.cos(phase))
            + ortho2 * (self._radius * math.sin(phase))
        )

    def points_on_circumference(
        self,
        count: int,
        offset: float = 0.0,
        ease: EaseLike = None,
        strength: Optional[float] = None,
    ) -> List[np.ndarray]:
        """Return ``count`` points spread around the circumference.

        Point ``i`` sits at ``ease(0, 360, i / count)`` degrees plus
        ``offset``, so progress never reaches a full turn and the first
        point is not repeated. ``ease`` may be an :class:`EaseType` (or its
        name) combined with ``strength``, or any ``ease(low, high, t)``
        callable, in which case ``strength`` is ignored.
        """

        count = int(count)
        ease_fn = resolve_ease(ease, strength)
        points: List[np.ndarray] = []
        for index in range(count):
            eased_angle = ease_fn(0.0, 360.0, inverse_lerp(0.0, count, index))
            points.append(self.point_on_circumference(eased_angle, offset))
        return points

    def points_from_options(self, options: CircumferenceOptions) -> List[np.ndarray]:
        return self.points_on_circumference(
            options.count,
            offset=options.offset,
            ease=options.ease,
            strength=options.strength,
        )

    # -- Interior sampling ------------------------------------------------

    def bounding_half_side(self) -> float:
        """Half side of the cube candidates are drawn from."""
        if self._config.bounding_cube == CUBE_CIRCUMSCRIBED:
            return self._radius
        return self._radius / ROOT_TWO

    def _sample_inside(self) -> Tuple[np.ndarray, int, bool]:
        half_side = self.bounding_half_side()
        minimum = self._centre - half_side
        maximum = self._centre + half_side
        radius_sq = self._radius * self._radius

        # //1.- Draw candidates in the cube until one projects inside the disc.
        for attempt in range(1, self._config.max_attempts + 1):
            candidate = np.array(
                [self._random.uniform(float(lo), float(hi)) for lo, hi in zip(minimum, maximum)]
            )
            # //2.- Drop the component along the axis before the distance test.
            relative = candidate - self._centre
            projected = relative - self._axis * float(np.dot(relative, self._axis))
            if float(np.dot(projected, projected)) <= radius_sq:
                return candidate, attempt, True

        # //3.- Cap reached: apply the configured fallback.
        return self._centre.copy(), self._config.max_attempts, False

    def random_point_inside(self) -> np.ndarray:
        """Return a random point whose projection onto the plane lies in the disc."""

        point, attempts, accepted = self._sample_inside()
        self.sampling_stats.attempts += attempts
        if accepted:
            self.sampling_stats.accepted += 1
            return point

        self.sampling_stats.exhausted += 1
        if self._config.fallback == FALLBACK_RAISE:
            raise SamplingExhaustedError(attempts)
        LOGGER.warning(
            "No sample accepted after %d attempts (radius=%s), returning centre",
            attempts,
            self._radius,
        )
        return point

    def random_points_inside(self, count: int) -> List[np.ndarray]:
        points = [self.random_point_inside() for _ in range(int(count))]
        LOGGER.debug(
            "Sampled %d interior points, acceptance rate %.3f",
            len(points),
            self.sampling_stats.acceptance_rate,
        )
        return points

    def reset_sampling_stats(self) -> None:
        self.sampling_stats = SamplingStats()

    # -- Dunder helpers ---------------------------------------------------

    def __repr__(self) -> str:
        return (
            f"Circle(centre={self._centre.tolist()!r}, radius={self._radius!r}, "
            f"axis={self._axis.tolist()!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circle):
            return NotImplemented
        return (
            self._radius == other._radius
            and bool(np.array_equal(self._centre, other._centre))
            and bool(np.array_equal(self._axis, other._axis))
        )

    __hash__ = None  # type: ignore[assignment]
