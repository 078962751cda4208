"""Small numpy vector helpers used by the circle geometry.

Vectors are plain ``float64`` arrays of shape ``(3,)``. Every helper
returns a fresh array so callers can mutate results without touching
the inputs.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple

import numpy as np

from .errors import DegenerateAxisError

LOGGER = logging.getLogger(__name__)

UNIT_X = np.array([1.0, 0.0, 0.0])
UNIT_Y = np.array([0.0, 1.0, 0.0])

# Above this |axis . x| the cross product with x becomes unstable.
PARALLEL_THRESHOLD = 0.999


# //1.- Coerce any iterable of three numbers into a private float array.
def as_vector(values: Optional[Iterable[float]], name: str = "vector") -> np.ndarray:
    if values is None:
        raise TypeError(f"{name} must not be None")
    vector = np.array(values, dtype=float).reshape(-1)
    if vector.shape != (3,):
        raise ValueError(f"{name} requires exactly three components")
    return vector


# //2.- Scale a vector to unit length, refusing zero or non-finite input.
def normalize(vector: Iterable[float], name: str = "axis") -> np.ndarray:
    values = as_vector(vector, name)
    magnitude = float(np.linalg.norm(values))
    if magnitude == 0.0 or not np.isfinite(magnitude):
        raise DegenerateAxisError(f"Cannot normalize {name} {values.tolist()!r}")
    return values / magnitude


def reference_vector(axis: Iterable[float]) -> np.ndarray:
    """Return the helper vector crossed with ``axis`` to span its plane.

    The x axis is used unless ``axis`` is almost parallel to it, in which
    case the y axis takes over.
    """

    unit = as_vector(axis, "axis")
    if abs(float(np.dot(unit, UNIT_X))) > PARALLEL_THRESHOLD:
        LOGGER.debug("Axis %s is parallel to x, using y as reference", unit.tolist())
        return UNIT_Y.copy()
    return UNIT_X.copy()


def orthonormal_basis(axis: Iterable[float]) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(ortho1, ortho2)`` spanning the plane perpendicular to ``axis``.

    ``ortho1 = axis x reference`` and ``ortho2 = axis x ortho1``, so for
    ``axis = (0, 0, 1)`` the basis is ``((0, 1, 0), (-1, 0, 0))``.
    """

    unit = normalize(axis)
    ortho1 = normalize(np.cross(unit, reference_vector(unit)), "ortho1")
    ortho2 = normalize(np.cross(unit, ortho1), "ortho2")
    return ortho1, ortho2


# //3.- Remove the component of ``vector`` along the unit ``normal``.
def project_onto_plane(vector: Iterable[float], normal: Iterable[float]) -> np.ndarray:
    values = as_vector(vector)
    unit = as_vector(normal, "normal")
    return values - unit * float(np.dot(values, unit))
