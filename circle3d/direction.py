"""Named compass directions that can orient a circle.

The six faces follow the usual block-world convention: north is -z,
east is +x and up is +y. Compound members add their parts together, so
``SOUTH_WEST_DOWN`` points along ``(-1, -1, 1)`` once normalized.
"""
from __future__ import annotations

from enum import Enum
from typing import Union

import numpy as np

from .errors import UnknownDirectionError
from .vector import normalize


class Direction(Enum):
    """The 26 directions from the centre of a cube to its faces, edges and corners."""

    NORTH = (0, 0, -1)
    SOUTH = (0, 0, 1)
    EAST = (1, 0, 0)
    WEST = (-1, 0, 0)
    UP = (0, 1, 0)
    DOWN = (0, -1, 0)

    NORTH_EAST = (1, 0, -1)
    NORTH_WEST = (-1, 0, -1)
    SOUTH_EAST = (1, 0, 1)
    SOUTH_WEST = (-1, 0, 1)

    NORTH_UP = (0, 1, -1)
    NORTH_DOWN = (0, -1, -1)
    SOUTH_UP = (0, 1, 1)
    SOUTH_DOWN = (0, -1, 1)
    EAST_UP = (1, 1, 0)
    EAST_DOWN = (1, -1, 0)
    WEST_UP = (-1, 1, 0)
    WEST_DOWN = (-1, -1, 0)

    NORTH_EAST_UP = (1, 1, -1)
    NORTH_EAST_DOWN = (1, -1, -1)
    NORTH_WEST_UP = (-1, 1, -1)
    NORTH_WEST_DOWN = (-1, -1, -1)
    SOUTH_EAST_UP = (1, 1, 1)
    SOUTH_EAST_DOWN = (1, -1, 1)
    SOUTH_WEST_UP = (-1, 1, 1)
    SOUTH_WEST_DOWN = (-1, -1, 1)

    def to_vector(self) -> np.ndarray:
        return normalize(self.value, self.name)

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise UnknownDirectionError(f"Unknown direction {name!r}") from None


DirectionLike = Union[Direction, str]


def resolve_to_vector(direction: DirectionLike) -> np.ndarray:
    """Return the unit vector for a :class:`Direction` or a direction name."""

    if direction is None:
        raise TypeError("direction must not be None")
    if isinstance(direction, str):
        direction = Direction.from_name(direction)
    if not isinstance(direction, Direction):
        raise TypeError(f"Expected a Direction, got {type(direction).__name__}")
    return direction.to_vector()
