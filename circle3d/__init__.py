"""Circle geometry in 3D space.

The package computes points on the circumference of an arbitrarily
oriented circle, optionally spaced by an easing curve, and samples
random points inside its disc. Directions, easing curves and random
sources are small pluggable collaborators.
"""

from .circle import Circle, CircumferenceOptions, SamplingStats, resolve_ease
from .config import SamplingConfig, load_sampling_config
from .direction import Direction, resolve_to_vector
from .easing import CustomEase, EaseType, default_ease, inverse_lerp, lerp, with_strength
from .errors import CircleError, DegenerateAxisError, SamplingExhaustedError, UnknownDirectionError
from .random_source import NumpyRandomSource, RandomSource, SeededRandomSource, create_random_source
from .vector import normalize, orthonormal_basis, reference_vector

__all__ = [
    "Circle",
    "CircumferenceOptions",
    "SamplingStats",
    "resolve_ease",
    "SamplingConfig",
    "load_sampling_config",
    "Direction",
    "resolve_to_vector",
    "CustomEase",
    "EaseType",
    "default_ease",
    "inverse_lerp",
    "lerp",
    "with_strength",
    "CircleError",
    "DegenerateAxisError",
    "SamplingExhaustedError",
    "UnknownDirectionError",
    "NumpyRandomSource",
    "RandomSource",
    "SeededRandomSource",
    "create_random_source",
    "normalize",
    "orthonormal_basis",
    "reference_vector",
]
