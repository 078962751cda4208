"""Configuration helpers for interior point sampling."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional

FALLBACK_CENTRE = "centre"
FALLBACK_RAISE = "raise"
FALLBACK_POLICIES = (FALLBACK_CENTRE, FALLBACK_RAISE)

# Half side of the candidate cube: ``radius / sqrt(2)`` (inscribed) or ``radius``.
CUBE_CIRCUMSCRIBED = "circumscribed"
CUBE_INSCRIBED = "inscribed"
CUBE_MODES = (CUBE_CIRCUMSCRIBED, CUBE_INSCRIBED)

DEFAULT_MAX_ATTEMPTS = 10_000


def _choice(value: str, allowed: tuple, label: str) -> None:
    if value not in allowed:
        raise ValueError(f"{label} must be one of {', '.join(allowed)}, got {value!r}")


# //1.- Seed, attempt cap, fallback and cube size for interior sampling.
@dataclass(frozen=True)
class SamplingConfig:
    """Settings driving the rejection sampling loop."""

    seed: Optional[int] = None
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    fallback: str = FALLBACK_CENTRE
    bounding_cube: str = CUBE_INSCRIBED

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        _choice(self.fallback, FALLBACK_POLICIES, "fallback")
        _choice(self.bounding_cube, CUBE_MODES, "bounding_cube")

    # //2.- Build the config from a mapping, ignoring keys that are absent.
    @classmethod
    def from_mapping(cls, payload: Optional[Mapping[str, object]] = None) -> "SamplingConfig":
        if not payload:
            return cls()
        seed = payload.get("seed")
        return cls(
            seed=None if seed is None else int(seed),  # type: ignore[arg-type]
            max_attempts=int(payload.get("max_attempts", DEFAULT_MAX_ATTEMPTS)),  # type: ignore[arg-type]
            fallback=str(payload.get("fallback", FALLBACK_CENTRE)).strip().lower(),
            bounding_cube=str(payload.get("bounding_cube", CUBE_INSCRIBED)).strip().lower(),
        )

    # //3.- Read each field from a PREFIX_FIELD environment variable when it is set.
    @classmethod
    def from_environment(cls, prefix: str = "CIRCLE3D") -> "SamplingConfig":
        mapping: Dict[str, object] = {}
        for key in ("seed", "max_attempts", "fallback", "bounding_cube"):
            value = os.getenv(f"{prefix}_{key.upper()}")
            if value:
                mapping[key] = value
        return cls.from_mapping(mapping)


# //4.- Prefer an explicit mapping, otherwise fall back to the environment.
def load_sampling_config(
    mapping: Optional[Mapping[str, object]] = None,
    *,
    env_prefix: str = "CIRCLE3D",
) -> SamplingConfig:
    if mapping is not None:
        return SamplingConfig.from_mapping(mapping)
    return SamplingConfig.from_environment(prefix=env_prefix)
