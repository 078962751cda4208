"""Pytest configuration and shared fakes for circle3d tests."""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, List, Tuple

import pytest

# //1.- Ensure repository root is available on the Python path for package imports.
ROOT = Path(__file__).resolve().parents[2]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class ScriptedRandomSource:
    """Replays fractions in ``[0, 1]`` mapped onto each requested range."""

    def __init__(self, fractions: Iterable[float]) -> None:
        self._fractions = list(fractions)
        self.calls: List[Tuple[float, float]] = []

    def uniform(self, low: float, high: float) -> float:
        self.calls.append((low, high))
        fraction = self._fractions[(len(self.calls) - 1) % len(self._fractions)]
        return low + (high - low) * fraction


class RecordingEase:
    """Linear ease that remembers every progress value it receives."""

    def __init__(self) -> None:
        self.progress: List[float] = []

    def __call__(self, low: float, high: float, t: float) -> float:
        self.progress.append(t)
        return low + (high - low) * t


@pytest.fixture
def scripted_random():
    return ScriptedRandomSource


@pytest.fixture
def recording_ease() -> RecordingEase:
    return RecordingEase()
