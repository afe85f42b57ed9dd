import sys
from pathlib import Path
from typing import Iterable, List

import pytest

# Ensure 'src' is on sys.path for test imports without installing the package
ROOT = Path(__file__).resolve().parents[1]
src = ROOT / "src"
if str(src) not in sys.path:
    sys.path.insert(0, str(src))


class ScriptedRandom:
    """RandomSource that replays fixed answers and records every request."""

    def __init__(self, ints: Iterable[int] = (), flips: Iterable[bool] = ()) -> None:
        self._ints: List[int] = list(ints)
        self._flips: List[bool] = list(flips)
        self.int_calls: List[tuple] = []

    def randint(self, lo: int, hi: int) -> int:
        self.int_calls.append((lo, hi))
        if not self._ints:
            raise AssertionError(f"unexpected randint({lo}, {hi})")
        value = self._ints.pop(0)
        assert lo <= value <= hi, f"scripted {value} outside [{lo}, {hi}]"
        return value

    def coin_flip(self) -> bool:
        if not self._flips:
            raise AssertionError("unexpected coin_flip()")
        return self._flips.pop(0)

    @property
    def exhausted(self) -> bool:
        return not self._ints and not self._flips


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def clean_env(monkeypatch):
    """Remove RL7D_* variables so host settings cannot leak into a test."""
    import os

    for key in list(os.environ):
        if key.startswith("RL7D_"):
            monkeypatch.delenv(key)
    return monkeypatch
