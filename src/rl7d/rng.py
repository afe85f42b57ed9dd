from __future__ import annotations

import hashlib
import logging
import random
import secrets
from dataclasses import dataclass, field
from typing import Protocol, Union

logger = logging.getLogger(__name__)

SeedLike = Union[int, str, bytes, None]


class RandomSource(Protocol):
    """Randomness capabilities required by map generation.

    Generation only ever asks for a uniform integer in a closed range and for a
    fair boolean, so tests can substitute a scripted source without touching
    production sampling code.
    """

    def randint(self, lo: int, hi: int) -> int: ...
    def coin_flip(self) -> bool: ...


def _canonicalize_seed(seed: SeedLike) -> bytes:
    if seed is None:
        return b""
    if isinstance(seed, bytes):
        return seed
    if isinstance(seed, bool):
        raise TypeError("Unsupported seed type: %r" % (type(seed),))
    if isinstance(seed, int):
        signed = seed < 0
        length = (seed.bit_length() + (8 if signed else 7)) // 8 or 1
        return seed.to_bytes(length, "big", signed=signed)
    if isinstance(seed, str):
        s = seed.strip()
        if s.startswith("0x"):
            try:
                val = int(s, 16)
            except ValueError:
                return s.encode("utf-8")
            length = (val.bit_length() + 7) // 8 or 1
            return val.to_bytes(length, "big", signed=False)
        return s.encode("utf-8")
    raise TypeError("Unsupported seed type: %r" % (type(seed),))


def derive_seed(seed: SeedLike) -> int:
    """Turn an int, str or bytes seed into a stable 64-bit integer.

    Non-negative ints are used as-is so that ``SeededRandom(42)`` behaves like
    ``random.Random(42)``; everything else is hashed with BLAKE2b.
    """
    if isinstance(seed, int) and not isinstance(seed, bool) and seed >= 0:
        return seed
    data = _canonicalize_seed(seed)
    h = hashlib.blake2b(data, digest_size=8)
    return int.from_bytes(h.digest(), "big", signed=False)


@dataclass
class SeededRandom:
    """Deterministic RandomSource backed by a private ``random.Random``.

    The global ``random`` module state is never touched. When ``seed`` is None a
    fresh seed is drawn from ``secrets`` and logged so a surprising map can be
    reproduced later.
    """

    seed: SeedLike = None
    _rng: random.Random = field(init=False, repr=False)
    _effective_seed: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.seed is None:
            self._effective_seed = secrets.randbits(64)
            logger.info("No seed provided; using random seed %d", self._effective_seed)
        else:
            self._effective_seed = derive_seed(self.seed)
            logger.debug("Using seed %r -> %d", self.seed, self._effective_seed)
        self._rng = random.Random(self._effective_seed)

    @property
    def effective_seed(self) -> int:
        return self._effective_seed

    def randint(self, lo: int, hi: int) -> int:
        """Return a uniform integer N such that lo <= N <= hi."""
        if lo > hi:
            raise ValueError(f"empty range for randint({lo}, {hi})")
        return self._rng.randint(lo, hi)

    def coin_flip(self) -> bool:
        return self._rng.random() < 0.5


__all__ = ["RandomSource", "SeededRandom", "derive_seed"]
