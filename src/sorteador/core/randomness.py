from __future__ import annotations

import hashlib
import random
from typing import Any

from sorteador.contracts import RandomSource


class PythonRandomSource(RandomSource):
    """Injected randomness for draws; seeded instances replay the same draws."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    def coin_flip(self) -> bool:
        return self._rng.random() < 0.5

    def shuffle(self, items: list[Any]) -> None:
        # Fisher-Yates: every permutation equally likely.
        self._rng.shuffle(items)

    def spawn(self, substream_id: str) -> RandomSource:
        if self._seed is None:
            return PythonRandomSource()
        digest = hashlib.sha256(f"{self._seed}:{substream_id}".encode("utf-8")).hexdigest()
        return PythonRandomSource(seed=int(digest[:16], 16))


def draw_random() -> PythonRandomSource:
    return PythonRandomSource()


def seeded_random(seed: int) -> PythonRandomSource:
    return PythonRandomSource(seed=seed)
