#!/usr/bin/env python3
"""
Seeded Random Stream
====================
The one source of randomness a language instance draws from.

Every language owns its own stream, seeded from a 64-bit integer, so two
languages built from the same seed and driven through the same calls
produce the same words. The module-global ``random`` state is never used.
"""

import random
from typing import Any, List, Sequence, Tuple


class SeededRandom:
    """
    Deterministic random number generator for one language instance.

    Not safe to share between threads: every draw advances the stream and
    interleaved draws change every word produced afterwards.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def random(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._rng.random()

    def randrange(self, stop: int) -> int:
        """Return random integer N such that 0 <= N < stop."""
        return self._rng.randrange(stop)

    def choice(self, seq: Sequence) -> Any:
        """Return a random element from non-empty sequence."""
        if not seq:
            raise IndexError("Cannot choose from empty sequence")
        return self._rng.choice(seq)

    def sample(self, population: Sequence, k: int) -> list:
        """
        Return up to k unique elements from population.

        Asking for more elements than the population holds returns the
        whole population in random order.
        """
        return self._rng.sample(list(population), min(k, len(population)))

    def shuffle(self, seq: list) -> None:
        """Shuffle list in place."""
        self._rng.shuffle(seq)

    def weighted_choice(self, items: List[Tuple[Any, int]]) -> Any:
        """
        Choose from items with integer weights.

        Args:
            items: List of (item, weight) tuples, weights >= 0

        Returns:
            Randomly selected item, with probability weight / total.
            An item with weight 0 is never returned.
        """
        if not items:
            raise IndexError("Cannot choose from empty sequence")

        total = 0
        for item, weight in items:
            if weight < 0:
                raise ValueError(f"Negative weight {weight} for {item!r}")
            total += weight
        if total == 0:
            raise ValueError(f"All weights are zero: {[item for item, _ in items]!r}")

        r = self._rng.randrange(total)

        cumulative = 0
        for item, weight in items:
            cumulative += weight
            if r < cumulative:
                return item

        raise AssertionError("unreachable: cumulative weight exhausted")


__all__ = [
    'SeededRandom',
]
