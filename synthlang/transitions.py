#!/usr/bin/env python3
"""
Transition Weight Table
=======================
Adjacency bias between phonemes.

For every phoneme in the inventory, plus the START marker for the first
slot of a syllable, the table holds weighted candidate lists of the
vowels and consonants that may come next.

Weights:
- Base weight from the candidate's rank in its own category list: early
  phonemes are common, phonemes at the tail are never chosen.
- Restricted onsets: at syllable start a phoneme like "ng" keeps its base
  weight only one time in N.
- Required followers: after "q" only "u" keeps its weight.
"""

import logging
from typing import Dict, List, Tuple

from synthlang.inventory import PhoneticInventory
from synthlang.models import Category
from synthlang.phonemes import InventoryConfig
from synthlang.random_stream import SeededRandom

logger = logging.getLogger(__name__)

# Start-of-syllable key. Never a phoneme value.
START = "\0"

WeightedList = List[Tuple[str, int]]


class TransitionTable:
    """
    Read-only mapping from a phoneme (or START) to weighted next candidates.

    Build with ``TransitionTable.build``; it validates that every list a
    syllable can reach has at least one positive weight.
    """

    def __init__(self, entries: Dict[str, Tuple[WeightedList, WeightedList]]):
        self._entries = entries

    @classmethod
    def build(cls,
              inventory: PhoneticInventory,
              rng: SeededRandom,
              config: InventoryConfig) -> 'TransitionTable':
        """
        Compute weights for every key of the inventory.

        Keys are visited in shuffled order and each restricted onset rule
        consumes one draw, so the stream position after building depends on
        the seed alone.
        """
        keys = list(inventory.vowels) + list(inventory.consonants) + [START]
        rng.shuffle(keys)

        entries = {}
        for key in keys:
            vowels = cls._weigh(key, inventory.vowels, rng, config)
            consonants = cls._weigh(key, inventory.consonants, rng, config)
            entries[key] = (vowels, consonants)

        table = cls(entries)
        table.validate(inventory)
        logger.debug(f"Transition table built for {len(entries)} keys")
        return table

    @staticmethod
    def _weigh(key: str,
               candidates: Tuple[str, ...],
               rng: SeededRandom,
               config: InventoryConfig) -> WeightedList:
        weighted = []
        length = len(candidates)
        for i, candidate in enumerate(candidates):
            weight = config.base_weight(i, length)
            weighted.append((candidate, _override(key, candidate, weight, rng, config)))
        return weighted

    def validate(self, inventory: PhoneticInventory) -> None:
        """
        Check every list a syllable can reach has a positive weight.

        START may be followed by either category, a consonant only by a
        vowel and a vowel only by a consonant.
        """
        required = [(START, Category.VOWEL), (START, Category.CONSONANT)]
        required += [(c, Category.VOWEL) for c in inventory.consonants]
        required += [(v, Category.CONSONANT) for v in inventory.vowels]

        for key, category in required:
            candidates = self.candidates(key, category)
            if not any(weight > 0 for _, weight in candidates):
                raise ValueError(
                    f"No {category.value} can follow {_label(key)}: all weights are zero"
                )

    def candidates(self, key: str, category: Category) -> WeightedList:
        """Weighted candidates of the given category that may follow key."""
        try:
            vowels, consonants = self._entries[key]
        except KeyError:
            raise KeyError(f"{_label(key)} is not in the transition table") from None
        return vowels if category is Category.VOWEL else consonants

    def keys(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def _override(key: str,
              candidate: str,
              weight: int,
              rng: SeededRandom,
              config: InventoryConfig) -> int:
    if key == START and candidate in config.restricted_onsets:
        keep_one_in = config.restricted_onsets[candidate]
        return weight if rng.randrange(keep_one_in) == 0 else 0
    allowed = config.required_followers.get(key)
    if allowed is not None and candidate not in allowed:
        return 0
    return weight


def _label(key: str) -> str:
    return "syllable start" if key == START else repr(key)


__all__ = [
    'START',
    'TransitionTable',
]
