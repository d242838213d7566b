#!/usr/bin/env python3
"""
Phonetic Inventory
==================
Selects the vowels and consonants one synthetic language is built from.

Draw order on the language's stream is fixed: base vowels, diphthongs,
consonants, then spice letters. The same seed always yields the same
inventory in the same order, and that order ranks phonemes in the
transition table.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from synthlang.models import Category, Phoneme
from synthlang.phonemes import InventoryConfig
from synthlang.random_stream import SeededRandom

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhoneticInventory:
    """The phonemes of one language, in selection order."""
    vowels: Tuple[str, ...]
    consonants: Tuple[str, ...]
    spice: Tuple[Phoneme, ...] = ()

    def __post_init__(self):
        if not self.vowels or not self.consonants:
            raise ValueError("An inventory needs at least one vowel and one consonant")

    def members(self, category: Category) -> Tuple[str, ...]:
        return self.vowels if category is Category.VOWEL else self.consonants

    def category_of(self, value: str) -> Category:
        if value in self.vowels:
            return Category.VOWEL
        if value in self.consonants:
            return Category.CONSONANT
        raise KeyError(f"{value!r} is not part of this inventory")

    def __contains__(self, value: str) -> bool:
        return value in self.vowels or value in self.consonants


def random_vowels(rng: SeededRandom, config: InventoryConfig) -> List[str]:
    """Base vowels in random order, followed by a few diphthongs."""
    vowels = rng.sample(config.vowels, config.draw_vowels)
    vowels.extend(rng.sample(config.get_diphthongs(), config.draw_diphthongs))
    return vowels


def random_consonants(rng: SeededRandom, config: InventoryConfig) -> List[str]:
    return rng.sample(config.consonants, config.draw_consonants)


def random_spice(rng: SeededRandom, config: InventoryConfig) -> List[Phoneme]:
    """Rare letters, each tagged with the category it joins."""
    return [
        Phoneme(value, category)
        for value, category in rng.sample(config.spice, config.draw_spice)
    ]


def build_inventory(rng: SeededRandom, config: InventoryConfig) -> PhoneticInventory:
    """Draw a complete inventory from the stream."""
    vowels = random_vowels(rng, config)
    consonants = random_consonants(rng, config)
    spice = random_spice(rng, config)

    for phoneme in spice:
        if phoneme.category is Category.VOWEL:
            vowels.append(phoneme.value)
        else:
            consonants.append(phoneme.value)

    logger.debug(
        f"Inventory: {len(vowels)} vowels {vowels}, "
        f"{len(consonants)} consonants {consonants}, "
        f"spice {[p.value for p in spice]}"
    )

    return PhoneticInventory(
        vowels=tuple(vowels),
        consonants=tuple(consonants),
        spice=tuple(spice),
    )


__all__ = [
    'PhoneticInventory',
    'build_inventory',
    'random_vowels',
    'random_consonants',
    'random_spice',
]
