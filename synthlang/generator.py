#!/usr/bin/env python3
"""
Synthetic Language Generator
============================
Builds a fictional phonology from a seed and generates words from it.

Usage:
    lang = SynthLang(seed=3)
    green = lang.word()
    mountain = lang.word()
    print(lang.compound(green, mountain))

Construction draws the inventory, the transition table and the syllable
shape weights from the language's own stream. Every later call to
``syllable``, ``word`` and ``compound`` advances the same stream, so the
words depend on the seed and on the order of calls. One instance must not
be used from several threads at once.
"""

import logging
from typing import Any, Dict, List

from synthlang.inventory import build_inventory
from synthlang.models import (
    Category,
    CompoundRule,
    Phoneme,
    Syllable,
    SyllableShape,
    Word,
)
from synthlang.phonemes import InventoryConfig, load_inventory_config
from synthlang.random_stream import SeededRandom
from synthlang.transitions import START, TransitionTable

logger = logging.getLogger(__name__)


class SynthLang:
    """One synthetic language instance."""

    def __init__(self, seed: int, config: InventoryConfig = None):
        self.seed = seed
        self._config = config or load_inventory_config()
        self._rng = SeededRandom(seed)

        self.inventory = build_inventory(self._rng, self._config)
        self.transitions = TransitionTable.build(self.inventory, self._rng, self._config)

        self.cv_weight, self.vc_weight, self.cvc_weight = self._rng.choice(
            self._config.shape_weights
        )

        logger.debug(
            f"Language {seed}: cv={self.cv_weight} vc={self.vc_weight} cvc={self.cvc_weight}"
        )

    @property
    def vowels(self) -> List[str]:
        return list(self.inventory.vowels)

    @property
    def consonants(self) -> List[str]:
        return list(self.inventory.consonants)

    def syllable(self) -> Syllable:
        """Pick a shape, then fill each slot keyed by the previous phoneme."""
        shape = self._rng.weighted_choice([
            (SyllableShape.CV, self.cv_weight),
            (SyllableShape.VC, self.vc_weight),
            (SyllableShape.CVC, self.cvc_weight),
        ])

        phonemes = []
        previous = START
        for category in shape.pattern:
            value = self._next_part(previous, category)
            phonemes.append(Phoneme(value, category))
            previous = value

        return Syllable(shape=shape, phonemes=tuple(phonemes))

    def _next_part(self, previous: str, category: Category) -> str:
        return self._rng.weighted_choice(self.transitions.candidates(previous, category))

    def word(self) -> Word:
        """Generate a word of one or two syllables."""
        count = self._rng.weighted_choice(self._config.syllable_counts)
        syllables = tuple(self.syllable() for _ in range(count))
        return Word(syllables=syllables, compound_rule=self._compound_rule())

    def compound(self, left: Word, right: Word) -> Word:
        """
        Merge two words, each trimmed by its own compound rule.

        A word with a single syllable is never trimmed. The operands may
        come from any language; only the new rule is drawn from this one.
        """
        syllables = _kept_syllables(left) + _kept_syllables(right)
        return Word(syllables=syllables, compound_rule=self._compound_rule())

    def _compound_rule(self) -> CompoundRule:
        rules = self._config.compound_rules
        return rules[self._rng.randrange(len(rules))]

    def describe(self) -> Dict[str, Any]:
        """Plain summary of the language for display."""
        return {
            'seed': self.seed,
            'vowels': self.vowels,
            'consonants': self.consonants,
            'spice': [p.value for p in self.inventory.spice],
            'cv_weight': self.cv_weight,
            'vc_weight': self.vc_weight,
            'cvc_weight': self.cvc_weight,
        }

    def __repr__(self) -> str:
        return (
            f"SynthLang(seed={self.seed}, vowels={self.vowels}, "
            f"consonants={self.consonants}, cv_weight={self.cv_weight}, "
            f"vc_weight={self.vc_weight}, cvc_weight={self.cvc_weight})"
        )


def _kept_syllables(word: Word) -> tuple:
    syllables = word.syllables
    if len(syllables) < 2:
        return syllables
    if word.compound_rule is CompoundRule.DROP_LEFT:
        return syllables[1:]
    if word.compound_rule is CompoundRule.DROP_RIGHT:
        return syllables[:-1]
    return syllables


# =============================================================================
# Module-level convenience functions
# =============================================================================

def create(seed: int) -> SynthLang:
    """Build a language from a 64-bit seed."""
    return SynthLang(seed)


def next_word(lang: SynthLang) -> Word:
    return lang.word()


def compound(lang: SynthLang, left: Word, right: Word) -> Word:
    return lang.compound(left, right)


__all__ = [
    'SynthLang',
    'create',
    'next_word',
    'compound',
]
