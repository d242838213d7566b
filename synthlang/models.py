#!/usr/bin/env python3
"""
Word Data Model
===============
Immutable values produced by a synthetic language:

- Phoneme: a short text value tagged consonant or vowel
- Syllable: phonemes following one of the CV, VC, CVC shapes
- Word: one or more syllables plus the rule used when it is compounded
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from synthlang.render import render


class Category(Enum):
    """Phoneme category."""
    CONSONANT = "consonant"
    VOWEL = "vowel"


class CompoundRule(Enum):
    """Which syllable a word loses when it is merged into a compound."""
    DROP_LEFT = "drop_left"
    DROP_RIGHT = "drop_right"
    DROP_NONE = "drop_none"


class SyllableShape(Enum):
    """Syllable category patterns."""
    CV = "CV"
    VC = "VC"
    CVC = "CVC"

    @property
    def pattern(self) -> Tuple[Category, ...]:
        return tuple(
            Category.CONSONANT if c == 'C' else Category.VOWEL
            for c in self.value
        )


@dataclass(frozen=True)
class Phoneme:
    value: str
    category: Category

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Syllable:
    """A syllable whose phoneme categories match its shape."""
    shape: SyllableShape
    phonemes: Tuple[Phoneme, ...]

    def __post_init__(self):
        categories = tuple(p.category for p in self.phonemes)
        if categories != self.shape.pattern:
            raise ValueError(
                f"Syllable {self.text!r} does not match shape {self.shape.value}"
            )

    @property
    def text(self) -> str:
        return ''.join(p.value for p in self.phonemes)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Word:
    """
    A generated or compounded word.

    ``str(word)`` gives the display form with long letter runs collapsed;
    ``word.raw_text`` is the plain concatenation of its phonemes.
    """
    syllables: Tuple[Syllable, ...]
    compound_rule: CompoundRule

    def __post_init__(self):
        if not self.syllables:
            raise ValueError("A word needs at least one syllable")

    @property
    def raw_text(self) -> str:
        return ''.join(s.text for s in self.syllables)

    def __len__(self) -> int:
        return len(self.syllables)

    def __str__(self) -> str:
        return render(self)


__all__ = [
    'Category',
    'CompoundRule',
    'SyllableShape',
    'Phoneme',
    'Syllable',
    'Word',
]
