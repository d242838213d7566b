"""
Tests for the Word Data Model
=============================
Shape validation and immutability of phonemes, syllables and words.
"""

import dataclasses

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from synthlang.models import Category, CompoundRule, Phoneme, Syllable, SyllableShape, Word

C = Category.CONSONANT
V = Category.VOWEL


class TestSyllableShape:
    """Tests for shape patterns."""

    def test_patterns(self):
        assert SyllableShape.CV.pattern == (C, V)
        assert SyllableShape.VC.pattern == (V, C)
        assert SyllableShape.CVC.pattern == (C, V, C)


class TestSyllable:
    """Tests for Syllable validation."""

    def test_valid_cvc(self):
        syl = Syllable(SyllableShape.CVC, (Phoneme('t', C), Phoneme('a', V), Phoneme('ng', C)))
        assert syl.text == 'tang'
        assert str(syl) == 'tang'

    def test_pattern_mismatch_raises(self):
        """Categories must follow the shape exactly."""
        with pytest.raises(ValueError):
            Syllable(SyllableShape.CV, (Phoneme('a', V), Phoneme('t', C)))

    def test_wrong_length_raises(self):
        with pytest.raises(ValueError):
            Syllable(SyllableShape.CVC, (Phoneme('t', C), Phoneme('a', V)))

    def test_frozen(self):
        syl = Syllable(SyllableShape.VC, (Phoneme('e', V), Phoneme('k', C)))
        with pytest.raises(dataclasses.FrozenInstanceError):
            syl.shape = SyllableShape.CV


class TestWord:
    """Tests for Word construction."""

    def test_empty_word_raises(self):
        with pytest.raises(ValueError):
            Word((), CompoundRule.DROP_NONE)

    def test_len_and_text(self):
        syllables = (
            Syllable(SyllableShape.CV, (Phoneme('sh', C), Phoneme('ae', V))),
            Syllable(SyllableShape.VC, (Phoneme('o', V), Phoneme('r', C))),
        )
        word = Word(syllables, CompoundRule.DROP_LEFT)
        assert len(word) == 2
        assert word.raw_text == 'shaeor'
        assert word.compound_rule is CompoundRule.DROP_LEFT

    def test_value_equality(self):
        """Words with the same syllables and rule are equal."""
        syl = Syllable(SyllableShape.CV, (Phoneme('m', C), Phoneme('i', V)))
        assert Word((syl,), CompoundRule.DROP_NONE) == Word((syl,), CompoundRule.DROP_NONE)
        assert Word((syl,), CompoundRule.DROP_NONE) != Word((syl,), CompoundRule.DROP_RIGHT)
