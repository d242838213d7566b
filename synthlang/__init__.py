#!/usr/bin/env python3
"""
synthlang - Synthetic Language Word Generator
=============================================

Builds a self-consistent fictional phonology from a seed and generates
pronounceable words and compound words from it.

Quick Start
-----------
    import synthlang

    lang = synthlang.create(3)
    green = synthlang.next_word(lang)
    mountain = synthlang.next_word(lang)
    print(synthlang.render(synthlang.compound(lang, green, mountain)))

Modules
-------
    synthlang.generator     - SynthLang: syllables, words, compounds
    synthlang.inventory     - Phonetic inventory selection
    synthlang.transitions   - Weighted phoneme transition table
    synthlang.render        - Display strings
    synthlang.phonemes      - YAML phoneme catalogs

CLI Usage
---------
    python -m synthlang words -n 10 --seed 3
    python -m synthlang inventory --seed 3
    python -m synthlang demo --seed 3
"""

__version__ = "0.1.0"

from .models import (
    Category,
    CompoundRule,
    Phoneme,
    Syllable,
    SyllableShape,
    Word,
)
from .generator import SynthLang, create, next_word, compound
from .inventory import PhoneticInventory
from .transitions import START, TransitionTable
from .render import render, collapse_repeats, title_case

__all__ = [
    '__version__',
    # Model
    'Category',
    'CompoundRule',
    'Phoneme',
    'Syllable',
    'SyllableShape',
    'Word',
    # Generation
    'SynthLang',
    'PhoneticInventory',
    'TransitionTable',
    'START',
    'create',
    'next_word',
    'compound',
    # Rendering
    'render',
    'collapse_repeats',
    'title_case',
]
