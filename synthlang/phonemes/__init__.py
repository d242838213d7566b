#!/usr/bin/env python3
"""
Phoneme Configuration Loader
============================
Loads phoneme catalogs and generation constants from YAML.

Usage:
    from synthlang.phonemes import load_inventory_config

    cfg = load_inventory_config()
    print(cfg.consonants, cfg.draw_consonants)
"""

import yaml
from pathlib import Path
from typing import Dict, List, Tuple, Any
from dataclasses import dataclass, field
from functools import lru_cache

from synthlang.models import Category, CompoundRule


# =============================================================================
# Configuration Path
# =============================================================================

PHONEMES_DIR = Path(__file__).parent


# =============================================================================
# Data Classes for Typed Access
# =============================================================================

@dataclass(frozen=True)
class WeightTier:
    """Base transition weight for candidates ranked at or below max_fraction."""
    max_fraction: float
    weight: int


@dataclass
class InventoryConfig:
    """Container for loaded inventory configuration."""
    consonants: List[str]
    vowels: List[str]
    extra_diphthongs: List[str]
    spice: List[Tuple[str, Category]]
    draw_vowels: int
    draw_diphthongs: int
    draw_consonants: int
    draw_spice: int
    shape_weights: List[Tuple[int, int, int]]
    tiers: List[WeightTier]
    restricted_onsets: Dict[str, int]
    required_followers: Dict[str, List[str]]
    syllable_counts: List[Tuple[int, int]]
    compound_rules: List[CompoundRule]
    raw: Dict[str, Any] = field(default_factory=dict)

    def get_diphthongs(self) -> List[str]:
        """Fixed diphthongs followed by every ordered pair of base vowels."""
        pairs = [v1 + v2 for v1 in self.vowels for v2 in self.vowels]
        return list(self.extra_diphthongs) + pairs

    def base_weight(self, index: int, length: int) -> int:
        """Base transition weight for the candidate at index in a list of length."""
        fraction = index / length
        for tier in self.tiers:
            if fraction <= tier.max_fraction:
                return tier.weight
        return self.tiers[-1].weight


# =============================================================================
# Loader Functions
# =============================================================================

def _load_yaml(filename: str) -> Dict[str, Any]:
    """Load a YAML file from the phonemes directory."""
    filepath = PHONEMES_DIR / filename
    if not filepath.exists():
        raise FileNotFoundError(f"Phoneme config not found: {filepath}")

    with open(filepath, 'r', encoding='utf-8') as f:
        return yaml.safe_load(f) or {}


def _require(mapping: Dict[str, Any], key: str, context: str):
    value = mapping.get(key) if isinstance(mapping, dict) else None
    if value is None:
        raise ValueError(f"{context}.{key} must be set in inventory.yaml")
    return value


def _parse_shape_weights(entries: List[Any]) -> List[Tuple[int, int, int]]:
    triples = []
    for entry in entries:
        if len(entry) != 3:
            raise ValueError(f"shape_weights entry must have 3 values: {entry!r}")
        triple = tuple(int(w) for w in entry)
        if any(w < 0 for w in triple) or sum(triple) == 0:
            raise ValueError(f"shape_weights entry must be non-negative and not all zero: {entry!r}")
        triples.append(triple)
    return triples


@lru_cache(maxsize=1)
def load_inventory_config() -> InventoryConfig:
    """Load the phoneme catalogs and generation constants."""
    raw = _load_yaml('inventory.yaml')

    spice_cfg = _require(raw, 'spice', 'inventory')
    spice = [(s, Category.CONSONANT) for s in _require(spice_cfg, 'consonants', 'spice')]
    spice += [(s, Category.VOWEL) for s in _require(spice_cfg, 'vowels', 'spice')]

    draw = _require(raw, 'draw', 'inventory')
    transition = _require(raw, 'transition', 'inventory')
    overrides = transition.get('overrides', {}) or {}
    word = _require(raw, 'word', 'inventory')

    tiers = [
        WeightTier(max_fraction=float(t['max']), weight=int(t['weight']))
        for t in _require(transition, 'tiers', 'transition')
    ]
    if not tiers:
        raise ValueError("transition.tiers must not be empty in inventory.yaml")

    restricted = {
        onset: int(_require(rule, 'keep_one_in', f'overrides.restricted_onsets.{onset}'))
        for onset, rule in (overrides.get('restricted_onsets') or {}).items()
    }
    followers = {
        key: [str(v) for v in allowed]
        for key, allowed in (overrides.get('required_followers') or {}).items()
    }

    syllable_counts = [
        (int(n), int(w)) for n, w in _require(word, 'syllable_counts', 'word').items()
    ]
    compound_rules = [CompoundRule(r) for r in _require(word, 'compound_rules', 'word')]

    return InventoryConfig(
        consonants=[str(c) for c in _require(raw, 'consonants', 'inventory')],
        vowels=[str(v) for v in _require(raw, 'vowels', 'inventory')],
        extra_diphthongs=[str(d) for d in raw.get('extra_diphthongs', [])],
        spice=spice,
        draw_vowels=int(_require(draw, 'vowels', 'draw')),
        draw_diphthongs=int(_require(draw, 'diphthongs', 'draw')),
        draw_consonants=int(_require(draw, 'consonants', 'draw')),
        draw_spice=int(_require(draw, 'spice', 'draw')),
        shape_weights=_parse_shape_weights(_require(raw, 'shape_weights', 'inventory')),
        tiers=tiers,
        restricted_onsets=restricted,
        required_followers=followers,
        syllable_counts=syllable_counts,
        compound_rules=compound_rules,
        raw=raw,
    )


def reload_configs():
    """Clear cached configs and reload from disk."""
    load_inventory_config.cache_clear()


__all__ = [
    'PHONEMES_DIR',
    'WeightTier',
    'InventoryConfig',
    'load_inventory_config',
    'reload_configs',
]
