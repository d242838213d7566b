"""
Tests for Phonetic Inventory Selection
======================================
Tests for the YAML catalogs and build_inventory().
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from synthlang.inventory import PhoneticInventory, build_inventory
from synthlang.models import Category
from synthlang.phonemes import load_inventory_config, reload_configs
from synthlang.random_stream import SeededRandom


@pytest.fixture
def config():
    return load_inventory_config()


class TestInventoryConfig:
    """Tests for the loaded catalogs."""

    def test_catalog_sizes(self, config):
        assert len(config.consonants) == 26
        assert config.vowels == ['a', 'e', 'i', 'o', 'u']
        assert len(config.spice) == 62

    def test_multi_letter_consonants(self, config):
        for cluster in ('ng', 'sh', 'th', 'ch', 'zh'):
            assert cluster in config.consonants

    def test_diphthongs(self, config):
        """Two fixed diphthongs plus every ordered pair of base vowels."""
        diphthongs = config.get_diphthongs()
        assert len(diphthongs) == 27
        assert diphthongs[:2] == ['æ', 'œ']
        assert 'aa' in diphthongs and 'ua' in diphthongs and 'ou' in diphthongs

    def test_spice_categories(self, config):
        """Spice consonants come first, then spice vowels."""
        categories = [category for _, category in config.spice]
        assert categories.count(Category.CONSONANT) == 21
        assert categories.count(Category.VOWEL) == 41
        assert categories[0] is Category.CONSONANT
        assert categories[-1] is Category.VOWEL

    def test_draw_sizes(self, config):
        assert config.draw_vowels == 6
        assert config.draw_diphthongs == 3
        assert config.draw_consonants == 16
        assert config.draw_spice == 2

    def test_shape_weights_never_all_zero(self, config):
        assert config.shape_weights
        for triple in config.shape_weights:
            assert len(triple) == 3
            assert sum(triple) > 0

    def test_base_weight_tiers(self, config):
        """First half weighs 10, up to 80% weighs 5, the tail weighs 0."""
        weights = [config.base_weight(i, 10) for i in range(10)]
        assert weights == [10, 10, 10, 10, 10, 10, 5, 5, 5, 0]

    def test_config_is_cached(self, config):
        assert load_inventory_config() is config

    def test_reload_configs(self, config):
        reload_configs()
        fresh = load_inventory_config()
        assert fresh is not config
        assert fresh.consonants == config.consonants


class TestBuildInventory:
    """Tests for build_inventory()."""

    def test_sizes(self, config):
        """5 vowels, 3 diphthongs, 16 consonants and 2 spice letters."""
        inventory = build_inventory(SeededRandom(3), config)
        assert len(inventory.spice) == 2
        assert len(inventory.vowels) + len(inventory.consonants) == 26

    def test_vowel_order(self, config):
        """All base vowels first, then the drawn diphthongs."""
        inventory = build_inventory(SeededRandom(11), config)
        assert sorted(inventory.vowels[:5]) == ['a', 'e', 'i', 'o', 'u']
        for diphthong in inventory.vowels[5:8]:
            assert diphthong in config.get_diphthongs()

    def test_consonants_from_catalog(self, config):
        inventory = build_inventory(SeededRandom(11), config)
        spice_values = {p.value for p in inventory.spice}
        drawn = [c for c in inventory.consonants if c not in spice_values]
        assert len(drawn) == 16
        assert len(set(drawn)) == 16
        assert set(drawn) <= set(config.consonants)

    def test_spice_joins_its_category(self, config):
        """Each spice letter is appended to the list of its category."""
        for seed in range(30):
            inventory = build_inventory(SeededRandom(seed), config)
            for phoneme in inventory.spice:
                members = inventory.members(phoneme.category)
                assert phoneme.value in members
                assert inventory.category_of(phoneme.value) is phoneme.category

    def test_deterministic(self, config):
        a = build_inventory(SeededRandom(99), config)
        b = build_inventory(SeededRandom(99), config)
        assert a == b

    def test_seeds_differ(self, config):
        a = build_inventory(SeededRandom(1), config)
        b = build_inventory(SeededRandom(2), config)
        assert a != b


class TestPhoneticInventory:
    """Tests for PhoneticInventory helpers."""

    def test_requires_both_categories(self):
        with pytest.raises(ValueError):
            PhoneticInventory(vowels=(), consonants=('t',))
        with pytest.raises(ValueError):
            PhoneticInventory(vowels=('a',), consonants=())

    def test_membership(self):
        inventory = PhoneticInventory(vowels=('a', 'ou'), consonants=('t', 'sh'))
        assert 'ou' in inventory
        assert 'x' not in inventory
        assert inventory.category_of('sh') is Category.CONSONANT

    def test_category_of_unknown_raises(self):
        inventory = PhoneticInventory(vowels=('a',), consonants=('t',))
        with pytest.raises(KeyError):
            inventory.category_of('z')
