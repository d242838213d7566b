#!/usr/bin/env python3
"""
Application Settings
====================
Loads synthlang/configs/app.yaml: logging, command line defaults and the
vocabulary shown by ``synthlang demo``.

Usage:
    from synthlang.settings import load_demo_settings

    demo = load_demo_settings()
    for adjective, label in demo.pairs():
        ...
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

PROJECT_ROOT = Path(__file__).resolve().parent
CONFIG_DIR = PROJECT_ROOT / "configs"
APP_CONFIG_PATH = CONFIG_DIR / "app.yaml"


@dataclass(frozen=True)
class CliSettings:
    """Defaults for the command line."""
    default_seed: Optional[int]
    word_count: int


@dataclass(frozen=True)
class DemoSettings:
    """Glossed vocabulary and compound place names for the demo page."""
    glosses: Tuple[str, ...]
    adjectives: Tuple[str, ...]
    nouns: Tuple[str, ...]

    def pairs(self) -> List[Tuple[str, str]]:
        """Every adjective with every noun label, adjectives outermost."""
        return [(a, n) for a in self.adjectives for n in self.nouns]


@lru_cache(maxsize=1)
def load_app_config() -> Dict[str, Any]:
    if not APP_CONFIG_PATH.exists():
        raise FileNotFoundError(f"Missing app config: {APP_CONFIG_PATH}")
    with open(APP_CONFIG_PATH, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"{APP_CONFIG_PATH.name} must hold a mapping")
    return data or {}


def get_setting(path: str, default: Any = None) -> Any:
    """Look up a nested setting by dotted path, e.g. ``logging.level``."""
    current: Any = load_app_config()
    for part in path.split('.'):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


@lru_cache(maxsize=1)
def load_cli_settings() -> CliSettings:
    seed = get_setting('cli.default_seed')
    count = int(get_setting('cli.word_count', 10))
    if count < 1:
        raise ValueError(f"cli.word_count must be at least 1, got {count}")
    return CliSettings(
        default_seed=None if seed is None else int(seed),
        word_count=count,
    )


@lru_cache(maxsize=1)
def load_demo_settings() -> DemoSettings:
    nouns = get_setting('demo.nouns') or {}
    if not isinstance(nouns, dict):
        raise ValueError("demo.nouns must map a noun to its display label")
    return DemoSettings(
        glosses=tuple(str(g) for g in get_setting('demo.glosses') or []),
        adjectives=tuple(str(a) for a in get_setting('demo.adjectives') or []),
        nouns=tuple(str(label) for label in nouns.values()),
    )


def reload_settings():
    """Clear cached settings and reload from disk."""
    load_app_config.cache_clear()
    load_cli_settings.cache_clear()
    load_demo_settings.cache_clear()


__all__ = [
    "PROJECT_ROOT",
    "APP_CONFIG_PATH",
    "CliSettings",
    "DemoSettings",
    "load_app_config",
    "get_setting",
    "load_cli_settings",
    "load_demo_settings",
    "reload_settings",
]
