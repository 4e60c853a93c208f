"""Nightly inventory aging for the Gilded Rose shop."""

from __future__ import annotations

from .config import UpdaterConfig, load_config_from_env
from .errors import StrategyRegistrationError
from .items import Item
from .registry import build_registry, builtin_strategies
from .updater import GildedRose

__all__ = [
    "GildedRose",
    "Item",
    "StrategyRegistrationError",
    "UpdaterConfig",
    "build_registry",
    "builtin_strategies",
    "load_config_from_env",
]
