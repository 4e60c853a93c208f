"""Item update strategies.

One stateless strategy per item category:
- DefaultUpdateStrategy: normal goods
- AgedBrieUpdateStrategy: goods that improve with age
- BackstagePassUpdateStrategy: event tickets
- SulfurasUpdateStrategy: legendary items (never change)
- ConjuredUpdateStrategy: fast-decaying goods
"""

from __future__ import annotations

from .aged_brie import AgedBrieUpdateStrategy
from .backstage import BackstagePassUpdateStrategy
from .base import LEGENDARY_QUALITY, MAX_QUALITY, MIN_QUALITY, UpdateStrategy, clamp_quality
from .conjured import ConjuredUpdateStrategy
from .default import DefaultUpdateStrategy
from .sulfuras import SulfurasUpdateStrategy

__all__ = [
    "AgedBrieUpdateStrategy",
    "BackstagePassUpdateStrategy",
    "ConjuredUpdateStrategy",
    "DefaultUpdateStrategy",
    "LEGENDARY_QUALITY",
    "MAX_QUALITY",
    "MIN_QUALITY",
    "SulfurasUpdateStrategy",
    "UpdateStrategy",
    "clamp_quality",
]
