from __future__ import annotations

from typing import TYPE_CHECKING

from .base import UpdateStrategy, clamp_quality

if TYPE_CHECKING:
    from gilded_rose.items import Item


class ConjuredUpdateStrategy(UpdateStrategy):
    """Conjured goods degrade twice as fast as normal goods."""

    def update(self, item: Item) -> None:
        item.sell_in -= 1
        if item.sell_in >= 0:
            item.quality -= 2
        else:
            item.quality -= 4
        item.quality = clamp_quality(item.quality)
