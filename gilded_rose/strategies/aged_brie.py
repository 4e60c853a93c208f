from __future__ import annotations

from typing import TYPE_CHECKING

from .base import UpdateStrategy, clamp_quality

if TYPE_CHECKING:
    from gilded_rose.items import Item


class AgedBrieUpdateStrategy(UpdateStrategy):
    """Appreciating goods: gain 1 quality per day, 2 after the sell-by date."""

    def update(self, item: Item) -> None:
        item.sell_in -= 1
        if item.sell_in >= 0:
            item.quality += 1
        else:
            item.quality += 2
        item.quality = clamp_quality(item.quality)
