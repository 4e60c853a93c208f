from __future__ import annotations

from typing import TYPE_CHECKING

from .base import MAX_QUALITY, UpdateStrategy

if TYPE_CHECKING:
    from gilded_rose.items import Item


class BackstagePassUpdateStrategy(UpdateStrategy):
    """
    Event tickets.

    Quality rises as the concert approaches: +1 normally, +2 within 10 days,
    +3 within 5 days. Thresholds are checked against ``sell_in`` before it is
    decremented. Once the concert has happened the pass is worth nothing.
    """

    def update(self, item: Item) -> None:
        if item.sell_in > 0:
            item.quality += 1
            if item.sell_in <= 10 and item.quality < MAX_QUALITY:
                item.quality += 1
            if item.sell_in <= 5 and item.quality < MAX_QUALITY:
                item.quality += 1
        else:
            item.quality = 0

        item.sell_in -= 1

        item.quality = min(item.quality, MAX_QUALITY)
