from __future__ import annotations

from typing import TYPE_CHECKING

from .base import UpdateStrategy

if TYPE_CHECKING:
    from gilded_rose.items import Item


class SulfurasUpdateStrategy(UpdateStrategy):
    """Legendary items never age and never lose quality.

    Quality is left untouched, including the conventional value of 80 that
    lies above the normal quality ceiling.
    """

    def update(self, item: Item) -> None:
        return None
