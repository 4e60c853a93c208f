"""Base class and shared arithmetic for item update strategies.

Each item category has its own strategy class implementing ``update()``,
so adding a category means adding a class rather than another branch in the
daily update loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gilded_rose.items import Item

MIN_QUALITY = 0
MAX_QUALITY = 50
# Legendary items keep this value and sit outside [MIN_QUALITY, MAX_QUALITY].
LEGENDARY_QUALITY = 80


def clamp_quality(value: int) -> int:
    """Bound a quality value to [MIN_QUALITY, MAX_QUALITY]."""
    if value < MIN_QUALITY:
        return MIN_QUALITY
    if value > MAX_QUALITY:
        return MAX_QUALITY
    return value


class UpdateStrategy(ABC):
    """
    Abstract base class for one day of aging applied to a single item.

    Strategies are stateless; one instance may serve any number of items.
    """

    @abstractmethod
    def update(self, item: Item) -> None:
        """
        Age ``item`` by one day, mutating ``sell_in`` and ``quality`` in place.

        Args:
            item: The item to update. No other item is read or written.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
