from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class Item:
    """A stocked item. Constructed by the caller, mutated in place by updates."""

    name: str
    sell_in: int
    quality: int

    def __str__(self) -> str:
        return f"{self.name}, {self.sell_in}, {self.quality}"

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
