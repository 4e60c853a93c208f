from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping, Sequence
from types import MappingProxyType

from .config import UpdaterConfig, load_config_from_env
from .items import Item
from .logging_utils import get_json_logger
from .registry import DEFAULT_KEY, build_registry
from .strategies import UpdateStrategy


class GildedRose:
    """Applies one day of aging to every item in the shop.

    The items are held by reference; callers observe the effect of
    ``update_quality()`` through their own item objects. Not thread-safe:
    serialize calls when sharing items between threads.
    """

    def __init__(
        self,
        items: Sequence[Item],
        strategies: Mapping[str, UpdateStrategy] | None = None,
        *,
        config: UpdaterConfig | None = None,
    ) -> None:
        self.items = items
        self.cfg = config or load_config_from_env()
        self._strategies = build_registry(strategies)
        self.strategies: Mapping[str, UpdateStrategy] = MappingProxyType(self._strategies)

    def strategy_for(self, name: str) -> UpdateStrategy:
        """Resolve the strategy for an item name, falling back to the default rule."""
        strategy = self._strategies.get(name)
        if strategy is None:
            return self._strategies[DEFAULT_KEY]
        return strategy

    def update_quality(self) -> None:
        """Advance every item by one day, in input order."""
        logger = get_json_logger(
            "updater",
            level=self.cfg.log_level,
            static_fields={"correlation_id": uuid.uuid4().hex, "op": "update_quality"},
        )
        logger.info("update_start", extra={"items": len(self.items)})

        fallback_level = logging.WARNING if self.cfg.warn_on_unknown else logging.DEBUG
        fallbacks = 0
        for item in self.items:
            if item.name not in self._strategies:
                fallbacks += 1
                logger.log(fallback_level, "strategy_fallback", extra={"item": item.name})
            self.strategy_for(item.name).update(item)

        logger.info("update_done", extra={"items": len(self.items), "fallbacks": fallbacks})
