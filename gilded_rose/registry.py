from __future__ import annotations

from collections.abc import Mapping

from .errors import StrategyRegistrationError
from .logging_utils import get_json_logger
from .strategies import (
    AgedBrieUpdateStrategy,
    BackstagePassUpdateStrategy,
    ConjuredUpdateStrategy,
    DefaultUpdateStrategy,
    SulfurasUpdateStrategy,
    UpdateStrategy,
)

AGED_BRIE = "Aged Brie"
BACKSTAGE_PASSES = "Backstage passes to a TAFKAL80ETC concert"
SULFURAS = "Sulfuras, Hand of Ragnaros"
CONJURED = "Conjured Mana Cake"
DEFAULT_KEY = "default"


def builtin_strategies() -> dict[str, UpdateStrategy]:
    """Return a fresh copy of the built-in name -> strategy table."""
    return {
        AGED_BRIE: AgedBrieUpdateStrategy(),
        BACKSTAGE_PASSES: BackstagePassUpdateStrategy(),
        SULFURAS: SulfurasUpdateStrategy(),
        CONJURED: ConjuredUpdateStrategy(),
        DEFAULT_KEY: DefaultUpdateStrategy(),
    }


def build_registry(overrides: Mapping[str, UpdateStrategy] | None = None) -> dict[str, UpdateStrategy]:
    """Merge caller overrides over the built-in table.

    Override entries replace built-ins with the same name and may add new
    names, including a replacement ``"default"``. Any object with a callable
    ``update`` is accepted; subclassing UpdateStrategy is not required.

    Raises StrategyRegistrationError for a non-string key or a value without
    a callable ``update``.
    """
    logger = get_json_logger("registry", static_fields={"op": "build_registry"})
    registry = builtin_strategies()

    for key, strategy in (overrides or {}).items():
        if not isinstance(key, str):
            logger.error("registry_invalid_override", extra={"key": repr(key), "reason": "key"})
            raise StrategyRegistrationError(key, "key must be a string")
        if not callable(getattr(strategy, "update", None)):
            logger.error("registry_invalid_override", extra={"key": key, "reason": "update"})
            raise StrategyRegistrationError(key, f"{type(strategy).__name__} has no callable update()")
        registry[key] = strategy

    logger.debug(
        "registry_built",
        extra={"keys": sorted(registry), "overrides": len(overrides or {})},
    )
    return registry
