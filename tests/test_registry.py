from __future__ import annotations

import pytest

from gilded_rose.errors import StrategyRegistrationError
from gilded_rose.items import Item
from gilded_rose.registry import (
    AGED_BRIE,
    BACKSTAGE_PASSES,
    CONJURED,
    DEFAULT_KEY,
    SULFURAS,
    build_registry,
    builtin_strategies,
)
from gilded_rose.strategies import (
    AgedBrieUpdateStrategy,
    BackstagePassUpdateStrategy,
    ConjuredUpdateStrategy,
    DefaultUpdateStrategy,
    SulfurasUpdateStrategy,
    UpdateStrategy,
)


class _Freeze(UpdateStrategy):
    def update(self, item: Item) -> None:
        return None


def test_builtin_strategies_table() -> None:
    """The built-in table maps the five recognised keys."""
    table = builtin_strategies()
    assert set(table) == {AGED_BRIE, BACKSTAGE_PASSES, SULFURAS, CONJURED, DEFAULT_KEY}
    assert isinstance(table[AGED_BRIE], AgedBrieUpdateStrategy)
    assert isinstance(table[BACKSTAGE_PASSES], BackstagePassUpdateStrategy)
    assert isinstance(table[SULFURAS], SulfurasUpdateStrategy)
    assert isinstance(table[CONJURED], ConjuredUpdateStrategy)
    assert isinstance(table[DEFAULT_KEY], DefaultUpdateStrategy)


def test_builtin_strategies_returns_fresh_table() -> None:
    """Mutating one returned table does not leak into the next."""
    first = builtin_strategies()
    first.pop(AGED_BRIE)
    assert AGED_BRIE in builtin_strategies()


def test_build_registry_without_overrides() -> None:
    assert set(build_registry()) == set(builtin_strategies())
    assert set(build_registry({})) == set(builtin_strategies())


def test_override_replaces_builtin() -> None:
    """An override with a built-in name wins over the built-in."""
    freeze = _Freeze()
    registry = build_registry({AGED_BRIE: freeze})
    assert registry[AGED_BRIE] is freeze
    assert isinstance(registry[SULFURAS], SulfurasUpdateStrategy)


def test_override_adds_new_category() -> None:
    freeze = _Freeze()
    registry = build_registry({"Elixir of the Mongoose": freeze})
    assert registry["Elixir of the Mongoose"] is freeze
    assert len(registry) == 6


def test_override_can_replace_default() -> None:
    """A replacement default keeps the 'default' key present."""
    freeze = _Freeze()
    registry = build_registry({DEFAULT_KEY: freeze})
    assert registry[DEFAULT_KEY] is freeze


def test_duck_typed_override_accepted() -> None:
    """Any object with a callable update() can be registered."""

    class Doubler:
        def update(self, item: Item) -> None:
            item.quality *= 2

    doubler = Doubler()
    registry = build_registry({"Gold": doubler})  # type: ignore[dict-item]
    assert registry["Gold"] is doubler


@pytest.mark.parametrize("bad", [object(), "not a strategy", 42, None])
def test_override_without_update_rejected(bad: object) -> None:
    """Values lacking a callable update() raise StrategyRegistrationError."""
    with pytest.raises(StrategyRegistrationError) as exc_info:
        build_registry({"Broken": bad})  # type: ignore[dict-item]
    assert exc_info.value.key == "Broken"
    assert "Broken" in str(exc_info.value)


def test_override_with_non_string_key_rejected() -> None:
    with pytest.raises(TypeError):
        build_registry({7: _Freeze()})  # type: ignore[dict-item]
