from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .items import Item


def snapshot(items: Iterable[Item]) -> list[dict[str, Any]]:
    """Copy the current state of each item into a plain dict."""
    return [item.to_dict() for item in items]


def _cell(value: Any) -> str:
    return str(value).replace("|", "\\|")


def generate_markdown(items: Iterable[Item], *, title: str = "Inventory") -> str:
    """Render the current inventory as a Markdown table."""
    rows = snapshot(items)

    lines: list[str] = []
    lines.append(f"# {title}")
    lines.append("")
    lines.append("| Name | SellIn | Quality |")
    lines.append("|---|---:|---:|")
    for r in rows:
        lines.append(f"| {_cell(r['name'])} | {r['sell_in']} | {r['quality']} |")
    if not rows:
        lines.append("| - | - | - |")
    lines.append("")
    return "\n".join(lines)
