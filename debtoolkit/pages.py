"""Splitting an item list into numbered pages and paging during drags."""

from __future__ import annotations

import re
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

ITEM_LIMIT = 256
ITEMS_PER_PAGE = 28
EDGE_MARGIN = 40

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _check_per_page(per_page: int) -> None:
    if per_page <= 0:
        raise ValueError("per_page must be positive")


def paginate(
    items: Sequence[T], per_page: int = ITEMS_PER_PAGE, limit: int = ITEM_LIMIT
) -> list[list[T]]:
    """Split at most ``limit`` items into pages of ``per_page`` items.

    There are always ``count // per_page + 1`` pages, so an exact multiple
    of ``per_page`` items (or no items at all) ends with an empty page.
    """
    _check_per_page(per_page)
    if limit < 0:
        raise ValueError("limit must not be negative")
    kept = list(items)[:limit]
    return [
        kept[start : start + per_page]
        for start in range(0, (len(kept) // per_page + 1) * per_page, per_page)
    ]


def page_names(count: int, per_page: int = ITEMS_PER_PAGE) -> list[str]:
    """Return the page names, "1" upwards, for ``count`` items."""
    _check_per_page(per_page)
    if count < 0:
        raise ValueError("count must not be negative")
    return [str(number) for number in range(1, count // per_page + 2)]


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def drag_target_page(
    current_name: Optional[str], x: float, width: float, margin: float = EDGE_MARGIN
) -> Optional[str]:
    """Return the page to flip to when a drag hovers at ``x``.

    Hovering within ``margin`` of the left edge selects the previous page,
    within ``margin`` of the right edge the next one. Returns ``None`` when
    no page change applies.
    """
    if current_name is None:
        return None
    current = _leading_int(current_name)
    if x < margin:
        target = current - 1
    elif x > width - margin:
        target = current + 1
    else:
        return None
    return str(target) if target > 0 else None