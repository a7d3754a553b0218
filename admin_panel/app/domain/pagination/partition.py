from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def slice_page(items: Sequence[T], page_index: int, page_size: int) -> list[T]:
    """Return the items on the zero-based ``page_index``; empty past the end."""
    if page_size <= 0:
        raise ValueError("page_size must be > 0")
    if page_index < 0:
        return []
    start = page_index * page_size
    return list(items[start:start + page_size])
