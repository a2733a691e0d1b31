"""Offset pagination helpers."""

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 5


def total_pages(count: int, page_size: int = DEFAULT_PAGE_SIZE) -> int:
    """Return the number of pages needed for count items."""
    if count <= 0:
        return 0
    return math.ceil(count / page_size)


def page_slice(
    items: Sequence[T], page: int, page_size: int = DEFAULT_PAGE_SIZE
) -> list[T]:
    """Return the items shown on a 1-based page."""
    start = (page - 1) * page_size
    return list(items[start : start + page_size])


def is_valid_page(page: int, pages: int) -> bool:
    """Return True if page is within 1..pages."""
    return 1 <= page <= pages


def go_to_page(current: int, requested: int, pages: int) -> int:
    """Return the requested page, or the current one if out of range."""
    if is_valid_page(requested, pages):
        return requested
    return current


def next_page(current: int, pages: int) -> int:
    """Return the following page, staying put on the last one."""
    if current < pages:
        return current + 1
    return current


def previous_page(current: int) -> int:
    """Return the preceding page, staying put on the first one."""
    if current > 1:
        return current - 1
    return current


def clamp_page(current: int, pages: int) -> int:
    """Pull a page back into 1..max(1, pages) after the list shrinks."""
    return min(max(current, 1), max(pages, 1))
