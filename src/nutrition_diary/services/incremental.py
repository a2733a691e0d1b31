"""Incremental loading of an already-available list."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from nutrition_diary.services.pagination import DEFAULT_PAGE_SIZE, page_slice

T = TypeVar("T")

_logger = logging.getLogger(__name__)


@dataclass
class IncrementalLoader(Generic[T]):
    """Serves successive chunks of a source list with a simulated delay.

    The source is not fetched here: each call slices the list it is given,
    so the loader re-pages data that is already in memory.
    """

    page_size: int = DEFAULT_PAGE_SIZE
    delay_seconds: float = 0.3
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    cursor_page: int = field(default=1, init=False)
    has_more: bool = field(default=True, init=False)
    is_loading_more: bool = field(default=False, init=False)
    accumulated: list[T] = field(default_factory=list, init=False)
    _generation: int = field(default=0, init=False, repr=False)

    def reset(self) -> None:
        """Start over from the first chunk."""
        self._generation += 1
        self.cursor_page = 1
        self.has_more = True
        self.accumulated = []
        self.is_loading_more = False

    async def load_more(self, source: Sequence[T]) -> None:
        """Append the next chunk of source to the accumulated items."""
        if self.is_loading_more or not self.has_more:
            return
        generation = self._generation
        self.is_loading_more = True
        chunk = page_slice(source, self.cursor_page, self.page_size)
        end = self.cursor_page * self.page_size
        try:
            await self.sleep(self.delay_seconds)
        except asyncio.CancelledError:
            if generation == self._generation:
                self.is_loading_more = False
            raise
        if generation != self._generation:
            # Reset while waiting; the chunk belongs to the old cursor.
            return
        if chunk:
            self.accumulated = [*self.accumulated, *chunk]
            self.cursor_page += 1
        self.has_more = end < len(source)
        self.is_loading_more = False
        _logger.debug(
            "Loaded chunk: size=%s accumulated=%s has_more=%s",
            len(chunk),
            len(self.accumulated),
            self.has_more,
        )
