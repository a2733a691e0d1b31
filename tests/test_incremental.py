"""Tests for the incremental loader."""

import asyncio

from nutrition_diary.services.incremental import IncrementalLoader
from tests.conftest import no_sleep


def test_loads_chunks_until_exhausted() -> None:
    loader: IncrementalLoader[int] = IncrementalLoader(page_size=5, sleep=no_sleep)
    source = list(range(12))

    async def scenario() -> list[tuple[int, bool]]:
        progress = []
        for _ in range(3):
            await loader.load_more(source)
            progress.append((len(loader.accumulated), loader.has_more))
        return progress

    progress = asyncio.run(scenario())

    assert progress == [(5, True), (10, True), (12, False)]
    assert loader.accumulated == source


def test_exhausted_loader_ignores_further_calls() -> None:
    loader: IncrementalLoader[int] = IncrementalLoader(page_size=5, sleep=no_sleep)
    source = [1, 2, 3]

    asyncio.run(loader.load_more(source))
    asyncio.run(loader.load_more(source))

    assert loader.accumulated == [1, 2, 3]
    assert loader.has_more is False
    assert loader.cursor_page == 2


def test_concurrent_call_is_ignored_while_loading() -> None:
    async def scenario() -> tuple[int, int, bool]:
        release = asyncio.Event()

        async def gated_sleep(seconds: float) -> None:
            await release.wait()

        loader: IncrementalLoader[int] = IncrementalLoader(
            page_size=5, sleep=gated_sleep
        )
        source = list(range(12))
        first = asyncio.create_task(loader.load_more(source))
        await asyncio.sleep(0)
        loading_flag = loader.is_loading_more
        await loader.load_more(source)
        during = len(loader.accumulated)
        release.set()
        await first
        return during, len(loader.accumulated), loading_flag

    during, after, loading_flag = asyncio.run(scenario())

    assert loading_flag is True
    assert during == 0
    assert after == 5


def test_reset_while_loading_discards_chunk() -> None:
    async def scenario() -> IncrementalLoader[int]:
        release = asyncio.Event()

        async def gated_sleep(seconds: float) -> None:
            await release.wait()

        loader: IncrementalLoader[int] = IncrementalLoader(
            page_size=5, sleep=gated_sleep
        )
        task = asyncio.create_task(loader.load_more(list(range(12))))
        await asyncio.sleep(0)
        loader.reset()
        release.set()
        await task
        return loader

    loader = asyncio.run(scenario())

    assert loader.accumulated == []
    assert loader.cursor_page == 1
    assert loader.has_more is True
    assert loader.is_loading_more is False


def test_waits_for_configured_delay() -> None:
    delays: list[float] = []

    async def recording_sleep(seconds: float) -> None:
        delays.append(seconds)

    loader: IncrementalLoader[int] = IncrementalLoader(
        page_size=2, delay_seconds=0.3, sleep=recording_sleep
    )

    asyncio.run(loader.load_more([1, 2, 3]))

    assert delays == [0.3]
    assert loader.accumulated == [1, 2]
