"""Diary endpoints backed by a per-user nutrition store."""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from nutrition_diary.api.diary_models import (
    DateRequest,
    DayRequest,
    DiarySnapshot,
    MealModel,
    PageRequest,
    SearchRequest,
    ViewModeRequest,
)
from nutrition_diary.services.nutrition_store import NutritionStore

if TYPE_CHECKING:
    from nutrition_diary.containers import AppContainer

router = APIRouter(prefix="/diary/{user_id}", tags=["diary"])
logger = logging.getLogger(__name__)


def get_store(user_id: str, request: Request) -> NutritionStore:
    """Return the store of a user session, creating it on first use.

    At most ``max_sessions`` stores are kept; the least recently used one
    is dropped to make room.
    """
    stores: OrderedDict[str, NutritionStore] = request.app.state.stores
    store = stores.get(user_id)
    if store is not None:
        stores.move_to_end(user_id)
        return store
    container: AppContainer = request.app.state.container
    while stores and len(stores) >= container.settings.max_sessions:
        evicted, _ = stores.popitem(last=False)
        logger.info("Evicted diary session for user %s", evicted)
    store = container.store_factory()
    stores[user_id] = store
    return store


@router.get("")
async def snapshot(store: NutritionStore = Depends(get_store)) -> DiarySnapshot:
    """Return the current diary state."""
    return DiarySnapshot.from_store(store)


@router.delete("")
async def clear(store: NutritionStore = Depends(get_store)) -> DiarySnapshot:
    """Clear the diary state."""
    store.clear()
    return DiarySnapshot.from_store(store)


@router.delete("/error")
async def clear_error(store: NutritionStore = Depends(get_store)) -> DiarySnapshot:
    store.clear_error()
    return DiarySnapshot.from_store(store)


@router.post("/load")
async def load(
    user_id: str, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    """Load the weekday meal plan."""
    await store.load(user_id)
    return DiarySnapshot.from_store(store)


@router.post("/refresh")
async def refresh(
    user_id: str, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    await store.refresh(user_id)
    return DiarySnapshot.from_store(store)


@router.put("/selected-day")
async def select_day(
    body: DayRequest, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    await store.select_day(body.day)
    return DiarySnapshot.from_store(store)


@router.post("/days/previous")
async def previous_meal_day(
    store: NutritionStore = Depends(get_store),
) -> DiarySnapshot:
    await store.previous_meal_day()
    return DiarySnapshot.from_store(store)


@router.post("/days/next")
async def next_meal_day(store: NutritionStore = Depends(get_store)) -> DiarySnapshot:
    await store.next_meal_day()
    return DiarySnapshot.from_store(store)


@router.post("/load-by-date")
async def load_by_date(
    user_id: str,
    body: DateRequest | None = None,
    store: NutritionStore = Depends(get_store),
) -> DiarySnapshot:
    """Load the nutrition log of a date, defaulting to the current one."""
    on_date = body.on_date.isoformat() if body else None
    await store.load_by_date(user_id, on_date)
    return DiarySnapshot.from_store(store)


@router.put("/date")
async def set_date(
    body: DateRequest, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    store.set_date(body.on_date.isoformat())
    return DiarySnapshot.from_store(store)


@router.post("/dates/previous")
async def previous_day(
    user_id: str, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    await store.previous_day(user_id)
    return DiarySnapshot.from_store(store)


@router.post("/dates/next")
async def next_day(
    user_id: str, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    await store.next_day(user_id)
    return DiarySnapshot.from_store(store)


@router.post("/meals")
async def add_meal(
    body: MealModel, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    store.add(body.to_domain())
    return DiarySnapshot.from_store(store)


@router.put("/meals/{meal_id}")
async def update_meal(
    meal_id: str, body: MealModel, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    store.update(body.model_copy(update={"id": meal_id}).to_domain())
    return DiarySnapshot.from_store(store)


@router.delete("/meals/{meal_id}")
async def remove_meal(
    meal_id: str, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    store.remove(meal_id)
    return DiarySnapshot.from_store(store)


@router.put("/search")
async def set_search_term(
    body: SearchRequest, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    store.set_search_term(body.term)
    return DiarySnapshot.from_store(store)


@router.delete("/search")
async def clear_search(store: NutritionStore = Depends(get_store)) -> DiarySnapshot:
    store.clear_search()
    return DiarySnapshot.from_store(store)


@router.put("/page")
async def go_to_page(
    body: PageRequest, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    store.go_to_page(body.page)
    return DiarySnapshot.from_store(store)


@router.post("/pages/next")
async def next_page(store: NutritionStore = Depends(get_store)) -> DiarySnapshot:
    store.next_page()
    return DiarySnapshot.from_store(store)


@router.post("/pages/previous")
async def previous_page(store: NutritionStore = Depends(get_store)) -> DiarySnapshot:
    store.previous_page()
    return DiarySnapshot.from_store(store)


@router.put("/view-mode")
async def set_view_mode(
    body: ViewModeRequest, store: NutritionStore = Depends(get_store)
) -> DiarySnapshot:
    await store.set_view_mode(body.mode)
    return DiarySnapshot.from_store(store)


@router.post("/load-more")
async def load_more(store: NutritionStore = Depends(get_store)) -> DiarySnapshot:
    await store.load_more()
    return DiarySnapshot.from_store(store)
