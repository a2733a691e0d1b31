"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_diary.adapters.nutrition_gateway import HttpxNutritionGateway
from nutrition_diary.config import Settings
from nutrition_diary.services.notifier import LoggingNotifier, Notifier
from nutrition_diary.services.nutrition_store import NutritionGateway, NutritionStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    gateway: NutritionGateway
    notifier: Notifier
    store_factory: Callable[[], NutritionStore]
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    gateway = HttpxNutritionGateway.create(
        base_url=resolved_settings.api_base_url,
        timeout_seconds=resolved_settings.request_timeout_seconds,
        retry_attempts=resolved_settings.retry_attempts,
        retry_delay_seconds=resolved_settings.retry_delay_seconds,
    )
    notifier = LoggingNotifier()

    def store_factory() -> NutritionStore:
        return NutritionStore(
            gateway=gateway,
            notifier=notifier,
            page_size=resolved_settings.page_size,
            load_more_delay_seconds=resolved_settings.load_more_delay_seconds,
            discard_stale_responses=resolved_settings.discard_stale_responses,
        )

    async def close_resources() -> None:
        await gateway.close()

    return AppContainer(
        settings=resolved_settings,
        gateway=gateway,
        notifier=notifier,
        store_factory=store_factory,
        close_resources=close_resources,
    )
