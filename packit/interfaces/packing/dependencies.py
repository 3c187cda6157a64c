"""
Dependency injection for the packing bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into handlers via constructor injection.
These are the composition root for the packing context.

The storage backend is chosen by ``settings.storage_backend``. Tests
replace the leaf providers through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine

from packit.application.packing.add_packing_item import AddPackingItemHandler
from packit.application.packing.create_packing_list_with_items import (
    CreatePackingListWithItemsHandler,
)
from packit.application.packing.get_packing_list import GetPackingListHandler
from packit.application.packing.pack_item import PackItemHandler
from packit.application.packing.ports import PackingListReadService, WeatherService
from packit.application.packing.remove_packing_item import RemovePackingItemHandler
from packit.application.packing.remove_packing_list import RemovePackingListHandler
from packit.application.packing.search_packing_lists import SearchPackingListsHandler
from packit.core.config import settings
from packit.domain.packing.factory import PackingListFactory, PolicyPackingListFactory
from packit.domain.packing.ports import PackingListRepository
from packit.infrastructure.packing.database import build_engine
from packit.infrastructure.packing.in_memory import (
    InMemoryPackingListReadService,
    InMemoryPackingListRepository,
    InMemoryPackingListStore,
)
from packit.infrastructure.packing.packing_list_read_service import (
    SqlPackingListReadService,
)
from packit.infrastructure.packing.packing_list_repository import (
    SqlPackingListRepository,
)
from packit.infrastructure.packing.weather_adapters import (
    OpenWeatherMapAdapter,
    RandomWeatherAdapter,
)

POSTGRES_BACKEND = "postgres"


def uses_sql_storage() -> bool:
    return settings.storage_backend.lower() == POSTGRES_BACKEND


@lru_cache
def get_db_engine() -> AsyncEngine:
    """Build the shared async engine from application settings."""
    return build_engine(settings.get_database_url())


@lru_cache
def get_memory_store() -> InMemoryPackingListStore:
    """Return the process-wide in-memory store."""
    return InMemoryPackingListStore()


def get_packing_list_repository() -> PackingListRepository:
    if uses_sql_storage():
        return SqlPackingListRepository(engine=get_db_engine())
    return InMemoryPackingListRepository(store=get_memory_store())


def get_packing_list_read_service() -> PackingListReadService:
    if uses_sql_storage():
        return SqlPackingListReadService(engine=get_db_engine())
    return InMemoryPackingListReadService(store=get_memory_store())


def get_weather_service() -> WeatherService:
    """Build the weather adapter; without an API URL temperatures are random."""
    if settings.weather_api_url:
        return OpenWeatherMapAdapter(
            base_url=settings.weather_api_url,
            api_key=settings.weather_api_key,
            timeout=settings.weather_timeout_seconds,
            max_retries=settings.weather_max_retries,
            backoff_seconds=settings.weather_backoff_seconds,
        )
    return RandomWeatherAdapter()


def get_packing_list_factory() -> PackingListFactory:
    return PolicyPackingListFactory()


def get_create_packing_list_with_items_handler(
    repository: PackingListRepository = Depends(get_packing_list_repository),
    factory: PackingListFactory = Depends(get_packing_list_factory),
    read_service: PackingListReadService = Depends(get_packing_list_read_service),
    weather_service: WeatherService = Depends(get_weather_service),
) -> CreatePackingListWithItemsHandler:
    """Build CreatePackingListWithItemsHandler with its dependencies."""
    return CreatePackingListWithItemsHandler(
        repository=repository,
        factory=factory,
        read_service=read_service,
        weather_service=weather_service,
    )


def get_add_packing_item_handler(
    repository: PackingListRepository = Depends(get_packing_list_repository),
) -> AddPackingItemHandler:
    return AddPackingItemHandler(repository=repository)


def get_pack_item_handler(
    repository: PackingListRepository = Depends(get_packing_list_repository),
) -> PackItemHandler:
    return PackItemHandler(repository=repository)


def get_remove_packing_item_handler(
    repository: PackingListRepository = Depends(get_packing_list_repository),
) -> RemovePackingItemHandler:
    return RemovePackingItemHandler(repository=repository)


def get_remove_packing_list_handler(
    repository: PackingListRepository = Depends(get_packing_list_repository),
) -> RemovePackingListHandler:
    return RemovePackingListHandler(repository=repository)


def get_packing_list_handler(
    read_service: PackingListReadService = Depends(get_packing_list_read_service),
) -> GetPackingListHandler:
    return GetPackingListHandler(read_service=read_service)


def get_search_packing_lists_handler(
    read_service: PackingListReadService = Depends(get_packing_list_read_service),
) -> SearchPackingListsHandler:
    return SearchPackingListsHandler(read_service=read_service)
