from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from storefront.config import Settings, get_settings
from storefront.services import (
    CatalogService,
    JsonRecordStore,
    QuoteService,
    ReviewService,
    SettingsService,
)


@lru_cache(maxsize=1)
def get_record_store_cached() -> JsonRecordStore:
    settings = get_settings()
    return JsonRecordStore(settings.data_dir)


def get_record_store(settings: Settings = Depends(get_settings)) -> JsonRecordStore:
    return get_record_store_cached()


def get_settings_service(
    store: JsonRecordStore = Depends(get_record_store),
) -> SettingsService:
    return SettingsService(store)


def get_review_service(
    store: JsonRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> ReviewService:
    return ReviewService(store, cap=settings.review_cap)


def get_quote_service(
    store: JsonRecordStore = Depends(get_record_store),
    settings: Settings = Depends(get_settings),
) -> QuoteService:
    return QuoteService(store, cap=settings.quote_cap)


def get_catalog_service(
    settings: Settings = Depends(get_settings),
) -> CatalogService:
    return CatalogService(settings)
