from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError
from starlette.concurrency import run_in_threadpool

from storefront.schemas.settings import SettingsDocument
from storefront.services.exceptions import CorruptDataError, ValidationError
from storefront.services.record_store import JsonRecordStore
from storefront.services.sanitizer import (
    INVALID_SETTINGS,
    is_list_like,
    is_object_like,
    sanitize_settings,
)

logger = logging.getLogger(__name__)

SETTINGS_KEY = "settings"


def default_settings() -> dict:
    return {"faqs": [], "shopInfo": {}}


class SettingsService:
    """Owns the single settings document (FAQs and shop details)."""

    def __init__(self, store: JsonRecordStore) -> None:
        self._store = store

    async def get(self) -> SettingsDocument:
        document = await run_in_threadpool(
            self._store.read, SETTINGS_KEY, default_settings()
        )
        try:
            return SettingsDocument.model_validate(document)
        except PydanticValidationError as exc:
            raise CorruptDataError(
                "Settings document has an unexpected shape", SETTINGS_KEY, cause=exc
            ) from exc

    async def replace(self, raw: Mapping[str, Any] | None) -> SettingsDocument:
        payload = raw if is_object_like(raw) else {}
        faqs = payload.get("faqs", [])
        shop_info = payload.get("shopInfo", {})
        if not is_list_like(faqs) or not is_object_like(shop_info):
            raise ValidationError(INVALID_SETTINGS)

        settings = sanitize_settings({"faqs": faqs, "shopInfo": shop_info})
        logger.info("Replacing settings with %s FAQ entries", len(settings.faqs))
        await run_in_threadpool(
            self._store.write,
            SETTINGS_KEY,
            settings.model_dump(by_alias=True),
            default_settings(),
        )
        return settings
