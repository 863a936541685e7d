from __future__ import annotations

import logging
from typing import Any, List, Mapping

from starlette.concurrency import run_in_threadpool

from storefront.schemas.quote import QuoteRecord
from storefront.services.collection import CappedCollection
from storefront.services.exceptions import NotFoundError, ValidationError
from storefront.services.identifiers import new_id, utc_now_iso
from storefront.services.record_store import JsonRecordStore
from storefront.services.sanitizer import Rejection, validate_quote

logger = logging.getLogger(__name__)

QUOTES_KEY = "quotes"
QUOTE_CAP = 1000
QUOTE_ID_SIZE = 12
QUOTE_NOT_FOUND = "Quote not found"


class QuoteService(CappedCollection[QuoteRecord]):
    key = QUOTES_KEY
    field = "quotes"
    record_model = QuoteRecord

    def __init__(self, store: JsonRecordStore, *, cap: int = QUOTE_CAP) -> None:
        super().__init__(store, cap=cap)

    async def list(self) -> List[QuoteRecord]:
        return await run_in_threadpool(self._load)

    async def get_by_id(self, quote_id: str) -> QuoteRecord:
        for quote in await run_in_threadpool(self._load):
            if quote.id == quote_id:
                return quote
        raise NotFoundError(QUOTE_NOT_FOUND)

    async def append(self, raw: Mapping[str, Any] | None) -> QuoteRecord:
        result = validate_quote(raw)
        if isinstance(result, Rejection):
            logger.info("Rejected quote request: %s", result.message)
            raise ValidationError(result.message)

        record = QuoteRecord(
            id=new_id(QUOTE_ID_SIZE),
            topic=result.topic,
            name=result.name,
            phone=result.phone,
            requirement=result.requirement,
            created_at=utc_now_iso(),
        )
        logger.info("Recording quote request %s for %s", record.id, record.topic)
        return await run_in_threadpool(self._prepend, record)
