from __future__ import annotations

import logging
from typing import Any, List, Mapping

from starlette.concurrency import run_in_threadpool

from storefront.schemas.review import ReviewRecord
from storefront.services.collection import CappedCollection
from storefront.services.exceptions import ValidationError
from storefront.services.identifiers import new_id, utc_now_iso
from storefront.services.record_store import JsonRecordStore
from storefront.services.sanitizer import Rejection, validate_review

logger = logging.getLogger(__name__)

REVIEWS_KEY = "reviews"
REVIEW_CAP = 100
REVIEW_ID_SIZE = 10


class ReviewService(CappedCollection[ReviewRecord]):
    key = REVIEWS_KEY
    field = "reviews"
    record_model = ReviewRecord

    def __init__(self, store: JsonRecordStore, *, cap: int = REVIEW_CAP) -> None:
        super().__init__(store, cap=cap)

    async def list(self) -> List[ReviewRecord]:
        return await run_in_threadpool(self._load)

    async def append(self, raw: Mapping[str, Any] | None) -> ReviewRecord:
        result = validate_review(raw)
        if isinstance(result, Rejection):
            logger.info("Rejected review: %s", result.message)
            raise ValidationError(result.message)

        record = ReviewRecord(
            id=new_id(REVIEW_ID_SIZE),
            name=result.name,
            rating=result.rating,
            comment=result.comment,
            created_at=utc_now_iso(),
        )
        logger.info("Adding %s-star review %s from %s", record.rating, record.id, record.name)
        return await run_in_threadpool(self._prepend, record)
