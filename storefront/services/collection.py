from __future__ import annotations

import logging
from typing import Any, Dict, Generic, List, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from storefront.services.exceptions import CorruptDataError
from storefront.services.record_store import JsonRecordStore

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


class CappedCollection(Generic[RecordT]):
    """Newest-first list of records kept in one document under ``field``.

    Appends prepend the new record and drop whatever falls past ``cap``.
    Evicted records are gone for good.
    """

    key: str
    field: str
    record_model: Type[RecordT]

    def __init__(self, store: JsonRecordStore, *, cap: int) -> None:
        if cap < 1:
            raise ValueError("Collection cap must be at least 1")
        self._store = store
        self._cap = cap

    def _default(self) -> Dict[str, List[Any]]:
        return {self.field: []}

    def _items(self, document: Any) -> List[Any]:
        items = document.get(self.field) if isinstance(document, dict) else None
        if not isinstance(items, list):
            raise CorruptDataError(
                f"Document '{self.key}' has no '{self.field}' list", self.key
            )
        return items

    def _load(self) -> List[RecordT]:
        document = self._store.read(self.key, self._default())
        try:
            return [self.record_model.model_validate(item) for item in self._items(document)]
        except PydanticValidationError as exc:
            raise CorruptDataError(
                f"Document '{self.key}' holds a malformed record", self.key, cause=exc
            ) from exc

    def _prepend(self, record: RecordT) -> RecordT:
        entry = record.model_dump(by_alias=True)

        def _apply(document: Any) -> None:
            items = self._items(document)
            items.insert(0, entry)
            evicted = len(items) - self._cap
            if evicted > 0:
                logger.debug("Evicting %s oldest entries from %s", evicted, self.key)
                del items[self._cap:]

        self._store.update(self.key, self._default(), _apply)
        return record
