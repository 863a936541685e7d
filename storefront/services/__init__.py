"""Service package public API definitions.

Service classes are imported lazily so that light-weight modules such as
``storefront.services.exceptions`` can be imported without pulling in the
storage layer.
"""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING, Any

__all__ = [
    "CatalogService",
    "JsonRecordStore",
    "QuoteService",
    "ReviewService",
    "SettingsService",
]

_SERVICE_MODULES = {
    "CatalogService": "catalog",
    "JsonRecordStore": "record_store",
    "QuoteService": "quotes",
    "ReviewService": "reviews",
    "SettingsService": "settings",
}


def __getattr__(name: str) -> Any:
    if name not in _SERVICE_MODULES:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = import_module(f".{_SERVICE_MODULES[name]}", __name__)
    attr = getattr(module, name)
    globals()[name] = attr
    return attr


if TYPE_CHECKING:  # pragma: no cover - import for static analysis only
    from .catalog import CatalogService as CatalogService
    from .quotes import QuoteService as QuoteService
    from .record_store import JsonRecordStore as JsonRecordStore
    from .reviews import ReviewService as ReviewService
    from .settings import SettingsService as SettingsService
