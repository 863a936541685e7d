from __future__ import annotations

import logging

from fastapi import HTTPException

from storefront.services.exceptions import ServiceError

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Internal server error"


def server_failure(exc: ServiceError) -> HTTPException:
    """Log a storage failure and hide its details from the caller."""

    logger.exception("Storage failure: %s", exc)
    return HTTPException(status_code=500, detail=INTERNAL_ERROR)
