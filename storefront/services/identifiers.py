from __future__ import annotations

import secrets
import string
from datetime import datetime, timezone

URL_ALPHABET = string.ascii_letters + string.digits + "_-"
DEFAULT_SIZE = 10


def new_id(size: int = DEFAULT_SIZE) -> str:
    """Return a random URL-safe identifier of ``size`` characters."""

    if size <= 0:
        raise ValueError("Identifier size must be positive")
    return "".join(secrets.choice(URL_ALPHABET) for _ in range(size))


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2025-01-31T09:15:02.417Z."""

    dt = datetime.now(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
