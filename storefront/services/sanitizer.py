"""Validation and normalisation of caller-supplied payloads.

These helpers never raise for bad input. Settings are always coerced into a
storable document; reviews and quotes come back either as validated fields or
as a :class:`Rejection` naming the first rule that failed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence

from storefront.schemas.quote import QuoteFields
from storefront.schemas.review import ReviewFields
from storefront.schemas.settings import FaqEntry, SettingsDocument, ShopInfo

FAQ_QUESTION_MAX = 200
FAQ_ANSWER_MAX = 300

SHOP_INFO_LIMITS = {
    "name": 80,
    "address": 200,
    "phone": 25,
    "whatsapp": 25,
    "hours": 200,
}

REVIEW_NAME_MAX = 30
REVIEW_COMMENT_MAX = 120
RATING_MIN = 1
RATING_MAX = 5

QUOTE_TOPIC_MAX = 60
QUOTE_NAME_MAX = 40
QUOTE_REQUIREMENT_MAX = 200
PHONE_PATTERN = re.compile(r"[0-9]{10,15}")
NUMERIC_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

INVALID_SETTINGS = "Invalid settings payload"
INVALID_REVIEW_NAME = "Valid name required"
INVALID_RATING = "Rating must be 1-5"
INVALID_COMMENT = "Valid comment required"
INVALID_TOPIC = "Valid topic required"
INVALID_PHONE = "Valid phone required (10-15 digits)"
QUOTE_NAME_TOO_LONG = "Name too long"
REQUIREMENT_TOO_LONG = "Requirement too long"


@dataclass(frozen=True)
class Rejection:
    """A failed validation: the offending field and the message to report."""

    field: str
    message: str


def is_list_like(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object_like(value: Any) -> bool:
    return isinstance(value, Mapping)


def sanitize_settings(raw: Mapping[str, Any] | None) -> SettingsDocument:
    raw = raw if is_object_like(raw) else {}
    faqs = raw.get("faqs")
    shop_info = raw.get("shopInfo")
    return SettingsDocument(
        faqs=_sanitize_faqs(faqs if is_list_like(faqs) else []),
        shop_info=_sanitize_shop_info(shop_info if is_object_like(shop_info) else {}),
    )


def validate_review(raw: Mapping[str, Any] | None) -> ReviewFields | Rejection:
    raw = raw if is_object_like(raw) else {}

    name = _coerce_text(raw.get("name"))
    if not name or len(name) > REVIEW_NAME_MAX:
        return Rejection("name", INVALID_REVIEW_NAME)

    rating = _coerce_rating(raw.get("rating"))
    if rating is None or not RATING_MIN <= rating <= RATING_MAX:
        return Rejection("rating", INVALID_RATING)

    comment = _coerce_text(raw.get("comment"))
    if not comment or len(comment) > REVIEW_COMMENT_MAX:
        return Rejection("comment", INVALID_COMMENT)

    return ReviewFields(name=name, rating=rating, comment=comment)


def validate_quote(raw: Mapping[str, Any] | None) -> QuoteFields | Rejection:
    raw = raw if is_object_like(raw) else {}

    topic = _coerce_text(raw.get("topic"))
    if not topic or len(topic) > QUOTE_TOPIC_MAX:
        return Rejection("topic", INVALID_TOPIC)

    phone = _coerce_text(raw.get("phone"))
    if not PHONE_PATTERN.fullmatch(phone):
        return Rejection("phone", INVALID_PHONE)

    name = _coerce_text(raw.get("name"))
    if len(name) > QUOTE_NAME_MAX:
        return Rejection("name", QUOTE_NAME_TOO_LONG)

    requirement = _coerce_text(raw.get("requirement"))
    if len(requirement) > QUOTE_REQUIREMENT_MAX:
        return Rejection("requirement", REQUIREMENT_TOO_LONG)

    return QuoteFields(topic=topic, phone=phone, name=name, requirement=requirement)


def _sanitize_faqs(entries: Sequence[Any]) -> List[FaqEntry]:
    faqs: List[FaqEntry] = []
    for entry in entries:
        if not is_object_like(entry):
            continue
        question = _pick_text(entry, "question", "q")
        answer = _pick_text(entry, "answer", "a")
        if question is None or answer is None:
            continue
        faqs.append(
            FaqEntry(
                question=question.strip()[:FAQ_QUESTION_MAX],
                answer=answer.strip()[:FAQ_ANSWER_MAX],
            )
        )
    return faqs


def _sanitize_shop_info(raw: Mapping[str, Any]) -> ShopInfo:
    return ShopInfo(
        **{
            field: _coerce_text(raw.get(field))[:limit]
            for field, limit in SHOP_INFO_LIMITS.items()
        }
    )


def _pick_text(entry: Mapping[str, Any], *keys: str) -> str | None:
    # The long key wins when both spellings are present.
    for key in keys:
        value = entry.get(key)
        if isinstance(value, str):
            return value
    return None


def _coerce_text(value: Any) -> str:
    """Stringify and trim a loose input value; empty for missing or falsy."""

    if not value:
        return ""
    if isinstance(value, bool):
        return "true"
    return str(value).strip()


def _coerce_rating(value: Any) -> int | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if not NUMERIC_PATTERN.fullmatch(text):
            return None
        number = float(text)
        return int(number) if number.is_integer() else None
    return None
