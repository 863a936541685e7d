import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from storefront.schemas.quote import QuoteFields
from storefront.schemas.review import ReviewFields
from storefront.services.sanitizer import (
    INVALID_COMMENT,
    INVALID_PHONE,
    INVALID_RATING,
    INVALID_REVIEW_NAME,
    INVALID_TOPIC,
    QUOTE_NAME_TOO_LONG,
    REQUIREMENT_TOO_LONG,
    Rejection,
    sanitize_settings,
    validate_quote,
    validate_review,
)

VALID_PHONE = "9434661990"


def _review(**overrides):
    payload = {"name": "Ravi", "rating": 5, "comment": "Great service"}
    payload.update(overrides)
    return payload


def _quote(**overrides):
    payload = {"topic": "Cement", "name": "Ravi", "phone": VALID_PHONE, "requirement": "50 bags"}
    payload.update(overrides)
    return payload


def test_sanitize_settings_trims_short_faq_keys_and_defaults_shop_info() -> None:
    settings = sanitize_settings(
        {"faqs": [{"q": "  Open when? ", "a": "9-5"}], "shopInfo": {"name": " Shop "}}
    )

    assert len(settings.faqs) == 1
    assert settings.faqs[0].question == "Open when?"
    assert settings.faqs[0].answer == "9-5"
    assert settings.shop_info.name == "Shop"
    assert settings.shop_info.address == ""
    assert settings.shop_info.phone == ""
    assert settings.shop_info.whatsapp == ""
    assert settings.shop_info.hours == ""


def test_sanitize_settings_drops_incomplete_faqs_and_truncates() -> None:
    settings = sanitize_settings(
        {
            "faqs": [
                {"question": "Q" * 250, "answer": "A" * 400},
                {"q": "No answer"},
                {"q": 42, "a": "numeric question"},
                "not an object",
                None,
            ],
            "shopInfo": {"name": "N" * 100, "phone": 9434661990, "hours": None},
        }
    )

    assert [len(faq.question) for faq in settings.faqs] == [200]
    assert [len(faq.answer) for faq in settings.faqs] == [300]
    assert settings.shop_info.name == "N" * 80
    assert settings.shop_info.phone == "9434661990"
    assert settings.shop_info.hours == ""


def test_sanitize_settings_tolerates_wrong_shapes() -> None:
    settings = sanitize_settings({"faqs": "nope", "shopInfo": ["x"]})

    assert settings.faqs == []
    assert settings.shop_info.model_dump() == {
        "name": "",
        "address": "",
        "phone": "",
        "whatsapp": "",
        "hours": "",
    }


@pytest.mark.parametrize("rating", [1, 2, 3, 4, 5, "5", " 4 ", 3.0, "2.0", "+4", "5e0"])
def test_validate_review_accepts_whole_ratings(rating) -> None:
    result = validate_review(_review(rating=rating))

    assert isinstance(result, ReviewFields)
    assert 1 <= result.rating <= 5
    assert isinstance(result.rating, int)


@pytest.mark.parametrize(
    "rating",
    [
        0, 6, -1, 100, 3.5, "3.5", "abc", "", None, True, float("nan"), [5], "inf",
        "0_3", "1_0", "\u0663", "\u0665", "\uff15", "1e400", "nan", "0x3",
    ],
)
def test_validate_review_rejects_bad_ratings(rating) -> None:
    result = validate_review(_review(rating=rating))

    assert result == Rejection("rating", INVALID_RATING)


def test_validate_review_trims_fields() -> None:
    result = validate_review(_review(name="  Ravi  ", comment="  Great service \n"))

    assert result == ReviewFields(name="Ravi", rating=5, comment="Great service")


@pytest.mark.parametrize("name", [None, "", "   ", "x" * 31])
def test_validate_review_rejects_bad_names(name) -> None:
    assert validate_review(_review(name=name)) == Rejection("name", INVALID_REVIEW_NAME)


@pytest.mark.parametrize("comment", [None, "", "  ", "c" * 121])
def test_validate_review_rejects_bad_comments(comment) -> None:
    assert validate_review(_review(comment=comment)) == Rejection("comment", INVALID_COMMENT)


def test_validate_review_reports_first_failing_rule() -> None:
    assert validate_review({}).message == INVALID_REVIEW_NAME
    assert validate_review({"name": "Ravi"}).message == INVALID_RATING
    assert validate_review({"name": "Ravi", "rating": 9, "comment": ""}).message == INVALID_RATING
    assert validate_review({"name": "Ravi", "rating": 4}).message == INVALID_COMMENT
    assert validate_review(None).message == INVALID_REVIEW_NAME


def test_validate_review_allows_boundary_lengths() -> None:
    result = validate_review(_review(name="n" * 30, comment="c" * 120))

    assert isinstance(result, ReviewFields)


@pytest.mark.parametrize(
    "phone", ["0123456789", "123456789012345", " 9434661990 ", 9434661990]
)
def test_validate_quote_accepts_digit_phones(phone) -> None:
    result = validate_quote(_quote(phone=phone))

    assert isinstance(result, QuoteFields)
    assert result.phone == str(phone).strip()


@pytest.mark.parametrize(
    "phone",
    [
        "123456789",
        "1234567890123456",
        "+919434661990",
        "94346-61990",
        "94346 61990",
        "94346619a0",
        "９４３４６６１９９０",
        "9434661990\n1",
        "   ",
        "",
        None,
    ],
)
def test_validate_quote_rejects_bad_phones(phone) -> None:
    assert validate_quote(_quote(phone=phone)) == Rejection("phone", INVALID_PHONE)


def test_validate_quote_optional_fields_default_to_empty() -> None:
    result = validate_quote({"topic": " Paint ", "phone": VALID_PHONE})

    assert result == QuoteFields(topic="Paint", phone=VALID_PHONE, name="", requirement="")


def test_validate_quote_reports_first_failing_rule() -> None:
    assert validate_quote({}).message == INVALID_TOPIC
    assert validate_quote(_quote(topic="t" * 61)).message == INVALID_TOPIC
    assert validate_quote(_quote(phone="12", name="n" * 41)).message == INVALID_PHONE
    assert validate_quote(_quote(name="n" * 41, requirement="r" * 201)).message == QUOTE_NAME_TOO_LONG
    assert validate_quote(_quote(requirement="r" * 201)).message == REQUIREMENT_TOO_LONG


def test_validate_quote_allows_boundary_lengths() -> None:
    result = validate_quote(_quote(topic="t" * 60, name="n" * 40, requirement="r" * 200))

    assert isinstance(result, QuoteFields)
