#!/usr/bin/env python3
"""Run a quick smoke test of the storefront API against a scratch data directory."""

from __future__ import annotations

import argparse
import json
import os
import sys
import tempfile
from typing import Any, Dict

from fastapi.testclient import TestClient

from storefront.config import get_settings
from storefront.dependencies.services import get_record_store_cached
from storefront.main import create_app


def _print_json(label: str, payload: Any) -> None:
    print(f"{label}:")
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _expect(response, status: int) -> Dict[str, Any]:
    if response.status_code != status:
        raise RuntimeError(
            f"{response.request.method} {response.request.url.path} returned "
            f"{response.status_code}, expected {status}: {response.text}"
        )
    return response.json()


def run_smoke_test(data_dir: str, phone: str) -> None:
    """Exercise settings, reviews and quotes end to end."""

    os.environ["STOREFRONT_DATA_DIR"] = data_dir
    # Ensure configuration changes are respected between runs.
    get_settings.cache_clear()
    get_record_store_cached.cache_clear()

    print(f"Running smoke test with data directory {get_settings().data_dir}")

    with TestClient(create_app()) as client:
        _expect(
            client.post(
                "/api/settings",
                json={
                    "faqs": [{"q": "Do you deliver?", "a": "Yes, within 20 km."}],
                    "shopInfo": {"name": "Mahamaya Enterprise", "phone": phone},
                },
            ),
            200,
        )
        _print_json("Settings", _expect(client.get("/api/settings"), 200))

        review = _expect(
            client.post(
                "/api/reviews",
                json={"name": "Smoke", "rating": 5, "comment": "Smoke test review"},
            ),
            201,
        )
        _print_json("Created review", review)

        quote = _expect(
            client.post(
                "/api/quotes",
                json={"topic": "Cement", "name": "Smoke", "phone": phone, "requirement": "10 bags"},
            ),
            201,
        )
        _print_json("Fetched quote", _expect(client.get(f"/api/quotes/{quote['id']}"), 200))
        _expect(client.get("/api/quotes/not-a-real-id"), 404)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Run a smoke test against the storefront API. Documents are written to "
            "a temporary directory unless --data-dir is given."
        )
    )
    parser.add_argument(
        "--data-dir",
        default=None,
        help="Directory for the JSON documents (defaults to a temporary directory).",
    )
    parser.add_argument(
        "--phone",
        default="9434661990",
        help="Digits-only phone number used for the sample quote.",
    )

    args = parser.parse_args(argv)

    try:
        if args.data_dir:
            run_smoke_test(args.data_dir, args.phone)
        else:
            with tempfile.TemporaryDirectory(prefix="storefront-") as scratch:
                run_smoke_test(scratch, args.phone)
    except Exception as exc:  # pragma: no cover - manual diagnostic utility
        print(f"Smoke test failed: {exc}", file=sys.stderr)
        return 1

    print("\nSmoke test completed successfully.")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual diagnostic utility
    raise SystemExit(main())
