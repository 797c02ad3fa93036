"""
Open Food Facts adapter: parses an already fetched product payload.

Fetching is left to the caller; this only maps the API v2 product JSON
(`/api/v2/product/<barcode>.json`) onto a ProductRecord.
"""

from __future__ import annotations

import json
from typing import Any

from halalscan.core.models import ProductRecord

HALAL_LABEL_TAGS = {"en:halal"}


class OpenFoodFactsAdapter:
    """Maps Open Food Facts product payloads to ProductRecords."""

    def source_id(self) -> str:
        return "openfoodfacts"

    def can_parse(self, metadata: dict[str, Any]) -> bool:
        return metadata.get("source") == self.source_id() or metadata.get("format") == "off_json"

    def parse(self, raw_bytes: bytes, metadata: dict[str, Any]) -> list[ProductRecord]:
        try:
            payload = json.loads(raw_bytes.decode("utf-8-sig"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ValueError(f"Failed to decode Open Food Facts payload: {exc}")

        if not isinstance(payload, dict):
            raise ValueError("Open Food Facts payload must be a JSON object")

        # status 1 means the product exists; anything else is "not found".
        if payload.get("status") != 1:
            return []

        product = payload.get("product") or {}
        if not isinstance(product, dict):
            raise ValueError("Open Food Facts 'product' must be a JSON object")

        labels = product.get("labels_tags") or []
        certified = bool(metadata.get("certified")) or any(tag in HALAL_LABEL_TAGS for tag in labels)

        return [
            ProductRecord(
                product_name=(
                    product.get("product_name") or product.get("product_name_en") or "Unknown Product"
                ),
                ingredients_text=(
                    product.get("ingredients_text") or product.get("ingredients_text_ja") or ""
                ),
                certified=certified,
                source=self.source_id(),
                barcode=payload.get("code") or metadata.get("barcode"),
                image_url=product.get("image_url"),
            )
        ]
