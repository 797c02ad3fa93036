"""Plain-text adapter: OCR output or a typed ingredient label becomes one ProductRecord."""

from __future__ import annotations

from typing import Any

from halalscan.core.models import ProductRecord


class PlainTextAdapter:
    """Reads UTF-8 text as a single ingredient declaration."""

    def source_id(self) -> str:
        return "text"

    def can_parse(self, metadata: dict[str, Any]) -> bool:
        return metadata.get("source") == self.source_id() or metadata.get("format") == "text"

    def parse(self, raw_bytes: bytes, metadata: dict[str, Any]) -> list[ProductRecord]:
        try:
            text = raw_bytes.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise ValueError(f"Failed to decode ingredient text: {exc}")

        return [
            ProductRecord(
                product_name=metadata.get("product_name") or "Ingredient Analysis Result",
                ingredients_text=text.strip(),
                certified=bool(metadata.get("certified")),
                source=self.source_id(),
            )
        ]
