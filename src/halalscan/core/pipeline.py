"""Pipeline orchestration: wires adapters and the classifier together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from halalscan.core.classify_rules import HalalClassifier
from halalscan.core.interfaces import Adapter, Classifier
from halalscan.core.models import ClassificationResult, ProductRecord

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    record: ProductRecord
    classification: ClassificationResult


class ScanPipeline:
    """
    Orchestrates a scan: adapt -> classify.

    Adapters and the classifier are injected, so rule tables or sources can be
    swapped without touching the pipeline.
    """

    def __init__(
        self,
        adapters: list[Adapter] | None = None,
        classifier: Optional[Classifier] = None,
    ) -> None:
        self.adapters = adapters or []
        self.classifier = classifier or HalalClassifier()

    def run(self, records: list[ProductRecord]) -> list[ScanResult]:
        """Classify already-parsed records in order."""
        return [
            ScanResult(
                record=record,
                classification=self.classifier.classify(record.ingredients_text, certified=record.certified),
            )
            for record in records
        ]

    def process_with_adapter(self, raw_bytes: bytes, metadata: dict[str, Any]) -> list[ScanResult]:
        """Full pipeline: find adapter -> parse -> classify."""
        adapter = next((a for a in self.adapters if a.can_parse(metadata)), None)
        if not adapter:
            raise ValueError(f"No adapter found for metadata: {metadata}")
        records = adapter.parse(raw_bytes, metadata)
        if not records:
            # Product not found upstream: classify empty text so callers get UNKNOWN.
            logger.warning("No product in %s payload", adapter.source_id())
            records = [ProductRecord(source=adapter.source_id())]
        return self.run(records)

    def run_pipeline(self, raw_bytes: bytes, metadata: dict[str, Any]) -> list[ScanResult]:
        """Stable integration entrypoint for external packages."""
        return self.process_with_adapter(raw_bytes, metadata)
