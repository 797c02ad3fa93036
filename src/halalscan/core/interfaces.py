"""Protocol definitions for halalscan adapters and the classifier stage."""

from typing import Any, Protocol, runtime_checkable

from halalscan.core.models import ClassificationResult, ProductRecord


@runtime_checkable
class Adapter(Protocol):
    """
    Adapter protocol: converts raw payloads from an upstream collaborator into ProductRecords.

    Upstream collaborators (barcode lookup, OCR) are out of scope; an adapter
    only turns what they already produced into records the classifier can read.
    """

    def source_id(self) -> str:
        """
        Return a unique identifier for this adapter's source.

        Examples: 'text', 'openfoodfacts'
        """
        ...

    def can_parse(self, metadata: dict[str, Any]) -> bool:
        """
        Determine if this adapter can parse data with the given metadata.

        Args:
            metadata: Context about the raw data (e.g., {'source': 'openfoodfacts'})

        Returns:
            True if this adapter recognizes the format, False otherwise.
        """
        ...

    def parse(self, raw_bytes: bytes, metadata: dict[str, Any]) -> list[ProductRecord]:
        """
        Parse raw data and emit ProductRecord entries.

        Args:
            raw_bytes: Raw bytes from the source
            metadata: Context (e.g., certified flag, file path)

        Returns:
            List of ProductRecord entries; empty when the payload holds no product

        Raises:
            ValueError: If parsing fails
        """
        ...


@runtime_checkable
class Classifier(Protocol):
    """Classifier protocol: decide halal status from an ingredient declaration."""

    def classify(self, text: str | None, certified: bool = False) -> ClassificationResult:
        """
        Classify the ingredient text.

        Args:
            text: Free-form ingredient declaration; may be empty
            certified: Externally verified certification flag

        Returns:
            ClassificationResult with status, level, label and matches
        """
        ...
