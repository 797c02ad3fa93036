"""Core data models: status and level enums, matches, results and product records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Status(str, Enum):
    """Coarse admissibility verdict."""

    HALAL = "HALAL"
    HARAM = "HARAM"
    SYUBHAT = "SYUBHAT"
    UNKNOWN = "UNKNOWN"


class Level(str, Enum):
    """
    Severity scale, ordered from most to least permissive.

    LV1 (certified) > LV2 (clean) > LV3 (shared line, no animal trace)
    > D (doubtful ingredient) > HR1 (shared line with animal trace)
    > HR2 (direct haram ingredient). UNKNOWN ("?") sits outside the scale.
    """

    LV1 = "LV1"
    LV2 = "LV2"
    LV3 = "LV3"
    D = "D"
    HR1 = "HR1"
    HR2 = "HR2"
    UNKNOWN = "?"

    @property
    def severity(self) -> Optional[int]:
        """Rank on the scale: 0 for LV1 up to 5 for HR2, None for UNKNOWN."""
        return _SEVERITY.get(self)

    def is_more_severe_than(self, other: "Level") -> bool:
        if self.severity is None or other.severity is None:
            return False
        return self.severity > other.severity


_SEVERITY = {
    Level.LV1: 0,
    Level.LV2: 1,
    Level.LV3: 2,
    Level.D: 3,
    Level.HR1: 4,
    Level.HR2: 5,
}


class MatchType(str, Enum):
    """Which term table produced a match."""

    HARAM = "HARAM"
    SYUBHAT = "SYUBHAT"


@dataclass(frozen=True)
class Match:
    """A single rule-table term found in the ingredient text."""

    name: str
    """The term as listed in the rule table."""

    translation: str
    """Human-readable gloss; falls back to the term itself."""

    type: MatchType


@dataclass
class ClassificationResult:
    """Output of the classifier. Built fresh for every call."""

    status: Status
    level: Level
    label: str
    matches: list[Match] = field(default_factory=list)


@dataclass(frozen=True)
class ProductRecord:
    """
    Ingredient declaration handed over by an upstream collaborator.

    Barcode lookups and OCR both end up here: a product name, the raw
    ingredient text and whatever certification data the source carried.
    """

    product_name: str = ""
    """Display name; sources fill in a placeholder when they have none."""

    ingredients_text: str = ""
    """Raw ingredient declaration (may be empty)."""

    certified: bool = False
    """Externally verified halal certification."""

    source: str = ""
    """Adapter source_id that produced this record (e.g., 'text', 'openfoodfacts')."""

    barcode: Optional[str] = None
    """JAN/EAN code when the record came from a product database."""

    image_url: Optional[str] = None
    """Product image reference if the source provides one."""
