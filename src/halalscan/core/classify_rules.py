"""Rule-based halal classification of ingredient declarations."""

from __future__ import annotations

import logging
import re

from halalscan.core.models import (
    ClassificationResult,
    Level,
    Match,
    MatchType,
    Status,
)
from halalscan.core.rules import DEFAULT_RULE_TABLES, RuleTables

logger = logging.getLogger(__name__)

# A disclosure runs from its trigger phrase to a Japanese/fullwidth
# terminator, a newline, or an ASCII period followed by whitespace or the end.
_SENTENCE_END = re.compile(r"[。．！？!?\n]|\.(?=\s|$)")


class HalalClassifier:
    """
    Deterministic rule-based classifier.

    Rules run in a fixed order and the first one that fires decides the
    result: certification, direct haram, syubhat, shared production line,
    then the clean default. Matching is plain substring containment on the
    lower-cased text; Japanese has no reliable word boundaries.
    """

    def __init__(self, rule_tables: RuleTables | None = None) -> None:
        self.rule_tables = rule_tables or DEFAULT_RULE_TABLES

    def classify(self, text: str | None, certified: bool = False) -> ClassificationResult:
        if not text:
            logger.debug("empty ingredient text")
            return ClassificationResult(
                status=Status.UNKNOWN,
                level=Level.UNKNOWN,
                label="Unknown",
                matches=[],
            )

        tables = self.rule_tables
        lowered = text.lower()

        if certified or any(marker in lowered for marker in tables.certification_markers):
            logger.debug("certification: flag=%s", certified)
            return ClassificationResult(
                status=Status.HALAL,
                level=Level.LV1,
                label="Halal Certified",
                matches=[],
            )

        ingredients, disclosures = self._split_disclosures(lowered)

        haram = self._scan(ingredients, tables.haram_terms, MatchType.HARAM)
        if haram:
            logger.debug("haram terms: %s", [m.name for m in haram])
            return ClassificationResult(
                status=Status.HARAM,
                level=Level.HR2,
                label="Haram Content",
                matches=haram,
            )

        syubhat = self._scan(ingredients, tables.syubhat_terms, MatchType.SYUBHAT)
        if syubhat:
            logger.debug("syubhat terms: %s", [m.name for m in syubhat])
            return ClassificationResult(
                status=Status.SYUBHAT,
                level=Level.D,
                label="Doubtful Ingredients",
                matches=syubhat,
            )

        if disclosures:
            for pattern in tables.contamination_patterns:
                if pattern.level != Level.HR1:
                    continue
                if not any(t in disclosures for t in pattern.trigger_phrases):
                    continue
                if any(k in disclosures for k in pattern.keywords):
                    logger.debug("shared line contamination: %s", pattern.label)
                    return ClassificationResult(
                        status=Status.HARAM,
                        level=Level.HR1,
                        label=pattern.label,
                        matches=[],
                    )
            logger.debug("shared line disclosure without animal trace")
            return ClassificationResult(
                status=Status.HALAL,
                level=Level.LV3,
                label="Shared Production Line",
                matches=[],
            )

        return ClassificationResult(
            status=Status.HALAL,
            level=Level.LV2,
            label="No Restricted Ingredients",
            matches=[],
        )

    def _split_disclosures(self, lowered: str) -> tuple[str, str]:
        """
        Separate shared-line disclosures from the ingredient list.

        A disclosure spans from a trigger phrase to the end of its sentence;
        text before the trigger stays in the ingredient scope.

        Returns (ingredient_scope, disclosure_scope). Without any disclosure
        the ingredient scope is the whole text.
        """
        spans: list[tuple[int, int]] = []
        for trigger in self.rule_tables.shared_line_triggers:
            start = lowered.find(trigger)
            while start != -1:
                end_match = _SENTENCE_END.search(lowered, start + len(trigger))
                spans.append((start, end_match.end() if end_match else len(lowered)))
                start = lowered.find(trigger, start + 1)
        if not spans:
            return lowered, ""

        merged: list[tuple[int, int]] = []
        for start, end in sorted(spans):
            if merged and start <= merged[-1][1]:
                merged[-1] = (merged[-1][0], max(merged[-1][1], end))
            else:
                merged.append((start, end))

        # Pieces are joined with newlines so no term can form across a cut.
        ingredients: list[str] = []
        position = 0
        for start, end in merged:
            ingredients.append(lowered[position:start])
            position = end
        ingredients.append(lowered[position:])
        disclosures = [lowered[start:end] for start, end in merged]
        return "\n".join(ingredients), "\n".join(disclosures)

    def _scan(self, text: str, terms: tuple[str, ...], match_type: MatchType) -> list[Match]:
        return [
            Match(name=term, translation=self.rule_tables.translate(term), type=match_type)
            for term in terms
            if term in text
        ]


_default_classifier = HalalClassifier()


def classify(text: str | None, certified: bool = False) -> ClassificationResult:
    """Classify with the built-in rule tables."""
    return _default_classifier.classify(text, certified=certified)
