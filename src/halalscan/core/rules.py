"""Rule tables: haram and syubhat terms, shared-line patterns and translations."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

import yaml

from halalscan.core.models import Level

logger = logging.getLogger(__name__)

RULES_VERSION = "jhf-2026.1"

# Terms are matched by substring containment, so a short term also fires
# inside longer compounds ("酒" in "清酒").
HARAM_TERMS = (
    # Pork
    "豚", "豚肉", "ポーク", "pork",
    "豚脂", "ラード", "lard",
    "豚エキス", "ポークエキス", "pork extract",
    "ポークパウダー", "pork powder",
    # Alcohol
    "酒", "清酒", "sake",
    "みりん", "味醂", "mirin",
    "ワイン", "wine",
    "ブランディ", "brandy",
    "ラム酒", "rum",
    "洋酒", "liquor",
    "アルコール", "alcohol",
    "酒精", "ethyl alcohol",
    "ビール", "beer",
    "ワインビネガー", "wine vinegar",
    # Meat not slaughtered to halal requirements
    "牛肉", "beef", "牛エキス", "beef extract",
    "鶏肉", "chicken", "チキンエキス", "chicken extract",
    "肉エキス", "meat extract",
    "動物油脂", "animal fat",
    # Gelatin of unspecified origin
    "ゼラチン", "gelatin",
)

SYUBHAT_TERMS = (
    "ショートニング", "shortening",
    "乳化剤", "emulsifier",
    "マーガリン", "margarine",
    "油脂", "fat",
    "ファットスプレッド", "fat spread",
    "コラーゲンペプチド", "collagen peptide",
    "加工油脂", "processed fat",
    "アミノ酸", "amino acid",
    "アミノ酸等", "amino acids etc",
    "グリセリン", "glycerin",
    "香料", "flavoring",
    "増粘多糖類", "thickener",
    "イーストフード", "yeast food",
)

SHARED_LINE_TRIGGERS = (
    "本品製造工場では",
    "製造ラインでは",
    "manufactured in a facility",
    "produced on a line",
    "shared production line",
)

CERTIFICATION_MARKERS = (
    "ハラール認証",
    "ハラル認証",
    "halal certified",
)

TRANSLATIONS = {
    "豚": "Pork",
    "豚肉": "Pork",
    "ポーク": "Pork",
    "豚脂": "Pork Fat",
    "ラード": "Lard",
    "豚エキス": "Pork Extract",
    "ポークエキス": "Pork Extract",
    "ポークパウダー": "Pork Powder",
    "酒": "Sake (Alcohol)",
    "清酒": "Refined Sake (Alcohol)",
    "みりん": "Mirin (Alcohol)",
    "味醂": "Mirin (Alcohol)",
    "ワイン": "Wine",
    "ブランディ": "Brandy",
    "ラム酒": "Rum",
    "洋酒": "Western Liquor",
    "アルコール": "Alcohol",
    "酒精": "Ethyl Alcohol",
    "ビール": "Beer",
    "ワインビネガー": "Wine Vinegar",
    "牛肉": "Beef",
    "牛エキス": "Beef Extract",
    "鶏肉": "Chicken",
    "チキンエキス": "Chicken Extract",
    "肉エキス": "Meat Extract",
    "動物油脂": "Animal Fat",
    "ゼラチン": "Gelatin (Haram/Animal)",
    "ショートニング": "Shortening (Doubtful)",
    "乳化剤": "Emulsifier (Doubtful)",
    "マーガリン": "Margarine (Doubtful)",
    "油脂": "Oils and Fats (Doubtful)",
    "ファットスプレッド": "Fat Spread (Doubtful)",
    "コラーゲンペプチド": "Collagen Peptide (Doubtful)",
    "加工油脂": "Processed Fat (Doubtful)",
    "アミノ酸": "Amino Acid (Doubtful)",
    "アミノ酸等": "Amino Acids (Doubtful)",
    "グリセリン": "Glycerin (Doubtful)",
    "香料": "Flavoring (Doubtful)",
    "増粘多糖類": "Thickener (Doubtful)",
    "イーストフード": "Yeast Food (Doubtful)",
}


@dataclass(frozen=True)
class ContaminationPattern:
    trigger_phrases: frozenset[str]
    keywords: frozenset[str]
    level: Level
    label: str


CONTAMINATION_PATTERNS = (
    ContaminationPattern(
        trigger_phrases=frozenset(SHARED_LINE_TRIGGERS),
        keywords=frozenset({"豚", "ポーク", "ラード", "pork", "lard"}),
        level=Level.HR1,
        label="Contaminated with Pork/Lard",
    ),
    ContaminationPattern(
        trigger_phrases=frozenset(SHARED_LINE_TRIGGERS),
        keywords=frozenset({"肉", "動物", "meat", "animal"}),
        level=Level.HR1,
        label="Contaminated with Animal Meat/Fat",
    ),
    ContaminationPattern(
        trigger_phrases=frozenset(SHARED_LINE_TRIGGERS),
        keywords=frozenset(),
        level=Level.LV3,
        label="Shared Production Line",
    ),
)

_PATTERN_LEVELS = {Level.HR1, Level.LV3}


@dataclass(frozen=True)
class RuleTables:
    """
    Immutable rule tables shared by every classification.

    Build once (DEFAULT_RULE_TABLES or load_rule_tables) and pass the
    instance around; nothing here is mutated after construction.
    """

    haram_terms: tuple[str, ...]
    syubhat_terms: tuple[str, ...]
    contamination_patterns: tuple[ContaminationPattern, ...]
    translations: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    certification_markers: tuple[str, ...] = CERTIFICATION_MARKERS
    version: str = RULES_VERSION

    @property
    def shared_line_triggers(self) -> frozenset[str]:
        triggers: set[str] = set()
        for pattern in self.contamination_patterns:
            triggers.update(pattern.trigger_phrases)
        return frozenset(triggers)

    def translation_for(self, term: str) -> Optional[str]:
        return self.translations.get(term)

    def translate(self, term: str) -> str:
        """Gloss for a term, falling back to the term itself."""
        translation = self.translation_for(term)
        return translation if translation else term


def build_rule_tables(
    haram_terms: tuple[str, ...] | list[str] = HARAM_TERMS,
    syubhat_terms: tuple[str, ...] | list[str] = SYUBHAT_TERMS,
    contamination_patterns: tuple[ContaminationPattern, ...] | list[ContaminationPattern] = CONTAMINATION_PATTERNS,
    translations: Mapping[str, str] | None = None,
    certification_markers: tuple[str, ...] | list[str] = CERTIFICATION_MARKERS,
    version: str = RULES_VERSION,
) -> RuleTables:
    """
    Validate and freeze rule table content.

    Raises:
        ValueError: If haram and syubhat terms overlap or a pattern is malformed
    """
    haram = _normalize_terms(haram_terms)
    syubhat = _normalize_terms(syubhat_terms)

    overlap = set(haram) & set(syubhat)
    if overlap:
        raise ValueError(f"Terms listed as both haram and syubhat: {sorted(overlap)}")

    patterns = tuple(contamination_patterns)
    for pattern in patterns:
        if pattern.level not in _PATTERN_LEVELS:
            raise ValueError(f"Unsupported contamination level: {pattern.level.value}")
        if not pattern.trigger_phrases:
            raise ValueError(f"Contamination pattern '{pattern.label}' has no trigger phrases")

    source = TRANSLATIONS if translations is None else translations
    glosses = {str(k).strip().lower(): str(v) for k, v in source.items()}

    return RuleTables(
        haram_terms=haram,
        syubhat_terms=syubhat,
        contamination_patterns=patterns,
        translations=MappingProxyType(glosses),
        certification_markers=_normalize_terms(certification_markers),
        version=version,
    )


def _normalize_terms(terms: tuple[str, ...] | list[str]) -> tuple[str, ...]:
    seen: dict[str, None] = {}
    for term in terms:
        value = term.strip().lower()
        if value:
            seen.setdefault(value, None)
    return tuple(seen)


DEFAULT_RULE_TABLES = build_rule_tables()


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise ValueError(f"Rule table file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Rule table file must contain a mapping: {path}")
    return data


def _string_list(data: dict[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    if key not in data:
        return default
    values = data.get(key) or []
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise ValueError(f"Rule table key '{key}' must be a list of strings")
    return tuple(values)


def _parse_pattern(entry: Any) -> ContaminationPattern:
    if not isinstance(entry, dict):
        raise ValueError("Contamination entries must be mappings")
    level_value = str(entry.get("level", "")).upper()
    try:
        level = Level(level_value)
    except ValueError:
        raise ValueError(f"Unknown contamination level: {level_value!r}") from None
    triggers = entry.get("trigger_phrases") or list(SHARED_LINE_TRIGGERS)
    keywords = entry.get("keywords") or []
    return ContaminationPattern(
        trigger_phrases=frozenset(str(t).lower() for t in triggers),
        keywords=frozenset(str(k).lower() for k in keywords),
        level=level,
        label=str(entry.get("label") or "Shared Production Line"),
    )


def load_rule_tables(path: str | Path) -> RuleTables:
    """
    Load rule tables from a YAML document.

    Keys: version, haram, syubhat, contamination, translations,
    certification_markers. Missing keys keep the built-in content.

    Raises:
        ValueError: If the file is missing or its content is invalid
    """
    file_path = Path(path)
    data = _load_yaml(file_path)

    if "contamination" in data:
        entries = data.get("contamination") or []
        if not isinstance(entries, list):
            raise ValueError("Rule table key 'contamination' must be a list")
        patterns = tuple(_parse_pattern(entry) for entry in entries)
    else:
        patterns = CONTAMINATION_PATTERNS

    translations = data.get("translations", TRANSLATIONS)
    if not isinstance(translations, dict):
        raise ValueError("Rule table key 'translations' must be a mapping")

    tables = build_rule_tables(
        haram_terms=_string_list(data, "haram", HARAM_TERMS),
        syubhat_terms=_string_list(data, "syubhat", SYUBHAT_TERMS),
        contamination_patterns=patterns,
        translations=translations,
        certification_markers=_string_list(data, "certification_markers", CERTIFICATION_MARKERS),
        version=str(data.get("version") or RULES_VERSION),
    )
    logger.info(
        "Loaded rule tables %s from %s: %d haram, %d syubhat, %d contamination patterns",
        tables.version,
        file_path,
        len(tables.haram_terms),
        len(tables.syubhat_terms),
        len(tables.contamination_patterns),
    )
    return tables


def dump_rule_tables(tables: RuleTables) -> str:
    """Render rule tables as YAML that load_rule_tables accepts."""
    payload = {
        "version": tables.version,
        "haram": list(tables.haram_terms),
        "syubhat": list(tables.syubhat_terms),
        "contamination": [
            {
                "level": pattern.level.value,
                "label": pattern.label,
                "trigger_phrases": sorted(pattern.trigger_phrases),
                "keywords": sorted(pattern.keywords),
            }
            for pattern in tables.contamination_patterns
        ],
        "translations": dict(tables.translations),
        "certification_markers": list(tables.certification_markers),
    }
    return yaml.safe_dump(payload, allow_unicode=True, sort_keys=False)
