"""halalscan: halal status classification for Japanese and English ingredient labels."""

__version__ = "0.1.0"

# Core exports
from halalscan.core.models import (
    ClassificationResult,
    Level,
    Match,
    MatchType,
    ProductRecord,
    Status,
)
from halalscan.core.rules import (
    DEFAULT_RULE_TABLES,
    ContaminationPattern,
    RuleTables,
    build_rule_tables,
    dump_rule_tables,
    load_rule_tables,
)
from halalscan.core.interfaces import Adapter, Classifier
from halalscan.core.classify_rules import HalalClassifier, classify
from halalscan.core.pipeline import ScanPipeline, ScanResult

__all__ = [
    "ClassificationResult",
    "Level",
    "Match",
    "MatchType",
    "ProductRecord",
    "Status",
    "DEFAULT_RULE_TABLES",
    "ContaminationPattern",
    "RuleTables",
    "build_rule_tables",
    "dump_rule_tables",
    "load_rule_tables",
    "Adapter",
    "Classifier",
    "HalalClassifier",
    "classify",
    "ScanPipeline",
    "ScanResult",
]
