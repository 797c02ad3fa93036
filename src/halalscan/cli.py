"""CLI helpers for halalscan."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from halalscan.adapters.openfoodfacts import OpenFoodFactsAdapter
from halalscan.adapters.plaintext import PlainTextAdapter
from halalscan.config import configure_logging, get_rule_tables, log_config
from halalscan.core.classify_rules import HalalClassifier
from halalscan.core.interfaces import Adapter
from halalscan.core.pipeline import ScanPipeline
from halalscan.core.rules import dump_rule_tables


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="halalscan")
    parser.add_argument("--rules", default=None, help="YAML rule tables (overrides HALALSCAN_RULES_PATH)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_cmd = subparsers.add_parser("classify", help="Classify an ingredient declaration")
    classify_cmd.add_argument("text", nargs="?", default=None)
    classify_cmd.add_argument("--file", default=None, help="Read the declaration from a UTF-8 file")
    classify_cmd.add_argument("--certified", action="store_true")

    scan_cmd = subparsers.add_parser("scan", help="Parse a source payload and classify it into JSONL")
    scan_cmd.add_argument("file")
    scan_cmd.add_argument("--source", required=True)
    scan_cmd.add_argument("--out", required=True)
    scan_cmd.add_argument("--certified", action="store_true")

    subparsers.add_parser("rules", help="Print the active rule tables as YAML")

    args = parser.parse_args(argv)

    configure_logging()
    log_config()
    rule_tables = get_rule_tables(args.rules)

    if args.command == "classify":
        if args.file:
            text = Path(args.file).read_text(encoding="utf-8-sig")
        else:
            text = args.text or ""
        result = HalalClassifier(rule_tables).classify(text, certified=args.certified)
        sys.stdout.write(json.dumps(dataclass_to_dict(result), ensure_ascii=False, indent=2) + "\n")
        return 0

    if args.command == "scan":
        adapter = _adapter_for_source(args.source)
        pipeline = ScanPipeline(adapters=[adapter], classifier=HalalClassifier(rule_tables))
        raw_bytes = Path(args.file).read_bytes()
        results = pipeline.run_pipeline(
            raw_bytes,
            {"source": args.source, "certified": args.certified, "file_path": args.file},
        )
        _write_jsonl(
            args.out,
            [
                {
                    "record": dataclass_to_dict(r.record),
                    "classification": dataclass_to_dict(r.classification),
                }
                for r in results
            ],
        )
        return 0

    if args.command == "rules":
        sys.stdout.write(dump_rule_tables(rule_tables))
        return 0

    return 1


def _adapter_for_source(source: str) -> Adapter:
    if source == "text":
        return PlainTextAdapter()
    if source == "openfoodfacts":
        return OpenFoodFactsAdapter()
    raise ValueError(f"Unsupported source: {source}")


def _write_jsonl(path: str | Path, records: list[dict[str, Any]]) -> None:
    path = Path(path)
    with path.open("w", encoding="utf-8") as handle:
        for record in records:
            handle.write(json.dumps(record, ensure_ascii=False) + "\n")


def dataclass_to_dict(obj: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        data = asdict(obj)
        return {key: dataclass_to_dict(value) for key, value in data.items()}
    if isinstance(obj, list):
        return [dataclass_to_dict(value) for value in obj]
    if isinstance(obj, dict):
        return {key: dataclass_to_dict(value) for key, value in obj.items()}
    return obj


if __name__ == "__main__":
    raise SystemExit(main())
