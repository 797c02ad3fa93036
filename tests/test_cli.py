"""Tests for the halalscan CLI."""

import json
from pathlib import Path

import pytest

from halalscan.cli import dataclass_to_dict, main
from halalscan.core.classify_rules import classify


ADAPTERS = Path(__file__).resolve().parents[1] / "src" / "halalscan" / "adapters"


@pytest.fixture(autouse=True)
def _no_rules_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HALALSCAN_RULES_PATH", raising=False)


def test_classify_text(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["classify", "豚肉、食塩、砂糖"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["status"] == "HARAM"
    assert payload["level"] == "HR2"
    assert {"name": "豚肉", "translation": "Pork", "type": "HARAM"} in payload["matches"]


def test_classify_certified_flag(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["classify", "鶏肉", "--certified"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["level"] == "LV1"


def test_classify_from_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    label = tmp_path / "label.txt"
    label.write_text("乳化剤、香料、食塩", encoding="utf-8")
    assert main(["classify", "--file", str(label)]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["level"] == "D"


def test_classify_without_text_is_unknown(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["classify"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {"status": "UNKNOWN", "level": "?", "label": "Unknown", "matches": []}


def test_scan_writes_jsonl(tmp_path: Path) -> None:
    out = tmp_path / "results.jsonl"
    fixture = ADAPTERS / "openfoodfacts" / "fixtures" / "product_found.json"
    assert main(["scan", str(fixture), "--source", "openfoodfacts", "--out", str(out)]) == 0
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["record"]["product_name"] == "Pork Gyoza"
    assert record["classification"]["level"] == "HR2"


def test_scan_unsupported_source(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Unsupported source"):
        main(["scan", "missing.bin", "--source", "camera", "--out", str(tmp_path / "out.jsonl")])


def test_rules_round_trip_through_cli(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["rules"]) == 0
    dumped = capsys.readouterr().out
    assert "本品製造工場では" in dumped

    rules = tmp_path / "rules.yaml"
    rules.write_text(dumped.replace("- 乳化剤\n", ""), encoding="utf-8")
    assert main(["--rules", str(rules), "classify", "乳化剤、食塩"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["level"] == "LV2"


def test_dataclass_to_dict_converts_enums() -> None:
    data = dataclass_to_dict(classify("ラード"))
    assert data["status"] == "HARAM"
    assert data["matches"][0] == {"name": "ラード", "translation": "Lard", "type": "HARAM"}
