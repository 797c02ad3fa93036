"""Tests for the Open Food Facts payload adapter."""

from pathlib import Path

import pytest

from halalscan.adapters.openfoodfacts import OpenFoodFactsAdapter


FIXTURES = Path(__file__).resolve().parents[1] / "src" / "halalscan" / "adapters" / "openfoodfacts" / "fixtures"


def _read_fixture(name: str) -> bytes:
    return (FIXTURES / name).read_bytes()


@pytest.fixture()
def adapter() -> OpenFoodFactsAdapter:
    return OpenFoodFactsAdapter()


def test_parse_found_product_uses_fallback_fields(adapter: OpenFoodFactsAdapter) -> None:
    records = adapter.parse(_read_fixture("product_found.json"), {"source": "openfoodfacts"})
    assert len(records) == 1
    record = records[0]
    assert record.product_name == "Pork Gyoza"
    assert "豚肉" in record.ingredients_text
    assert record.barcode == "4901234567894"
    assert record.image_url.endswith("front.jpg")
    assert record.certified is False


def test_halal_label_marks_certified(adapter: OpenFoodFactsAdapter) -> None:
    records = adapter.parse(_read_fixture("product_certified.json"), {"source": "openfoodfacts"})
    assert records[0].certified is True
    assert records[0].product_name == "Halal Chicken Curry"


def test_missing_product_yields_nothing(adapter: OpenFoodFactsAdapter) -> None:
    assert adapter.parse(_read_fixture("product_missing.json"), {"source": "openfoodfacts"}) == []


def test_unknown_product_name(adapter: OpenFoodFactsAdapter) -> None:
    raw = b'{"status": 1, "product": {"ingredients_text": "salt"}}'
    records = adapter.parse(raw, {"source": "openfoodfacts"})
    assert records[0].product_name == "Unknown Product"
    assert records[0].ingredients_text == "salt"


def test_invalid_json(adapter: OpenFoodFactsAdapter) -> None:
    with pytest.raises(ValueError, match="Failed to decode"):
        adapter.parse(b"{not json", {"source": "openfoodfacts"})


def test_non_object_payload(adapter: OpenFoodFactsAdapter) -> None:
    with pytest.raises(ValueError, match="JSON object"):
        adapter.parse(b"[1, 2]", {"source": "openfoodfacts"})
