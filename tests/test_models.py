"""Tests for core data models."""

import pytest

from halalscan.core.models import (
    ClassificationResult,
    Level,
    Match,
    MatchType,
    ProductRecord,
    Status,
)


def test_level_ordering() -> None:
    ordered = [Level.LV1, Level.LV2, Level.LV3, Level.D, Level.HR1, Level.HR2]
    assert [level.severity for level in ordered] == [0, 1, 2, 3, 4, 5]
    assert Level.HR2.is_more_severe_than(Level.HR1)
    assert Level.D.is_more_severe_than(Level.LV3)
    assert not Level.LV1.is_more_severe_than(Level.LV2)


def test_unknown_level_is_outside_scale() -> None:
    assert Level.UNKNOWN.value == "?"
    assert Level.UNKNOWN.severity is None
    assert not Level.UNKNOWN.is_more_severe_than(Level.LV1)
    assert not Level.HR2.is_more_severe_than(Level.UNKNOWN)


def test_enum_values_compare_as_strings() -> None:
    assert Status.HARAM == "HARAM"
    assert Level.HR2 == "HR2"
    assert MatchType.SYUBHAT == "SYUBHAT"


def test_match_immutable() -> None:
    match = Match(name="豚肉", translation="Pork", type=MatchType.HARAM)
    with pytest.raises(Exception):  # FrozenInstanceError
        match.name = "牛肉"


def test_product_record_defaults() -> None:
    record = ProductRecord()
    assert record.ingredients_text == ""
    assert record.certified is False
    assert record.barcode is None


def test_classification_result_structural_equality() -> None:
    first = ClassificationResult(status=Status.HALAL, level=Level.LV2, label="No Restricted Ingredients")
    second = ClassificationResult(status=Status.HALAL, level=Level.LV2, label="No Restricted Ingredients")
    assert first == second
    assert first.matches == []
