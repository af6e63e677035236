"""Tests for transfer object serialization."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from storehive.schemas import (
    HiveListItem,
    HiveSection,
    UpdateHiveSectionRequest,
    UpdateProductRequest,
)


def test_serializes_with_camel_case_keys():
    item = HiveListItem(id=1, name="North", code="HV002", is_deleted=False, hive_section_count=2)

    data = item.model_dump(by_alias=True)

    assert data == {
        "id": 1,
        "name": "North",
        "code": "HV002",
        "isDeleted": False,
        "hiveSectionCount": 2,
    }


def test_accepts_camel_case_input():
    request = UpdateHiveSectionRequest.model_validate({"name": "Bikes", "code": "SC001", "hiveId": 3})

    assert request.hive_id == 3


def test_accepts_snake_case_input():
    request = UpdateProductRequest.model_validate(
        {"name": "Road Bike", "code": "PR001", "category_id": 2, "manufacturer_code": "RB-1"}
    )

    assert request.category_id == 2
    assert request.manufacturer_code == "RB-1"
    assert request.price == 0.0


def test_missing_required_field_is_rejected():
    with pytest.raises(ValidationError):
        UpdateHiveSectionRequest.model_validate({"name": "Bikes", "code": "SC001"})


def test_hive_section_json_keys():
    section = HiveSection(
        id=1,
        name="Bikes",
        code="SC001",
        hive_id=2,
        is_deleted=False,
        last_updated=datetime(2024, 5, 1, tzinfo=timezone.utc),
    )

    data = section.model_dump(by_alias=True, mode="json")

    assert data["hiveId"] == 2
    assert data["lastUpdated"].startswith("2024-05-01")


@pytest.mark.parametrize("price", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_price_is_rejected(price):
    with pytest.raises(ValidationError):
        UpdateProductRequest(name="Road Bike", code="PR001", category_id=1, price=price)
