"""Tests for the JSON document codec."""

import json
from decimal import Decimal

import pytest

from src.application.ports.document_codec import (
    IMPORT_REQUIRED_COLLECTIONS,
    ImportFormatError,
)
from src.domain.models import AssetCategory, ExpenseMode, FinancialData
from src.domain.seed import build_seed_data
from src.infrastructure.document_schema import JsonDocumentCodec


def test_encode_uses_camel_case_keys_and_enum_values() -> None:
    """Exported documents should use the portable field names."""
    document = json.loads(JsonDocumentCodec().encode(build_seed_data()))

    assert set(document) == {
        "expenses",
        "recurringExpenses",
        "debts",
        "income",
        "assets",
        "incomeGoals",
        "expensePlans",
        "purchases",
    }
    debt = document["debts"][0]
    assert debt["originalAmount"] == 5000
    assert debt["interestRate"] == 5.5
    assert document["recurringExpenses"][0]["startDate"] == "2025-11"
    assert document["recurringExpenses"][0]["frequency"] == "monthly"
    assert document["expenses"][0]["mode"] == "Survival Mode"


def test_decode_round_trips_seed() -> None:
    """Decoding an encoded aggregate should give it back."""
    codec = JsonDocumentCodec()
    seed = build_seed_data()

    assert codec.decode(codec.encode(seed)) == seed


def test_decode_keeps_decimal_precision() -> None:
    """Amounts that floats cannot hold exactly should survive as strings."""
    codec = JsonDocumentCodec()
    raw = json.dumps(
        {
            "expenses": [],
            "debts": [],
            "income": [],
            "assets": [
                {
                    "id": "a1",
                    "name": "Fund",
                    "category": "Savings",
                    "amountInvested": "0.1000000000000000000001",
                    "currentValue": 12.3,
                    "date": "2025-01-01",
                }
            ],
        }
    )

    data = codec.decode(raw, required=IMPORT_REQUIRED_COLLECTIONS)

    asset = data.assets[0]
    assert asset.category is AssetCategory.SAVINGS
    assert asset.basket is None
    assert asset.current_value == Decimal("12.3")
    assert asset.amount_invested == Decimal("0.1000000000000000000001")
    exported = json.loads(codec.encode(data))
    assert exported["assets"][0]["amountInvested"] == "0.1000000000000000000001"


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        json.dumps({"expenses": []}),
    ],
)
def test_decode_rejects_malformed_documents(raw: str) -> None:
    """Non-JSON, non-object and incomplete documents are rejected."""
    with pytest.raises(ImportFormatError):
        JsonDocumentCodec().decode(raw)


def test_decode_rejects_invalid_records() -> None:
    """A record with an unknown mode or bad amount fails validation."""
    payload = json.loads(JsonDocumentCodec().encode(FinancialData()))
    payload["expenses"] = [
        {
            "id": "e1",
            "date": "2025-11-01",
            "category": "Food",
            "amount": "abc",
            "description": "",
            "mode": ExpenseMode.SURVIVAL.value,
        }
    ]

    with pytest.raises(ImportFormatError):
        JsonDocumentCodec().decode(json.dumps(payload))


def test_decode_ignores_unknown_fields() -> None:
    """Extra keys in records or at the top level are dropped."""
    payload = json.loads(JsonDocumentCodec().encode(build_seed_data()))
    payload["version"] = 2
    payload["debts"][0]["notes"] = "extra"

    data = JsonDocumentCodec().decode(json.dumps(payload))

    assert data.debts == build_seed_data().debts


@pytest.mark.parametrize("start_date", ["2025-13", "", "2025-9", "2025-12-01"])
def test_decode_rejects_non_canonical_start_month(start_date: str) -> None:
    """Recurring templates must carry a zero-padded ``YYYY-MM`` start month."""
    payload = json.loads(JsonDocumentCodec().encode(build_seed_data()))
    payload["recurringExpenses"][0]["startDate"] = start_date

    with pytest.raises(ImportFormatError):
        JsonDocumentCodec().decode(json.dumps(payload))


@pytest.mark.parametrize(
    "collection, record",
    [
        ("incomeGoals", {"id": "ig1", "month": "2025-00", "amount": 100}),
        (
            "expensePlans",
            {
                "id": "ep1",
                "month": "next month",
                "mode": ExpenseMode.SURVIVAL.value,
                "amount": 100,
            },
        ),
    ],
)
def test_decode_rejects_invalid_plan_months(collection: str, record: dict) -> None:
    """Goals and plans are keyed by a valid month."""
    payload = json.loads(JsonDocumentCodec().encode(FinancialData()))
    payload[collection] = [record]

    with pytest.raises(ImportFormatError):
        JsonDocumentCodec().decode(json.dumps(payload))
