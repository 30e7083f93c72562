"""Tests for JSON backup export and import."""

import json
from decimal import Decimal

import pytest

from shopledger.domain.backup import BackupService, snapshot_to_dict
from shopledger.domain.entities import Company, Party, PartyType, Sale, Snapshot
from shopledger.domain.errors import ValidationError


@pytest.fixture
def backup_service():
    return BackupService()


def test_round_trip(sample_ledger, store, backup_service):
    store.update_company(name="Demo Trading", currency="PKR")
    snapshot = store.snapshot()

    assert backup_service.import_json(backup_service.export_json(snapshot)) == snapshot


def test_round_trip_fractional_amounts(backup_service):
    snapshot = Snapshot(
        clients=(
            Party(id="c1", name="C", opening_balance=Decimal("10.10")),
            Party(id="c2", name="D", opening_balance=Decimal("12345678901234.5678")),
        ),
        ledger=(
            Sale(id="e1", date="2024-01-01", party_type=PartyType.CLIENT, party_id="c1",
                 amount=Decimal("99.99"), paid=Decimal("0.1")),
            Sale(id="e2", date="2024-01-02", party_type=PartyType.CLIENT, party_id="c2",
                 amount=Decimal("98765432109876.0001"), paid=Decimal("0.0001")),
        ),
    )

    text = backup_service.export_json(snapshot)

    assert "12345678901234.5678" in text
    assert backup_service.import_json(text) == snapshot


def test_export_layout(sample_ledger, store):
    data = snapshot_to_dict(store.snapshot())

    assert set(data) == {"company", "clients", "vendors", "ledger"}
    assert data["company"] == {"name": "My Business", "currency": "PKR", "fiscalYearStartMonth": 7}
    sale = data["ledger"][0]
    assert sale["type"] == "sale"
    assert sale["partyType"] == "client"
    assert sale["amount"] == 55000
    assert sale["paid"] == 20000
    assert data["clients"][0]["openingBalance"] == 12000


def test_import_original_style_file(backup_service):
    text = json.dumps(
        {
            "company": {"name": "Shop", "currency": "PKR", "fiscalYearStartMonth": 7},
            "users": [{"username": "admin", "password": "x", "role": "admin"}],
            "clients": [{"id": "c1", "name": "Ali", "openingBalance": "oops"}],
            "vendors": [],
            "ledger": [
                {"id": "e1", "date": "2024-01-01", "type": "sale", "partyType": "client",
                 "partyId": "c1", "amount": 100, "paid": None},
                {"id": "e2", "date": "2024-01-02", "type": "expense", "partyType": None,
                 "partyId": None, "amount": "25.5"},
            ],
        }
    )

    snapshot = backup_service.import_json(text)

    assert snapshot.company == Company(name="Shop")
    assert snapshot.clients[0].opening_balance == Decimal("0")
    assert snapshot.ledger[0].paid == Decimal("0")
    assert snapshot.ledger[1].amount == Decimal("25.5")
    assert snapshot.ledger[1].ref == ""


@pytest.mark.parametrize("missing", ["company", "clients", "vendors", "ledger"])
def test_import_rejects_missing_keys(backup_service, missing):
    data = {"company": {}, "clients": [], "vendors": [], "ledger": []}
    del data[missing]

    with pytest.raises(ValidationError, match=missing):
        backup_service.import_json(json.dumps(data))


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '{"company": {}, "clients": {}, "vendors": [], "ledger": []}',
        '{"company": [], "clients": [], "vendors": [], "ledger": []}',
        '{"company": {}, "clients": [1], "vendors": [], "ledger": []}',
    ],
)
def test_import_rejects_malformed(backup_service, text):
    with pytest.raises(ValidationError):
        backup_service.import_json(text)


def test_import_rejects_unknown_entry_type(backup_service):
    text = json.dumps(
        {"company": {}, "clients": [], "vendors": [],
         "ledger": [{"id": "e1", "date": "2024-01-01", "type": "refund"}]}
    )
    with pytest.raises(ValidationError, match="unknown type"):
        backup_service.import_json(text)


def test_import_rejects_unknown_party_type(backup_service):
    text = json.dumps(
        {"company": {}, "clients": [], "vendors": [],
         "ledger": [{"id": "e1", "date": "2024-01-01", "type": "sale", "partyType": "staff"}]}
    )
    with pytest.raises(ValidationError, match="unknown party type"):
        backup_service.import_json(text)


@pytest.mark.parametrize(
    "key,records",
    [
        ("clients", [{"id": "c1", "name": "A"}, {"id": "c1", "name": "B"}]),
        ("vendors", [{"id": "v1", "name": "A"}, {"id": "v1", "name": "B"}]),
        ("ledger", [{"id": "e1", "date": "2024-01-01", "type": "expense"},
                    {"id": "e1", "date": "2024-01-02", "type": "expense"}]),
    ],
)
def test_import_rejects_duplicate_ids(backup_service, key, records):
    data = {"company": {}, "clients": [], "vendors": [], "ledger": []}
    data[key] = records

    with pytest.raises(ValidationError, match=f"duplicate {key} id"):
        backup_service.import_json(json.dumps(data))


def test_import_allows_same_id_across_party_collections(backup_service):
    data = {"company": {}, "clients": [{"id": "p1", "name": "A"}],
            "vendors": [{"id": "p1", "name": "B"}], "ledger": []}

    snapshot = backup_service.import_json(json.dumps(data))

    assert snapshot.clients[0].id == snapshot.vendors[0].id == "p1"
