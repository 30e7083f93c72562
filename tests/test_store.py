"""Tests for the in-memory record store."""

from decimal import Decimal

import pytest

from shopledger.domain.entities import Expense, Party, PartyType, Sale
from shopledger.domain.errors import ValidationError
from shopledger.domain.store import RecordStore


def test_upsert_party_appends_then_replaces_in_place(store):
    store.upsert_party(PartyType.CLIENT, Party(id="c1", name="First"))
    store.upsert_party(PartyType.CLIENT, Party(id="c2", name="Second"))
    store.upsert_party(PartyType.CLIENT, Party(id="c1", name="First Renamed"))

    assert [p.name for p in store.list_clients()] == ["First Renamed", "Second"]
    assert store.list_vendors() == ()


def test_upsert_party_requires_name(store):
    with pytest.raises(ValidationError):
        store.upsert_party(PartyType.VENDOR, Party(id="v1", name="  "))


def test_find_party_not_found(store):
    store.upsert_party(PartyType.CLIENT, Party(id="c1", name="Client"))

    assert store.find_party(PartyType.CLIENT, "c1").name == "Client"
    assert store.find_party(PartyType.VENDOR, "c1") is None
    assert store.find_party(PartyType.CLIENT, "missing") is None
    assert store.find_party(None, "c1") is None
    assert store.find_party("staff", "c1") is None
    assert store.find_party(PartyType.CLIENT, None) is None


def test_remove_party_keeps_entries(store):
    store.upsert_party(PartyType.CLIENT, Party(id="c1", name="Client"))
    store.upsert_entry(
        Sale(id="e1", date="2024-01-01", party_type=PartyType.CLIENT, party_id="c1", amount=Decimal("10"))
    )

    assert store.remove_party(PartyType.CLIENT, "c1") is True
    assert store.remove_party(PartyType.CLIENT, "c1") is False
    assert store.find_entry("e1").party_id == "c1"


def test_upsert_entry_requires_date(store):
    with pytest.raises(ValidationError):
        store.upsert_entry(Sale(id="e1", date=""))


def test_odd_entries_stored_as_given(store):
    odd = Expense(id="e1", date="2024-01-01", party_type=PartyType.VENDOR, party_id="v9")
    store.upsert_entry(odd)

    assert store.list_entries() == (odd,)


def test_remove_entry(store):
    store.upsert_entry(Sale(id="e1", date="2024-01-01"))

    assert store.remove_entry("e1") is True
    assert store.remove_entry("e1") is False
    assert store.list_entries() == ()


def test_snapshot_is_immutable_copy(store):
    store.upsert_entry(Sale(id="e1", date="2024-01-01"))
    snapshot = store.snapshot()
    store.upsert_entry(Sale(id="e2", date="2024-01-02"))

    assert len(snapshot.ledger) == 1
    assert isinstance(snapshot.ledger, tuple)


def test_from_snapshot_round_trip(sample_ledger, store):
    rebuilt = RecordStore.from_snapshot(store.snapshot())
    assert rebuilt.snapshot() == store.snapshot()


def test_update_company(store):
    company = store.update_company(name="Demo Trading")

    assert company.name == "Demo Trading"
    assert company.currency == "PKR"
    assert store.snapshot().company == company
