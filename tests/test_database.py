"""Tests for the SQLAlchemy persistence layer."""

from decimal import Decimal

import pytest

from shopledger.database.factories import create_sqlite_database
from shopledger.domain.entities import Company, Expense, PartyType, Snapshot
from shopledger.domain.errors import ConflictError
from shopledger.domain.store import RecordStore


def test_empty_database_loads_default_snapshot(temp_db):
    assert temp_db.load_snapshot() == Snapshot()


def test_save_and_load_round_trip(temp_db, sample_ledger, store):
    store.update_company(name="Demo Trading", fiscal_year_start_month=1)
    snapshot = store.snapshot()

    temp_db.save_snapshot(snapshot)
    temp_db.disconnect()

    reopened = create_sqlite_database(database_path=temp_db.database_path)
    try:
        assert reopened.load_snapshot() == snapshot
    finally:
        reopened.disconnect()


def test_save_replaces_previous_records(temp_db, sample_ledger, store):
    temp_db.save_snapshot(store.snapshot())

    store.remove_entry(sample_ledger["sale"].id)
    store.remove_party(PartyType.CLIENT, sample_ledger["khan"].id)
    temp_db.save_snapshot(store.snapshot())

    loaded = temp_db.load_snapshot()
    assert len(loaded.ledger) == 4
    assert [c.name for c in loaded.clients] == ["Ali Store"]


def test_collection_order_preserved(temp_db):
    store = RecordStore(company=Company(currency="USD"))
    for index, day in enumerate(["2024-03-01", "2024-01-01", "2024-02-01"]):
        store.upsert_entry(Expense(id=f"e{index}", date=day, amount=Decimal(index)))
    temp_db.save_snapshot(store.snapshot())

    assert [e.id for e in temp_db.load_snapshot().ledger] == ["e0", "e1", "e2"]


def test_dangling_references_survive_storage(temp_db, sample_ledger, store):
    store.remove_party(PartyType.VENDOR, sample_ledger["abc"].id)
    temp_db.save_snapshot(store.snapshot())

    loaded = temp_db.load_snapshot()
    assert loaded.vendors == ()
    assert loaded.ledger[1].party_id == sample_ledger["abc"].id


def test_duplicate_entry_ids_rejected(temp_db):
    snapshot = Snapshot(
        ledger=(
            Expense(id="dup", date="2024-01-01"),
            Expense(id="dup", date="2024-01-02"),
        )
    )
    with pytest.raises(ConflictError):
        temp_db.save_snapshot(snapshot)

    assert temp_db.load_snapshot() == Snapshot()


def test_database_path_from_environment(monkeypatch, tmp_path):
    db_path = tmp_path / "env.db"
    monkeypatch.setenv("SHOPLEDGER_DB_PATH", str(db_path))

    db = create_sqlite_database()
    try:
        assert db.database_url == f"sqlite:///{db_path}"
    finally:
        db.disconnect()
