"""Shared pytest fixtures for shopledger tests."""

import tempfile
import os
from decimal import Decimal
import pytest

from shopledger.database.factories import create_sqlite_database
from shopledger.domain.entities import PartyType
from shopledger.domain.store import RecordStore
from shopledger.domain.party import PartyService
from shopledger.domain.entry import EntryService
from shopledger.domain.reports import ReportService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def store():
    """Create an empty record store."""
    return RecordStore()


@pytest.fixture
def party_service(store):
    """Create a PartyService over the test store."""
    return PartyService(store)


@pytest.fixture
def entry_service(store):
    """Create an EntryService over the test store."""
    return EntryService(store)


@pytest.fixture
def report_service(store):
    """Create a ReportService over the test store."""
    return ReportService(store)


@pytest.fixture
def sample_ledger(store, party_service, entry_service):
    """Populate the store with two clients, one vendor and one entry of each kind.

    Returns a dict of the created parties and entries keyed by short names.
    """
    ali = party_service.create_party(
        PartyType.CLIENT, name="Ali Store", phone="0300-1234567", address="Swabi",
        opening_balance=Decimal("12000"),
    )
    khan = party_service.create_party(PartyType.CLIENT, name="Khan Mart", address="Mardan")
    abc = party_service.create_party(
        PartyType.VENDOR, name="ABC Supplier", address="Peshawar",
        opening_balance=Decimal("8000"),
    )

    sale = entry_service.create_entry(
        "sale", date="2024-07-01", amount=Decimal("55000"), paid=Decimal("20000"),
        party_id=ali.id, ref="S-001", desc="Cement sale",
    )
    purchase = entry_service.create_entry(
        "purchase", date="2024-07-02", amount=Decimal("40000"), paid=Decimal("10000"),
        party_id=abc.id, ref="P-001", desc="Cement purchase", category="COGS",
    )
    expense = entry_service.create_entry(
        "expense", date="2024-07-03", amount=Decimal("3000"), ref="E-001",
        desc="Fuel", category="Fuel",
    )
    cash_in = entry_service.create_entry(
        "cash_in", date="2024-07-04", amount=Decimal("5000"), party_id=ali.id,
        ref="RCV-001", desc="Client payment",
    )
    cash_out = entry_service.create_entry(
        "cash_out", date="2024-07-05", amount=Decimal("7000"), party_id=abc.id,
        ref="PAY-001", desc="Vendor payment",
    )

    return {
        "ali": ali,
        "khan": khan,
        "abc": abc,
        "sale": sale,
        "purchase": purchase,
        "expense": expense,
        "cash_in": cash_in,
        "cash_out": cash_out,
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
