"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the table layout can change
without touching the reporting code.
"""

from typing import Optional

from shopledger.domain import entities as domain
from shopledger.database.models import (
    Company as ORMCompany,
    Party as ORMParty,
    LedgerEntry as ORMLedgerEntry,
)


def company_to_domain(orm_company: Optional[ORMCompany]) -> domain.Company:
    """Convert SQLAlchemy Company model to domain Company entity."""
    if orm_company is None:
        return domain.Company()
    return domain.Company(
        name=orm_company.name,
        currency=orm_company.currency,
        fiscal_year_start_month=orm_company.fiscal_year_start_month,
    )


def company_to_orm(company: domain.Company) -> ORMCompany:
    """Convert domain Company entity to a new SQLAlchemy Company model."""
    return ORMCompany(
        id=1,
        name=company.name,
        currency=company.currency,
        fiscal_year_start_month=company.fiscal_year_start_month,
    )


def party_to_domain(orm_party: ORMParty) -> domain.Party:
    """Convert SQLAlchemy Party model to domain Party entity."""
    return domain.Party(
        id=orm_party.party_id,
        name=orm_party.name,
        phone=orm_party.phone,
        address=orm_party.address,
        notes=orm_party.notes,
        opening_balance=orm_party.opening_balance,
    )


def party_to_orm(party: domain.Party, kind: domain.PartyType, position: int) -> ORMParty:
    """Convert domain Party entity to a new SQLAlchemy Party model."""
    return ORMParty(
        kind=domain.PartyType(kind).value,
        party_id=party.id,
        position=position,
        name=party.name,
        phone=party.phone,
        address=party.address,
        notes=party.notes,
        opening_balance=party.opening_balance,
    )


def entry_to_domain(orm_entry: ORMLedgerEntry) -> domain.LedgerEntry:
    """Convert SQLAlchemy LedgerEntry model to the matching domain entry class."""
    party_type = None
    if orm_entry.party_type is not None:
        party_type = domain.PartyType(orm_entry.party_type)
    return domain.make_entry(
        orm_entry.entry_type,
        id=orm_entry.entry_id,
        date=orm_entry.date,
        party_type=party_type,
        party_id=orm_entry.party_id,
        ref=orm_entry.ref,
        desc=orm_entry.desc,
        category=orm_entry.category,
        amount=orm_entry.amount,
        paid=orm_entry.paid,
        method=orm_entry.method,
    )


def entry_to_orm(entry: domain.LedgerEntry, position: int) -> ORMLedgerEntry:
    """Convert domain ledger entry to a new SQLAlchemy LedgerEntry model."""
    return ORMLedgerEntry(
        entry_id=entry.id,
        position=position,
        date=entry.date,
        entry_type=entry.entry_type.value,
        party_type=entry.party_type.value if entry.party_type is not None else None,
        party_id=entry.party_id,
        ref=entry.ref,
        desc=entry.desc,
        category=entry.category,
        amount=entry.amount,
        paid=entry.paid,
        method=entry.method,
    )
