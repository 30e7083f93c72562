"""JSON backup export and import.

The backup file holds the whole record set::

    {
      "company": {"name": ..., "currency": ..., "fiscalYearStartMonth": ...},
      "clients": [{"id", "name", "phone", "address", "openingBalance", "notes"}],
      "vendors": [...same shape...],
      "ledger": [{"id", "date", "type", "partyType", "partyId", "ref",
                  "desc", "category", "amount", "paid", "method"}]
    }

Import validates the structure eagerly and raises before any record store
is built, so reports never see a half-valid file.
"""

from collections import Counter
from decimal import Decimal
from typing import Any

import simplejson as json

from shopledger.domain.entities import (
    Company,
    EntryType,
    LedgerEntry,
    Party,
    PartyType,
    Snapshot,
    make_entry,
)
from shopledger.domain.errors import (
    ValidationError,
    duplicate_snapshot_ids,
    missing_snapshot_keys,
)
from shopledger.utils.logging_utils import get_logger

logger = get_logger(__name__)

REQUIRED_KEYS = ("company", "clients", "vendors", "ledger")


def _number(value: Decimal) -> int | Decimal:
    """Convert a Decimal to the JSON number that reads back as the same value.

    Whole amounts are written without a fraction (``55000``); others are
    written digit for digit.
    """
    if value == value.to_integral_value():
        return int(value)
    return value


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _optional_text(value: Any) -> str | None:
    return None if value is None else str(value)


def company_to_dict(company: Company) -> dict[str, Any]:
    return {
        "name": company.name,
        "currency": company.currency,
        "fiscalYearStartMonth": company.fiscal_year_start_month,
    }


def company_from_dict(data: dict[str, Any]) -> Company:
    defaults = Company()
    month = data.get("fiscalYearStartMonth", defaults.fiscal_year_start_month)
    try:
        month = int(month)
    except (TypeError, ValueError):
        month = defaults.fiscal_year_start_month
    return Company(
        name=_text(data.get("name")) or defaults.name,
        currency=_text(data.get("currency")) or defaults.currency,
        fiscal_year_start_month=month,
    )


def party_to_dict(party: Party) -> dict[str, Any]:
    return {
        "id": party.id,
        "name": party.name,
        "phone": party.phone,
        "address": party.address,
        "openingBalance": _number(party.opening_balance),
        "notes": party.notes,
    }


def party_from_dict(data: dict[str, Any]) -> Party:
    return Party(
        id=_text(data.get("id")),
        name=_text(data.get("name")),
        phone=_optional_text(data.get("phone")),
        address=_optional_text(data.get("address")),
        notes=_optional_text(data.get("notes")),
        opening_balance=data.get("openingBalance"),
    )


def entry_to_dict(entry: LedgerEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "date": entry.date,
        "type": entry.entry_type.value,
        "partyType": entry.party_type.value if entry.party_type is not None else None,
        "partyId": entry.party_id,
        "ref": entry.ref,
        "desc": entry.desc,
        "category": entry.category,
        "amount": _number(entry.amount),
        "paid": _number(entry.paid),
        "method": entry.method,
    }


def entry_from_dict(data: dict[str, Any]) -> LedgerEntry:
    """Build a ledger entry from its backup representation.

    Raises:
        ValidationError: If the entry type or party type is not recognised
    """
    entry_id = _text(data.get("id"))
    try:
        entry_type = EntryType(data.get("type"))
    except ValueError:
        raise ValidationError(f"Entry '{entry_id}' has unknown type {data.get('type')!r}")

    party_type = data.get("partyType")
    if party_type is not None:
        try:
            party_type = PartyType(party_type)
        except ValueError:
            raise ValidationError(f"Entry '{entry_id}' has unknown party type {party_type!r}")

    return make_entry(
        entry_type,
        id=entry_id,
        date=_text(data.get("date")),
        party_type=party_type,
        party_id=_optional_text(data.get("partyId")),
        ref=_text(data.get("ref")),
        desc=_text(data.get("desc")),
        category=_text(data.get("category")),
        amount=data.get("amount"),
        paid=data.get("paid"),
        method=_text(data.get("method")),
    )


def snapshot_to_dict(snapshot: Snapshot) -> dict[str, Any]:
    return {
        "company": company_to_dict(snapshot.company),
        "clients": [party_to_dict(p) for p in snapshot.clients],
        "vendors": [party_to_dict(p) for p in snapshot.vendors],
        "ledger": [entry_to_dict(e) for e in snapshot.ledger],
    }


def snapshot_from_dict(data: Any) -> Snapshot:
    """Validate a decoded backup payload and build a snapshot from it.

    Raises:
        ValidationError: If required sections are missing or malformed, or
            records in one collection share an ID
    """
    if not isinstance(data, dict):
        raise ValidationError("Invalid backup file: expected a JSON object")

    missing = [key for key in REQUIRED_KEYS if key not in data]
    if missing:
        raise ValidationError(missing_snapshot_keys(missing))

    if not isinstance(data["company"], dict):
        raise ValidationError("Invalid backup file: 'company' must be an object")
    for key in ("clients", "vendors", "ledger"):
        if not isinstance(data[key], list):
            raise ValidationError(f"Invalid backup file: '{key}' must be a list")
        for index, item in enumerate(data[key]):
            if not isinstance(item, dict):
                raise ValidationError(
                    f"Invalid backup file: '{key}' item {index} must be an object"
                )

    snapshot = Snapshot(
        company=company_from_dict(data["company"]),
        clients=tuple(party_from_dict(p) for p in data["clients"]),
        vendors=tuple(party_from_dict(p) for p in data["vendors"]),
        ledger=tuple(entry_from_dict(e) for e in data["ledger"]),
    )
    for key in ("clients", "vendors", "ledger"):
        counts = Counter(record.id for record in getattr(snapshot, key))
        duplicates = [record_id for record_id, count in counts.items() if count > 1]
        if duplicates:
            raise ValidationError(duplicate_snapshot_ids(key, duplicates))
    return snapshot


class BackupService:
    """Service for exporting and importing JSON backups."""

    def export_json(self, snapshot: Snapshot, indent: int = 2) -> str:
        """Serialize a snapshot to backup JSON text."""
        text = json.dumps(
            snapshot_to_dict(snapshot), indent=indent, ensure_ascii=False, use_decimal=True
        )
        logger.info(
            "Exported %d clients, %d vendors, %d entries",
            len(snapshot.clients),
            len(snapshot.vendors),
            len(snapshot.ledger),
        )
        return text

    def import_json(self, text: str) -> Snapshot:
        """Parse backup JSON text into a snapshot.

        Raises:
            ValidationError: If the text is not valid JSON or not a backup
        """
        try:
            data = json.loads(text, use_decimal=True)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid backup file: {e}")

        snapshot = snapshot_from_dict(data)
        logger.info(
            "Imported %d clients, %d vendors, %d entries",
            len(snapshot.clients),
            len(snapshot.vendors),
            len(snapshot.ledger),
        )
        return snapshot
