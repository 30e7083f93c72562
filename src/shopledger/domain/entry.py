"""Ledger entry domain service."""

from decimal import Decimal
from typing import Any, Optional

from shopledger.domain.entities import (
    EntryType,
    LedgerEntry,
    PartyType,
    make_entry,
)
from shopledger.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_entry_id,
    entry_not_found,
)
from shopledger.domain.party import new_id
from shopledger.domain.reports import ReportService
from shopledger.domain.store import RecordStore
from shopledger.utils.amount_parser import lenient_amount

DEFAULT_METHOD = "Cash"
PAYMENT_METHODS = ("Cash", "Bank", "JazzCash", "EasyPaisa", "Other")

CATEGORIES: dict[EntryType, tuple[str, ...]] = {
    EntryType.SALE: ("Sales",),
    EntryType.PURCHASE: ("COGS", "Asset", "Other"),
    EntryType.EXPENSE: (
        "Office",
        "Fuel",
        "Salary",
        "Rent",
        "Electricity",
        "Internet",
        "Transport",
        "Other",
    ),
    EntryType.CASH_IN: ("Receipt",),
    EntryType.CASH_OUT: ("Payment",),
}

# Listing modes and the entry kinds they show
ENTRY_MODES: dict[str, tuple[EntryType, ...]] = {
    "sale": (EntryType.SALE,),
    "purchase": (EntryType.PURCHASE,),
    "expense": (EntryType.EXPENSE,),
    "cash": (EntryType.CASH_IN, EntryType.CASH_OUT),
}

SETTLED_TYPES = (EntryType.EXPENSE, EntryType.CASH_IN, EntryType.CASH_OUT)


def party_type_for(entry_type: EntryType, party_id: Optional[str]) -> Optional[PartyType]:
    """Return the party collection an entry of ``entry_type`` refers to.

    Sales and receipts refer to clients, purchases and payments to vendors.
    Expenses, and entries without a party, refer to nothing.
    """
    if not party_id:
        return None
    if entry_type in (EntryType.SALE, EntryType.CASH_IN):
        return PartyType.CLIENT
    if entry_type in (EntryType.PURCHASE, EntryType.CASH_OUT):
        return PartyType.VENDOR
    return None


class EntryService:
    """Service for recording and querying ledger entries."""

    def __init__(self, store: RecordStore):
        """Initialize entry service.

        Args:
            store: Record store instance
        """
        self.store = store

    def create_entry(
        self,
        entry_type: EntryType,
        date: str,
        amount: Any,
        paid: Any = None,
        party_id: Optional[str] = None,
        ref: str = "",
        desc: str = "",
        category: Optional[str] = None,
        method: str = DEFAULT_METHOD,
        entry_id: Optional[str] = None,
    ) -> LedgerEntry:
        """Record a new ledger entry.

        Args:
            entry_type: Kind of entry
            date: ISO date (YYYY-MM-DD)
            amount: Full value of the transaction
            paid: Portion settled now. Defaults to the full amount for
                expenses and cash movements, and to zero for sales and
                purchases (credit).
            party_id: Optional client/vendor ID; ignored for expenses
            ref: External reference (invoice/bill number)
            desc: Description
            category: Category (defaults to the first category of the kind)
            method: Payment method
            entry_id: Optional ID (generated if not provided)

        Returns:
            The created entry

        Raises:
            ValidationError: If the entry type is unknown or date is missing
            ConflictError: If ``entry_id`` is already used
        """
        entry_type = self._entry_type(entry_type)
        if entry_id is not None and self.store.find_entry(entry_id) is not None:
            raise ConflictError(duplicate_entry_id(entry_id))

        amount = lenient_amount(amount)
        if paid is None:
            paid = amount if entry_type in SETTLED_TYPES else Decimal("0")

        party_type = party_type_for(entry_type, party_id)
        entry = make_entry(
            entry_type,
            id=entry_id or new_id(),
            date=date,
            party_type=party_type,
            party_id=party_id if party_type is not None else None,
            ref=(ref or "").strip(),
            desc=(desc or "").strip(),
            category=category if category is not None else CATEGORIES[entry_type][0],
            amount=amount,
            paid=paid,
            method=method or DEFAULT_METHOD,
        )
        return self.store.upsert_entry(entry)

    def get_entry(self, entry_id: str) -> Optional[LedgerEntry]:
        """Get a ledger entry by ID, or None if not found."""
        return self.store.find_entry(entry_id)

    def require_entry(self, entry_id: str) -> LedgerEntry:
        """Get a ledger entry by ID.

        Raises:
            NotFoundError: If the entry does not exist
        """
        entry = self.get_entry(entry_id)
        if entry is None:
            raise NotFoundError(entry_not_found(entry_id))
        return entry

    def update_entry(self, entry_id: str, **changes) -> LedgerEntry:
        """Update selected fields of an entry.

        Passing ``entry_type`` re-tags the entry; the party type is derived
        again from the resulting kind and party ID. When the new kind refers
        to the other party collection and no ``party_id`` is given, the party
        reference is dropped.

        Raises:
            NotFoundError: If the entry does not exist
            ValidationError: If the new entry type is unknown
        """
        entry = self.require_entry(entry_id)
        entry_type = self._entry_type(changes.pop("entry_type", entry.entry_type))

        fields = {
            "id": entry.id,
            "date": entry.date,
            "party_id": entry.party_id,
            "ref": entry.ref,
            "desc": entry.desc,
            "category": entry.category,
            "amount": entry.amount,
            "paid": entry.paid,
            "method": entry.method,
        }
        unknown = set(changes) - set(fields) - {"id"}
        if unknown:
            raise ValidationError(f"Unknown entry fields: {', '.join(sorted(unknown))}")
        changes.pop("id", None)
        fields.update(changes)

        party_type = party_type_for(entry_type, fields["party_id"])
        if "party_id" not in changes and party_type != entry.party_type:
            party_type = None
        if party_type is None:
            fields["party_id"] = None
        updated = make_entry(entry_type, party_type=party_type, **fields)
        return self.store.upsert_entry(updated)

    def delete_entry(self, entry_id: str) -> None:
        """Delete a ledger entry.

        Raises:
            NotFoundError: If the entry does not exist
        """
        if not self.store.remove_entry(entry_id):
            raise NotFoundError(entry_not_found(entry_id))

    def list_entries(
        self,
        mode: Optional[str] = None,
        query: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[LedgerEntry]:
        """List entries, newest first.

        Args:
            mode: Optional listing mode ("sale", "purchase", "expense" or
                "cash" for receipts and payments); None lists everything
            query: Optional case-insensitive text matched against reference,
                description, party name and category
            limit: Optional maximum number of entries

        Returns:
            Matching entries sorted by date descending. Entries with the same
            date keep their recorded order.
        """
        entries = self.filter_entries(mode=mode, query=query)
        entries.sort(key=lambda e: e.date, reverse=True)
        if limit is not None:
            entries = entries[:limit]
        return entries

    def filter_entries(
        self, mode: Optional[str] = None, query: Optional[str] = None
    ) -> list[LedgerEntry]:
        """Filter entries by mode and search text, keeping recorded order.

        Raises:
            ValidationError: If mode is not a known listing mode
        """
        if mode is not None and mode not in ENTRY_MODES:
            raise ValidationError(
                f"Unknown mode '{mode}'. Supported modes: {', '.join(ENTRY_MODES)}"
            )

        entries = list(self.store.list_entries())
        if mode is not None:
            kinds = ENTRY_MODES[mode]
            entries = [e for e in entries if e.entry_type in kinds]

        needle = (query or "").strip().lower()
        if needle:
            reports = ReportService(self.store)
            entries = [
                e
                for e in entries
                if needle in (e.ref or "").lower()
                or needle in (e.desc or "").lower()
                or needle in reports.party_name(e.party_type, e.party_id).lower()
                or needle in (e.category or "").lower()
            ]
        return entries

    @staticmethod
    def _entry_type(entry_type: Any) -> EntryType:
        try:
            return EntryType(entry_type)
        except ValueError:
            raise ValidationError(
                f"Unknown entry type '{entry_type}'. "
                f"Supported types: {', '.join(t.value for t in EntryType)}"
            )
