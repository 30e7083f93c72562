"""Domain model entities for shopledger.

These are pure data classes representing business concepts, independent of
database schema and of the JSON backup layout. Ledger entries form a tagged
union: the concrete class (``Sale``, ``Purchase``, ...) is the tag, and
reports dispatch on it with ``match``.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import ClassVar, Optional

from shopledger.utils.amount_parser import lenient_amount


class PartyType(str, Enum):
    """Counterparty collections a ledger entry can reference."""

    CLIENT = "client"
    VENDOR = "vendor"


def as_party_type(value) -> Optional[PartyType]:
    """Coerce ``value`` to a PartyType, or None when it names no collection."""
    try:
        return PartyType(value)
    except ValueError:
        return None


class EntryType(str, Enum):
    """Wire tags for the five ledger entry kinds."""

    SALE = "sale"
    PURCHASE = "purchase"
    EXPENSE = "expense"
    CASH_IN = "cash_in"
    CASH_OUT = "cash_out"


@dataclass(frozen=True)
class Company:
    """Company settings carried alongside the ledger."""

    name: str = "My Business"
    currency: str = "PKR"
    fiscal_year_start_month: int = 7


@dataclass(frozen=True)
class Party:
    """Client or vendor domain entity."""

    id: str
    name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    notes: Optional[str] = None
    opening_balance: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "opening_balance", lenient_amount(self.opening_balance))


@dataclass(frozen=True)
class PartyRef:
    """Reference from an entry to a party that may no longer exist."""

    party_type: PartyType
    party_id: str


@dataclass(frozen=True)
class LedgerEntry:
    """Fields shared by every ledger entry kind.

    Not instantiated directly; use one of the subclasses or ``make_entry``.
    """

    entry_type: ClassVar[EntryType]

    id: str
    date: str
    party_type: Optional[PartyType] = None
    party_id: Optional[str] = None
    ref: str = ""
    desc: str = ""
    category: str = ""
    amount: Decimal = Decimal("0")
    paid: Decimal = Decimal("0")
    method: str = ""

    def __post_init__(self) -> None:
        if self.party_type is not None:
            object.__setattr__(self, "party_type", PartyType(self.party_type))
        object.__setattr__(self, "amount", lenient_amount(self.amount))
        object.__setattr__(self, "paid", lenient_amount(self.paid))

    @property
    def outstanding(self) -> Decimal:
        """Unsettled part of the entry; negative when overpaid."""
        return self.amount - self.paid

    @property
    def party_ref(self) -> Optional[PartyRef]:
        """Party reference, or None when the entry names no party."""
        if self.party_type is None or not self.party_id:
            return None
        return PartyRef(self.party_type, self.party_id)


@dataclass(frozen=True)
class Sale(LedgerEntry):
    """Sale to a client; the unpaid part becomes receivable."""

    entry_type: ClassVar[EntryType] = EntryType.SALE


@dataclass(frozen=True)
class Purchase(LedgerEntry):
    """Purchase from a vendor; the unpaid part becomes payable."""

    entry_type: ClassVar[EntryType] = EntryType.PURCHASE


@dataclass(frozen=True)
class Expense(LedgerEntry):
    """Operating expense, assumed settled in cash."""

    entry_type: ClassVar[EntryType] = EntryType.EXPENSE


@dataclass(frozen=True)
class CashIn(LedgerEntry):
    """Cash received, usually a client receipt."""

    entry_type: ClassVar[EntryType] = EntryType.CASH_IN


@dataclass(frozen=True)
class CashOut(LedgerEntry):
    """Cash paid out, usually a vendor payment."""

    entry_type: ClassVar[EntryType] = EntryType.CASH_OUT


ENTRY_CLASSES: dict[EntryType, type[LedgerEntry]] = {
    EntryType.SALE: Sale,
    EntryType.PURCHASE: Purchase,
    EntryType.EXPENSE: Expense,
    EntryType.CASH_IN: CashIn,
    EntryType.CASH_OUT: CashOut,
}


def make_entry(entry_type: EntryType | str, **fields) -> LedgerEntry:
    """Build the ledger entry subclass for ``entry_type``.

    Raises:
        ValueError: If ``entry_type`` is not one of the five kinds
    """
    return ENTRY_CLASSES[EntryType(entry_type)](**fields)


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the whole record set at one point in time."""

    company: Company = field(default_factory=Company)
    clients: tuple[Party, ...] = ()
    vendors: tuple[Party, ...] = ()
    ledger: tuple[LedgerEntry, ...] = ()

    def parties(self, party_type: PartyType) -> tuple[Party, ...]:
        """Return the collection holding parties of ``party_type``."""
        if party_type == PartyType.CLIENT:
            return self.clients
        return self.vendors


@dataclass(frozen=True)
class LedgerTotals:
    """Global sums over the ledger."""

    sales: Decimal
    purchases: Decimal
    cogs: Decimal
    expenses: Decimal
    cash_in: Decimal
    cash_out: Decimal
    cash: Decimal
    receivable: Decimal
    payable: Decimal
    profit: Decimal


@dataclass(frozen=True)
class ReportLine:
    """Named figure in a report section."""

    name: str
    value: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """Assets, liabilities and the equity that balances them."""

    assets: tuple[ReportLine, ...]
    liabilities: tuple[ReportLine, ...]
    total_assets: Decimal
    total_liabilities: Decimal
    equity: Decimal


@dataclass(frozen=True)
class CashFlowStatement:
    """Cash movements grouped by source."""

    cash_from_sales: Decimal
    cash_to_suppliers: Decimal
    cash_to_expenses: Decimal
    net: Decimal


@dataclass(frozen=True)
class ProfitAndLoss:
    """Simple trading profit statement."""

    sales: Decimal
    cogs: Decimal
    expenses: Decimal
    profit: Decimal


@dataclass(frozen=True)
class PartyBalance:
    """Opening and current balance of one party."""

    party: Party
    opening_balance: Decimal
    balance: Decimal
