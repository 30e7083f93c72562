"""Ledger aggregation and reporting domain service.

Every figure is recomputed from a fresh snapshot of the record store on each
call. Nothing here raises on malformed data: amounts were already coerced by
the entities, and a missing party simply contributes nothing.
"""

from collections import defaultdict
from decimal import Decimal
from typing import Optional

from shopledger.domain.entities import (
    BalanceSheet,
    CashFlowStatement,
    CashIn,
    CashOut,
    Expense,
    LedgerTotals,
    PartyBalance,
    PartyType,
    ProfitAndLoss,
    Purchase,
    ReportLine,
    Sale,
    Snapshot,
    as_party_type,
)
from shopledger.domain.store import RecordStore
from shopledger.utils.logging_utils import get_logger

logger = get_logger(__name__)

ZERO = Decimal("0")
COGS_CATEGORY = "COGS"
UNKNOWN_PARTY_NAME = "-"


def _balance_change(party_type: PartyType, entry) -> Decimal:
    """Return how ``entry`` moves the balance of a party of ``party_type``."""
    match entry:
        case Sale() if party_type == PartyType.CLIENT:
            return entry.outstanding
        case CashIn() if party_type == PartyType.CLIENT:
            return -entry.amount
        case Purchase() if party_type == PartyType.VENDOR:
            return entry.outstanding
        case CashOut() if party_type == PartyType.VENDOR:
            return -entry.amount
        case _:
            return ZERO


def _party_balances(snapshot: Snapshot, party_type: PartyType) -> dict[str, Decimal]:
    """Compute balances for every existing party of a type in one pass."""
    balances = {p.id: p.opening_balance for p in snapshot.parties(party_type)}
    for entry in snapshot.ledger:
        if entry.party_type != party_type or entry.party_id not in balances:
            continue
        balances[entry.party_id] += _balance_change(party_type, entry)
    return balances


class ReportService:
    """Service computing balances, totals and financial statements."""

    def __init__(self, store: RecordStore):
        """Initialize report service.

        Args:
            store: Record store to report on
        """
        self.store = store

    def balance_of(self, party_type: PartyType, party_id: Optional[str]) -> Decimal:
        """Get the running balance of a client or vendor.

        For clients this is what they owe the business; for vendors it is
        what the business owes them. Negative values mean an overpayment
        and are returned unchanged. An unknown party has a balance of zero.

        Args:
            party_type: Party collection to look in
            party_id: Party ID

        Returns:
            Opening balance plus outstanding credit minus settlements
        """
        party_type = as_party_type(party_type)
        party = self.store.find_party(party_type, party_id)
        if party is None:
            logger.debug("Balance requested for unknown party %s %s", party_type, party_id)
            return ZERO

        balance = party.opening_balance
        for entry in self.store.snapshot().ledger:
            if entry.party_type == party_type and entry.party_id == party_id:
                balance += _balance_change(party_type, entry)
        return balance

    def party_name(self, party_type: Optional[PartyType], party_id: Optional[str]) -> str:
        """Get a party's display name, or "-" when it cannot be resolved."""
        party = self.store.find_party(party_type, party_id)
        if party is None or not party.name:
            return UNKNOWN_PARTY_NAME
        return party.name

    def totals(self) -> LedgerTotals:
        """Aggregate sales, purchases, cash and balances over the whole ledger."""
        snapshot = self.store.snapshot()
        sales = purchases = cogs = expenses = ZERO
        cash_in = cash_out = paid_on_sales = paid_on_purchases = ZERO

        for entry in snapshot.ledger:
            match entry:
                case Sale():
                    sales += entry.amount
                    paid_on_sales += entry.paid
                case Purchase():
                    purchases += entry.amount
                    paid_on_purchases += entry.paid
                    if entry.category == COGS_CATEGORY:
                        cogs += entry.amount
                case Expense():
                    expenses += entry.amount
                case CashIn():
                    cash_in += entry.amount
                case CashOut():
                    cash_out += entry.amount

        cash = (paid_on_sales + cash_in) - (paid_on_purchases + expenses + cash_out)
        receivable = sum(_party_balances(snapshot, PartyType.CLIENT).values(), ZERO)
        payable = sum(_party_balances(snapshot, PartyType.VENDOR).values(), ZERO)

        return LedgerTotals(
            sales=sales,
            purchases=purchases,
            cogs=cogs,
            expenses=expenses,
            cash_in=cash_in,
            cash_out=cash_out,
            cash=cash,
            receivable=receivable,
            payable=payable,
            profit=sales - cogs - expenses,
        )

    def balance_sheet(self) -> BalanceSheet:
        """Build the balance sheet from current totals."""
        totals = self.totals()
        assets = (
            ReportLine("Cash", totals.cash),
            ReportLine("Accounts Receivable (Clients)", totals.receivable),
        )
        liabilities = (ReportLine("Accounts Payable (Vendors)", totals.payable),)
        total_assets = sum((line.value for line in assets), ZERO)
        total_liabilities = sum((line.value for line in liabilities), ZERO)
        return BalanceSheet(
            assets=assets,
            liabilities=liabilities,
            total_assets=total_assets,
            total_liabilities=total_liabilities,
            equity=total_assets - total_liabilities,
        )

    def cash_flow(self) -> CashFlowStatement:
        """Build the cash flow statement.

        The net figure always equals ``totals().cash``.
        """
        cash_from_sales = cash_to_suppliers = cash_to_expenses = ZERO
        for entry in self.store.snapshot().ledger:
            match entry:
                case Sale():
                    cash_from_sales += entry.paid
                case CashIn():
                    cash_from_sales += entry.amount
                case Purchase():
                    cash_to_suppliers += entry.paid
                case CashOut():
                    cash_to_suppliers += entry.amount
                case Expense():
                    cash_to_expenses += entry.amount

        return CashFlowStatement(
            cash_from_sales=cash_from_sales,
            cash_to_suppliers=cash_to_suppliers,
            cash_to_expenses=cash_to_expenses,
            net=cash_from_sales - cash_to_suppliers - cash_to_expenses,
        )

    def profit_and_loss(self) -> ProfitAndLoss:
        """Build the simple trading profit statement.

        Only purchases categorised exactly as "COGS" count as cost of goods
        sold; other purchases are treated as asset purchases.
        """
        totals = self.totals()
        return ProfitAndLoss(
            sales=totals.sales,
            cogs=totals.cogs,
            expenses=totals.expenses,
            profit=totals.profit,
        )

    def party_balances(self, party_type: PartyType) -> list[PartyBalance]:
        """List opening and current balances for every party of a type.

        An unknown party type lists nothing.
        """
        party_type = as_party_type(party_type)
        if party_type is None:
            return []
        snapshot = self.store.snapshot()
        balances = _party_balances(snapshot, party_type)
        return [
            PartyBalance(
                party=party,
                opening_balance=party.opening_balance,
                balance=balances[party.id],
            )
            for party in snapshot.parties(party_type)
        ]
