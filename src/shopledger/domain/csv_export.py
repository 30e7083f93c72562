"""CSV export of ledger entries."""

from decimal import Decimal
from typing import Iterable, Optional

from shopledger.domain.entities import LedgerEntry
from shopledger.domain.entry import EntryService
from shopledger.domain.reports import ReportService
from shopledger.domain.store import RecordStore

CSV_HEADER = ("date", "type", "party", "ref", "desc", "category", "amount", "paid", "method")


def quote(value: Optional[str]) -> str:
    """Wrap a text field in double quotes, doubling embedded quotes."""
    text = "" if value is None else str(value)
    return '"' + text.replace('"', '""') + '"'


def format_number(value: Decimal) -> str:
    """Format an amount without exponent or trailing zeros (1000, 12.5)."""
    if value == value.to_integral_value():
        return str(int(value))
    return format(value.normalize(), "f")


class CSVExportService:
    """Service for exporting ledger entries as CSV text."""

    def __init__(self, store: RecordStore):
        """Initialize CSV export service.

        Args:
            store: Record store instance
        """
        self.store = store

    def export_entries(self, mode: Optional[str] = None, query: Optional[str] = None) -> str:
        """Export entries matching a listing mode and search text.

        Entries are written in recorded order. Text columns are always
        quoted; date, type, amount and paid are written bare.

        Args:
            mode: Optional listing mode ("sale", "purchase", "expense", "cash")
            query: Optional search text

        Returns:
            CSV text with a header row, lines separated by newlines
        """
        entries = EntryService(self.store).filter_entries(mode=mode, query=query)
        return self.format_entries(entries)

    def format_entries(self, entries: Iterable[LedgerEntry]) -> str:
        """Format the given entries as CSV text."""
        reports = ReportService(self.store)
        lines = [",".join(CSV_HEADER)]
        for entry in entries:
            lines.append(
                ",".join(
                    [
                        entry.date,
                        entry.entry_type.value,
                        quote(reports.party_name(entry.party_type, entry.party_id)),
                        quote(entry.ref),
                        quote(entry.desc),
                        quote(entry.category),
                        format_number(entry.amount),
                        format_number(entry.paid),
                        quote(entry.method),
                    ]
                )
            )
        return "\n".join(lines)
