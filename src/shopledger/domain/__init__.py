"""Domain layer for shopledger application."""

from shopledger.domain.store import RecordStore
from shopledger.domain.reports import ReportService
from shopledger.domain.party import PartyService
from shopledger.domain.entry import EntryService
from shopledger.domain.backup import BackupService
from shopledger.domain.csv_export import CSVExportService

__all__ = [
    "RecordStore",
    "ReportService",
    "PartyService",
    "EntryService",
    "BackupService",
    "CSVExportService",
]
