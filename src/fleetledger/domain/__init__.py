"""Domain layer for fleetledger application."""

from fleetledger.domain.chart import ChartOfAccounts
from fleetledger.domain.transaction import TransactionService
from fleetledger.domain.csv_import import CSVImportService
from fleetledger.domain.journal_import import JournalImportService
from fleetledger.domain.journal import JournalService
from fleetledger.domain.summary import ReportService

__all__ = [
    "ChartOfAccounts",
    "TransactionService",
    "CSVImportService",
    "JournalImportService",
    "JournalService",
    "ReportService",
]
