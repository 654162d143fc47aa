"""Shared pytest fixtures for fleetledger tests."""

from pathlib import Path

import pytest
import structlog

from fleetledger.database.factories import create_memory_store
from fleetledger.domain.chart import ChartOfAccounts
from fleetledger.domain.csv_import import CSVImportService
from fleetledger.domain.journal import JournalService
from fleetledger.domain.journal_import import JournalImportService
from fleetledger.domain.summary import ReportService
from fleetledger.domain.transaction import TransactionService


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop logging configuration left behind by CLI invocations."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def store():
    """Create an in-memory transaction store for testing."""
    store = create_memory_store()
    store.connect()
    store.initialize_schema()

    yield store

    store.disconnect()


@pytest.fixture
def chart():
    """Return the default chart of accounts."""
    return ChartOfAccounts.default()


@pytest.fixture
def transaction_service(store):
    """Create a TransactionService with a temporary store."""
    return TransactionService(store)


@pytest.fixture
def import_service(store):
    """Create a CSVImportService with a temporary store."""
    return CSVImportService(store)


@pytest.fixture
def journal_import_service():
    """Create a JournalImportService."""
    return JournalImportService()


@pytest.fixture
def journal_service(chart):
    """Create a JournalService over the default chart."""
    return JournalService(chart)


@pytest.fixture
def report_service(chart):
    """Create a ReportService over the default chart."""
    return ReportService(chart)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
