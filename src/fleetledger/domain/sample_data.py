"""Sample fleet transactions for demos and tests."""

from datetime import date
from decimal import Decimal

from fleetledger.domain.chart import ACCOUNTS_PAYABLE
from fleetledger.domain.entities import Transaction, TransactionCategory

SAMPLE_TRANSACTIONS = [
    Transaction(
        id="TX001",
        date=date(2024, 6, 1),
        description="Rental Income - Inv #1001",
        category=TransactionCategory.REVENUE,
        amount=Decimal("450000"),
        reference="INV-1001",
    ),
    Transaction(
        id="TX002",
        date=date(2024, 6, 2),
        description="Purchase Parts (Tires) - Mitra Motor",
        category=TransactionCategory.EXPENSE,
        amount=Decimal("-2500000"),
        reference="PO-502",
        contra_account=ACCOUNTS_PAYABLE,
    ),
    Transaction(
        id="TX003",
        date=date(2024, 6, 3),
        description="Rental Income - Inv #1002",
        category=TransactionCategory.REVENUE,
        amount=Decimal("1200000"),
        reference="INV-1002",
    ),
    Transaction(
        id="TX004",
        date=date(2024, 6, 4),
        description="Monthly Garage Rent",
        category=TransactionCategory.EXPENSE,
        amount=Decimal("-5000000"),
        reference="AP-201",
    ),
    Transaction(
        id="TX005",
        date=date(2024, 6, 5),
        description="New Unit Purchase (Down Payment)",
        category=TransactionCategory.ASSET,
        amount=Decimal("-7000000"),
        reference="CAPEX-01",
    ),
]
