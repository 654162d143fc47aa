"""Chart of accounts catalog."""

from typing import Iterable, Iterator, Optional

from fleetledger.domain.csv_dialect import read_table
from fleetledger.domain.entities import Account, AccountType
from fleetledger.domain.errors import (
    ValidationError,
    duplicate_account_code,
    invalid_choice,
)

# Account codes the posting rules and reports depend on
CASH_ON_HAND = "1001"
BANK = "1002"
ACCOUNTS_RECEIVABLE = "1100"
FLEET_INVENTORY = "1200"
ACCOUNTS_PAYABLE = "2000"
OWNER_CAPITAL = "3000"
RENTAL_REVENUE = "4000"
MAINTENANCE_EXPENSE = "5001"
RENT_EXPENSE = "5002"
MISC = "9999"

DEFAULT_ACCOUNTS = [
    # Assets
    Account(CASH_ON_HAND, "Cash on Hand", AccountType.ASSET, "Current Asset"),
    Account(BANK, "Bank BCA", AccountType.ASSET, "Current Asset"),
    Account(ACCOUNTS_RECEIVABLE, "Accounts Receivable", AccountType.ASSET, "Current Asset"),
    Account(FLEET_INVENTORY, "Motorcycle Fleet Inventory", AccountType.ASSET, "Fixed Asset"),
    # Liabilities
    Account(ACCOUNTS_PAYABLE, "Accounts Payable", AccountType.LIABILITY, "Current Liability"),
    # Equity
    Account(OWNER_CAPITAL, "Owner Capital", AccountType.EQUITY, "Equity"),
    # Revenue
    Account(RENTAL_REVENUE, "Rental Revenue", AccountType.REVENUE, "Operating Revenue"),
    # Expenses
    Account(MAINTENANCE_EXPENSE, "Maintenance Expense", AccountType.EXPENSE, "COGS"),
    Account(RENT_EXPENSE, "Rent Expense (Garage)", AccountType.EXPENSE, "Operating Expense"),
]


class ChartOfAccounts:
    """Read-only, ordered catalog of accounts keyed by code."""

    def __init__(self, accounts: Iterable[Account]):
        """Initialize chart of accounts.

        Args:
            accounts: Accounts in display order

        Raises:
            ValidationError: If two accounts share a code
        """
        self._accounts: dict[str, Account] = {}
        for account in accounts:
            if account.code in self._accounts:
                raise ValidationError(duplicate_account_code(account.code))
            self._accounts[account.code] = account

    @classmethod
    def default(cls) -> "ChartOfAccounts":
        """Return the standard fleet rental chart."""
        return cls(DEFAULT_ACCOUNTS)

    @classmethod
    def from_csv_text(cls, text: str) -> "ChartOfAccounts":
        """Load a chart from delimited text with code, name, type, category columns.

        The header row is required; columns are matched by name.

        Raises:
            ValidationError: If required columns are missing, a type is not a
                known account type, or a code repeats
        """
        table = read_table(text)
        header = [name.lower() for name in table.header]
        required = ["code", "name", "type"]
        missing = [name for name in required if name not in header]
        if missing:
            raise ValidationError(
                f"Chart of accounts is missing required columns: {', '.join(missing)}"
            )

        idx_code = header.index("code")
        idx_name = header.index("name")
        idx_type = header.index("type")
        idx_category = header.index("category") if "category" in header else None
        valid_types = [t.value for t in AccountType]

        accounts = []
        for row_num, cols in table.rows:
            if len(cols) <= max(idx_code, idx_name, idx_type):
                raise ValidationError(f"Row {row_num}: Expected at least {len(required)} columns")
            type_name = cols[idx_type].strip().capitalize()
            if type_name not in valid_types:
                raise ValidationError(
                    f"Row {row_num}: " + invalid_choice("account type", cols[idx_type], valid_types)
                )
            category = ""
            if idx_category is not None and idx_category < len(cols):
                category = cols[idx_category]
            accounts.append(
                Account(
                    code=cols[idx_code],
                    name=cols[idx_name],
                    type=AccountType(type_name),
                    category=category,
                )
            )
        return cls(accounts)

    def get(self, code: str) -> Optional[Account]:
        """Get account by code, or None when the chart lacks it."""
        return self._accounts.get(code)

    def name_for(self, code: str) -> str:
        """Display name for a code; empty when the chart lacks it."""
        account = self._accounts.get(code)
        return account.name if account is not None else ""

    def codes(self) -> list[str]:
        return list(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, code: object) -> bool:
        return code in self._accounts
