"""Financial report aggregation domain service."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Sequence

from fleetledger.domain.chart import (
    MAINTENANCE_EXPENSE,
    RENT_EXPENSE,
    RENTAL_REVENUE,
    ChartOfAccounts,
)
from fleetledger.domain.entities import (
    AccountBalance,
    IncomeStatement,
    JournalEntry,
    MonthlyStat,
)

ZERO = Decimal("0")


class ReportService:
    """Service for folding journal entries into report figures.

    Only the revenue (4000), maintenance (5001) and garage rent (5002)
    accounts feed the income statement; postings to any other code are not
    part of it.
    """

    def __init__(self, chart: ChartOfAccounts):
        """Initialize report service.

        Args:
            chart: Chart of accounts used for names and ordering
        """
        self.chart = chart

    def countable_entries(
        self, entries: Sequence[JournalEntry], include_imported: bool = True
    ) -> list[JournalEntry]:
        """Select the entries a report should count.

        Derived entries always count. An imported entry counts only when
        include_imported is set and no derived entry carries the same
        reference on the same date, so the same event is never counted twice.
        Generated references (REF-n, CSV-n) repeat across unrelated events.
        """
        derived_keys = {
            (entry.reference, entry.date) for entry in entries if not entry.is_imported
        }
        return [
            entry
            for entry in entries
            if not entry.is_imported
            or (include_imported and (entry.reference, entry.date) not in derived_keys)
        ]

    def _fold(self, entries: Iterable[JournalEntry]) -> tuple[Decimal, Decimal, Decimal]:
        revenue = ZERO
        cogs = ZERO
        opex = ZERO
        for entry in entries:
            for line in entry.lines:
                if line.account_id == RENTAL_REVENUE:
                    revenue += line.credit
                elif line.account_id == MAINTENANCE_EXPENSE:
                    cogs += line.debit
                elif line.account_id == RENT_EXPENSE:
                    opex += line.debit
        return revenue, cogs, opex

    def aggregate(
        self, entries: Sequence[JournalEntry], include_imported: bool = True
    ) -> IncomeStatement:
        """Build the income statement from journal entries.

        Args:
            entries: Derived and imported journal entries
            include_imported: Count imported entries that have no derived
                counterpart

        Returns:
            IncomeStatement with net income = revenue - COGS - operating expense
        """
        revenue, cogs, opex = self._fold(self.countable_entries(entries, include_imported))
        return IncomeStatement(
            revenue=revenue,
            cost_of_goods_sold=cogs,
            operating_expense=opex,
            net_income=revenue - cogs - opex,
        )

    def monthly_stats(
        self, entries: Sequence[JournalEntry], include_imported: bool = True
    ) -> list[MonthlyStat]:
        """Group income statement figures by calendar month, oldest first."""
        by_month: dict[str, list[JournalEntry]] = defaultdict(list)
        for entry in self.countable_entries(entries, include_imported):
            by_month[entry.date.strftime("%Y-%m")].append(entry)

        stats = []
        for month in sorted(by_month):
            revenue, cogs, opex = self._fold(by_month[month])
            expenses = cogs + opex
            stats.append(
                MonthlyStat(name=month, revenue=revenue, expenses=expenses, profit=revenue - expenses)
            )
        return stats

    def account_balances(
        self, entries: Sequence[JournalEntry], include_imported: bool = True
    ) -> list[AccountBalance]:
        """Total debits and credits per account.

        Accounts appear in chart order; codes missing from the chart follow,
        sorted by code. Accounts with no postings are left out.
        """
        totals: dict[str, list[Decimal]] = {}
        names: dict[str, str] = {}
        for entry in self.countable_entries(entries, include_imported):
            for line in entry.lines:
                bucket = totals.setdefault(line.account_id, [ZERO, ZERO])
                bucket[0] += line.debit
                bucket[1] += line.credit
                names.setdefault(line.account_id, line.account_name)

        chart_codes = [code for code in self.chart.codes() if code in totals]
        other_codes = sorted(code for code in totals if code not in self.chart)

        balances = []
        for code in chart_codes + other_codes:
            debit, credit = totals[code]
            balances.append(
                AccountBalance(
                    account_id=code,
                    account_name=self.chart.name_for(code) or names[code],
                    debit=debit,
                    credit=credit,
                )
            )
        return balances
