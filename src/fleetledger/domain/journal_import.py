"""Import of raw journal lines grouped by reference."""

import uuid
from datetime import date
from typing import Any

import structlog

from fleetledger.domain.chart import MISC
from fleetledger.domain.csv_dialect import read_table
from fleetledger.domain.entities import EntryOrigin, JournalEntry, JournalLine
from fleetledger.domain.rules import IMPORTED_LINE_ACCOUNT_RULES, first_match
from fleetledger.utils.amount_parser import normalize_amount
from fleetledger.utils.date_parser import parse_date_or_none

logger = structlog.get_logger(__name__)

# Date, Ref, Account/Description, Debit, Credit
JOURNAL_MIN_COLUMNS = 5
IMPORTED_DESCRIPTION = "Imported Transaction"


def account_for_line(description: str) -> str:
    """Pick an account code for an imported line from its description."""
    return first_match(IMPORTED_LINE_ACCOUNT_RULES, description, MISC)


class JournalImportService:
    """Service for importing CSV files that are already in journal layout.

    Lines are shown as-is: entries are tagged IMPORTED and are not required
    to balance.
    """

    def import_text(self, text: str, dayfirst: bool = True) -> dict[str, Any]:
        """Group journal lines by reference into imported entries.

        Args:
            text: Complete file contents, header row first
            dayfirst: Read ambiguous numeric dates as day/month/year

        Returns:
            Dict with:
            - entries: imported JournalEntry objects in first-seen reference order
            - lines: number of lines imported
            - skipped: rows with fewer than five columns
            - unbalanced: number of entries whose debits and credits differ
        """
        table = read_table(text)
        groups: dict[str, dict[str, Any]] = {}
        skipped = 0
        line_count = 0

        for row_index, cols in table.rows:
            if len(cols) < JOURNAL_MIN_COLUMNS:
                skipped += 1
                logger.debug("journal_row_skipped", row=row_index, columns=len(cols))
                continue

            date_str, reference, raw_description, debit_str, credit_str = cols[:5]
            description = raw_description.replace('"', "")

            group = groups.get(reference)
            if group is None:
                group = {"date_str": date_str, "lines": []}
                groups[reference] = group

            group["lines"].append(
                JournalLine(
                    account_id=account_for_line(description),
                    account_name=description,
                    debit=normalize_amount(debit_str),
                    credit=normalize_amount(credit_str),
                )
            )
            line_count += 1

        today = date.today()
        entries = []
        for reference, group in groups.items():
            entry_date = parse_date_or_none(group["date_str"], dayfirst=dayfirst)
            if entry_date is None:
                entry_date = today
                logger.warning("journal_entry_date_defaulted", reference=reference, raw_date=group["date_str"])
            entries.append(
                JournalEntry(
                    id=f"CSV-{reference}-{uuid.uuid4().hex[:5]}",
                    date=entry_date,
                    reference=reference,
                    description=IMPORTED_DESCRIPTION,
                    lines=tuple(group["lines"]),
                    origin=EntryOrigin.IMPORTED,
                )
            )

        unbalanced = sum(1 for entry in entries if not entry.is_balanced)
        logger.info(
            "journal_imported",
            entries=len(entries),
            lines=line_count,
            skipped=skipped,
            unbalanced=unbalanced,
        )
        return {
            "entries": entries,
            "lines": line_count,
            "skipped": skipped,
            "unbalanced": unbalanced,
        }
