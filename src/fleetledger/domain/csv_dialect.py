"""Delimiter detection, row splitting and header inference for CSV/TSV text."""

from typing import Optional, Sequence

from fleetledger.domain.entities import ColumnRoles, Table

COMMA = ","
SEMICOLON = ";"
TAB = "\t"

DELIMITER_NAMES = {COMMA: "COMMA", SEMICOLON: "SEMICOLON", TAB: "TAB"}

# Header keywords per column role, English and Indonesian
DATE_KEYWORDS = ("date", "tanggal", "tgl")
REFERENCE_KEYWORDS = ("ref", "nomor", "no.", "code")
DESCRIPTION_KEYWORDS = ("description", "deskripsi", "keterangan", "account", "akun")
DEBIT_KEYWORDS = ("debit", "masuk")
CREDIT_KEYWORDS = ("credit", "kredit", "keluar")
AMOUNT_KEYWORDS = ("amount", "jumlah", "nilai", "total")


def non_blank_lines(text: str) -> list[str]:
    """Split text into lines, dropping lines that are only whitespace."""
    return [line for line in text.splitlines() if line.strip()]


def detect_delimiter(text: str) -> str:
    """Detect the field delimiter from the first line of text.

    Tab or semicolon is chosen only when it occurs strictly more often than
    each of the other two candidates. Anything else, including text with
    fewer than two lines, falls back to comma.

    Args:
        text: Raw delimited text

    Returns:
        One of COMMA, SEMICOLON or TAB
    """
    lines = non_blank_lines(text)
    if len(lines) < 2:
        return COMMA

    header = lines[0]
    tabs = header.count(TAB)
    semicolons = header.count(SEMICOLON)
    commas = header.count(COMMA)

    if tabs > commas and tabs > semicolons:
        return TAB
    if semicolons > commas and semicolons > tabs:
        return SEMICOLON
    return COMMA


def split_row(line: str, delimiter: str) -> list[str]:
    """Split one line into fields, honouring double-quoted fields.

    Inside quotes the delimiter is literal and a doubled quote ("") yields one
    quote character. Fields are stripped of surrounding whitespace.
    """
    fields = []
    current = []
    in_quotes = False
    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)
        i += 1
    fields.append("".join(current).strip())
    return fields


def _find_column(headers: Sequence[str], keywords: Sequence[str]) -> Optional[int]:
    for index, header in enumerate(headers):
        if any(keyword in header for keyword in keywords):
            return index
    return None


def infer_columns(header_row: Sequence[str]) -> ColumnRoles:
    """Infer which columns hold each semantic role from header text.

    Matching is a case-insensitive substring test; the first matching column
    wins for each role independently.
    """
    headers = [header.lower() for header in header_row]
    return ColumnRoles(
        date=_find_column(headers, DATE_KEYWORDS),
        reference=_find_column(headers, REFERENCE_KEYWORDS),
        description=_find_column(headers, DESCRIPTION_KEYWORDS),
        debit=_find_column(headers, DEBIT_KEYWORDS),
        credit=_find_column(headers, CREDIT_KEYWORDS),
        amount=_find_column(headers, AMOUNT_KEYWORDS),
    )


def read_table(text: str) -> Table:
    """Split delimited text into header and data rows.

    Blank lines are ignored. Data rows are numbered from 1 in the order they
    appear after the header.
    """
    lines = non_blank_lines(text)
    delimiter = detect_delimiter(text)
    if not lines:
        return Table(delimiter=delimiter, header=())

    header = tuple(split_row(lines[0], delimiter))
    rows = tuple(
        (row_index, tuple(split_row(line, delimiter)))
        for row_index, line in enumerate(lines[1:], start=1)
    )
    return Table(delimiter=delimiter, header=header, rows=rows)
