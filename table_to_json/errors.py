"""Error kinds raised while converting tables.

Every failure that aborts a run derives from `TableToJsonError`, so the
CLI can report it and exit non-zero without a traceback.
"""
from __future__ import annotations

from typing import Optional


class TableToJsonError(Exception):
    pass


class FetchError(TableToJsonError):
    def __init__(self, url: str, cause: BaseException) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"failed to fetch {url}: {cause}")


class SelectorError(TableToJsonError):
    def __init__(self, selector: str, cause: BaseException) -> None:
        self.selector = selector
        self.cause = cause
        super().__init__(f"invalid selector {selector!r}: {cause}")


class ColumnIndexError(TableToJsonError):
    """A row cell sits at a position with no matching header column."""

    def __init__(
        self,
        cell_index: int,
        column_count: int,
        row_number: int,
        url: Optional[str] = None,
        table_number: Optional[int] = None,
    ) -> None:
        self.cell_index = cell_index
        self.column_count = column_count
        self.row_number = row_number
        self.url = url
        self.table_number = table_number
        where = f"row {row_number}"
        if table_number is not None:
            where = f"table {table_number}, {where}"
        if url:
            where = f"{url}, {where}"
        super().__init__(
            f"{where}: cell at position {cell_index} has no column "
            f"(only {column_count} column(s) found in the header)"
        )

    def located(self, url: str, table_number: int) -> "ColumnIndexError":
        """Return a copy that also names the URL and table it came from."""
        return ColumnIndexError(self.cell_index, self.column_count, self.row_number, url, table_number)
