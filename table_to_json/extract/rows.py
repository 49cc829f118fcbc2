"""Row extraction: one ordered record per matched table row.

Each cell is keyed by the header column at the same element sibling
position. With links enabled, the first `<a href>` in a cell adds a
`<column>_link` field right after the cell's own field.

Partial rows are judged on data cells only; `_link` fields don't count
toward the column total.
"""
from __future__ import annotations

from typing import Dict, List, Optional
from urllib.parse import urljoin, urlparse
import logging

from bs4 import Tag

from ..config import ExtractOptions
from ..errors import ColumnIndexError
from .selectors import select_nodes
from .text import node_text
from .values import Value, coerce_value

logger = logging.getLogger(__name__)

Record = Dict[str, Value]
LINK_SUFFIX = "_link"


def element_index(node: Tag) -> int:
    """Zero-based position of `node` among its parent's element children."""
    return sum(1 for sib in node.previous_siblings if isinstance(sib, Tag))


def first_link_href(cell: Tag, base_url: str = "") -> Optional[str]:
    """Absolute href of the first `<a href>` in `cell`, None when there is none.

    An href that cannot be made absolute (relative, with no base URL to
    resolve against) gives an empty string.
    """
    link = cell.select_one("a[href]")
    if link is None:
        return None
    resolved = urljoin(base_url, str(link.get("href", "")).strip())
    return resolved if urlparse(resolved).scheme else ""


def _row_record(
    row: Tag,
    row_number: int,
    cell_selector: str,
    column_names: List[str],
    options: ExtractOptions,
    base_url: str,
) -> tuple[Record, int]:
    record: Record = {}
    data_cells = 0
    for cell in select_nodes(row, cell_selector):
        idx = element_index(cell)
        if idx >= len(column_names):
            raise ColumnIndexError(idx, len(column_names), row_number)
        name = column_names[idx]
        record[name] = coerce_value(node_text(cell), options.string_values)
        data_cells += 1

        if options.include_links:
            href = first_link_href(cell, base_url)
            if href is not None:
                record[name + LINK_SUFFIX] = href
    return record, data_cells


def extract_rows(
    table: Tag,
    row_selector: str,
    cell_selector: str,
    column_names: List[str],
    options: ExtractOptions,
    base_url: str = "",
) -> List[Record]:
    """Return the records of one table in row order.

    Raises ColumnIndexError when a cell has no header column to map to.
    """
    records: List[Record] = []
    for row_number, row in enumerate(select_nodes(table, row_selector), start=1):
        record, data_cells = _row_record(row, row_number, cell_selector, column_names, options, base_url)
        if not options.omit_partial_rows or data_cells >= len(column_names):
            records.append(record)
    logger.info("   Added %s rows.", len(records))
    return records
