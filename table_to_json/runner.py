"""Per-URL, per-table orchestration.

For every URL (in the order given) the document is fetched, tables are
selected in document order, and each table goes through header then row
extraction. Records accumulate into one list that is only serialized by
the caller once every URL succeeded; any error aborts the whole run.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Protocol
import logging

from bs4 import Tag

from .clients.http_client import FetchedDocument, HttpClient
from .config import ExtractOptions
from .errors import ColumnIndexError
from .extract.headers import extract_headers
from .extract.rows import Record, extract_rows
from .extract.selectors import select_nodes

logger = logging.getLogger(__name__)


class DocumentFetcher(Protocol):
    def fetch_document(self, url: str) -> FetchedDocument: ...


def extract_table(table: Tag, options: ExtractOptions, base_url: str = "") -> List[Record]:
    columns = extract_headers(table, options.header_cell_selector)
    return extract_rows(
        table,
        options.row_selector,
        options.row_cell_selector,
        columns,
        options,
        base_url=base_url,
    )


def extract_tables(doc: FetchedDocument, options: ExtractOptions) -> List[Record]:
    """Records from every table in `doc` matching the table selector."""
    records: List[Record] = []
    tables = select_nodes(doc.soup, options.table_selector)
    for table_number, table in enumerate(tables, start=1):
        try:
            records.extend(extract_table(table, options, base_url=doc.base_url))
        except ColumnIndexError as e:
            raise e.located(doc.url, table_number) from None
    return records


def run(urls: Iterable[str], options: ExtractOptions, client: Optional[DocumentFetcher] = None) -> List[Record]:
    """Fetch and extract every URL sequentially; return all records in order."""
    if client is None:
        with HttpClient() as own_client:
            return run(urls, options, client=own_client)

    records: List[Record] = []
    for url in urls:
        logger.info("Reading data from url %s", url)
        doc = client.fetch_document(url)
        records.extend(extract_tables(doc, options))
    logger.info("%s rows.", len(records))
    return records
