from __future__ import annotations

import argparse
import dataclasses
import logging
from typing import List, Optional

from .clients.http_client import HttpClient
from .config import (
    DEFAULT_HEADER_CELL_SELECTOR,
    DEFAULT_ROW_CELL_SELECTOR,
    DEFAULT_ROW_SELECTOR,
    DEFAULT_TABLE_SELECTOR,
    PARSERS,
    ExtractOptions,
    load_fetch_settings,
)
from .errors import TableToJsonError
from .runner import run
from .transform.json_writer import write_records

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser("table-to-json", description="Convert HTML table rows at the given URLs to JSON")
    ap.add_argument("urls", nargs="*", help="One or more URLs to read")
    ap.add_argument("-t", "--table-selector", default=DEFAULT_TABLE_SELECTOR,
                    help=f"CSS selector for the table(s) to pull data from on each url (default: {DEFAULT_TABLE_SELECTOR})")
    ap.add_argument("-th", "--header-cell-selector", default=DEFAULT_HEADER_CELL_SELECTOR,
                    help=f"CSS selector for the table header names (default: {DEFAULT_HEADER_CELL_SELECTOR})")
    ap.add_argument("-tr", "--row-selector", default=DEFAULT_ROW_SELECTOR,
                    help=f"CSS selector for the table rows (default: {DEFAULT_ROW_SELECTOR})")
    ap.add_argument("-td", "--row-cell-selector", default=DEFAULT_ROW_CELL_SELECTOR,
                    help=f"CSS selector for the cells within each row (default: {DEFAULT_ROW_CELL_SELECTOR})")
    ap.add_argument("-p", "--pretty", action="store_true", help="Print JSON in a more human-readable way")
    ap.add_argument("-s", "--string-values", action="store_true",
                    help="Treat all values as strings (no boolean/number conversion)")
    ap.add_argument("-l", "--include-links", action="store_true",
                    help="Add a '<column>_link' field for the first link found in a cell")
    ap.add_argument("-o", "--omit-partial-rows", action="store_true",
                    help="Omit rows that don't have a value for each column, e.g. colspan summary rows")
    ap.add_argument("--parser", choices=PARSERS, default=None,
                    help="HTML tree builder (overrides TABLE_TO_JSON_PARSER; default: html5lib)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return ap


def options_from_args(args: argparse.Namespace) -> ExtractOptions:
    return ExtractOptions(
        table_selector=args.table_selector,
        header_cell_selector=args.header_cell_selector,
        row_selector=args.row_selector,
        row_cell_selector=args.row_cell_selector,
        pretty=args.pretty,
        string_values=args.string_values,
        include_links=args.include_links,
        omit_partial_rows=args.omit_partial_rows,
    )


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if not args.urls:
        ap.error("You must specify at least one url to read.")
        return 2

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(message)s",
    )

    try:
        settings = load_fetch_settings()
    except ValueError as e:
        ap.error(str(e))
        return 2
    if args.parser:
        settings = dataclasses.replace(settings, parser=args.parser)

    options = options_from_args(args)
    try:
        with HttpClient(settings) as client:
            records = run(args.urls, options, client=client)
    except TableToJsonError as e:
        logger.error("error: %s", e)
        return 1

    write_records(records, pretty=options.pretty)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
