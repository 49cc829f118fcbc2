"""Centralized configuration for table extraction runs.

`ExtractOptions` holds what the command line controls; `FetchSettings`
holds HTTP knobs that can be tuned through environment variables.
Both are frozen: they are resolved once and then only read.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from . import __version__


DEFAULT_TABLE_SELECTOR = "table:eq(0)"
DEFAULT_HEADER_CELL_SELECTOR = "thead tr:eq(0) th"
DEFAULT_ROW_SELECTOR = "tbody tr"
DEFAULT_ROW_CELL_SELECTOR = "td"

# html5lib builds the tree like a browser does (implicit <tbody> etc.)
DEFAULT_PARSER = "html5lib"
PARSERS = ("html5lib", "lxml", "html.parser")


@dataclass(frozen=True)
class ExtractOptions:
    table_selector: str = DEFAULT_TABLE_SELECTOR
    header_cell_selector: str = DEFAULT_HEADER_CELL_SELECTOR
    row_selector: str = DEFAULT_ROW_SELECTOR
    row_cell_selector: str = DEFAULT_ROW_CELL_SELECTOR

    # Output / typing flags
    pretty: bool = False
    string_values: bool = False
    include_links: bool = False
    omit_partial_rows: bool = False


def _timeout_from_env() -> Optional[float]:
    raw = os.getenv("TABLE_TO_JSON_TIMEOUT", "30")
    value = float(raw)
    return value if value > 0 else None


@dataclass(frozen=True)
class FetchSettings:
    user_agent: str = f"table-to-json/{__version__}"
    timeout_seconds: Optional[float] = 30.0
    parser: str = DEFAULT_PARSER


def load_fetch_settings() -> FetchSettings:
    """Resolve fetch settings from the environment (falling back to defaults)."""
    parser = os.getenv("TABLE_TO_JSON_PARSER", DEFAULT_PARSER)
    if parser not in PARSERS:
        raise ValueError(f"TABLE_TO_JSON_PARSER must be one of {', '.join(PARSERS)}, got {parser!r}")
    return FetchSettings(
        user_agent=os.getenv("TABLE_TO_JSON_USER_AGENT", f"table-to-json/{__version__}"),
        timeout_seconds=_timeout_from_env(),
        parser=parser,
    )
