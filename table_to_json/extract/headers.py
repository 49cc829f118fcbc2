from __future__ import annotations

from typing import List
import logging

from bs4 import Tag

from .selectors import select_nodes
from .text import node_text

logger = logging.getLogger(__name__)


def extract_headers(table: Tag, header_selector: str) -> List[str]:
    """Return the lower-cased header texts of one table, in document order.

    A fresh list is built per call, so column names never carry over
    from one table to the next. No match means no columns.
    """
    columns: List[str] = []
    for cell in select_nodes(table, header_selector):
        text = node_text(cell)
        if text is not None:
            columns.append(text.lower())
    logger.info("   Found %s columns.", len(columns))
    return columns
