"""
Table extraction: selector dialect, headers, rows and value typing.
"""

from .headers import extract_headers
from .rows import extract_rows
from .selectors import select_nodes, translate_selector
from .values import Value, coerce_value

__all__ = [
    "Value",
    "coerce_value",
    "extract_headers",
    "extract_rows",
    "select_nodes",
    "translate_selector",
]
