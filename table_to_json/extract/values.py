"""Cell value typing.

A cell's text becomes one of bool, int, float or str. Python's own types
are the variants; `json` maps each to its native JSON form.
"""
from __future__ import annotations

from typing import Union
import re

Value = Union[bool, int, float, str]

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_bool(text: str) -> Union[bool, None]:
    low = text.lower()
    if low == "true":
        return True
    if low == "false":
        return False
    return None


def number_or_string(text: str) -> Union[int, float, str]:
    """Integer if it parses as one, else float, else the text unchanged.

    Only plain decimal spellings count as numbers: no whitespace, no `_`
    digit separators, no `nan`/`inf` (those are not valid JSON numbers).
    """
    if _INT_RE.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # beyond sys.get_int_max_str_digits(); treat like any other overflow
            pass
    if _FLOAT_RE.fullmatch(text):
        value = float(text)
        # 1e999 overflows to inf
        if value not in (float("inf"), float("-inf")):
            return value
    return text


def coerce_value(text: str, string_values: bool = False) -> Value:
    """Type a raw cell text. Never raises."""
    if string_values:
        return text
    flag = parse_bool(text)
    if flag is not None:
        return flag
    return number_or_string(text)
