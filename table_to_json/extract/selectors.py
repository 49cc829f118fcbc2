"""Selector helpers.

Queries run through soupsieve (BeautifulSoup's `select`). On top of plain
CSS we accept the jsoup pseudo-classes the default selectors use:

    :eq(n)   element sibling index == n  ->  :nth-child(n+1)
    :lt(n)   element sibling index <  n  ->  :nth-child(-n+n)
    :gt(n)   element sibling index >  n  ->  :nth-child(n+(n+2))
    :contains(text)  rendered text contains `text`, ignoring case

Indexes are zero-based, as in jsoup. The `:contains` argument may be
bare (`td:contains(Grand Total)`) or quoted; whitespace in it is
collapsed. soupsieve has no case-insensitive text match, so matching
elements are tagged with a temporary marker attribute for the duration
of the query and the pseudo-class becomes an attribute selector.

Where this differs from jsoup's `Element.select`:
- the element `select_nodes` is called on is never part of its own
  result, only its descendants are (jsoup can return the root itself);
- ancestor and parent combinators are checked against the whole
  document, not just up to the element queried from. `thead th` run
  on a table nested inside another table's `<thead>` also matches the
  inner table's header cells.
"""
from __future__ import annotations

from typing import List, Tuple
import re

import soupsieve
from bs4 import Tag

from ..errors import SelectorError
from .text import node_text


# Quoted strings are matched first so pseudo-classes inside them survive.
_TOKEN_RE = re.compile(
    r"""(?P<quoted>"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*')"""
    r"""|:(?P<pseudo>eq|lt|gt)\(\s*(?P<index>\d+)\s*\)"""
    r"""|:contains\((?P<needle>(?:"(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*'|[^()"'])*)\)"""
)

CONTAINS_ATTR = "data-table-to-json-contains-"


def _needle(raw: str) -> str:
    text = raw.strip()
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'":
        text = re.sub(r"\\(.)", r"\1", text[1:-1])
    text = " ".join(text.split()).lower()
    if not text:
        raise ValueError(":contains(text) query must not be empty")
    return text


def _compile(selector: str) -> Tuple[str, List[str]]:
    """Return soupsieve CSS plus the `:contains` needles it refers to."""
    needles: List[str] = []

    def _replace(m: re.Match) -> str:
        if m.group("quoted"):
            return m.group("quoted")
        if m.group("needle") is not None:
            needles.append(_needle(m.group("needle")))
            return f"[{CONTAINS_ATTR}{len(needles) - 1}]"
        n = int(m.group("index"))
        if m.group("pseudo") == "eq":
            return f":nth-child({n + 1})"
        if m.group("pseudo") == "lt":
            return f":nth-child(-n+{n})"
        return f":nth-child(n+{n + 2})"

    return _TOKEN_RE.sub(_replace, selector), needles


def translate_selector(selector: str) -> str:
    """Rewrite jsoup-only pseudo-classes into soupsieve CSS."""
    return _compile(selector)[0]


def _mark_contains(root: Tag, needles: List[str]) -> List[Tuple[Tag, str]]:
    top = root
    while top.parent is not None:
        top = top.parent
    marked: List[Tuple[Tag, str]] = []
    for tag in top.find_all(True):
        text = node_text(tag).lower()
        for i, needle in enumerate(needles):
            if needle in text:
                attr = f"{CONTAINS_ATTR}{i}"
                tag[attr] = ""
                marked.append((tag, attr))
    return marked


def select_nodes(root: Tag, selector: str) -> List[Tag]:
    """Return descendants of `root` matching `selector`, in document order."""
    try:
        css, needles = _compile(selector)
    except ValueError as e:
        raise SelectorError(selector, e) from e

    marked = _mark_contains(root, needles) if needles else []
    try:
        return root.select(css)
    except soupsieve.SelectorSyntaxError as e:
        raise SelectorError(selector, e) from e
    finally:
        for tag, attr in marked:
            del tag[attr]
