"""Rendered text of a node.

Adjacent strings are joined as a browser would lay them out: `<br>` and
block-level elements break words apart, inline elements don't. The
result has whitespace runs collapsed to one space and is trimmed.
"""
from __future__ import annotations

from typing import List

from bs4 import CData, NavigableString, Tag

BLOCK_TAGS = frozenset({
    "address", "article", "aside", "blockquote", "caption", "center", "dd", "details",
    "dialog", "dir", "div", "dl", "dt", "fieldset", "figcaption", "figure", "footer",
    "form", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hgroup", "hr", "li", "main",
    "menu", "nav", "ol", "p", "pre", "section", "summary", "table", "tbody", "td",
    "tfoot", "th", "thead", "tr", "ul",
})
SKIP_TAGS = frozenset({"script", "style", "template", "noscript"})


def _collect(node: Tag, parts: List[str]) -> None:
    for child in node.children:
        if isinstance(child, Tag):
            if child.name == "br":
                parts.append(" ")
                continue
            if child.name in SKIP_TAGS:
                continue
            block = child.name in BLOCK_TAGS
            if block:
                parts.append(" ")
            _collect(child, parts)
            if block:
                parts.append(" ")
        elif type(child) in (NavigableString, CData):
            # comments, doctypes and processing instructions are not text
            parts.append(str(child))


def node_text(node: Tag) -> str:
    """Text content with `<br>`/block boundaries as spaces, collapsed and trimmed."""
    parts: List[str] = []
    _collect(node, parts)
    return " ".join("".join(parts).split())
