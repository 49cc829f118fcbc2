"""Shared fixtures: canned HTML documents and a fetcher that never hits the network."""

from typing import Dict

import pytest

from table_to_json.clients.http_client import parse_document
from table_to_json.errors import FetchError


PEOPLE_HTML = """
<html><body>
<table>
  <thead><tr><th>Name</th><th>Age</th></tr></thead>
  <tbody>
    <tr><td>Alice</td><td>30</td></tr>
  </tbody>
</table>
</body></html>
"""


class FakeFetcher:
    """Serves pages from a dict; unknown URLs fail like a 404 would."""

    def __init__(self, pages: Dict[str, str], parser: str = "html5lib"):
        self.pages = pages
        self.parser = parser
        self.requested = []

    def fetch_document(self, url):
        self.requested.append(url)
        if url not in self.pages:
            raise FetchError(url, RuntimeError("404 Client Error: Not Found"))
        return parse_document(self.pages[url], url=url, parser=self.parser)


@pytest.fixture
def make_table():
    def _make(table_html: str):
        return parse_document(f"<html><body>{table_html}</body></html>").soup.find("table")
    return _make
