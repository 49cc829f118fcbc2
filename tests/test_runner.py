"""
Tests for the per-URL / per-table driver.
"""

import pytest

from table_to_json.config import ExtractOptions
from table_to_json.errors import ColumnIndexError, FetchError
from table_to_json.runner import extract_tables, run
from table_to_json.transform.json_writer import records_to_json

from .conftest import PEOPLE_HTML, FakeFetcher


TWO_TABLES_HTML = """
<html><body>
<table>
  <thead><tr><th>City</th><th>Pop</th></tr></thead>
  <tbody><tr><td>Oslo</td><td>700000</td></tr><tr><td>Bergen</td><td>285000</td></tr></tbody>
</table>
<p>between</p>
<table>
  <thead><tr><th>Country</th></tr></thead>
  <tbody><tr><td>Norway</td></tr></tbody>
</table>
</body></html>
"""

BAD_TABLE_HTML = """
<html><body>
<table>
  <thead><tr><th>Only</th></tr></thead>
  <tbody><tr><td>1</td><td>2</td></tr></tbody>
</table>
</body></html>
"""


class TestRun:
    def test_single_page_default_options(self):
        fetcher = FakeFetcher({"https://a.example/": PEOPLE_HTML})
        assert run(["https://a.example/"], ExtractOptions(), client=fetcher) == [{"name": "Alice", "age": 30}]

    def test_default_table_selector_takes_first_table_only(self):
        fetcher = FakeFetcher({"https://a.example/": TWO_TABLES_HTML})
        records = run(["https://a.example/"], ExtractOptions(), client=fetcher)
        assert records == [{"city": "Oslo", "pop": 700000}, {"city": "Bergen", "pop": 285000}]

    def test_all_tables_in_document_order_without_header_leak(self):
        fetcher = FakeFetcher({"https://a.example/": TWO_TABLES_HTML})
        records = run(["https://a.example/"], ExtractOptions(table_selector="table"), client=fetcher)
        assert records == [
            {"city": "Oslo", "pop": 700000},
            {"city": "Bergen", "pop": 285000},
            {"country": "Norway"},
        ]

    def test_url_order_preserved(self):
        fetcher = FakeFetcher({
            "https://a.example/": PEOPLE_HTML,
            "https://b.example/": TWO_TABLES_HTML,
        })
        records = run(["https://b.example/", "https://a.example/"], ExtractOptions(), client=fetcher)
        assert fetcher.requested == ["https://b.example/", "https://a.example/"]
        assert records[-1] == {"name": "Alice", "age": 30}
        assert records[0] == {"city": "Oslo", "pop": 700000}

    def test_fetch_error_aborts_run(self):
        fetcher = FakeFetcher({"https://a.example/": PEOPLE_HTML})
        with pytest.raises(FetchError, match="https://missing.example/"):
            run(["https://a.example/", "https://missing.example/", "https://a.example/"], ExtractOptions(), client=fetcher)
        assert fetcher.requested == ["https://a.example/", "https://missing.example/"]

    def test_column_error_names_url_and_table(self):
        fetcher = FakeFetcher({"https://bad.example/": BAD_TABLE_HTML})
        with pytest.raises(ColumnIndexError) as exc:
            run(["https://bad.example/"], ExtractOptions(), client=fetcher)
        message = str(exc.value)
        assert "https://bad.example/" in message
        assert "table 1" in message
        assert "position 1" in message

    def test_deterministic_output(self):
        pages = {"https://a.example/": TWO_TABLES_HTML}
        options = ExtractOptions(table_selector="table")
        first = records_to_json(run(["https://a.example/"], options, client=FakeFetcher(pages)))
        second = records_to_json(run(["https://a.example/"], options, client=FakeFetcher(pages)))
        assert first == second


class TestExtractTables:
    def test_no_matching_tables(self):
        doc = FakeFetcher({"u": "<html><body><p>no tables</p></body></html>"}).fetch_document("u")
        assert extract_tables(doc, ExtractOptions()) == []
