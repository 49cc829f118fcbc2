"""
Table → JSON conversion tools.

Layout
- config.py: run options (selectors, output flags) + fetch knobs from env
- errors.py: error kinds surfaced by the CLI
- clients/http_client.py: thin requests + BeautifulSoup document fetcher
- extract/: selector dialect, header/row extraction, value coercion
- transform/json_writer.py: record list → JSON text
- runner.py: per-URL, per-table orchestration
- cli.py: `table-to-json` command line entry point
"""

__version__ = "1.0.0"
