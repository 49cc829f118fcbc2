"""Thin wrapper around `requests` that hands back parsed documents.

Kept small and swappable: the runner only needs `fetch_document(url)`,
so tests (or another transport) can stand in for it.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup

from ..config import FetchSettings, load_fetch_settings
from ..errors import FetchError


@dataclass
class FetchedDocument:
    url: str        # final URL after redirects
    base_url: str   # what relative links resolve against
    soup: BeautifulSoup


def document_base_url(soup: BeautifulSoup, url: str) -> str:
    """Resolve the base URL: `<base href>` when present, else the page URL."""
    base = soup.find("base", href=True)
    if base is None:
        return url
    return urljoin(url, str(base["href"]).strip())


def parse_document(markup: str | bytes, url: str = "", parser: str = "html5lib") -> FetchedDocument:
    soup = BeautifulSoup(markup, parser)
    return FetchedDocument(url=url, base_url=document_base_url(soup, url), soup=soup)


class HttpClient:
    def __init__(self, settings: Optional[FetchSettings] = None, session: Optional[requests.Session] = None) -> None:
        self.settings = settings or load_fetch_settings()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})

    def fetch_document(self, url: str) -> FetchedDocument:
        """GET `url` and parse it. Any failure surfaces as FetchError."""
        try:
            resp = self.session.get(url, timeout=self.settings.timeout_seconds)
            resp.raise_for_status()
            # bytes let the parser honour <meta charset>
            return parse_document(resp.content, url=resp.url or url, parser=self.settings.parser)
        except requests.RequestException as e:
            raise FetchError(url, e) from e
        except (ValueError, LookupError) as e:
            # parser/codec failures on malformed responses
            raise FetchError(url, e) from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
