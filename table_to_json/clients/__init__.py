from .http_client import FetchedDocument, HttpClient, document_base_url, parse_document

__all__ = ["FetchedDocument", "HttpClient", "document_base_url", "parse_document"]
