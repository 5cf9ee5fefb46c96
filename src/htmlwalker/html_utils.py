# src/htmlwalker/html_utils.py
"""
Entry point for loading HTML documents.

    document = load().from_url("https://example.com")
    for anchor in document.find_anchors():
        print(anchor.get_href())
"""
import logging
import os
from pathlib import Path
from typing import BinaryIO, Optional, TextIO, Union

from htmlwalker.dom.document import HtmlDocument
from htmlwalker.model import HttpSettings
from htmlwalker.services.http_request_service import HttpRequestService
from htmlwalker.utils.configure_logging import configure_logger
from htmlwalker.utils.soup_utils import SoupUtils

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class HtmlDocumentLoader:
    """
    Builds HtmlDocuments from markup held in strings, bytes, streams, files or URLs.

    Every input is decoded as UTF-8 and handed to `from_html`. Loading either
    returns a complete document or raises an OSError (file and stream errors,
    requests.RequestException for HTTP); nothing is retried.
    """

    def __init__(self, http_service: Optional[HttpRequestService] = None):
        self.http_service = http_service or HttpRequestService()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Closes the HTTP session and the cache connection, if any were opened."""
        self.http_service.close()

    def using_local_cache(self, cache_name: Optional[str] = None) -> "HtmlDocumentLoader":
        """Routes URL fetches through a persistent local cache (default name: 'rest-calls')."""
        previous = self.http_service
        self.http_service = previous.with_local_cache(cache_name)
        previous.close()
        logger.debug("Loader switched to local cache '%s'.", self.http_service.cache.cache_name)
        return self

    def from_url(self, url: str) -> HtmlDocument:
        html = self.http_service.fetch(url, accept="text/html")
        return self.from_html(html, source=url)

    def from_html(self, html: str, source: Optional[str] = None) -> HtmlDocument:
        document = SoupUtils.parse(html)
        logger.debug("Parsed %d chars of markup from %s.", len(html), source or "<string>")
        return HtmlDocument(document, source=source)

    def from_bytes(self, data: bytes, source: Optional[str] = None) -> HtmlDocument:
        return self.from_html(data.decode(ENCODING, errors="replace"), source=source)

    def from_stream(self, stream: Union[BinaryIO, TextIO]) -> HtmlDocument:
        """Reads the stream to its end; the stream is left open."""
        data = stream.read()
        name = getattr(stream, "name", None)
        source = name if isinstance(name, str) else None
        if isinstance(data, str):
            return self.from_html(data, source=source)
        return self.from_bytes(data, source=source)

    def from_file(self, path: Union[str, os.PathLike]) -> HtmlDocument:
        file_path = Path(path)
        return self.from_bytes(file_path.read_bytes(), source=str(file_path))


def load(settings: Optional[HttpSettings] = None, log_level: Optional[Union[str, int]] = None) -> HtmlDocumentLoader:
    """
    Returns a new, independent loader.

    Passing `log_level` also installs the library's log handler (see configure_logger).
    """
    if log_level is not None:
        configure_logger(log_level)
    return HtmlDocumentLoader(HttpRequestService(settings))
