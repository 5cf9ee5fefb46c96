# src/htmlwalker/services/http_request_service.py
import logging
import time
from typing import Optional

import requests

from htmlwalker.model import HttpSettings
from htmlwalker.services.response_cache_service import ResponseCacheService

logger = logging.getLogger(__name__)


class HttpRequestService:
    """
    Synchronous service for fetching remote documents as text.
    Owns one requests.Session; optionally reads through a ResponseCacheService.
    """

    def __init__(self, settings: Optional[HttpSettings] = None, cache: Optional[ResponseCacheService] = None):
        self.settings = settings or HttpSettings.from_config()
        self.cache = cache
        self.session: Optional[requests.Session] = None

    def __enter__(self):
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def initialize(self) -> requests.Session:
        if self.session is None:
            self.session = requests.Session()
            self.session.headers.update({
                'Accept-Encoding': 'gzip, deflate',
                'User-Agent': self.settings.user_agent
            })
            logger.debug("HttpRequestService: Session initialized.")
        return self.session

    def close(self) -> None:
        if self.session is not None:
            self.session.close()
            self.session = None
            logger.debug("HttpRequestService: Session closed.")
        if self.cache is not None:
            self.cache.close()

    def with_local_cache(self, cache_name: Optional[str] = None) -> "HttpRequestService":
        """Returns a service with the same settings that reads through the named cache."""
        return HttpRequestService(self.settings, ResponseCacheService(cache_name))

    def fetch(self, url: str, accept: Optional[str] = None) -> str:
        """
        Performs a GET request and returns the body decoded as UTF-8.

        Raises:
            requests.RequestException: on connection problems, timeouts and
                non-2xx responses (an IOError subclass).
        """
        accept = accept or self.settings.accept

        if self.cache is not None:
            cached = self.cache.get(url, accept)
            if cached is not None:
                return cached.body

        session = self.initialize()
        start_time = time.perf_counter()
        response = session.get(url, headers={'Accept': accept}, timeout=self.settings.timeout)
        elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.debug("GET %s -> %s (%s ms)", url, response.status_code, elapsed_ms)

        # Non-2xx statuses raise requests.HTTPError
        response.raise_for_status()
        body = response.content.decode('utf-8', errors='replace')

        if self.cache is not None:
            self.cache.put(url, body, accept=accept, status_code=response.status_code)
        return body
