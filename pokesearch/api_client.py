"""
API client for the PokéAPI.
"""

from typing import Union
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from core.logging_config import setup_logger

from .config import Config
from .errors import (
    NetworkError,
    NotFoundError,
    RateLimitedError,
    UpstreamError,
)
from .models import EntityKind

logger = setup_logger(__name__)


class PokeAPIClient:
    """Client issuing one GET per lookup against the PokéAPI."""

    def __init__(self):
        """Initialize the API client."""
        if not Config.validate():
            raise ValueError("Invalid configuration")

        self.base_url = Config.API_BASE_URL.rstrip("/")
        self.headers = Config.get_headers()
        self.timeout = Config.API_TIMEOUT

        # Transport failures and 429s are retried; other statuses are returned as-is.
        # Retry-After is ignored so the wait stays bounded by BACKOFF_FACTOR.
        self.session = requests.Session()
        retry_strategy = Retry(
            total=Config.MAX_RETRIES,
            backoff_factor=Config.BACKOFF_FACTOR,
            status_forcelist=[429],
            allowed_methods=["GET"],
            raise_on_status=False,
            respect_retry_after_header=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)
        self.session.headers.update(self.headers)

        logger.debug("PokéAPI client initialized")

    def _url(self, endpoint: str, name: str) -> str:
        return f"{self.base_url}/{endpoint}/{quote(name, safe='')}/"

    def _make_request(self, url: str) -> requests.Response:
        """
        Make a request to the API.

        Args:
            url: Absolute resource URL

        Returns:
            requests.Response: Response with a 2xx status

        Raises:
            FetchError: If the request fails or the status is not 2xx
        """
        try:
            logger.debug(f"Making request to {url}")
            response = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.RetryError as e:
            logger.error(f"API request failed after retries: {e}")
            raise RateLimitedError("rate limited by the API", url=url, status_code=429) from e
        except requests.exceptions.RequestException as e:
            logger.error(f"API request failed: {e}")
            raise NetworkError(f"network error: {e}", url=url) from e

        status = response.status_code
        if status == 404:
            raise NotFoundError("not found", url=url, status_code=status)
        if status == 429:
            raise RateLimitedError("rate limited by the API", url=url, status_code=status)
        if not 200 <= status < 300:
            logger.error(f"API returned HTTP {status} for {url}")
            raise UpstreamError(f"unexpected HTTP status {status}", url=url, status_code=status)

        return response

    def fetch(self, kind: Union[EntityKind, str], name: str) -> bytes:
        """
        Fetch the raw JSON body of a resource.

        Args:
            kind: Entity kind, or any API endpoint name for linked resources
            name: Normalized resource name or id

        Returns:
            bytes: Raw response body

        Raises:
            FetchError: NotFoundError, NetworkError, RateLimitedError or UpstreamError
        """
        endpoint = kind.value if isinstance(kind, EntityKind) else str(kind)
        url = self._url(endpoint, name)
        response = self._make_request(url)

        content = response.content
        if not content:
            raise UpstreamError("empty response body", url=url, status_code=response.status_code)

        logger.info(f"Fetched {endpoint} '{name}' ({len(content)} bytes)")
        return content

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()
