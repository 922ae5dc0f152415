"""HTTP client for fetching pages to scan for embedded images."""

from dataclasses import dataclass

import requests

from ..core.scanner import PayloadScanner

DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "b64img/1.0 (+https://pypi.org/project/b64img/)"


class FetchError(Exception):
    """Raised when a page cannot be fetched."""
    pass


@dataclass
class FetchedPage:
    """Body and content type of a fetched URL."""

    url: str
    text: str
    content_type: str = ""

    @property
    def is_html(self) -> bool:
        return PayloadScanner.looks_like_html(self.text, self.content_type)


class PageFetcher:
    """Fetches remote content with a single GET request (no retries)."""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, user_agent: str = DEFAULT_USER_AGENT):
        """
        Args:
            timeout: Request timeout in seconds
            user_agent: User-Agent header sent with the request
        """
        self.timeout = timeout
        self.user_agent = user_agent

    def _get_headers(self) -> dict:
        return {"User-Agent": self.user_agent}

    def fetch(self, url: str) -> FetchedPage:
        """Fetch a URL and return its decoded body.

        Raises:
            FetchError: If the request fails or the status is not 200
        """
        try:
            response = requests.get(url, headers=self._get_headers(), timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"Request failed: {e}") from e

        if response.status_code != 200:
            raise FetchError(f"HTTP {response.status_code}: {response.reason}")

        return FetchedPage(
            url=url,
            text=response.text,
            content_type=response.headers.get("Content-Type", ""),
        )
