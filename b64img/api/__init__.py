"""External integrations - HTTP page fetcher."""

from .fetcher import PageFetcher, FetchedPage, FetchError

__all__ = ["PageFetcher", "FetchedPage", "FetchError"]
