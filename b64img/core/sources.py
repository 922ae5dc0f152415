"""Resolving where payload text comes from and collecting payloads from it."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .errors import NoPayloadsFoundError
from .models import ScanMode
from .scanner import PayloadScanner
from ..api.fetcher import PageFetcher

ARGUMENT = "argument"
FILE = "file"
URL = "url"
DATA_FILE = "data-file"


@dataclass
class SourceText:
    """Text to scan, with where it came from and whether it is HTML."""

    text: str
    origin: str
    is_html: bool = False
    location: Optional[str] = None  # file path or URL


class InputResolver:
    """Picks the input source: argument, URL, file, then the DATA file."""

    def __init__(
        self,
        fetcher: PageFetcher,
        data_file: str = "DATA",
        base_dir: str | Path = ".",
    ):
        self.fetcher = fetcher
        self.data_file = data_file
        self.base_dir = Path(base_dir)

    @staticmethod
    def read_file(path: str | Path) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def resolve(
        self,
        data: Optional[str] = None,
        file: Optional[str] = None,
        url: Optional[str] = None,
    ) -> SourceText:
        """
        Return the text for the first available source.

        Raises:
            FileNotFoundError: If an explicitly given file does not exist
            FetchError: If the URL cannot be fetched
            NoPayloadsFoundError: If no input was given and there is no DATA file
        """
        if data:
            return SourceText(text=data, origin=ARGUMENT)

        if url:
            page = self.fetcher.fetch(url)
            return SourceText(text=page.text, origin=URL, is_html=page.is_html, location=url)

        if file:
            text = self.read_file(file)
            return SourceText(
                text=text,
                origin=FILE,
                is_html=PayloadScanner.looks_like_html(text),
                location=str(file),
            )

        data_path = self.base_dir / self.data_file
        if not data_path.is_file():
            raise NoPayloadsFoundError(
                "No base64 data provided, no URL/file path given, "
                f"and no {self.data_file} file found in {self.base_dir}"
            )
        text = self.read_file(data_path)
        return SourceText(
            text=text,
            origin=DATA_FILE,
            is_html=PayloadScanner.looks_like_html(text),
            location=str(data_path),
        )


def collect_payloads(source: SourceText, scanner: type[PayloadScanner] = PayloadScanner) -> list[str]:
    """Turn source text into the payloads to convert.

    An argument is always a single payload. URL and HTML sources must contain
    at least one data URL. Plain files fall back to treating the whole text
    as one raw payload when no data URL is found.
    """
    if source.origin == ARGUMENT:
        return [source.text]

    mode = ScanMode.HTML if source.is_html else ScanMode.PLAIN
    payloads = scanner.scan(source.text, mode)
    if payloads:
        return payloads

    if source.origin == URL:
        raise NoPayloadsFoundError("No base64 image data found in the URL content")
    if source.is_html:
        raise NoPayloadsFoundError("No base64 image data found in the HTML file")
    return [source.text]
