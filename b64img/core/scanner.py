"""Scanning text and HTML for embedded base64 image data URLs."""

import re
from typing import Optional

from .models import ScanMode

DATA_URL_REGEX = r"data:image/[^;]+;base64,[A-Za-z0-9+/=]+"


class PayloadScanner:
    """Finds ``data:image/...;base64,...`` payloads in plain text or HTML."""

    DATA_URL_PATTERN = re.compile(DATA_URL_REGEX)

    # (context name, outer pattern). The data URL inside each outer match is
    # pulled out with DATA_URL_PATTERN.
    HTML_CONTEXTS: tuple[tuple[str, re.Pattern], ...] = (
        ("src", re.compile(rf"src\s*=\s*[\"']({DATA_URL_REGEX})[\"']", re.IGNORECASE)),
        (
            "background-image",
            re.compile(rf"background-image\s*:\s*url\([\"']?({DATA_URL_REGEX})[\"']?\)", re.IGNORECASE),
        ),
        (
            "style",
            re.compile(
                rf"style\s*=\s*[\"'][^\"']*url\([\"']?({DATA_URL_REGEX})[\"']?\)[^\"']*[\"']",
                re.IGNORECASE,
            ),
        ),
        ("content", re.compile(rf"content\s*:\s*url\([\"']?({DATA_URL_REGEX})[\"']?\)", re.IGNORECASE)),
    )

    @classmethod
    def scan(cls, text: str, mode: ScanMode = ScanMode.PLAIN) -> list[str]:
        """
        Return the data URLs found in text, in order of first appearance.

        Args:
            text: Plain text or HTML markup
            mode: ScanMode.HTML also applies the HTML/CSS context patterns

        Returns:
            Data URLs without duplicates (exact string comparison)
        """
        found: list[str] = []
        seen: set[str] = set()

        def add(candidate: str) -> None:
            if candidate not in seen:
                seen.add(candidate)
                found.append(candidate)

        for match in cls.DATA_URL_PATTERN.finditer(text):
            add(match.group(0))

        if mode is ScanMode.HTML:
            for _, pattern in cls.HTML_CONTEXTS:
                for match in pattern.finditer(text):
                    inner = cls.extract_data_url(match.group(0))
                    if inner:
                        add(inner)

        return found

    @classmethod
    def scan_text(cls, text: str) -> list[str]:
        return cls.scan(text, ScanMode.PLAIN)

    @classmethod
    def scan_html(cls, html: str) -> list[str]:
        return cls.scan(html, ScanMode.HTML)

    @classmethod
    def extract_data_url(cls, fragment: str) -> Optional[str]:
        """Return the first data URL inside an attribute or CSS fragment."""
        match = cls.DATA_URL_PATTERN.search(fragment)
        return match.group(0) if match else None

    @staticmethod
    def looks_like_html(text: str, content_type: Optional[str] = None) -> bool:
        """Check whether content should be scanned as HTML."""
        if content_type and "text/html" in content_type.lower():
            return True
        return text.strip().lower().startswith("<!doctype") or "<html" in text
