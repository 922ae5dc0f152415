"""Data models for image formats, decoded payloads and conversion results."""

import io
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError


class ImageFormat(Enum):
    """Image formats this tool knows how to name and save."""

    JPEG = ("image/jpeg", "jpg")
    PNG = ("image/png", "png")
    GIF = ("image/gif", "gif")
    WEBP = ("image/webp", "webp")
    BMP = ("image/bmp", "bmp")
    TIFF = ("image/tiff", "tiff")
    SVG = ("image/svg+xml", "svg")
    ICO = ("image/ico", "ico")

    def __init__(self, mimetype: str, extension: str):
        self.mimetype = mimetype
        self.extension = extension


MIME_TO_EXTENSION = {
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/bmp": "bmp",
    "image/tiff": "tiff",
    "image/svg+xml": "svg",
    "image/ico": "ico",
    "image/x-icon": "ico",
    "image/vnd.microsoft.icon": "ico",
}


class ScanMode(Enum):
    PLAIN = "plain"
    HTML = "html"


def probe_dimensions(data: bytes) -> Optional[tuple[int, int]]:
    """Return (width, height) if Pillow can open the buffer, else None."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            return img.size
    except (UnidentifiedImageError, OSError):
        return None


@dataclass
class DecodedImage:
    """A payload decoded to bytes together with its detected type."""

    data: bytes
    mimetype: str
    extension: str

    @property
    def size(self) -> int:
        return len(self.data)

    def dimensions(self) -> Optional[tuple[int, int]]:
        return probe_dimensions(self.data)


@dataclass
class ConversionResult:
    """Outcome of writing one payload to disk."""

    path: Path
    mimetype: str
    size: int  # bytes
    index: Optional[int] = None  # 1-based position within a batch


@dataclass
class BatchReport:
    """Report of a multi-payload conversion."""

    converted: list[ConversionResult] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def has_errors(self) -> bool:
        return bool(self.errors)

    def __str__(self) -> str:
        lines = [f"Converted: {len(self.converted)}"]
        if self.errors:
            lines.append(f"Errors: {len(self.errors)}")
        return "\n".join(lines)
