"""b64img - Convert base64 encoded images to image files.

Package structure:
    b64img/
    ├── cli.py              # Command-line interface
    ├── config.py           # Settings from YAML and environment
    ├── core/               # Core logic
    │   ├── detector.py     # Image type detection (data URL, magic bytes)
    │   ├── scanner.py      # Data URL scanning in text and HTML
    │   ├── converter.py    # Payload decoding and conversion
    │   ├── sources.py      # Input source resolution
    │   ├── models.py       # Data models (ImageFormat, results)
    │   └── errors.py       # Error types
    ├── storage/
    │   └── writer.py       # Output paths and file writing
    └── api/
        └── fetcher.py      # HTTP page fetcher
"""

__version__ = "1.0.0"

from .core.models import ImageFormat, MIME_TO_EXTENSION, ScanMode, DecodedImage, ConversionResult, BatchReport
from .core.errors import (
    B64ImageError,
    UndetectedFormatError,
    UnsupportedFormatError,
    MalformedPayloadError,
    NoPayloadsFoundError,
)
from .core.detector import (
    detect_declared_mime,
    detect_signature,
    detect_image_type,
    decode_base64,
    extract_base64_data,
    extension_for,
)
from .core.scanner import PayloadScanner
from .core.converter import ImageConverter, decode_image
from .core.sources import InputResolver, SourceText, collect_payloads
from .storage.writer import ImageWriter
from .api.fetcher import PageFetcher, FetchError

__all__ = [
    # Core
    "ImageFormat",
    "MIME_TO_EXTENSION",
    "ScanMode",
    "DecodedImage",
    "ConversionResult",
    "BatchReport",
    "B64ImageError",
    "UndetectedFormatError",
    "UnsupportedFormatError",
    "MalformedPayloadError",
    "NoPayloadsFoundError",
    "detect_declared_mime",
    "detect_signature",
    "detect_image_type",
    "decode_base64",
    "extract_base64_data",
    "extension_for",
    "PayloadScanner",
    "ImageConverter",
    "decode_image",
    "InputResolver",
    "SourceText",
    "collect_payloads",
    # Storage
    "ImageWriter",
    # API
    "PageFetcher",
    "FetchError",
]
