"""Image type detection from data-URL declarations and magic bytes.

Two independent classifiers are composed by priority:

1. ``detect_declared_mime`` trusts the MIME type declared in a data URL.
2. ``detect_signature`` inspects the leading bytes of the decoded buffer.

SVG and ICO have no reliable binary signature and are only recognised
through the declared MIME type.
"""

import base64
import re
from typing import Optional

from .errors import UnsupportedFormatError
from .models import ImageFormat, MIME_TO_EXTENSION

DATA_URL_PREFIX = re.compile(r"^data:([^;]+);base64,")
DATA_URL_BODY = re.compile(r"^data:[^;]+;base64,(.*)$", re.DOTALL)

_NOT_BASE64 = re.compile(r"[^A-Za-z0-9+/]")
_URLSAFE_TO_STANDARD = str.maketrans("-_", "+/")

# (format, ((offset, expected bytes), ...)); every window must match.
SIGNATURES: tuple[tuple[ImageFormat, tuple[tuple[int, bytes], ...]], ...] = (
    (ImageFormat.JPEG, ((0, b"\xff\xd8\xff"),)),
    (ImageFormat.PNG, ((0, b"\x89PNG\r\n\x1a\n"),)),
    (ImageFormat.GIF, ((0, b"GIF8"),)),
    (ImageFormat.WEBP, ((0, b"RIFF"), (8, b"WEBP"))),
    (ImageFormat.BMP, ((0, b"BM"),)),
    (ImageFormat.TIFF, ((0, b"II*\x00"),)),
    (ImageFormat.TIFF, ((0, b"MM\x00*"),)),
)


def detect_declared_mime(text: str) -> Optional[str]:
    """Return the MIME type declared by a data URL, or None for anything else."""
    match = DATA_URL_PREFIX.match(text)
    return match.group(1) if match else None


def extract_base64_data(text: str) -> str:
    """Strip a data-URL envelope, returning raw base64 input unchanged."""
    match = DATA_URL_BODY.match(text)
    return match.group(1) if match else text


def decode_base64(text: str) -> bytes:
    """Decode base64 leniently.

    Both the standard and URL-safe alphabets are accepted. Characters outside
    the alphabet are dropped, decoding stops at the first ``=`` and missing
    padding is tolerated. Malformed input yields garbled or empty bytes
    instead of raising.
    """
    body = text.translate(_URLSAFE_TO_STANDARD).split("=", 1)[0]
    body = _NOT_BASE64.sub("", body)
    # A single leftover character carries fewer than 8 bits
    if len(body) % 4 == 1:
        body = body[:-1]
    body += "=" * (-len(body) % 4)
    return base64.b64decode(body)


def detect_signature(data: bytes) -> Optional[ImageFormat]:
    """Classify a buffer by its magic bytes. First match wins."""
    for image_format, windows in SIGNATURES:
        if all(data[offset:offset + len(expected)] == expected for offset, expected in windows):
            return image_format
    return None


def detect_image_type(text: str) -> Optional[str]:
    """Return the MIME type of a data URL or raw base64 payload.

    A declared data-URL type is returned verbatim without looking at the
    bytes. Raw base64 is decoded and classified by signature. Returns None
    when the type cannot be determined.
    """
    declared = detect_declared_mime(text)
    if declared is not None:
        return declared

    image_format = detect_signature(decode_base64(text))
    return image_format.mimetype if image_format else None


def extension_for(mimetype: str) -> str:
    """Map a MIME type to a file extension."""
    try:
        return MIME_TO_EXTENSION[mimetype.lower()]
    except KeyError:
        raise UnsupportedFormatError(mimetype) from None
