"""Sample payloads shared by the tests."""

import base64

# 1x1 PNG
PNG_1X1_BASE64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)
PNG_1X1_DATA_URL = f"data:image/png;base64,{PNG_1X1_BASE64}"
PNG_1X1_SIZE = 70

HEADERS = {
    "image/jpeg": b"\xff\xd8\xff\xe0\x00\x10JFIF",
    "image/png": b"\x89PNG\r\n\x1a\n",
    "image/gif": b"GIF89a",
    "image/webp": b"RIFF\x24\x00\x00\x00WEBPVP8 ",
    "image/bmp": b"BM\x36\x00\x00\x00",
    "image/tiff": b"II*\x00",
}

TRAILER = bytes(range(40))


def encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def sample_bytes(mimetype: str) -> bytes:
    """Signature header followed by arbitrary bytes."""
    return HEADERS[mimetype] + TRAILER


def data_url(mimetype: str, data: bytes | None = None) -> str:
    if data is None:
        data = sample_bytes(mimetype)
    return f"data:{mimetype};base64,{encode(data)}"
