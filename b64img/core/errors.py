"""Typed failures raised while scanning, detecting and decoding payloads."""


class B64ImageError(Exception):
    """Base class for recoverable payload conversion errors."""
    pass


class UndetectedFormatError(B64ImageError):
    """Neither the declared MIME type nor the byte signature identified a format."""
    pass


class UnsupportedFormatError(B64ImageError):
    """A MIME type was identified but has no file extension mapping."""

    def __init__(self, mimetype: str):
        super().__init__(f"Unsupported image type: {mimetype}")
        self.mimetype = mimetype


class MalformedPayloadError(B64ImageError):
    """The payload is empty or decodes to zero bytes."""
    pass


class NoPayloadsFoundError(B64ImageError):
    """A scan over text or HTML found no base64 image data."""
    pass
