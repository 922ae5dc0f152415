"""Core logic - detection, scanning, decoding and input sources."""

from .models import ImageFormat, ScanMode, DecodedImage, ConversionResult, BatchReport
from .errors import B64ImageError
from .detector import detect_image_type, detect_signature, decode_base64
from .scanner import PayloadScanner
from .converter import ImageConverter, decode_image
from .sources import InputResolver, SourceText, collect_payloads

__all__ = [
    "ImageFormat",
    "ScanMode",
    "DecodedImage",
    "ConversionResult",
    "BatchReport",
    "B64ImageError",
    "detect_image_type",
    "detect_signature",
    "decode_base64",
    "PayloadScanner",
    "ImageConverter",
    "decode_image",
    "InputResolver",
    "SourceText",
    "collect_payloads",
]
