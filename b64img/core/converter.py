"""Decoding payloads into classified image buffers and writing them out."""

import re
from typing import Callable, Iterable, Optional

from .detector import decode_base64, detect_image_type, extension_for, extract_base64_data
from .errors import B64ImageError, MalformedPayloadError, UndetectedFormatError
from .models import BatchReport, ConversionResult, DecodedImage
from ..storage.writer import ImageWriter

_WHITESPACE = re.compile(r"\s")


def normalize_payload(text: str) -> str:
    """Remove all whitespace and line breaks from a payload."""
    payload = _WHITESPACE.sub("", text)
    if not payload:
        raise MalformedPayloadError("Empty base64 data provided")
    return payload


def decode_image(text: str) -> DecodedImage:
    """Decode a data URL or raw base64 payload and classify it.

    Raises:
        MalformedPayloadError: Payload is empty or decodes to zero bytes
        UndetectedFormatError: Image type could not be determined
        UnsupportedFormatError: Image type has no file extension mapping
    """
    payload = normalize_payload(text)

    data = decode_base64(extract_base64_data(payload))
    if not data:
        raise MalformedPayloadError("Base64 data decoded to zero bytes")

    mimetype = detect_image_type(payload)
    if mimetype is None:
        raise UndetectedFormatError("Could not detect image type from base64 data")

    return DecodedImage(data=data, mimetype=mimetype, extension=extension_for(mimetype))


class ImageConverter:
    """Converts base64 payloads into image files through an ImageWriter."""

    def __init__(self, writer: ImageWriter):
        self.writer = writer

    def convert(
        self,
        payload: str,
        output: Optional[str] = None,
        output_dir: Optional[str] = None,
        index: Optional[int] = None,
    ) -> ConversionResult:
        """Decode one payload and write it to disk.

        Args:
            payload: Data URL or raw base64 string
            output: Output file path; the detected extension is appended if missing
            output_dir: Directory that overrides the directory part of output
            index: 1-based position within a batch, appended to the file name

        Returns:
            ConversionResult describing the written file
        """
        image = decode_image(payload)
        path = self.writer.resolve_path(
            image.extension, output=output, output_dir=output_dir, index=index
        )
        self.writer.write(image.data, path)
        return ConversionResult(path=path, mimetype=image.mimetype, size=image.size, index=index)

    def convert_all(
        self,
        payloads: Iterable[str],
        output: Optional[str] = None,
        output_dir: Optional[str] = None,
        progress: Optional[Callable[[Iterable[str]], Iterable[str]]] = None,
    ) -> BatchReport:
        """Convert several payloads, each one independently.

        A failing payload is recorded in the report and does not stop the
        remaining ones from being attempted.

        Args:
            payloads: Data URLs or raw base64 strings
            output: Base output path; each file gets a ``_<n>`` suffix
            output_dir: Output directory for every file
            progress: Optional wrapper around the iterable (e.g. tqdm)
        """
        report = BatchReport()
        items = progress(payloads) if progress else payloads

        for index, payload in enumerate(items, 1):
            try:
                result = self.convert(payload, output=output, output_dir=output_dir, index=index)
            except (B64ImageError, OSError) as e:
                report.errors.append(f"Image {index}: {e}")
                continue
            report.converted.append(result)

        return report
