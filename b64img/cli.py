"""Command-line interface for converting base64 images to files.

Usage:
    b64img convert [data] [--file F] [--url U] [--output O] [--outputdir D]
    b64img detect [data] [--file F] [--url U]
    b64img [data] [options]          # same as convert
    b64img                           # convert the contents of ./DATA

Environment variables: see b64img.config
"""

import argparse
import sys
from functools import partial
from pathlib import Path

from dotenv import load_dotenv
from tqdm import tqdm

from . import __version__
from .api.fetcher import FetchError, PageFetcher
from .config import Settings, load_settings
from .core.converter import ImageConverter, decode_image
from .core.errors import B64ImageError
from .core.sources import DATA_FILE, FILE, URL, InputResolver, SourceText, collect_payloads
from .storage.writer import ImageWriter

COMMANDS = ("convert", "detect")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _kb(size: int) -> str:
    return f"{size / 1024:.2f} KB"


def read_source(args, settings: Settings) -> SourceText:
    """Resolve the input source and report where it came from."""
    resolver = InputResolver(
        fetcher=PageFetcher(timeout=settings.fetch_timeout, user_agent=settings.user_agent),
        data_file=settings.data_file,
        base_dir=Path.cwd(),
    )
    if args.url and not args.data:
        print(f"Fetching content from: {args.url}")

    source = resolver.resolve(data=args.data, file=args.file, url=args.url)

    if source.origin in (FILE, DATA_FILE):
        print(f"Reading base64 data from: {source.location}")
    if source.origin in (FILE, DATA_FILE, URL):
        if source.is_html:
            print("Detected HTML content, performing enhanced scan...")
        else:
            print("Performing standard content scan...")
    return source


def get_payloads(args, settings: Settings) -> list[str]:
    source = read_source(args, settings)
    payloads = collect_payloads(source)
    if source.origin == URL or len(payloads) > 1:
        print(f"Found {len(payloads)} base64 image(s)")
    return payloads


def get_converter(settings: Settings) -> ImageConverter:
    writer = ImageWriter(base_dir=settings.base_dir(), prefix=settings.filename_prefix)
    return ImageConverter(writer)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def convert(args, settings: Settings) -> int:
    """Convert base64 image data to image file(s)."""
    payloads = get_payloads(args, settings)
    converter = get_converter(settings)

    if len(payloads) == 1:
        result = converter.convert(payloads[0], output=args.output, output_dir=args.outputdir)
        print(f"Saved: {result.path}")
        print(f"  File size:  {_kb(result.size)}")
        print(f"  Image type: {result.mimetype}")
        return 0

    print(f"Processing {len(payloads)} images...")
    report = converter.convert_all(
        payloads,
        output=args.output,
        output_dir=args.outputdir,
        progress=partial(tqdm, desc="Converting", unit="image"),
    )
    for result in report.converted:
        tqdm.write(f"Saved: {result.path} ({result.mimetype}, {_kb(result.size)})")
    for error in report.errors:
        tqdm.write(f"Warning: {error}")

    print(f"\n{report}")
    return 1 if report.has_errors() else 0


def detect(args, settings: Settings) -> int:
    """Detect image type from base64 data without writing a file."""
    payloads = get_payloads(args, settings)

    failures = 0
    for index, payload in enumerate(payloads, 1):
        if len(payloads) > 1:
            print(f"\nImage {index}:")
        try:
            image = decode_image(payload)
        except B64ImageError as e:
            print(f"Could not detect image type: {e}")
            failures += 1
            continue

        print(f"Detected image type: {image.mimetype}")
        print(f"  File extension:      {image.extension}")
        print(f"  Estimated file size: {_kb(image.size)}")
        dimensions = image.dimensions()
        if dimensions:
            print(f"  Dimensions:          {dimensions[0]}x{dimensions[1]}")

    return 1 if failures else 0


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("data", nargs="?", help="Base64 encoded image data or data URL")
    common.add_argument("--file", "-f", help="Read base64 data (or HTML) from a file")
    common.add_argument("--url", "-u", help="Fetch a URL and scan it for base64 images")
    common.add_argument("--config", "-c", help="Path to YAML config file")

    parser = argparse.ArgumentParser(
        prog="b64img",
        description="Convert base64 encoded images to image files",
        epilog="Without a command, arguments are passed to 'convert'. "
               "Without any arguments, data is read from ./DATA.",
    )
    parser.add_argument("--version", "-V", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- convert ---
    convert_parser = subparsers.add_parser(
        "convert",
        parents=[common],
        help="Convert base64 image data to file(s)",
    )
    convert_parser.add_argument("--output", "-o", help="Output file path")
    convert_parser.add_argument("--outputdir", "-d", help="Output directory")
    convert_parser.set_defaults(func=convert)

    # --- detect ---
    detect_parser = subparsers.add_parser(
        "detect",
        parents=[common],
        help="Detect image type without converting",
    )
    detect_parser.set_defaults(func=detect)

    return parser


def _with_default_command(argv: list[str]) -> list[str]:
    """Insert 'convert' when no command is given."""
    if any(arg in ("-h", "--help", "-V", "--version") for arg in argv[:1]):
        return argv
    if argv and argv[0] in COMMANDS:
        return argv
    return ["convert", *argv]


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    argv = sys.argv[1:] if argv is None else list(argv)

    parser = build_parser()
    args = parser.parse_args(_with_default_command(argv))

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    try:
        return args.func(args, settings)
    except (B64ImageError, FetchError, OSError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
