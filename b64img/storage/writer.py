"""Output path construction and image file writing."""

import time
from pathlib import Path
from typing import Callable, Optional


class ImageWriter:
    """Builds output paths for decoded images and writes them to disk."""

    def __init__(
        self,
        base_dir: str | Path,
        prefix: str = "image",
        clock: Callable[[], float] = time.time,
    ):
        """
        Args:
            base_dir: Directory that relative output paths and directories resolve against
            prefix: File name prefix for generated names
            clock: Returns the current time in seconds, used for default names
        """
        self.base_dir = Path(base_dir)
        self.prefix = prefix
        self.clock = clock

    def default_stem(self) -> str:
        """Generated file name without extension: <prefix>_<timestamp ms>."""
        return f"{self.prefix}_{int(self.clock() * 1000)}"

    def resolve_path(
        self,
        extension: str,
        output: Optional[str] = None,
        output_dir: Optional[str] = None,
        index: Optional[int] = None,
    ) -> Path:
        """
        Build the target path for one image.

        Args:
            extension: Extension for generated names, or for an output without one
            output: Requested output path (optional)
            output_dir: Directory to place the file in (optional)
            index: 1-based batch position; adds a _<index> suffix

        Returns:
            Path to write the image to
        """
        if output:
            stem = f"{Path(output).with_suffix('')}_{index}" if index is not None else output
        else:
            stem = self.default_stem()
            if index is not None:
                stem = f"{stem}_{index}"

        path = Path(stem)
        if output_dir:
            path = self.base_dir / output_dir / path.name
        else:
            path = self.base_dir / path

        # Generated names always get the extension; the prefix may contain dots
        if not output or not path.suffix:
            path = path.with_name(f"{path.name}.{extension}")
        return path

    @staticmethod
    def write(data: bytes, path: str | Path) -> Path:
        """Write image bytes, creating parent directories. Overwrites existing files."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
        return path
