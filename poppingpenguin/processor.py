"""Image shrinking through an external ImageMagick ``convert`` command."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence


class ProcessingError(Exception):
    """Raised when an image cannot be shrunk."""


class ImageMagickProcessor:
    """Re-encodes an image in place at a given quality level."""

    def __init__(
        self,
        compression_level: int = 80,
        command: str | os.PathLike | Sequence[str] = "convert",
    ) -> None:
        self.compression_level = compression_level
        if isinstance(command, (str, os.PathLike)):
            self.command = [os.fspath(command)]
        else:
            self.command = [os.fspath(part) for part in command]

    def process(self, file_path: str | os.PathLike) -> None:
        """Convert ``file_path`` into a temporary file, then replace the original."""
        path = os.fspath(file_path)
        temp_path = path + ".tmp"
        args = [
            *self.command,
            path,
            "-quality",
            f"{self.compression_level}%",
            temp_path,
        ]
        try:
            subprocess.run(
                args,
                check=True,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise ProcessingError(f"failed to process image: {exc}") from exc

        try:
            os.replace(temp_path, path)
        except OSError as exc:
            raise ProcessingError(f"failed to replace original file: {exc}") from exc