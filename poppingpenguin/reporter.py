"""Shrink results and their console report."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

_MEGABYTE = 1024 * 1024


@dataclass(frozen=True)
class ShrinkResult:
    """Sizes of one file before and after shrinking."""

    file_path: str
    original_size: int
    new_size: int

    def shrink_percentage(self) -> float:
        """Percentage by which the file got smaller; 0 for an empty original."""
        if self.original_size == 0:
            return 0.0
        return (1 - self.new_size / self.original_size) * 100


class ConsoleReporter:
    """Prints one line per file, sorted by path, followed by a summary."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def report_results(
        self,
        results: Iterable[ShrinkResult],
        total_original_size: int,
        total_new_size: int,
    ) -> None:
        """Write the per-file lines and the summary."""
        stream = self.stream if self.stream is not None else sys.stdout
        for result in sorted(results, key=lambda r: r.file_path):
            print(
                f"{result.file_path}: {result.original_size / _MEGABYTE:.2f} MB → "
                f"{result.new_size / _MEGABYTE:.2f} MB "
                f"({result.shrink_percentage():.2f}% smaller)",
                file=stream,
            )

        total_percentage = 0.0
        if total_original_size > 0:
            total_percentage = (1 - total_new_size / total_original_size) * 100

        print(
            f"\nSummary: {total_original_size / _MEGABYTE:.2f} MB → "
            f"{total_new_size / _MEGABYTE:.2f} MB ({total_percentage:.2f}% smaller)",
            file=stream,
        )