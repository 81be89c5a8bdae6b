"""Expands file patterns, shrinks the files concurrently and reports sizes."""

from __future__ import annotations

import glob
import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from poppingpenguin.logger import ConsoleLogger, new_logger
from poppingpenguin.processor import ImageMagickProcessor, ProcessingError
from poppingpenguin.reporter import ConsoleReporter, ShrinkResult


def _check_pattern(pattern: str) -> None:
    """Raise ValueError for a malformed glob pattern."""
    error = ValueError(f"invalid pattern {pattern}: syntax error in pattern")
    escapes = os.sep != "\\"
    i = 0
    length = len(pattern)
    while i < length:
        char = pattern[i]
        if char == "\\" and escapes:
            if i + 1 >= length:
                raise error
            i += 2
            continue
        if char == "[":
            j = i + 1
            if j < length and pattern[j] == "^":
                j += 1
            if j < length and pattern[j] == "]":
                raise error
            end = pattern.find("]", j)
            if end == -1:
                raise error
            i = end + 1
            continue
        i += 1


class ImageShrinker:
    """Shrinks image files in parallel and reports per-file and total savings."""

    def __init__(
        self,
        compression_level: int = 80,
        concurrency_level: int = 4,
        logger: ConsoleLogger | None = None,
        processor=None,
        reporter=None,
    ) -> None:
        if concurrency_level < 1:
            raise ValueError("concurrency level must be at least 1")
        self.compression_level = compression_level
        self.concurrency_level = concurrency_level
        self.logger = logger if logger is not None else new_logger(0)
        self.processor = (
            processor if processor is not None else ImageMagickProcessor(compression_level)
        )
        self.reporter = reporter if reporter is not None else ConsoleReporter()

    def shrink_images(self, patterns: Iterable[str]) -> list[ShrinkResult]:
        """Shrink every file matched by ``patterns`` and return the successful results."""
        files = self.expand_file_patterns(patterns)
        self.logger.debug("Found %d files to process", len(files))

        if not files:
            self.logger.warning("No files found matching the provided patterns")
            return []

        self.logger.debug("Processing with concurrency level: %d", self.concurrency_level)

        with ThreadPoolExecutor(max_workers=self.concurrency_level) as pool:
            outcomes = list(pool.map(self._process_logged, files))

        results = [outcome for outcome in outcomes if outcome is not None]
        failures = len(outcomes) - len(results)
        if failures:
            self.logger.warning("Failed to process %d files", failures)

        if results:
            self.reporter.report_results(
                results,
                sum(r.original_size for r in results),
                sum(r.new_size for r in results),
            )
        return results

    def expand_file_patterns(self, patterns: Iterable[str]) -> list[str]:
        """Expand glob patterns into file paths, in pattern order."""
        all_files: list[str] = []
        for pattern in patterns:
            pattern = os.fspath(pattern)
            self.logger.debug("Expanding pattern: %s", pattern)
            _check_pattern(pattern)
            files = sorted(glob.glob(pattern))
            if not files:
                self.logger.warning("No files found matching pattern: %s", pattern)
                continue
            all_files.extend(files)
        return all_files

    def process_file(self, file_path: str) -> ShrinkResult:
        """Shrink one file and return its sizes before and after."""
        original_size = os.stat(file_path).st_size
        self.processor.process(file_path)
        new_size = os.stat(file_path).st_size
        return ShrinkResult(file_path, original_size, new_size)

    def _process_logged(self, file_path: str) -> ShrinkResult | None:
        self.logger.debug("Processing file: %s", file_path)
        try:
            return self.process_file(file_path)
        except (OSError, ProcessingError) as exc:
            self.logger.error("Failed to process %s: %s", file_path, exc)
            return None