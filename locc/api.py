"""Unified LineCounter facade: single entry point for counting.

Operations:
    classify(path, content, language=None)  -> FileStats
    aggregate(stats)                        -> ProjectSummary
    list_supported_languages()              -> frozenset of language ids
    count_files(paths)                      -> ProjectSummary (reads files, parallel)
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Iterable

from locc.aggregator import Aggregator
from locc.aggregator import aggregate as _aggregate
from locc.classifier import LineClassifier
from locc.config import LoccConfig
from locc.detector import LanguageDetector
from locc.exceptions import FileSkippedError, LoccError
from locc.languages.registry import LanguageRegistry, default_registry
from locc.models.counts import FileStats, ProjectSummary
from locc.models.syntax import PLAIN_TEXT, UNKNOWN_LANGUAGE, SyntaxProfile

logger = logging.getLogger(__name__)

# Bytes inspected when sniffing for binary content
_BINARY_SNIFF_SIZE = 8192


class LineCounter:
    """
    Classify files and fold the results into summaries.

    Classification is pure and thread-safe; ``count_files`` reads files and
    classifies them on a thread pool, isolating per-file failures.
    """

    def __init__(
        self,
        config: LoccConfig | None = None,
        registry: LanguageRegistry | None = None,
    ) -> None:
        self.config = config if config is not None else LoccConfig()
        self.registry = registry if registry is not None else default_registry()
        self.detector = LanguageDetector(self.registry, self.config.extensions)
        self._classifiers: dict[str, LineClassifier] = {}
        self._classifiers_lock = threading.Lock()

    def list_supported_languages(self) -> frozenset[str]:
        return self.registry.language_ids()

    def classify(
        self,
        path: str | Path,
        content: str,
        language: str | None = None,
    ) -> FileStats:
        """
        Classify one file's content.

        Raises:
            UnknownLanguageError: ``language`` is given but not registered.
        """
        first_line = content.partition("\n")[0]
        language = self.detector.detect(path, first_line=first_line, override=language)
        profile = PLAIN_TEXT if language == UNKNOWN_LANGUAGE else self.registry.require(language)
        lines = self._classifier(profile).classify(content)
        return FileStats(path=str(path), language=language, lines=lines)

    def aggregate(self, stats: Iterable[FileStats]) -> ProjectSummary:
        return _aggregate(stats)

    def count_files(
        self,
        paths: Iterable[str | Path],
        language: str | None = None,
        root: str | Path | None = None,
    ) -> ProjectSummary:
        """Read, classify and aggregate files. Failed files are recorded as skipped.

        ``language`` forces one language for every file. With ``root``, files
        under it are reported by their path relative to it.
        """
        aggregator = Aggregator()
        with ThreadPoolExecutor(max_workers=self.config.workers) as pool:
            unique = dict.fromkeys(Path(p) for p in paths)
            futures = {pool.submit(self.count_file, p, language): p for p in unique}
            for future in as_completed(futures):
                path = futures[future]
                name = _display_path(path, root)
                try:
                    stats = future.result()
                except (OSError, LoccError) as exc:
                    reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
                    logger.info("Skipped %s: %s", name, reason)
                    aggregator.skip(name, reason)
                    continue
                aggregator.add(dataclasses.replace(stats, path=name))

        summary = aggregator.finalize()
        logger.debug(
            "Counted %d files in %d languages (%d skipped)",
            summary.file_count,
            len(summary.languages),
            len(summary.skipped),
        )
        return summary

    def count_file(self, path: Path, language: str | None = None) -> FileStats:
        """Read and classify a single file, applying the size, binary and unrecognized policies."""
        size = path.stat().st_size
        if size > self.config.max_file_size:
            raise FileSkippedError(f"file too large ({size} bytes)")

        data = path.read_bytes()
        if b"\x00" in data[:_BINARY_SNIFF_SIZE]:
            raise FileSkippedError("binary file")

        stats = self.classify(path, data.decode("utf-8-sig", errors="replace"), language)
        if stats.language == UNKNOWN_LANGUAGE and not self.config.count_unrecognized:
            raise FileSkippedError("unrecognized language")
        return stats

    def _classifier(self, profile: SyntaxProfile) -> LineClassifier:
        with self._classifiers_lock:
            classifier = self._classifiers.get(profile.id)
            if classifier is None:
                classifier = LineClassifier(
                    profile,
                    registry=self.registry,
                    count_doc_strings=self.config.count_doc_strings,
                )
                self._classifiers[profile.id] = classifier
            return classifier


def _display_path(path: Path, root: str | Path | None) -> str:
    """Path relative to ``root`` in POSIX form, or the path as given when outside it."""
    if root is None:
        return str(path)
    try:
        return path.resolve().relative_to(Path(root).resolve()).as_posix()
    except ValueError:
        return str(path)


def classify(path: str | Path, content: str, language: str | None = None) -> FileStats:
    """Classify with the default configuration and registry."""
    return _default_counter().classify(path, content, language)


def aggregate(stats: Iterable[FileStats]) -> ProjectSummary:
    return _aggregate(stats)


def list_supported_languages() -> frozenset[str]:
    return default_registry().language_ids()


@functools.lru_cache(maxsize=1)
def _default_counter() -> LineCounter:
    return LineCounter()
