"""Aggregation of per-file results into a project summary."""

from __future__ import annotations

import logging
import threading
from typing import Iterable

from locc.models.counts import (
    FileStats,
    FileSummary,
    LanguageSummary,
    ProjectSummary,
    SkippedFile,
)

logger = logging.getLogger(__name__)

DUPLICATE_PATH = "duplicate path"


class Aggregator:
    """
    Thread-safe fold of FileStats into a ProjectSummary.

    Every update is an addition, so the result does not depend on the order in
    which files (or partial summaries from other workers) arrive. A path that
    was already counted is recorded as skipped rather than counted twice.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._languages: dict[str, LanguageSummary] = {}
        self._files: dict[str, FileSummary] = {}
        self._skipped: dict[str, SkippedFile] = {}

    def add(self, stats: FileStats) -> None:
        file_summary = stats.summary()
        with self._lock:
            if file_summary.path in self._files:
                logger.info("Skipped %s: %s", file_summary.path, DUPLICATE_PATH)
                self._skip(file_summary.path, DUPLICATE_PATH)
                return
            self._fold(file_summary)

    def skip(self, path: str, reason: str) -> None:
        with self._lock:
            self._skip(path, reason)

    def merge(self, summary: ProjectSummary) -> None:
        """Fold in a partial summary produced elsewhere.

        All or nothing: if any of its files is already present, raises
        ValueError and leaves this aggregator unchanged.
        """
        with self._lock:
            clashes = sorted(f.path for f in summary.files if f.path in self._files)
            if clashes:
                raise ValueError(f"Files already aggregated: {', '.join(clashes)}")
            for file_summary in summary.files:
                self._fold(file_summary)
            for skipped in summary.skipped:
                self._skip(skipped.path, skipped.reason)

    def finalize(self) -> ProjectSummary:
        with self._lock:
            return ProjectSummary(
                languages=dict(sorted(self._languages.items())),
                files=tuple(self._files[p] for p in sorted(self._files)),
                skipped=tuple(self._skipped[p] for p in sorted(self._skipped)),
            )

    # Callers hold self._lock.

    def _skip(self, path: str, reason: str) -> None:
        self._skipped[path] = SkippedFile(path=path, reason=reason)

    def _fold(self, file_summary: FileSummary) -> None:
        contribution = LanguageSummary(
            language=file_summary.language, files=1, counts=file_summary.counts
        )
        self._files[file_summary.path] = file_summary
        current = self._languages.get(file_summary.language)
        self._languages[file_summary.language] = (
            contribution if current is None else current + contribution
        )


def aggregate(stats: Iterable[FileStats]) -> ProjectSummary:
    """Fold a sequence of FileStats into a finalized ProjectSummary."""
    aggregator = Aggregator()
    for file_stats in stats:
        aggregator.add(file_stats)
    return aggregator.finalize()
