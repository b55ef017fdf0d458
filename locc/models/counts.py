"""Data models for line classification results and summaries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from locc.models.syntax import UNKNOWN_LANGUAGE


@dataclass(frozen=True)
class Counts:
    """Line counts. A mixed code/comment line counts as code."""

    code: int = 0
    comment: int = 0
    blank: int = 0

    @property
    def total(self) -> int:
        return self.code + self.comment + self.blank

    def __add__(self, other: Counts) -> Counts:
        return Counts(
            code=self.code + other.code,
            comment=self.comment + other.comment,
            blank=self.blank + other.blank,
        )

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "code": self.code,
            "comment": self.comment,
            "blank": self.blank,
        }


ZERO = Counts()


@dataclass(frozen=True)
class LineStats:
    """Classification of one physical line."""

    has_code: bool = False
    has_comment: bool = False
    language: str = ""

    @property
    def is_blank(self) -> bool:
        return not (self.has_code or self.has_comment)

    def as_counts(self) -> Counts:
        if self.has_code:
            return Counts(code=1)
        if self.has_comment:
            return Counts(comment=1)
        return Counts(blank=1)


@dataclass(frozen=True)
class FileSummary:
    """Per-file counts kept by a ProjectSummary (no per-line detail)."""

    path: str
    language: str
    counts: Counts
    language_counts: Mapping[str, Counts] = field(default_factory=dict)


@dataclass(frozen=True)
class FileStats:
    """Result of classifying one file."""

    path: str
    language: str
    lines: tuple[LineStats, ...] = ()

    @property
    def counts(self) -> Counts:
        code = sum(1 for line in self.lines if line.has_code)
        comment = sum(1 for line in self.lines if line.has_comment and not line.has_code)
        return Counts(code=code, comment=comment, blank=len(self.lines) - code - comment)

    @property
    def total_lines(self) -> int:
        return len(self.lines)

    def language_counts(self) -> dict[str, Counts]:
        """Counts broken down by the language owning each line (embedded regions)."""
        result: dict[str, Counts] = {}
        for line in self.lines:
            lang = line.language or self.language
            result[lang] = result.get(lang, ZERO) + line.as_counts()
        return result

    def summary(self) -> FileSummary:
        return FileSummary(
            path=self.path,
            language=self.language,
            counts=self.counts,
            language_counts=self.language_counts(),
        )


@dataclass(frozen=True)
class LanguageSummary:
    """Totals for all files sharing a detected language."""

    language: str
    files: int = 0
    counts: Counts = ZERO

    def __add__(self, other: LanguageSummary) -> LanguageSummary:
        if other.language != self.language:
            raise ValueError(
                f"Cannot combine summaries of '{self.language}' and '{other.language}'"
            )
        return LanguageSummary(
            language=self.language,
            files=self.files + other.files,
            counts=self.counts + other.counts,
        )


@dataclass(frozen=True)
class SkippedFile:
    path: str
    reason: str


@dataclass(frozen=True)
class ProjectSummary:
    """Finalized, read-only aggregate of a counting run."""

    languages: Mapping[str, LanguageSummary] = field(default_factory=dict)
    files: tuple[FileSummary, ...] = ()
    skipped: tuple[SkippedFile, ...] = ()

    @property
    def totals(self) -> Counts:
        total = ZERO
        for summary in self.languages.values():
            total = total + summary.counts
        return total

    @property
    def file_count(self) -> int:
        return sum(s.files for s in self.languages.values())

    @property
    def unrecognized(self) -> tuple[FileSummary, ...]:
        return tuple(f for f in self.files if f.language == UNKNOWN_LANGUAGE)
