"""Data models for syntax profiles and line counts."""

from locc.models.counts import (
    ZERO,
    Counts,
    FileStats,
    FileSummary,
    LanguageSummary,
    LineStats,
    ProjectSummary,
    SkippedFile,
)
from locc.models.syntax import (
    PLAIN_TEXT,
    UNKNOWN_LANGUAGE,
    BlockComment,
    EmbeddingRule,
    StringLiteral,
    SyntaxProfile,
)

__all__ = [
    "PLAIN_TEXT",
    "UNKNOWN_LANGUAGE",
    "ZERO",
    "BlockComment",
    "Counts",
    "EmbeddingRule",
    "FileStats",
    "FileSummary",
    "LanguageSummary",
    "LineStats",
    "ProjectSummary",
    "SkippedFile",
    "StringLiteral",
    "SyntaxProfile",
]
