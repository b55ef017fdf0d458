"""locc: lines-of-code counting engine."""

__version__ = "0.1.0"

from locc.aggregator import Aggregator
from locc.api import LineCounter, aggregate, classify, list_supported_languages
from locc.classifier import MAX_EMBEDDING_DEPTH, LineClassifier
from locc.config import LoccConfig, ReportFormat
from locc.detector import LanguageDetector
from locc.exceptions import (
    ConfigError,
    FileSkippedError,
    LanguageTableError,
    LoccError,
    UnknownLanguageError,
)
from locc.languages.registry import LanguageRegistry, default_registry
from locc.models import (
    UNKNOWN_LANGUAGE,
    BlockComment,
    Counts,
    EmbeddingRule,
    FileStats,
    LanguageSummary,
    LineStats,
    ProjectSummary,
    StringLiteral,
    SyntaxProfile,
)
from locc.reports import render

__all__ = [
    "MAX_EMBEDDING_DEPTH",
    "UNKNOWN_LANGUAGE",
    "Aggregator",
    "BlockComment",
    "ConfigError",
    "Counts",
    "EmbeddingRule",
    "FileSkippedError",
    "FileStats",
    "LanguageDetector",
    "LanguageRegistry",
    "LanguageSummary",
    "LanguageTableError",
    "LineClassifier",
    "LineCounter",
    "LineStats",
    "LoccConfig",
    "LoccError",
    "ProjectSummary",
    "ReportFormat",
    "StringLiteral",
    "SyntaxProfile",
    "UnknownLanguageError",
    "aggregate",
    "classify",
    "default_registry",
    "list_supported_languages",
    "render",
]
