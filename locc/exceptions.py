"""Custom exceptions for locc."""


class LoccError(Exception):
    """Base exception for all locc errors."""


class UnknownLanguageError(LoccError):
    """Raised when a language id has no registered syntax profile."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"Unknown language '{language}'")


class LanguageTableError(LoccError):
    """Raised when the syntax table is inconsistent (duplicate ids, dangling embeddings)."""


class ConfigError(LoccError):
    """Raised when a configuration file cannot be read or validated."""


class FileSkippedError(LoccError):
    """Raised for a file the counter declines to classify (too large, binary, unrecognized)."""
