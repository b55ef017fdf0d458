"""Data models for language syntax profiles."""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class BlockComment:
    """Block comment delimiter pair, e.g. ``/*`` ... ``*/``."""

    start: str
    end: str
    nestable: bool = False


@dataclass(frozen=True)
class StringLiteral:
    """
    String literal delimiters.

    ``multiline=False`` closes the literal at the end of its line, so a stray
    quote cannot swallow the rest of a file. ``doc=True`` marks doc-string
    quotes (e.g. Python ``\"\"\"``), which count as comments when they open a line.
    """

    start: str
    end: str
    escape: str | None = "\\"
    multiline: bool = True
    doc: bool = False


@dataclass(frozen=True)
class EmbeddingRule:
    """Text between ``start`` and ``end`` (regexes) is classified as ``language``."""

    start: str
    end: str
    language: str

    @property
    def start_pattern(self) -> re.Pattern[str]:
        return re.compile(self.start, re.IGNORECASE)

    @property
    def end_pattern(self) -> re.Pattern[str]:
        return re.compile(self.end, re.IGNORECASE)


@dataclass(frozen=True)
class SyntaxProfile:
    """Comment and string rules for one language, plus its detection data."""

    id: str
    name: str
    line_comments: tuple[str, ...] = ()
    block_comments: tuple[BlockComment, ...] = ()
    strings: tuple[StringLiteral, ...] = ()
    embeddings: tuple[EmbeddingRule, ...] = ()
    extensions: tuple[str, ...] = ()  # lower-case, without the leading dot
    filenames: tuple[str, ...] = ()  # lower-case
    interpreters: tuple[str, ...] = ()  # shebang interpreter names, version suffix stripped


# Profile used for files whose language could not be detected: every
# non-blank line is code, nothing is a comment.
UNKNOWN_LANGUAGE = "unknown"

PLAIN_TEXT = SyntaxProfile(id=UNKNOWN_LANGUAGE, name="Unknown")
