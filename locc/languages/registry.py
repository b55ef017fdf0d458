"""Language registry: immutable lookup of syntax profiles by id and detection key."""

from __future__ import annotations

import functools
import logging
import re
from typing import Iterable

from locc.exceptions import LanguageTableError, UnknownLanguageError
from locc.models.syntax import SyntaxProfile

logger = logging.getLogger(__name__)


class LanguageRegistry:
    """
    Read-only set of syntax profiles.

    Built once from a table of profiles; lookups by id, extension, filename and
    shebang interpreter. Every embedding must refer to a registered language.
    """

    def __init__(self, profiles: Iterable[SyntaxProfile]) -> None:
        self._profiles: dict[str, SyntaxProfile] = {}
        self._by_extension: dict[str, str] = {}
        self._by_filename: dict[str, str] = {}
        self._by_interpreter: dict[str, str] = {}

        for profile in profiles:
            if profile.id in self._profiles:
                raise LanguageTableError(f"Duplicate language id '{profile.id}'")
            self._profiles[profile.id] = profile
            self._index(profile.extensions, self._by_extension, profile.id)
            self._index(profile.filenames, self._by_filename, profile.id)
            self._index(profile.interpreters, self._by_interpreter, profile.id)

        for profile in self._profiles.values():
            self._validate(profile)

        logger.debug("Loaded %d syntax profiles", len(self._profiles))

    def _validate(self, profile: SyntaxProfile) -> None:
        delimiters = list(profile.line_comments)
        delimiters.extend(d for b in profile.block_comments for d in (b.start, b.end))
        delimiters.extend(d for s in profile.strings for d in (s.start, s.end))
        if not all(delimiters):
            raise LanguageTableError(f"Language '{profile.id}' has an empty delimiter")

        for rule in profile.embeddings:
            if rule.language not in self._profiles:
                raise LanguageTableError(
                    f"Language '{profile.id}' embeds unregistered language '{rule.language}'"
                )
            try:
                matches_empty = (
                    rule.start_pattern.match("") is not None
                    or rule.end_pattern.match("") is not None
                )
            except re.error as exc:
                raise LanguageTableError(
                    f"Language '{profile.id}' has an invalid embedding pattern: {exc}"
                ) from exc
            if matches_empty:
                raise LanguageTableError(
                    f"Language '{profile.id}' has an embedding pattern matching empty text"
                )

    @staticmethod
    def _index(keys: Iterable[str], index: dict[str, str], language: str) -> None:
        for key in keys:
            key = key.lower()
            if key in index and index[key] != language:
                raise LanguageTableError(
                    f"'{key}' is claimed by both '{index[key]}' and '{language}'"
                )
            index[key] = language

    def __contains__(self, language: object) -> bool:
        return language in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)

    def get(self, language: str) -> SyntaxProfile | None:
        return self._profiles.get(language)

    def require(self, language: str) -> SyntaxProfile:
        profile = self._profiles.get(language)
        if profile is None:
            raise UnknownLanguageError(language)
        return profile

    def list_all(self) -> list[SyntaxProfile]:
        return sorted(self._profiles.values(), key=lambda p: p.name.lower())

    def language_ids(self) -> frozenset[str]:
        return frozenset(self._profiles)

    def find_by_extension(self, extension: str) -> str | None:
        return self._by_extension.get(extension.lower().lstrip("."))

    def find_by_filename(self, filename: str) -> str | None:
        return self._by_filename.get(filename.lower())

    def find_by_interpreter(self, interpreter: str) -> str | None:
        return self._by_interpreter.get(interpreter.lower())

    def extension_map(self) -> dict[str, str]:
        return dict(self._by_extension)


def create_default_registry() -> LanguageRegistry:
    """Create a registry from the built-in syntax table."""
    from locc.languages.table import PROFILES

    return LanguageRegistry(PROFILES)


@functools.lru_cache(maxsize=1)
def default_registry() -> LanguageRegistry:
    """Process-wide registry, built on first use."""
    return create_default_registry()
