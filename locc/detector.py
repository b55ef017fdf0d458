"""Language detection: override, filename, extension, then shebang."""

from __future__ import annotations

import logging
import re
from pathlib import PurePath

from locc.exceptions import UnknownLanguageError
from locc.languages.registry import LanguageRegistry, default_registry
from locc.models.syntax import UNKNOWN_LANGUAGE

logger = logging.getLogger(__name__)

# "python3.11" -> "python", "pypy3" -> "pypy"
_VERSION_SUFFIX = re.compile(r"[\d.]+$")


def parse_shebang(first_line: str | None) -> str | None:
    """Return the interpreter name from a ``#!`` line, or None.

    ``#!/usr/bin/env -S python3 -u`` resolves to ``python``.
    """
    if not first_line or not first_line.startswith("#!"):
        return None
    words = first_line[2:].split()
    if not words:
        return None
    interpreter = PurePath(words[0]).name
    if interpreter == "env":
        args = [w for w in words[1:] if not w.startswith("-") and "=" not in w]
        if not args:
            return None
        interpreter = PurePath(args[0]).name
    stripped = _VERSION_SUFFIX.sub("", interpreter)
    return (stripped or interpreter).lower()


class LanguageDetector:
    """
    Map a file path (and optionally its first line) to a language id.

    Priority:
        1. Explicit override (must be registered).
        2. Full filename, e.g. ``Makefile``, ``CMakeLists.txt``.
        3. Longest matching extension, e.g. ``d.ts`` before ``ts``.
        4. Shebang interpreter.
        5. ``UNKNOWN_LANGUAGE``.

    Extension overrides are local to the detector instance; the registry
    itself is never modified.
    """

    def __init__(
        self,
        registry: LanguageRegistry | None = None,
        extensions: dict[str, str] | None = None,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self._extensions = self.registry.extension_map()
        for ext, language in (extensions or {}).items():
            self.add_extension(ext, language)

    def add_extension(self, extension: str, language: str) -> None:
        """Map ``extension`` (case-insensitive, no leading dot) to ``language``."""
        if language not in self.registry:
            raise UnknownLanguageError(language)
        self._extensions[extension.lower().lstrip(".")] = language

    def remove_extension(self, extension: str) -> None:
        self._extensions.pop(extension.lower().lstrip("."), None)

    def detect(
        self,
        path: str | PurePath,
        first_line: str | None = None,
        override: str | None = None,
    ) -> str:
        if override is not None:
            if override not in self.registry:
                raise UnknownLanguageError(override)
            return override

        name = PurePath(path).name
        language = self.registry.find_by_filename(name)
        if language:
            return language

        language = self._match_extension(name)
        if language:
            return language

        interpreter = parse_shebang(first_line)
        if interpreter:
            language = self.registry.find_by_interpreter(interpreter)
            if language:
                return language
            logger.debug("Unrecognized shebang interpreter %s in %s", interpreter, path)

        return UNKNOWN_LANGUAGE

    def _match_extension(self, name: str) -> str | None:
        # "a.spec.ts" -> try "spec.ts", then "ts". A leading dot is not an extension.
        parts = name.lower().lstrip(".").split(".")
        for i in range(1, len(parts)):
            language = self._extensions.get(".".join(parts[i:]))
            if language:
                return language
        return None
