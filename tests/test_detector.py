"""Tests for LanguageDetector and shebang parsing."""

from __future__ import annotations

import pytest

from locc.detector import LanguageDetector, parse_shebang
from locc.exceptions import UnknownLanguageError


class TestParseShebang:
    @pytest.mark.parametrize(
        "line,expected",
        [
            ("#!/bin/bash", "bash"),
            ("#!/usr/bin/env python3", "python"),
            ("#!/usr/bin/python3.11", "python"),
            ("#! /usr/bin/env -S node --flag", "node"),
            ("#!/usr/bin/env LANG=C perl -w", "perl"),
            ("#!/usr/local/bin/Ruby", "ruby"),
        ],
    )
    def test_interpreters(self, line, expected):
        assert parse_shebang(line) == expected

    @pytest.mark.parametrize("line", [None, "", "#!", "#!/usr/bin/env", "# comment", "print(1)"])
    def test_no_interpreter(self, line):
        assert parse_shebang(line) is None


class TestLanguageDetector:
    def test_filename(self):
        detector = LanguageDetector()
        assert detector.detect("Makefile") == "makefile"
        assert detector.detect("src/CMakeLists.txt") == "cmake"
        assert detector.detect("Dockerfile") == "dockerfile"
        assert detector.detect(".bashrc") == "shell"

    def test_extension(self):
        detector = LanguageDetector()
        assert detector.detect("main.c") == "c"
        assert detector.detect("MAIN.PY") == "python"
        assert detector.detect("notes.txt") == "text"
        assert detector.detect("a.spec.ts") == "typescript"

    def test_longest_extension_wins(self):
        detector = LanguageDetector()
        detector.add_extension("d.ts", "javascript")
        assert detector.detect("types.d.ts") == "javascript"
        assert detector.detect("index.ts") == "typescript"

    def test_shebang(self):
        detector = LanguageDetector()
        assert detector.detect("run", first_line="#!/usr/bin/env python3") == "python"
        assert detector.detect("build", first_line="#!/bin/sh -e") == "shell"

    def test_extension_beats_shebang(self):
        detector = LanguageDetector()
        assert detector.detect("x.rb", first_line="#!/usr/bin/env python") == "ruby"

    def test_unknown(self):
        detector = LanguageDetector()
        assert detector.detect("README") == "unknown"
        assert detector.detect(".gitignore") == "unknown"
        assert detector.detect("tool", first_line="#!/usr/bin/env frobnicate") == "unknown"

    def test_override(self):
        detector = LanguageDetector()
        assert detector.detect("x.c", override="python") == "python"

    def test_unknown_override_raises(self):
        detector = LanguageDetector()
        with pytest.raises(UnknownLanguageError) as exc_info:
            detector.detect("x.c", override="klingon")
        assert exc_info.value.language == "klingon"
        assert "klingon" in str(exc_info.value)

    def test_remove_extension(self):
        detector = LanguageDetector()
        detector.remove_extension(".c")
        assert detector.detect("x.c") == "unknown"
        assert LanguageDetector().detect("x.c") == "c"

    def test_add_extension_unknown_language(self):
        with pytest.raises(UnknownLanguageError):
            LanguageDetector().add_extension("foo", "klingon")

    def test_extension_overrides_from_constructor(self):
        detector = LanguageDetector(extensions={".INC": "php"})
        assert detector.detect("header.inc") == "php"
