"""Tests for embedded-language regions (CSS/JS inside HTML)."""

from __future__ import annotations

import pytest

from locc.classifier import MAX_EMBEDDING_DEPTH, LineClassifier
from locc.exceptions import LanguageTableError
from locc.languages.registry import LanguageRegistry
from locc.models.counts import Counts
from locc.models.syntax import EmbeddingRule, SyntaxProfile


def _flags(lines):
    return [(line.has_code, line.has_comment) for line in lines]


CODE = (True, False)
COMMENT = (False, True)
MIXED = (True, True)
BLANK = (False, False)

PAGE = (
    "<html>\n"
    "<style>\n"
    "  /* css */\n"
    "  body { }\n"
    "</style>\n"
    "<!-- note -->\n"
    "<script>\n"
    "  // js\n"
    "  let x = 1;\n"
    "</script>\n"
    "</html>\n"
)


class TestHtmlEmbedding:
    def test_page_flags(self, counter):
        stats = counter.classify("index.html", PAGE)
        assert _flags(stats.lines) == [
            CODE,
            CODE,
            COMMENT,
            CODE,
            CODE,
            COMMENT,
            CODE,
            COMMENT,
            CODE,
            CODE,
            CODE,
        ]

    def test_line_languages(self, counter):
        stats = counter.classify("index.html", PAGE)
        languages = [line.language for line in stats.lines]
        assert languages == [
            "html",
            "html",
            "css",
            "css",
            "html",
            "html",
            "html",
            "javascript",
            "javascript",
            "html",
            "html",
        ]

    def test_language_counts_break_down_embedded_lines(self, counter):
        stats = counter.classify("index.html", PAGE)
        breakdown = stats.language_counts()
        assert breakdown["css"] == Counts(code=1, comment=1)
        assert breakdown["javascript"] == Counts(code=1, comment=1)
        assert breakdown["html"] == Counts(code=6, comment=1)
        assert stats.counts == Counts(code=8, comment=3)

    def test_region_matches_standalone_classification(self, counter, registry):
        css = "a { color: red; }\n/* c */\n\nb {\n}\n"
        standalone = LineClassifier(registry.require("css")).classify(css)
        hosted = counter.classify("page.html", "<style>\n" + css + "</style>\n").lines
        assert hosted[1:-1] == standalone
        assert len(hosted) == len(standalone) + 2

    def test_inline_region_belongs_to_host(self, counter):
        stats = counter.classify("a.html", "<style>p{}</style><b>x</b>")
        assert _flags(stats.lines) == [CODE]
        assert stats.lines[0].language == "html"

    def test_inline_comment_in_region(self, counter):
        stats = counter.classify("a.html", "<style>/* c */</style>")
        assert _flags(stats.lines) == [MIXED]

    def test_trigger_inside_host_comment_is_ignored(self, counter):
        stats = counter.classify("a.html", "<!-- <script> -->\n// not js\n")
        assert _flags(stats.lines) == [COMMENT, CODE]
        assert stats.lines[1].language == "html"

    def test_unterminated_region_runs_to_eof(self, counter):
        stats = counter.classify("a.html", "<script>\nlet a = 1; // x\n")
        assert _flags(stats.lines) == [CODE, MIXED]
        assert stats.lines[1].language == "javascript"

    def test_tags_are_case_insensitive(self, counter):
        stats = counter.classify("a.html", "<STYLE type='text/css'>\n/* c */\n</STYLE>\n")
        assert _flags(stats.lines) == [CODE, COMMENT, CODE]

    def test_terminator_closes_unterminated_comment(self, counter):
        stats = counter.classify("a.html", "<script>/* open\n</script>\n<p>\n")
        assert _flags(stats.lines) == [MIXED, CODE, CODE]
        assert stats.lines[2].language == "html"


class TestEmbeddingDepth:
    def test_depth_limit_disables_embedding(self, registry):
        classifier = LineClassifier(
            registry.require("html"), registry=registry, depth=MAX_EMBEDDING_DEPTH
        )
        assert _flags(classifier.classify("<style>/* c */</style>")) == [CODE]

    @pytest.fixture
    def box_registry(self):
        box = SyntaxProfile(
            id="box",
            name="Box",
            line_comments=("#",),
            embeddings=(EmbeddingRule(r"\[", r"\]", "box"),),
        )
        return LanguageRegistry([box])

    def test_self_embedding_degrades_to_code(self, box_registry):
        classifier = LineClassifier(box_registry.require("box"), registry=box_registry)
        lines = classifier.classify("[" * 50 + "\n# c\n")
        assert _flags(lines) == [CODE, COMMENT]

    def test_inner_regions_end_with_outer_region(self, box_registry):
        classifier = LineClassifier(box_registry.require("box"), registry=box_registry)
        lines = classifier.classify("[[[[ # c ]]]] x")
        assert _flags(lines) == [MIXED]


class TestEmbeddingValidation:
    def test_embedding_of_unregistered_language_rejected(self):
        host = SyntaxProfile(id="host", name="Host", embeddings=(EmbeddingRule("<a>", "</a>", "ghost"),))
        with pytest.raises(LanguageTableError, match="ghost"):
            LanguageRegistry([host])

    def test_pattern_matching_empty_text_rejected(self):
        host = SyntaxProfile(id="host", name="Host", embeddings=(EmbeddingRule("x*", "y", "host"),))
        with pytest.raises(LanguageTableError, match="empty"):
            LanguageRegistry([host])
