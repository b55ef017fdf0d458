"""Line classifier: single left-to-right scan over file content.

The scanner is in one of four states: normal, line comment, block comment
(with an explicit stack for nestable delimiters) or string. Each character
range is marked as code or comment on the physical line(s) it covers;
whitespace marks nothing, so a line with no marks is blank.

Embedded languages (CSS/JS inside HTML) are handled by running a nested
classifier for the region between an embedding's start and end patterns and
splicing its per-line results back into the host's lines.
"""

from __future__ import annotations

import functools
import re
from typing import Union

from locc.languages.registry import LanguageRegistry, default_registry
from locc.models.counts import LineStats
from locc.models.syntax import BlockComment, EmbeddingRule, StringLiteral, SyntaxProfile

MAX_EMBEDDING_DEPTH = 8

_CODE = 0
_COMMENT = 1

_Token = Union[EmbeddingRule, StringLiteral, BlockComment, str]


class _LineBuffer:
    """Per-line code/comment flags, appended to as the scan crosses newlines."""

    def __init__(self, language: str) -> None:
        self.language = language
        self.code: list[bool] = [False]
        self.comment: list[bool] = [False]
        self.owner: list[str] = [language]

    def mark(self, text: str, kind: int) -> None:
        for i, piece in enumerate(text.split("\n")):
            if i:
                self._newline(self.language)
            if piece.strip():
                self._flag(kind, self.language)

    def splice(self, other: _LineBuffer) -> None:
        """Append an embedded region's lines; its first line merges with the current one."""
        for i in range(len(other.code)):
            if i:
                self._newline(other.owner[i])
            if other.code[i]:
                self._flag(_CODE, other.owner[i])
            if other.comment[i]:
                self._flag(_COMMENT, other.owner[i])

    def to_lines(self) -> list[LineStats]:
        return [
            LineStats(has_code=c, has_comment=m, language=o)
            for c, m, o in zip(self.code, self.comment, self.owner)
        ]

    def _newline(self, owner: str) -> None:
        self.code.append(False)
        self.comment.append(False)
        self.owner.append(owner)

    def _flag(self, kind: int, owner: str) -> None:
        # The first non-whitespace character decides which language owns the line.
        if not (self.code[-1] or self.comment[-1]):
            self.owner[-1] = owner
        if kind == _CODE:
            self.code[-1] = True
        else:
            self.comment[-1] = True


@functools.lru_cache(maxsize=None)
def _compile_starts(
    profile: SyntaxProfile, embeddings: bool
) -> tuple[dict[str, _Token], re.Pattern[str] | None]:
    """Build one alternation matching every token that can leave the normal state.

    Embedding triggers come first. Literal delimiters follow longest first, so
    ``--[[`` beats ``--`` and ``\"\"\"`` beats ``"``; equal lengths keep the order
    string, block comment, line comment.
    """
    tokens: dict[str, _Token] = {}
    parts: list[str] = []

    if embeddings:
        for rule in profile.embeddings:
            name = f"t{len(tokens)}"
            tokens[name] = rule
            parts.append(f"(?P<{name}>(?i:{rule.start}))")

    literals: list[tuple[str, _Token]] = []
    literals.extend((s.start, s) for s in profile.strings)
    literals.extend((b.start, b) for b in profile.block_comments)
    literals.extend((c, c) for c in profile.line_comments)
    literals.sort(key=lambda item: -len(item[0]))
    for text, token in literals:
        name = f"t{len(tokens)}"
        tokens[name] = token
        parts.append(f"(?P<{name}>{re.escape(text)})")

    if not parts:
        return tokens, None
    return tokens, re.compile("|".join(parts))


@functools.lru_cache(maxsize=None)
def _block_pattern(block: BlockComment) -> re.Pattern[str]:
    end = f"(?P<end>{re.escape(block.end)})"
    if block.nestable and block.start != block.end:
        return re.compile(f"{end}|(?P<start>{re.escape(block.start)})")
    return re.compile(end)


@functools.lru_cache(maxsize=None)
def _string_pattern(literal: StringLiteral) -> re.Pattern[str]:
    parts = []
    if literal.escape:
        parts.append(f"(?P<escape>{re.escape(literal.escape)}[\\s\\S])")
    parts.append(f"(?P<end>{re.escape(literal.end)})")
    if not literal.multiline:
        parts.append("(?P<newline>\n)")
    return re.compile("|".join(parts))


class LineClassifier:
    """
    Classify every physical line of a file as code, comment and/or blank.

    One instance per (profile, options); instances hold no per-scan state and
    can be shared between threads.
    """

    def __init__(
        self,
        profile: SyntaxProfile,
        registry: LanguageRegistry | None = None,
        count_doc_strings: bool = True,
        depth: int = 0,
    ) -> None:
        self.profile = profile
        self.registry = registry if registry is not None else default_registry()
        self.count_doc_strings = count_doc_strings
        self.depth = depth
        self._tokens, self._starts = _compile_starts(profile, depth < MAX_EMBEDDING_DEPTH)

    def classify(self, content: str) -> tuple[LineStats, ...]:
        """Return one LineStats per physical line. A trailing newline does not start a line."""
        buf, _, _ = self._scan(content, 0, None, len(content))
        lines = buf.to_lines()
        if not content or content.endswith("\n"):
            lines.pop()
        return tuple(lines)

    def _scan(
        self,
        content: str,
        pos: int,
        terminator: re.Pattern[str] | None,
        limit: int,
    ) -> tuple[_LineBuffer, int, int]:
        """Scan from ``pos`` until ``terminator`` matches or ``limit`` is reached.

        Returns the line buffer, the offset where scanning stopped and the
        offset just past the terminator (equal when it never matched).
        """
        buf = _LineBuffer(self.profile.id)
        term = terminator.search(content, pos, limit) if terminator else None
        bound = term.start() if term else limit
        stack: list[BlockComment] = []

        while pos < bound:
            if stack:
                pos = self._scan_block(content, pos, bound, stack, buf)
                continue

            m = self._starts.search(content, pos, bound) if self._starts else None
            if m is None:
                buf.mark(content[pos:bound], _CODE)
                pos = bound
                break

            buf.mark(content[pos : m.start()], _CODE)
            token = self._tokens[m.lastgroup]
            if isinstance(token, EmbeddingRule):
                pos = self._scan_embedding(content, m, token, bound, buf)
            elif isinstance(token, StringLiteral):
                pos = self._scan_string(content, m, token, bound, buf)
            elif isinstance(token, BlockComment):
                buf.mark(m.group(), _COMMENT)
                stack.append(token)
                pos = m.end()
            else:
                eol = content.find("\n", m.end(), bound)
                if eol == -1:
                    eol = bound
                buf.mark(content[m.start() : eol], _COMMENT)
                pos = eol

        return buf, bound, term.end() if term else bound

    def _scan_block(
        self,
        content: str,
        pos: int,
        bound: int,
        stack: list[BlockComment],
        buf: _LineBuffer,
    ) -> int:
        block = stack[-1]
        m = _block_pattern(block).search(content, pos, bound)
        if m is None:
            # Unterminated: the comment runs to the end of the region.
            buf.mark(content[pos:bound], _COMMENT)
            return bound
        buf.mark(content[pos : m.end()], _COMMENT)
        if m.lastgroup == "start":
            stack.append(block)
        else:
            stack.pop()
        return m.end()

    def _scan_string(
        self,
        content: str,
        start: re.Match[str],
        literal: StringLiteral,
        bound: int,
        buf: _LineBuffer,
    ) -> int:
        kind = _CODE
        if literal.doc and self.count_doc_strings and _opens_line(content, start.start()):
            kind = _COMMENT

        pattern = _string_pattern(literal)
        pos = start.end()
        while True:
            m = pattern.search(content, pos, bound)
            if m is None:
                buf.mark(content[start.start() : bound], kind)
                return bound
            if m.lastgroup == "escape":
                pos = m.end()
                continue
            if m.lastgroup == "newline":
                buf.mark(content[start.start() : m.start()], kind)
                return m.start()
            buf.mark(content[start.start() : m.end()], kind)
            return m.end()

    def _scan_embedding(
        self,
        content: str,
        trigger: re.Match[str],
        rule: EmbeddingRule,
        bound: int,
        buf: _LineBuffer,
    ) -> int:
        buf.mark(trigger.group(), _CODE)
        nested = LineClassifier(
            self.registry.require(rule.language),
            registry=self.registry,
            count_doc_strings=self.count_doc_strings,
            depth=self.depth + 1,
        )
        inner, end, resume = nested._scan(content, trigger.end(), rule.end_pattern, bound)
        buf.splice(inner)
        buf.mark(content[end:resume], _CODE)
        return resume


def _opens_line(content: str, offset: int) -> bool:
    """True if only whitespace precedes ``offset`` on its line."""
    line_start = content.rfind("\n", 0, offset) + 1
    return not content[line_start:offset].strip()
