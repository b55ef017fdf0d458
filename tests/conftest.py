"""Shared pytest fixtures for locc tests."""

from __future__ import annotations

import pytest

from locc.api import LineCounter
from locc.languages.registry import default_registry
from locc.models.syntax import BlockComment, StringLiteral, SyntaxProfile


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def counter():
    return LineCounter()


@pytest.fixture
def c_like():
    """C-like profile: ``//`` line comments, flat ``/* */`` blocks, one-line ``"`` strings."""
    return SyntaxProfile(
        id="clike",
        name="C-like",
        line_comments=("//",),
        block_comments=(BlockComment("/*", "*/"),),
        strings=(StringLiteral('"', '"', multiline=False),),
    )


@pytest.fixture
def c_like_nested():
    """Same as ``c_like`` but block comments nest and strings may span lines."""
    return SyntaxProfile(
        id="clike",
        name="C-like",
        line_comments=("//",),
        block_comments=(BlockComment("/*", "*/", nestable=True),),
        strings=(StringLiteral('"', '"'),),
    )
