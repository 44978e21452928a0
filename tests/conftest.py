"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessline.core.rules import ChessRules
from chessline.lines.builder import LineBuilder


@pytest.fixture()
def builder() -> LineBuilder:
    """A fresh builder with default options."""
    return LineBuilder()


@pytest.fixture()
def rules() -> ChessRules:
    return ChessRules()
