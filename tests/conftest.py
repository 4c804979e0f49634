"""Shared fixtures for mathspan tests."""

from __future__ import annotations

import pytest

from mathspan import Markdown
from mathspan.engine import RenderOptions
from mathspan.utils.text import escape_html


class EchoEngine:
    """Engine that wraps the source in a marker element."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, RenderOptions]] = []

    def render_to_string(self, source: str, options: RenderOptions) -> str:
        self.calls.append((source, options))
        mode = "block" if options.display_mode else "inline"
        return f'<m mode="{mode}">{escape_html(source)}</m>'


class FaultyEngine:
    """Engine that always fails as if out of resources."""

    def __init__(self) -> None:
        self.calls = 0

    def render_to_string(self, source: str, options: RenderOptions) -> str:
        self.calls += 1
        raise MemoryError("engine exhausted")


@pytest.fixture
def echo_engine() -> EchoEngine:
    return EchoEngine()


@pytest.fixture
def faulty_engine() -> FaultyEngine:
    return FaultyEngine()


@pytest.fixture
def md() -> Markdown:
    """Markdown with default delimiters and the latex2mathml engine."""
    return Markdown()


@pytest.fixture
def echo_md(echo_engine: EchoEngine) -> Markdown:
    """Markdown with default delimiters and a predictable engine."""
    return Markdown(engine=echo_engine)
