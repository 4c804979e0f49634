"""
mathspan: math spans for markdown-it-py

Recognizes math bounded by configurable delimiter pairs, inline within a
line or as display blocks over any number of lines, and renders it to
MathML through latex2mathml.

Quick Start:
    >>> from mathspan import Markdown
    >>> md = Markdown()
    >>> html = md("Euler: \\(e^{i\\pi} + 1 = 0\\)")

    >>> # Or extend an existing MarkdownIt instance
    >>> from markdown_it import MarkdownIt
    >>> from mathspan import math_plugin
    >>> md = MarkdownIt("commonmark").use(math_plugin)

Custom Delimiters:
    >>> from mathspan import Delimiter, MathConfig
    >>> config = MathConfig(
    ...     delimiters=(
    ...         Delimiter("$$", "$$", display=True),
    ...         Delimiter("$", "$"),
    ...     )
    ... )
    >>> md = Markdown(config)

Installation:
    pip install mathspan
"""

from collections.abc import Mapping
from typing import Any

from markdown_it import MarkdownIt
from markdown_it.token import Token

from mathspan.config import DEFAULT_CONFIG, DEFAULT_DELIMITERS, Delimiter, MathConfig
from mathspan.emitter import ContentEmitter, Rendered, RenderFailure, RenderResult
from mathspan.engine import LatexToMathMLEngine, RenderOptions, TypesettingEngine
from mathspan.errors import MathConfigError, MathSpanError, PluginError, RenderError
from mathspan.plugin import math_plugin, resolve_config
from mathspan.rules import MathBlockRule, MathInlineRule
from mathspan.scanning import BlockMatch, InlineMatch, scan_block, scan_inline

__version__ = "0.1.0"


class Markdown:
    """High-level Markdown processor with math support.

    Usage:
        >>> md = Markdown()
        >>> html = md("\\[\\frac{a}{b}\\]")

        >>> # Access the token stream
        >>> tokens = md.parse("\\[x\\]")
        >>> tokens[0].type
        'math_block'

    Thread Safety:
        Configuration is immutable and each parse owns its state. Safe to
        share one instance between threads.

    """

    __slots__ = ("_config", "_md")

    def __init__(
        self,
        config: MathConfig | Mapping[str, Any] | None = None,
        *,
        engine: TypesettingEngine | None = None,
        preset: str = "commonmark",
        options_update: Mapping[str, Any] | None = None,
    ) -> None:
        """Initialize Markdown processor.

        Args:
            config: Math configuration (defaults to ``\\[ \\]`` and ``\\( \\)``)
            engine: Typesetting engine (defaults to latex2mathml)
            preset: markdown-it-py preset name
            options_update: Overrides for the preset's options
        """
        self._config = resolve_config(config)
        self._md = MarkdownIt(preset, options_update=options_update)
        math_plugin(self._md, self._config, engine=engine)

    @property
    def config(self) -> MathConfig:
        return self._config

    @property
    def parser(self) -> MarkdownIt:
        """The underlying MarkdownIt instance."""
        return self._md

    def __call__(self, source: str, env: dict[str, Any] | None = None) -> str:
        """Parse and render Markdown in one call.

        Args:
            source: Markdown source text
            env: Optional markdown-it environment

        Returns:
            HTML string

        """
        return self._md.render(source, env)

    def parse(self, source: str, env: dict[str, Any] | None = None) -> list[Token]:
        """Parse Markdown source into the markdown-it token stream."""
        return self._md.parse(source, env)


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_DELIMITERS",
    "BlockMatch",
    "ContentEmitter",
    "Delimiter",
    "InlineMatch",
    "LatexToMathMLEngine",
    "Markdown",
    "MathBlockRule",
    "MathConfig",
    "MathConfigError",
    "MathInlineRule",
    "MathSpanError",
    "PluginError",
    "RenderError",
    "RenderFailure",
    "RenderOptions",
    "RenderResult",
    "Rendered",
    "TypesettingEngine",
    "math_plugin",
    "resolve_config",
    "scan_block",
    "scan_inline",
]
