"""Math plugin for markdown-it-py.

Adds recognition of math spans bounded by configurable delimiter pairs and
renders them through a typesetting engine.

Usage:
    >>> from markdown_it import MarkdownIt
    >>> from mathspan import math_plugin
    >>> md = MarkdownIt("commonmark").use(math_plugin)
    >>> md.render("Inline: \\(E = mc^2\\)")
    '<p>Inline: <math ...>...</math></p>\\n'

Syntax (default delimiters):
Inline math: \\(expression\\)
Display math: \\[expression\\] alone on its line(s)

Registration:
- block rule ``math_block`` before ``fence``
- inline rule ``math_inline`` after ``text``
- render rule for ``math_block`` tokens (content passes through unchanged)

Thread Safety:
This plugin is stateless after registration and thread-safe.

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from mathspan.config import DEFAULT_CONFIG, MathConfig
from mathspan.emitter import ContentEmitter
from mathspan.errors import PluginError
from mathspan.rules import (
    MATH_BLOCK,
    MATH_INLINE,
    MathBlockRule,
    MathInlineRule,
    render_math_block,
)
from mathspan.utils.logger import get_logger

if TYPE_CHECKING:
    from markdown_it import MarkdownIt

    from mathspan.engine import TypesettingEngine

PLUGIN_NAME = "math"

logger = get_logger(__name__)


def resolve_config(config: MathConfig | Mapping[str, Any] | None) -> MathConfig:
    """Normalize the accepted configuration forms to a MathConfig."""
    if config is None:
        return DEFAULT_CONFIG
    if isinstance(config, MathConfig):
        return config
    if isinstance(config, Mapping):
        return MathConfig.from_dict(config)
    raise TypeError(f"Expected MathConfig or mapping, got {type(config).__name__}")


def math_plugin(
    md: MarkdownIt,
    config: MathConfig | Mapping[str, Any] | None = None,
    *,
    engine: TypesettingEngine | None = None,
) -> None:
    """Register math rules on a MarkdownIt instance.

    Args:
        md: Parser to extend
        config: Delimiters and output options (defaults to ``\\[ \\]``
            display and ``\\( \\)`` inline, MathML output)
        engine: Typesetting engine (defaults to latex2mathml)

    Raises:
        PluginError: If the plugin is already registered or the parser
            lacks the ``fence`` or ``text`` rule

    """
    resolved = resolve_config(config)

    block_rules = md.block.ruler.get_all_rules()
    inline_rules = md.inline.ruler.get_all_rules()
    if MATH_BLOCK in block_rules:
        raise PluginError(PLUGIN_NAME, "already registered on this parser")
    if "fence" not in block_rules:
        raise PluginError(PLUGIN_NAME, "parser has no 'fence' block rule to anchor to")
    if "text" not in inline_rules:
        raise PluginError(PLUGIN_NAME, "parser has no 'text' inline rule to anchor to")

    emitter = ContentEmitter(engine, output=resolved.output)
    md.block.ruler.before("fence", MATH_BLOCK, MathBlockRule(resolved, emitter))
    md.inline.ruler.after("text", MATH_INLINE, MathInlineRule(resolved, emitter))
    md.add_render_rule(MATH_BLOCK, render_math_block)

    logger.debug(
        "Registered math rules with %d delimiter pair(s), output=%s",
        len(resolved.delimiters),
        resolved.output,
    )


__all__ = [
    "PLUGIN_NAME",
    "math_plugin",
    "resolve_config",
]
