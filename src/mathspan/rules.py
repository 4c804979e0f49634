"""markdown-it-py rules for math spans.

MathBlockRule runs once per candidate line ahead of the ``fence`` block
rule. MathInlineRule runs at each inline terminator position after the
``text`` rule, so it sees ``\\``, ``$`` and the other markdown-it
terminator characters before ``escape`` can consume them.

Mutation order:
    The block rule renders first and only then pushes its token and
    advances ``state.line``. A render failure leaves the state untouched so
    later block rules see the same line.

    The inline rule consumes the delimiters even when rendering fails; the
    span then produces no output but the rest of the line is still scanned.

Thread Safety:
    Rules hold only immutable delimiters and an emitter. All mutable state
    belongs to the StateBlock/StateInline of the parse in flight.

"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any

from mathspan.config import MathConfig
from mathspan.emitter import ContentEmitter, Rendered, RenderFailure
from mathspan.scanning import scan_block, scan_inline

if TYPE_CHECKING:
    from collections.abc import Sequence

    from markdown_it.rules_block import StateBlock
    from markdown_it.rules_inline import StateInline
    from markdown_it.token import Token

MATH_BLOCK = "math_block"
MATH_INLINE = "math_inline"


def _line_text(state: StateBlock, line: int) -> str:
    return state.src[state.bMarks[line] + state.tShift[line] : state.eMarks[line]]


class MathBlockRule:
    """Block rule recognizing display math that opens at a line start."""

    __slots__ = ("_delimiters", "_emitter")

    def __init__(self, config: MathConfig, emitter: ContentEmitter) -> None:
        self._delimiters = config.display_delimiters
        self._emitter = emitter

    def __call__(
        self,
        state: StateBlock,
        start_line: int,
        end_line: int,
        silent: bool,
    ) -> bool:
        if not self._delimiters:
            return False

        span = scan_block(partial(_line_text, state), start_line, end_line, self._delimiters)
        if span is None:
            return False
        if silent:
            return True

        tex = span.content.strip()
        match self._emitter.render(tex, display_mode=True):
            case RenderFailure():
                return False
            case Rendered(markup=markup):
                token = state.push(MATH_BLOCK, "math", 0)
                token.content = markup
                token.map = [span.start_line, span.end_line]
                token.block = True
                token.meta = {"tex": tex, "display": True}

        state.line = span.end_line
        return True


class MathInlineRule:
    """Inline rule recognizing math that opens and closes on one line."""

    __slots__ = ("_delimiters", "_emitter")

    def __init__(self, config: MathConfig, emitter: ContentEmitter) -> None:
        self._delimiters = config.delimiters
        self._emitter = emitter

    def __call__(self, state: StateInline, silent: bool) -> bool:
        span = scan_inline(state.src, state.pos, state.posMax, self._delimiters)
        if span is None:
            return False

        if not silent:
            display = span.delimiter.display
            result = self._emitter.render(span.content, display_mode=display)
            if isinstance(result, Rendered):
                token = state.push("html_inline", "", 0)
                token.content = result.markup
                token.meta = {"tex": span.content, "display": display}

        state.pos = span.end
        return True


def render_math_block(
    self: Any,
    tokens: Sequence[Token],
    idx: int,
    options: Any,
    env: Any,
) -> str:
    """Render a math_block token: its content is already markup."""
    return tokens[idx].content


__all__ = [
    "MATH_BLOCK",
    "MATH_INLINE",
    "MathBlockRule",
    "MathInlineRule",
    "render_math_block",
]
