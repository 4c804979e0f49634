"""Typesetting engines for mathspan.

An engine turns raw TeX notation into a markup string. mathspan never
parses the notation itself; it only hands captured span content to an
engine and attaches whatever comes back to the token stream.

Output formats:
- mathml: MathML produced by latex2mathml (default)
- source: escaped TeX wrapped in ``\\(..\\)`` / ``\\[..\\]`` inside a
  ``math`` span or div, for client-side typesetting (MathJax, KaTeX)

Permissive mode:
    With ``throw_on_error=False`` a notation error degrades to an error
    span holding the escaped source, the way KaTeX renders errors. Resource
    faults (MemoryError, RecursionError) always propagate.

Thread Safety:
    LatexToMathMLEngine is stateless. Safe for concurrent use.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from latex2mathml.converter import convert

from mathspan.utils.logger import get_logger
from mathspan.utils.text import escape_html

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """Options passed to an engine for a single span.

    Attributes:
        display_mode: Render as display (block) math
        output: Output format selector
        throw_on_error: Raise on notation errors instead of degrading

    """

    display_mode: bool = False
    output: str = "mathml"
    throw_on_error: bool = False


@runtime_checkable
class TypesettingEngine(Protocol):
    """Protocol for typesetting engines.

    Engines must be synchronous and free of side effects beyond their
    return value. They may raise on internal faults even in permissive mode.
    """

    def render_to_string(self, source: str, options: RenderOptions) -> str:
        """Render TeX source to a markup string."""
        ...


class LatexToMathMLEngine:
    """Engine backed by latex2mathml."""

    __slots__ = ()

    def render_to_string(self, source: str, options: RenderOptions) -> str:
        if options.output == "source":
            return _render_source(source, options.display_mode)
        if options.output != "mathml":
            raise ValueError(f"Unsupported output format: {options.output!r}")

        display = "block" if options.display_mode else "inline"
        try:
            return convert(source, display=display)
        except (MemoryError, RecursionError):
            raise
        except Exception as e:
            if options.throw_on_error:
                raise
            logger.debug("latex2mathml could not convert %r: %s", source, e)
            return _render_error(source, e)


def _render_source(source: str, display_mode: bool) -> str:
    if display_mode:
        return f'<div class="math notranslate nohighlight">\\[{escape_html(source)}\\]</div>'
    return f'<span class="math notranslate nohighlight">\\({escape_html(source)}\\)</span>'


def _render_error(source: str, error: Exception) -> str:
    title = escape_html(f"{type(error).__name__}: {error}")
    return f'<span class="math-error" title="{title}">{escape_html(source)}</span>'


__all__ = [
    "LatexToMathMLEngine",
    "RenderOptions",
    "TypesettingEngine",
]
