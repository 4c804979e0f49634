"""Content emitter: captured span content to rendered markup.

Wraps a TypesettingEngine and converts its exceptions into an explicit
result value, so rules branch on the outcome instead of catching
engine-specific exception types.

Usage:
    >>> emitter = ContentEmitter(LatexToMathMLEngine())
    >>> match emitter.render("x^2", display_mode=False):
    ...     case Rendered(markup=markup):
    ...         token.content = markup
    ...     case RenderFailure():
    ...         pass

"""

from __future__ import annotations

from dataclasses import dataclass

from mathspan.engine import LatexToMathMLEngine, RenderOptions, TypesettingEngine
from mathspan.errors import RenderError
from mathspan.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Rendered:
    """Successful render."""

    markup: str


@dataclass(frozen=True, slots=True)
class RenderFailure:
    """Engine fault for a structurally valid span."""

    error: RenderError


type RenderResult = Rendered | RenderFailure


class ContentEmitter:
    """Render raw math content through an engine in permissive mode.

    Thread Safety:
        Holds only the engine and output format. Safe for concurrent use
        when the engine is.

    """

    __slots__ = ("_engine", "_output")

    def __init__(
        self,
        engine: TypesettingEngine | None = None,
        *,
        output: str = "mathml",
    ) -> None:
        self._engine = engine if engine is not None else LatexToMathMLEngine()
        self._output = output

    @property
    def engine(self) -> TypesettingEngine:
        return self._engine

    def render(self, content: str, display_mode: bool) -> RenderResult:
        """Render content, reporting engine faults instead of raising.

        Args:
            content: Raw notation captured between delimiters
            display_mode: Whether the span is display math

        Returns:
            Rendered with the markup, or RenderFailure carrying a RenderError
            (already logged).
        """
        options = RenderOptions(
            display_mode=display_mode,
            output=self._output,
            throw_on_error=False,
        )
        try:
            markup = self._engine.render_to_string(content, options)
        except Exception as e:
            error = RenderError(content, display_mode, cause=e)
            logger.error("%s", error, exc_info=e)
            return RenderFailure(error)
        return Rendered(markup)


__all__ = [
    "ContentEmitter",
    "RenderFailure",
    "RenderResult",
    "Rendered",
]
