"""Exception classes for mathspan.

Provides standardized exceptions for error handling throughout mathspan.

Structural mismatches (no opener, no closer, trailing content) are never
exceptions; rules report them by returning ``False``.
"""

from __future__ import annotations


class MathSpanError(Exception):
    """Base exception for all mathspan errors.

    Subclass this for specific error categories.
    """

    pass


class MathConfigError(MathSpanError):
    """Invalid delimiter or option in a math configuration.

    Raised at construction time so that a bad configuration never reaches
    a parse.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize config error.

        Args:
            field: Name of the offending field (e.g., "left", "output")
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid math config field '{field}': {message}")


class RenderError(MathSpanError):
    """Error raised by the typesetting engine for well-formed delimiters.

    The engine runs in permissive mode, so this signals an engine fault
    (resource exhaustion, internal bug) rather than malformed notation.
    """

    def __init__(
        self,
        source: str,
        display_mode: bool,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize render error.

        Args:
            source: Raw notation passed to the engine
            display_mode: Whether display mode was requested
            cause: Original engine exception (optional)
        """
        self.source = source
        self.display_mode = display_mode
        self.cause = cause

        mode = "display" if display_mode else "inline"
        preview = source if len(source) <= 40 else source[:37] + "..."
        detail = f": {type(cause).__name__}: {cause}" if cause is not None else ""
        super().__init__(f"Failed to render {mode} math {preview!r}{detail}")


class PluginError(MathSpanError):
    """Error in plugin registration.

    Raised when the host parser lacks a rule the plugin anchors to.
    """

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
