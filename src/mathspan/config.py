"""Delimiter configuration for mathspan.

A MathConfig is built once when the plugin is registered and captured by
the block and inline rules. It is a frozen dataclass, so every parse that
goes through the same MarkdownIt instance reads the same delimiters.

Usage:
    from mathspan.config import Delimiter, MathConfig

    config = MathConfig(
        delimiters=(
            Delimiter("$$", "$$", display=True),
            Delimiter("$", "$", display=False),
        )
    )

    # Or from a plain mapping (YAML, JSON, framework settings)
    config = MathConfig.from_dict({
        "delimiters": [{"left": "$$", "right": "$$", "display": True}],
        "output": "source",
    })

Precedence:
    Delimiters are tried in declaration order. When one marker is a prefix
    of another (``$`` and ``$$``), declare the longer one first.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from mathspan.errors import MathConfigError

#: Output formats understood by the default engine.
OUTPUT_FORMATS: frozenset[str] = frozenset({"mathml", "source"})


@dataclass(frozen=True, slots=True)
class Delimiter:
    """A literal left/right marker pair bounding a math span.

    Attributes:
        left: Opening marker (literal, non-empty)
        right: Closing marker (literal, non-empty)
        display: Render as a display block rather than inline

    """

    left: str
    right: str
    display: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.left, str) or not self.left:
            raise MathConfigError("left", "delimiter markers must be non-empty strings")
        if not isinstance(self.right, str) or not self.right:
            raise MathConfigError("right", "delimiter markers must be non-empty strings")
        if not isinstance(self.display, bool):
            raise MathConfigError("display", f"expected a bool, got {type(self.display).__name__}")

    @classmethod
    def coerce(cls, value: Delimiter | Mapping[str, Any] | tuple) -> Delimiter:
        """Build a Delimiter from a Delimiter, a mapping, or a tuple.

        Mappings use the keys ``left``, ``right`` and ``display``; tuples are
        ``(left, right)`` or ``(left, right, display)``.

        Raises:
            MathConfigError: If the value cannot describe a delimiter

        """
        if isinstance(value, Delimiter):
            return value
        if isinstance(value, Mapping):
            try:
                return cls(
                    left=value["left"],
                    right=value["right"],
                    display=bool(value.get("display", False)),
                )
            except KeyError as e:
                raise MathConfigError(str(e.args[0]), "missing from delimiter mapping") from e
        if isinstance(value, tuple) and len(value) in (2, 3):
            display = bool(value[2]) if len(value) == 3 else False
            return cls(value[0], value[1], display)
        raise MathConfigError("delimiters", f"cannot build a delimiter from {value!r}")


DEFAULT_DELIMITERS: tuple[Delimiter, ...] = (
    Delimiter("\\[", "\\]", display=True),
    Delimiter("\\(", "\\)", display=False),
)


@dataclass(frozen=True, slots=True)
class MathConfig:
    """Immutable math configuration.

    Attributes:
        delimiters: Ordered delimiter pairs; first structural match wins
        output: Engine output format ("mathml" or "source")

    """

    delimiters: tuple[Delimiter, ...] = DEFAULT_DELIMITERS
    output: str = "mathml"
    _display: tuple[Delimiter, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        delimiters = tuple(Delimiter.coerce(d) for d in self.delimiters)
        if not delimiters:
            raise MathConfigError("delimiters", "at least one delimiter pair is required")
        if self.output not in OUTPUT_FORMATS:
            available = ", ".join(sorted(OUTPUT_FORMATS))
            raise MathConfigError("output", f"unknown format {self.output!r}. Available: {available}")
        object.__setattr__(self, "delimiters", delimiters)
        object.__setattr__(self, "_display", tuple(d for d in delimiters if d.display))

    @property
    def display_delimiters(self) -> tuple[Delimiter, ...]:
        """Delimiters with display mode set, in declaration order."""
        return self._display

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> MathConfig:
        """Create MathConfig from dictionary.

        Only includes keys that are valid MathConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. ``delimiters`` may hold
                mappings, tuples or Delimiter instances.

        Returns:
            New MathConfig instance with values from dict.

        Example:
            >>> config = MathConfig.from_dict({
            ...     "delimiters": [{"left": "$$", "right": "$$", "display": True}],
            ...     "unknown_key": "ignored",
            ... })
            >>> config.delimiters[0].left
            '$$'

        """
        kwargs: dict[str, Any] = {}
        if "delimiters" in config_dict:
            kwargs["delimiters"] = _coerce_all(config_dict["delimiters"])
        if "output" in config_dict:
            kwargs["output"] = config_dict["output"]
        return cls(**kwargs)


def _coerce_all(values: Iterable[Any]) -> tuple[Delimiter, ...]:
    if isinstance(values, (str, bytes, Mapping)):
        raise MathConfigError("delimiters", "expected a sequence of delimiter pairs")
    return tuple(Delimiter.coerce(v) for v in values)


DEFAULT_CONFIG: MathConfig = MathConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_DELIMITERS",
    "OUTPUT_FORMATS",
    "Delimiter",
    "MathConfig",
]
