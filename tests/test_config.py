"""Tests for Delimiter and MathConfig.

Validates defaults, immutability, validation at construction time and
dictionary-based configuration.
"""

from __future__ import annotations

import pytest

from mathspan.config import (
    DEFAULT_CONFIG,
    DEFAULT_DELIMITERS,
    Delimiter,
    MathConfig,
)
from mathspan.errors import MathConfigError, MathSpanError


class TestDelimiter:
    """Test Delimiter frozen dataclass behavior."""

    def test_fields(self) -> None:
        d = Delimiter("$$", "$$", display=True)
        assert d.left == "$$"
        assert d.right == "$$"
        assert d.display is True

    def test_display_defaults_to_inline(self) -> None:
        assert Delimiter("$", "$").display is False

    def test_immutability(self) -> None:
        d = Delimiter("$", "$")
        with pytest.raises(AttributeError):
            d.left = "%"  # type: ignore[misc]

    @pytest.mark.parametrize(("left", "right", "field"), [("", "$", "left"), ("$", "", "right")])
    def test_empty_marker_rejected(self, left: str, right: str, field: str) -> None:
        with pytest.raises(MathConfigError) as exc_info:
            Delimiter(left, right)
        assert exc_info.value.field == field

    def test_non_string_marker_rejected(self) -> None:
        with pytest.raises(MathConfigError):
            Delimiter(None, "$")  # type: ignore[arg-type]

    def test_coerce_mapping(self) -> None:
        d = Delimiter.coerce({"left": "\\[", "right": "\\]", "display": True})
        assert d == Delimiter("\\[", "\\]", display=True)

    def test_coerce_mapping_without_display(self) -> None:
        assert Delimiter.coerce({"left": "$", "right": "$"}).display is False

    def test_coerce_mapping_missing_key(self) -> None:
        with pytest.raises(MathConfigError) as exc_info:
            Delimiter.coerce({"left": "$"})
        assert exc_info.value.field == "right"

    def test_coerce_tuple(self) -> None:
        assert Delimiter.coerce(("$", "$")) == Delimiter("$", "$")
        assert Delimiter.coerce(("$$", "$$", True)) == Delimiter("$$", "$$", True)

    def test_coerce_tuple_display_is_bool(self) -> None:
        d = Delimiter.coerce(("$", "$", "yes"))
        assert d.display is True
        assert Delimiter.coerce(("$", "$", 0)).display is False

    def test_non_bool_display_rejected(self) -> None:
        with pytest.raises(MathConfigError) as exc_info:
            Delimiter("$", "$", display="yes")  # type: ignore[arg-type]
        assert exc_info.value.field == "display"

    def test_coerce_returns_same_instance(self) -> None:
        d = Delimiter("$", "$")
        assert Delimiter.coerce(d) is d

    def test_coerce_rejects_other_values(self) -> None:
        with pytest.raises(MathConfigError):
            Delimiter.coerce("$")  # type: ignore[arg-type]


class TestMathConfig:
    """Test MathConfig frozen dataclass behavior."""

    def test_default_delimiters(self) -> None:
        config = MathConfig()
        assert config.delimiters == DEFAULT_DELIMITERS
        assert config.delimiters == (
            Delimiter("\\[", "\\]", display=True),
            Delimiter("\\(", "\\)", display=False),
        )
        assert config.output == "mathml"

    def test_default_config_singleton_matches(self) -> None:
        assert DEFAULT_CONFIG == MathConfig()

    def test_immutability(self) -> None:
        config = MathConfig()
        with pytest.raises(AttributeError):
            config.output = "source"  # type: ignore[misc]

    def test_list_coerced_to_tuple(self) -> None:
        config = MathConfig(delimiters=[("$", "$")])  # type: ignore[arg-type]
        assert config.delimiters == (Delimiter("$", "$"),)

    def test_display_delimiters_preserve_order(self) -> None:
        config = MathConfig(
            delimiters=(
                Delimiter("$$", "$$", display=True),
                Delimiter("$", "$"),
                Delimiter("\\[", "\\]", display=True),
            )
        )
        assert config.display_delimiters == (
            Delimiter("$$", "$$", display=True),
            Delimiter("\\[", "\\]", display=True),
        )

    def test_no_display_delimiters(self) -> None:
        config = MathConfig(delimiters=(Delimiter("$", "$"),))
        assert config.display_delimiters == ()

    def test_empty_delimiters_rejected(self) -> None:
        with pytest.raises(MathConfigError) as exc_info:
            MathConfig(delimiters=())
        assert exc_info.value.field == "delimiters"

    def test_unknown_output_rejected(self) -> None:
        with pytest.raises(MathConfigError) as exc_info:
            MathConfig(output="svg")
        assert exc_info.value.field == "output"
        assert "mathml" in str(exc_info.value)

    def test_config_errors_share_base(self) -> None:
        with pytest.raises(MathSpanError):
            MathConfig(output="svg")

    def test_equal_configs_hash_equal(self) -> None:
        assert hash(MathConfig()) == hash(MathConfig())


class TestMathConfigFromDict:
    """Test MathConfig.from_dict() factory method."""

    def test_from_dict_basic(self) -> None:
        config = MathConfig.from_dict({
            "delimiters": [
                {"left": "$$", "right": "$$", "display": True},
                {"left": "$", "right": "$", "display": False},
            ],
            "output": "source",
        })
        assert config.delimiters == (
            Delimiter("$$", "$$", display=True),
            Delimiter("$", "$"),
        )
        assert config.output == "source"

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = MathConfig.from_dict({"output": "source", "unknown_key": "ignored"})
        assert config.output == "source"
        assert not hasattr(config, "unknown_key")

    def test_from_dict_empty_uses_defaults(self) -> None:
        assert MathConfig.from_dict({}) == MathConfig()

    def test_from_dict_rejects_single_mapping(self) -> None:
        with pytest.raises(MathConfigError):
            MathConfig.from_dict({"delimiters": {"left": "$", "right": "$"}})

    def test_from_dict_validates(self) -> None:
        with pytest.raises(MathConfigError):
            MathConfig.from_dict({"delimiters": [{"left": "", "right": "$"}]})
