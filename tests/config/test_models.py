"""Tests for configuration models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wikinote.config.models import ParseConfig, RenderConfig
from wikinote.infrastructure.markdown import ALL_EXTENSIONS


class TestModels:
    def test_defaults(self) -> None:
        assert ParseConfig().tags_key == "tags"
        assert RenderConfig().extensions == ALL_EXTENSIONS

    def test_frozen(self) -> None:
        config = ParseConfig()
        with pytest.raises(ValidationError):
            config.tags_key = "other"  # type: ignore[misc]

    def test_extensions_from_list(self) -> None:
        assert RenderConfig.model_validate({"extensions": ["table"]}).extensions == ("table",)

    def test_unknown_extension_rejected(self) -> None:
        with pytest.raises(ValidationError, match="wikitables"):
            RenderConfig(extensions=("wikitables",))
