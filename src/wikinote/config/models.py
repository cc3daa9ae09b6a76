"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, wikinote.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from wikinote.domain.metadata import TAGS_KEY


def _all_extensions() -> tuple[str, ...]:
    from wikinote.infrastructure.markdown import ALL_EXTENSIONS

    return ALL_EXTENSIONS


class ParseConfig(BaseModel):
    """[parse] section."""

    model_config = {"frozen": True}

    tags_key: str = TAGS_KEY


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    extensions: tuple[str, ...] = Field(default_factory=_all_extensions)

    @field_validator("extensions")
    @classmethod
    def _known_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        from wikinote.infrastructure.markdown import validate_extensions

        return validate_extensions(value)
