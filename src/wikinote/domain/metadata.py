"""Typed frontmatter metadata.

Each header value is stored as one of a closed set of frozen variants
(``StringValue``, ``BooleanValue``, ``NumberValue``, ``ListValue``),
discriminated by ``kind``. Raw YAML values are coerced once, at
construction time, by :func:`coerce_value`; anything that fits no
variant raises :class:`MetadataValueError` there rather than surfacing
as a later misuse.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from datetime import date
from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

from wikinote.domain.errors import MetadataValueError

TAGS_KEY = "tags"


class StringValue(BaseModel):
    """Quoted or unquoted scalar string."""

    model_config = {"frozen": True}

    kind: Literal["string"] = "string"
    value: StrictStr

    def plain(self) -> str:
        return self.value


class BooleanValue(BaseModel):
    """``true`` / ``false`` literal."""

    model_config = {"frozen": True}

    kind: Literal["boolean"] = "boolean"
    value: StrictBool

    def plain(self) -> bool:
        return self.value


class NumberValue(BaseModel):
    """Integer or floating point literal (never a boolean)."""

    model_config = {"frozen": True}

    kind: Literal["number"] = "number"
    value: StrictInt | StrictFloat

    def plain(self) -> int | float:
        return self.value


class ListValue(BaseModel):
    """Flow- or block-style sequence of scalars, held as strings."""

    model_config = {"frozen": True}

    kind: Literal["list"] = "list"
    value: tuple[StrictStr, ...] = ()

    def plain(self) -> list[str]:
        return list(self.value)


MetadataValue = Annotated[
    StringValue | BooleanValue | NumberValue | ListValue,
    Field(discriminator="kind"),
]


def _scalar_text(raw: Any) -> str:
    """Render a list item scalar as a string."""
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, str):
        return str(raw)
    if isinstance(raw, int | float):
        return str(raw)
    if isinstance(raw, date):
        return raw.isoformat()
    msg = f"list items must be scalars, got {type(raw).__name__}"
    raise MetadataValueError(msg)


def coerce_value(raw: Any) -> MetadataValue:
    """Coerce a loaded YAML value into a :data:`MetadataValue` variant.

    Raises:
        MetadataValueError: If *raw* is null, a mapping, a nested
            sequence, or any other type with no matching variant.
    """
    # bool first: bool is an int subclass.
    if isinstance(raw, bool):
        return BooleanValue(value=raw)
    if isinstance(raw, int):
        return NumberValue(value=int(raw))
    if isinstance(raw, float):
        return NumberValue(value=float(raw))
    if isinstance(raw, str):
        return StringValue(value=str(raw))
    if isinstance(raw, date):
        return StringValue(value=raw.isoformat())
    if isinstance(raw, list | tuple):
        return ListValue(value=tuple(_scalar_text(item) for item in raw))
    if raw is None:
        msg = "empty value"
    else:
        msg = f"unsupported value of type {type(raw).__name__}"
    raise MetadataValueError(msg)


class Metadata(BaseModel):
    """Mapping of frontmatter keys to typed values.

    Equality ignores key order. Use :meth:`from_mapping` to build one
    from raw YAML output.
    """

    model_config = {"frozen": True}

    entries: dict[str, MetadataValue] = Field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping[Any, Any]) -> Metadata:
        """Coerce every value of *raw*, failing on the first bad key or value."""
        entries: dict[str, MetadataValue] = {}
        for key, value in raw.items():
            if not isinstance(key, str):
                msg = f"frontmatter keys must be strings, got {key!r}"
                raise MetadataValueError(msg)
            try:
                entries[str(key)] = coerce_value(value)
            except MetadataValueError as exc:
                msg = f"{key}: {exc}"
                raise MetadataValueError(msg) from exc
        return cls(entries=entries)

    def tags(self, key: str = TAGS_KEY) -> list[str]:
        """Tags declared under *key*, in header order.

        Returns an empty list when the key is missing or does not hold
        a list value.
        """
        match self.entries.get(key):
            case ListValue(value=items):
                return list(items)
            case _:
                return []

    def get(self, key: str, default: MetadataValue | None = None) -> MetadataValue | None:
        return self.entries.get(key, default)

    def keys(self) -> Iterator[str]:
        return iter(self.entries)

    def items(self) -> Iterator[tuple[str, MetadataValue]]:
        return iter(self.entries.items())

    def to_plain(self) -> dict[str, Any]:
        """Return a JSON-ready ``{key: python_value}`` dict."""
        return {key: value.plain() for key, value in self.entries.items()}

    def __getitem__(self, key: str) -> MetadataValue:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)
