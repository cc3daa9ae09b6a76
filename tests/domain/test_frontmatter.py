"""Tests for frontmatter extraction."""

from __future__ import annotations

import pytest

from wikinote.domain.errors import MetadataValueError
from wikinote.domain.frontmatter import load_header, parse_frontmatter
from wikinote.domain.metadata import BooleanValue, ListValue, Metadata, NumberValue, StringValue


class TestNoFrontmatter:
    @pytest.mark.parametrize(
        "document",
        [
            "",
            "Just some text.",
            "# Heading\n\nBody\n",
            "Intro\n---\ntitle: Nope\n---\nMore text.",
            "  leading spaces\n",
            "----\nnot: a header\n----\n",
            "\ufeffno header here",
        ],
    )
    def test_document_returned_unchanged(self, document: str) -> None:
        meta, body = parse_frontmatter(document)
        assert meta == Metadata()
        assert body == document

    def test_unclosed_header_is_body(self) -> None:
        document = "---\ntitle: never closed\nbody"
        meta, body = parse_frontmatter(document)
        assert len(meta) == 0
        assert body == document


class TestParseFrontmatter:
    def test_basic(self) -> None:
        document = '---\npublished: true\ncategory: "Example"\n---\n\n#example\n'
        meta, body = parse_frontmatter(document)
        assert meta == Metadata.from_mapping({"published": True, "category": "Example"})
        assert body == "#example"

    def test_body_excludes_header(self) -> None:
        document = "---\ntitle: Secret Header\n---\nBody text."
        _, body = parse_frontmatter(document)
        assert "Secret Header" not in body
        assert "---" not in body
        assert body == "Body text."

    def test_value_types(self) -> None:
        document = (
            "---\n"
            "flag: false\n"
            "plain: unquoted words\n"
            "quoted: 'single'\n"
            "count: 42\n"
            "ratio: 0.5\n"
            "tags: [rust, notes]\n"
            "---\n"
            "Body"
        )
        meta, _ = parse_frontmatter(document)
        assert meta["flag"] == BooleanValue(value=False)
        assert meta["plain"] == StringValue(value="unquoted words")
        assert meta["quoted"] == StringValue(value="single")
        assert meta["count"] == NumberValue(value=42)
        assert meta["ratio"] == NumberValue(value=0.5)
        assert meta["tags"] == ListValue(value=("rust", "notes"))
        assert meta.tags() == ["rust", "notes"]

    def test_block_style_list(self) -> None:
        document = "---\ntags:\n  - one\n  - two\n---\nBody"
        meta, _ = parse_frontmatter(document)
        assert meta.tags() == ["one", "two"]

    def test_crlf_line_endings(self) -> None:
        document = "---\r\ntitle: Windows\r\n---\r\nLine one\r\nLine two\r\n"
        meta, body = parse_frontmatter(document)
        assert meta["title"] == StringValue(value="Windows")
        assert body == "Line one\nLine two"

    def test_leading_byte_order_mark(self) -> None:
        meta, body = parse_frontmatter("\ufeff---\na: b\n---\nbody")
        assert meta["a"] == StringValue(value="b")
        assert body == "body"

    def test_empty_header(self) -> None:
        meta, body = parse_frontmatter("---\n---\nBody.")
        assert len(meta) == 0
        assert body == "Body."

    def test_delimiter_with_trailing_spaces(self) -> None:
        meta, body = parse_frontmatter("---  \na: b\n---  \nBody")
        assert meta["a"] == StringValue(value="b")
        assert body == "Body"

    def test_yaml_1_2_yes_is_a_string(self) -> None:
        meta, _ = parse_frontmatter("---\ndraft: yes\n---\n")
        assert meta["draft"] == StringValue(value="yes")


class TestMalformedFrontmatter:
    def test_invalid_yaml(self) -> None:
        with pytest.raises(MetadataValueError):
            parse_frontmatter("---\n: broken: yaml:\n  - [\n---\nBody.")

    def test_non_mapping_header(self) -> None:
        with pytest.raises(MetadataValueError, match="mapping"):
            parse_frontmatter("---\n- just\n- a list\n---\nBody")

    def test_unsupported_value(self) -> None:
        with pytest.raises(MetadataValueError, match="author"):
            parse_frontmatter("---\nauthor:\n  name: Someone\n---\nBody")

    def test_null_value(self) -> None:
        with pytest.raises(MetadataValueError):
            parse_frontmatter("---\ndate:\n---\nBody")

    def test_duplicate_keys(self) -> None:
        with pytest.raises(MetadataValueError):
            parse_frontmatter("---\na: 1\na: 2\n---\nBody")

    def test_cause_is_chained(self) -> None:
        with pytest.raises(MetadataValueError) as excinfo:
            load_header("key: [unclosed")
        assert excinfo.value.__cause__ is not None
