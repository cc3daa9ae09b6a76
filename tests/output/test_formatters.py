"""Tests for the format_result dispatcher and OutputSettings."""

import json

from wikinote.output.formatters import OutputSettings, format_result
from wikinote.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("parse_note", title="Example", tags=["a"])
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "parse_note"
        assert data["data"]["tags"] == ["a"]

    def test_json_mode_error(self) -> None:
        output = format_result(_err("parse_note", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"

    def test_json_mode_keeps_html_in_payload(self) -> None:
        result = _ok("render_note", title="Example", html="<p>x</p>\n")
        data = json.loads(format_result(result, settings=OutputSettings(json_output=True)))
        assert data["data"]["html"] == "<p>x</p>\n"


class TestFormatResultRaw:
    def test_render_prints_html_only(self) -> None:
        result = _ok("render_note", path="a.md", title="a", html="<h1>A</h1>\n")
        assert format_result(result) == "<h1>A</h1>"

    def test_render_raw_in_quiet_mode(self) -> None:
        result = _ok("render_note", path="a.md", title="a", html="<p>x</p>")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "<p>x</p>"

    def test_render_to_file_is_not_raw(self) -> None:
        result = _ok("render_note", path="a.md", title="a", output="out.html")
        output = format_result(result)
        assert "OK" in output
        assert "out.html" in output


class TestFormatResultQuiet:
    def test_quiet_title(self) -> None:
        result = _ok("parse_note", path="a.md", title="Example")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "Example"

    def test_quiet_error(self) -> None:
        output = format_result(_err("parse_note", "boom"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: parse_note")
        assert "boom" in output


class TestFormatResultHuman:
    def test_default_is_rich(self) -> None:
        output = format_result(_ok("something", key="val"))
        assert "OK" in output
        assert "key: val" in output
