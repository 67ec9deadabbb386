"""Tests for the format_result dispatcher and OutputSettings."""

import json

from isbnctl.output.formatters import OutputSettings, format_result
from isbnctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="FORMAT", message=msg, detail={"input": "abc"}),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        result = _ok("convert", value="9780123456724")
        output = format_result(result, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "convert"
        assert data["data"]["value"] == "9780123456724"

    def test_json_mode_error(self) -> None:
        output = format_result(_err("check", "Bad"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["code"] == "FORMAT"
        assert data["error"]["message"] == "Bad"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        data = json.loads(format_result(_ok("convert", value="x"), settings=settings))
        assert data["data"]["value"] == "x"


class TestFormatResultQuiet:
    def test_convert_prints_value_only(self) -> None:
        result = _ok("convert", input="012345672X", form="hyphen", value="978-0-12-345672-4")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "978-0-12-345672-4"

    def test_check_prints_isbn13(self) -> None:
        result = _ok("check", input="012345672X", isbn13="9780123456724")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "9780123456724"

    def test_unknown_op(self) -> None:
        assert format_result(_ok("other"), settings=OutputSettings(quiet=True)) == "OK: other"

    def test_error(self) -> None:
        output = format_result(_err("check", "Bad"), settings=OutputSettings(quiet=True))
        assert output == "ERROR: check — Bad"


class TestFormatResultHuman:
    def test_default_settings(self) -> None:
        output = format_result(_ok("check", isbn13="9780123456724"))
        assert "OK" in output
        assert "isbn13: 9780123456724" in output
