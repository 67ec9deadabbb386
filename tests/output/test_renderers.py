"""Tests for Rich renderers."""

from isbnctl.output.renderers import render_quiet, render_result
from isbnctl.services.result import ServiceError, ServiceResult


def _show_result() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="show",
        data={"isbn13": "9791032101056", "isbn10": None},
        warnings=["isbn10: no ISBN10 form"],
        meta={"ranges_serial": "test-1"},
    )


def _error_result() -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="check",
        error=ServiceError(code="CHECK_DIGIT", message="Invalid [bold]check", detail={"input": "x"}),
    )


class TestRenderResult:
    def test_ok_status_and_fields(self) -> None:
        output = render_result(_show_result())
        lines = output.splitlines()
        assert lines[0].startswith("OK")
        assert "show" in lines[0]
        assert "isbn13: 9791032101056" in output

    def test_missing_value_rendered_as_na(self) -> None:
        assert "isbn10: n/a" in render_result(_show_result())

    def test_meta_only_when_verbose(self) -> None:
        assert "ranges_serial" not in render_result(_show_result())
        assert "ranges_serial: test-1" in render_result(_show_result(), verbose=True)

    def test_error_line(self) -> None:
        output = render_result(_error_result())
        assert output.startswith("ERROR")
        assert "check" in output
        assert "code" not in output

    def test_error_message_is_not_markup(self) -> None:
        assert "Invalid [bold]check" in render_result(_error_result())

    def test_error_verbose_shows_code_and_detail(self) -> None:
        output = render_result(_error_result(), verbose=True)
        assert "code: CHECK_DIGIT" in output
        assert "input: x" in output

    def test_no_trailing_newline(self) -> None:
        assert not render_result(_show_result()).endswith("\n")


class TestRenderQuiet:
    def test_show_prints_isbn13(self) -> None:
        assert render_quiet(_show_result()) == "9791032101056"

    def test_missing_key_falls_back(self) -> None:
        result = ServiceResult(ok=True, op="convert", data={})
        assert render_quiet(result) == "OK: convert"

    def test_error(self) -> None:
        assert render_quiet(_error_result()) == "ERROR: check — Invalid [bold]check"
