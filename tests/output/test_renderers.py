"""Tests for the Rich renderers."""

from snippetkit.output.renderers import render_quiet, render_result
from snippetkit.result import ToolError, ToolResult


def _failed(**detail: object) -> ToolResult:
    return ToolResult(
        ok=False,
        op="times",
        error=ToolError(code="INVALID_ARGUMENT", message="n: number expected", detail=detail),
    )


class TestRenderResult:
    def test_generic_renders_all_fields(self) -> None:
        result = ToolResult(ok=True, op="shorten", data={"text": "abcdef", "value": "ab..."})
        output = render_result(result)
        assert "OK  shorten" in output
        assert "text: abcdef" in output
        assert "value: ab..." in output

    def test_lists_rendered_as_compact_json(self) -> None:
        result = ToolResult(ok=True, op="remove_duplicates", data={"value": ["a", "b"]})
        assert 'value: ["a","b"]' in render_result(result)

    def test_color_renderer(self) -> None:
        result = ToolResult(ok=True, op="string_to_color", data={"text": "a", "value": "#610000"})
        output = render_result(result)
        assert "#610000" in output
        assert "text: a" in output

    def test_chunk_renderer_lists_rows(self) -> None:
        result = ToolResult(ok=True, op="chunk", data={"size": 2, "value": [["1", "2"], ["3"]]})
        output = render_result(result)
        assert "1, 2" in output
        assert "3" in output

    def test_timings_only_when_verbose(self) -> None:
        result = ToolResult(ok=True, op="sleep", data={"value": 1.0}, timings={"x": 1.0})
        assert "timings" not in render_result(result)
        verbose = render_result(result, verbose=True)
        assert "timings" in verbose
        assert "x: 1.0 ms" in verbose

    def test_error_detail_only_when_verbose(self) -> None:
        result = _failed(argument="n")
        assert "ERROR" in render_result(result)
        assert "argument: n" not in render_result(result)
        assert "argument: n" in render_result(result, verbose=True)


class TestRenderQuiet:
    def test_scalar_value(self) -> None:
        assert render_quiet(ToolResult(ok=True, op="pad", data={"value": "005"})) == "005"

    def test_list_value(self) -> None:
        result = ToolResult(ok=True, op="chunk", data={"value": [[1, 2], [3]]})
        assert render_quiet(result) == "[[1,2],[3]]"

    def test_no_value(self) -> None:
        assert render_quiet(ToolResult(ok=True, op="noop")) == "OK: noop"

    def test_failure(self) -> None:
        assert render_quiet(_failed()).startswith("ERROR: times")
