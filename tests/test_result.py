"""Tests for ToolResult and ToolError."""

import json

import pytest

from snippetkit.result import ToolError, ToolResult


class TestToolResult:
    def test_success_construction(self) -> None:
        result = ToolResult(ok=True, op="slugify", data={"value": "hello-world"})
        assert result.ok is True
        assert result.op == "slugify"
        assert result.data == {"value": "hello-world"}
        assert result.warnings == []
        assert result.error is None
        assert result.timings == {}

    def test_error_construction(self) -> None:
        error = ToolError(code="INVALID_ARGUMENT", message="text: string expected")
        result = ToolResult(ok=False, op="slugify", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_ARGUMENT"

    def test_json_serialization(self) -> None:
        result = ToolResult(ok=True, op="sleep", data={"value": 1.5}, timings={"a": 1.5})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["value"] == 1.5
        assert parsed["timings"] == {"a": 1.5}

    def test_value_property(self) -> None:
        assert ToolResult(ok=True, op="chunk", data={"size": 2, "value": [[1]]}).value == [[1]]
        assert ToolResult(ok=False, op="chunk").value is None

    def test_frozen(self) -> None:
        result = ToolResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestToolError:
    def test_detail_defaults_empty(self) -> None:
        assert ToolError(code="X", message="m").detail == {}

    def test_with_detail(self) -> None:
        error = ToolError(code="EMPTY_RANGE", message="no integer", detail={"lower": 3})
        assert error.detail["lower"] == 3
