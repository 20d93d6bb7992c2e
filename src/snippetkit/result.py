"""ToolResult and ToolError: what validation and CLI runs hand back.

Library functions never return these directly. A failed ToolResult is
passed to the diagnostic sink and the function returns ``None``; the CLI
wraps each call's return value in a successful one.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ToolError(BaseModel):
    """Why an argument was rejected.

    ``detail`` carries the machine-readable parts of the message, e.g.
    ``{"argument": "text", "expected": "string", "received": "int"}``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ToolResult(BaseModel):
    """Outcome of one utility call.

    Attributes:
        ok: False when an argument was rejected.
        op: Utility name, e.g. ``"shorten"``.
        data: The call's inputs plus its return under ``"value"``.
        warnings: Lossy but valid outcomes, such as digits cut by ``pad``.
        error: Set only when ``ok`` is False.
        timings: Durations reported by ``measure_time``, in ms, keyed by label.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ToolError | None = None
    timings: dict[str, float] = Field(default_factory=dict)

    @property
    def value(self) -> Any:
        """The wrapped return value, or None."""
        return self.data.get("value")
