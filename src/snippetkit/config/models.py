"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, snippetkit.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- snippetkit.toml sections ---


class TextConfig(BaseModel):
    """[text] section."""

    model_config = {"frozen": True}

    shorten_length: int = Field(default=10, ge=0)
    ellipsis_count: int = Field(default=3, ge=0)


class RandomConfig(BaseModel):
    """[random] section."""

    model_config = {"frozen": True}

    lower: int = 0
    upper: int = 10
    seed: int | None = None


class TimingConfig(BaseModel):
    """[timing] section."""

    model_config = {"frozen": True}

    label: str = "default"
