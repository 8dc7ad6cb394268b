from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class BaseMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str


class FormattingOverrides(BaseModel):
    """Per-request tweaks applied on top of the server's config snapshot."""

    model_config = ConfigDict(extra="forbid")

    isotope_limit: int | None = Field(default=None, ge=0)
    space_string: str | None = None
    use_mathrm: bool | None = None
    exceptions: dict[str, str] | None = None


class ConvertRequest(BaseMessage):
    type: str = "convert"
    text: str = Field(max_length=256)
    mode: Literal["auto", "molecule", "unit"] = "auto"
    math: Literal["auto", "math"] = "auto"
    # The client's own answer to "is the caret inside math?"
    in_math: bool | None = None
    overrides: FormattingOverrides | None = None
