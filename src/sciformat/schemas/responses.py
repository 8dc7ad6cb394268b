from __future__ import annotations


from pydantic import BaseModel, ConfigDict


class ErrorMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "error"
    message: str
    success: bool = False


class WelcomeMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "welcome"
    message: str
    client_id: str
    version: str


class PongMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "pong"
    timestamp: float


class ConversionComplete(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "conversion_complete"
    input: str
    text: str
    kind: str
    in_math: bool
    success: bool = True


class UnitEntry(BaseModel):
    symbol: str
    replacement: str | None = None


class UnitList(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "unit_list"
    units: list[UnitEntry]


class ReloadResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "reload_response"
    status: str
    message: str
