"""Wire schemas for the sciformat WebSocket service."""

from .requests import BaseMessage, ConvertRequest, FormattingOverrides
from .responses import (
    ConversionComplete,
    ErrorMessage,
    PongMessage,
    ReloadResponse,
    UnitEntry,
    UnitList,
    WelcomeMessage,
)

__all__ = [
    "BaseMessage",
    "ConvertRequest",
    "FormattingOverrides",
    "ConversionComplete",
    "ErrorMessage",
    "PongMessage",
    "ReloadResponse",
    "UnitEntry",
    "UnitList",
    "WelcomeMessage",
]
