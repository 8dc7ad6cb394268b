"""Protocol handlers for the WebSocket server.

This module contains the message handlers for the JSON protocol:
- handle_ping: Ping/pong handler
- handle_convert: Expression conversion handler
- handle_units: Unit vocabulary listing
- handle_reload: Configuration reload (local clients only)
"""

import dataclasses
import time
from typing import TYPE_CHECKING

from pydantic import BaseModel, ValidationError

from ..core.config import ConfigError, reload_config, setup_logging
from ..schemas import (
    ConversionComplete,
    ConvertRequest,
    ErrorMessage,
    PongMessage,
    ReloadResponse,
    UnitEntry,
    UnitList,
)
from ..text_formatting.common import MathOverride, ModeOverride
from ..text_formatting.pipeline import ScientificFormatter

if TYPE_CHECKING:
    from .server import SciformatWebSocketServer

logger = setup_logging(__name__, log_filename="service.txt")


def _is_local_client(client_ip: str) -> bool:
    return client_ip in {"127.0.0.1", "::1", "localhost"}


async def send_message(websocket, message: BaseModel) -> None:
    await websocket.send(message.model_dump_json())


async def send_error(websocket, message: str) -> None:
    await send_message(websocket, ErrorMessage(message=message))


async def handle_ping(
    server: "SciformatWebSocketServer", websocket, data: dict, client_ip: str, client_id: str
) -> None:
    await send_message(websocket, PongMessage(timestamp=time.time()))


async def handle_convert(
    server: "SciformatWebSocketServer", websocket, data: dict, client_ip: str, client_id: str
) -> None:
    """Convert one expression against the snapshot current at receipt.

    Args:
        server: The SciformatWebSocketServer instance
        websocket: The WebSocket connection
        data: Parsed JSON message data
        client_ip: Client IP address
        client_id: Client identifier

    """
    try:
        request = ConvertRequest.model_validate(data)
    except ValidationError as e:
        await send_error(websocket, f"Invalid convert request: {e.errors()[0]['msg']}")
        return

    # Take the reference once; a concurrent reload swaps it, never mutates it
    formatter = server.formatter
    if request.overrides is not None:
        changes = request.overrides.model_dump(exclude_none=True)
        try:
            formatter = ScientificFormatter(dataclasses.replace(formatter.config, **changes))
        except ConfigError as e:
            await send_error(websocket, f"Invalid overrides: {e}")
            return

    math_context = None
    if request.in_math is not None:
        in_math = request.in_math
        math_context = lambda: in_math  # noqa: E731

    result = formatter.convert(
        request.text,
        mode=ModeOverride(request.mode),
        math=MathOverride(request.math),
        math_context=math_context,
    )
    logger.debug(f"Client {client_id}: '{request.text}' -> '{result.text}' ({result.kind.value})")

    await send_message(
        websocket,
        ConversionComplete(input=request.text, text=result.text, kind=result.kind.value, in_math=result.in_math),
    )


async def handle_units(
    server: "SciformatWebSocketServer", websocket, data: dict, client_ip: str, client_id: str
) -> None:
    units = [UnitEntry(symbol=unit.symbol, replacement=unit.replacement) for unit in server.formatter.config.vocabulary]
    await send_message(websocket, UnitList(units=units))


async def handle_reload(
    server: "SciformatWebSocketServer", websocket, data: dict, client_ip: str, client_id: str
) -> None:
    """Handle configuration reload request."""
    if not _is_local_client(client_ip):
        await send_error(websocket, "Unauthorized: Reload only allowed from localhost")
        return

    try:
        logger.info("Reloading configuration...")
        loader = reload_config(server.config_path)
        server.formatter = ScientificFormatter(loader.formatter_config)
    except ConfigError as e:
        logger.exception("Failed to reload configuration")
        await send_error(websocket, f"Reload failed: {e}")
        return

    await send_message(websocket, ReloadResponse(status="ok", message="Configuration reloaded"))
    logger.info("Configuration reloaded successfully")
