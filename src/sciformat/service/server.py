"""WebSocket server exposing the formatter to editors and other clients.

Clients send JSON messages with a ``type`` field (``ping``, ``convert``,
``units``, ``reload``) and receive one JSON reply per message.
"""

import asyncio
import json
import sys
import uuid
from pathlib import Path

import websockets

from .. import __version__
from ..core.config import ConfigLoader, get_config, setup_logging
from ..core.logging import set_log_level
from ..schemas import WelcomeMessage
from ..text_formatting.pipeline import ScientificFormatter
from . import handlers

logger = setup_logging(__name__, log_filename="service.txt")


class SciformatWebSocketServer:
    """WebSocket server for scientific expression conversion.

    Every request is converted against an immutable config snapshot, so
    concurrent clients never observe a half-applied reload.
    """

    def __init__(self, host: str | None = None, port: int | None = None, config_path: str | Path | None = None):
        config = ConfigLoader(config_path) if config_path else get_config()
        self.config_path = config_path
        self.log_level = config.log_level
        self.host = host or config.server_host
        self.port = port or config.server_port
        self.max_message_bytes = config.max_message_bytes
        self.formatter = ScientificFormatter(config.formatter_config)

        # Client tracking
        self.connected_clients = set()

        self.message_handlers = {
            "ping": self._wrap_handler(handlers.handle_ping),
            "convert": self._wrap_handler(handlers.handle_convert),
            "units": self._wrap_handler(handlers.handle_units),
            "reload": self._wrap_handler(handlers.handle_reload),
        }

        logger.debug(f"Initializing server on ws://{self.host}:{self.port}")

    def _wrap_handler(self, handler):
        """Wrap a handler to inject self as the first argument."""

        async def wrapped(websocket, data, client_ip, client_id):
            return await handler(self, websocket, data, client_ip, client_id)

        return wrapped

    async def handle_client(self, websocket, path=None):
        """Handle individual WebSocket client connections.

        Args:
            websocket: The WebSocket connection
            path: Optional path (for compatibility)

        """
        client_id = str(uuid.uuid4())[:8]
        client_ip = websocket.remote_address[0]

        try:
            self.connected_clients.add(websocket)
            logger.debug(f"Client {client_id} connected from {client_ip}")

            await handlers.send_message(
                websocket,
                WelcomeMessage(
                    message="Connected to sciformat WebSocket Server", client_id=client_id, version=__version__
                ),
            )

            async for message in websocket:
                try:
                    if isinstance(message, bytes):
                        await handlers.send_error(websocket, "Binary messages are not supported")
                        continue
                    data = json.loads(message)
                    if not isinstance(data, dict):
                        await handlers.send_error(websocket, "Messages must be JSON objects")
                        continue
                    await self.process_message(websocket, data, client_ip, client_id)

                except json.JSONDecodeError:
                    await handlers.send_error(websocket, "Invalid JSON format")
                except Exception as e:
                    logger.exception(f"Error processing message from {client_id}: {e}")
                    await handlers.send_error(websocket, f"Processing error: {e!s}")

        except websockets.exceptions.ConnectionClosed:
            logger.debug(f"Client {client_id} disconnected")
        finally:
            self.connected_clients.discard(websocket)
            logger.debug(f"Client {client_id} removed")

    async def process_message(self, websocket, data: dict, client_ip: str, client_id: str):
        """Dispatch a parsed JSON message to its handler."""
        message_type = data.get("type")

        handler = self.message_handlers.get(message_type)
        if handler:
            await handler(websocket, data, client_ip, client_id)
        else:
            await handlers.send_error(websocket, f"Unknown message type: {message_type}")

    async def start_server(self, host: str | None = None, port: int | None = None) -> None:
        """Start the WebSocket server and serve until cancelled."""
        server_host = host or self.host
        server_port = port or self.port

        logger.info(f"Starting WebSocket server on ws://{server_host}:{server_port}")
        async with websockets.serve(
            self.handle_client, server_host, server_port, ping_interval=30, ping_timeout=10, max_size=self.max_message_bytes
        ):
            logger.info("sciformat server is ready for connections")
            await asyncio.Future()


def main(host: str | None = None, port: int | None = None, config_path: str | Path | None = None) -> None:
    """Main function to start the server."""
    server = SciformatWebSocketServer(host=host, port=port, config_path=config_path)
    set_log_level(server.log_level)

    try:
        asyncio.run(server.start_server())
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except OSError as e:
        logger.exception(f"Server error: {e}")
        sys.exit(1)
