"""WebSocket service for sciformat."""

from .server import SciformatWebSocketServer, main

__all__ = ["SciformatWebSocketServer", "main"]
