"""Relays lines between the serial link and the WebSocket server."""

from __future__ import annotations

from wayguide.serial_handler import SerialHandler
from wayguide.websocket_handler import WebSocketHandler


class IPCManager:
    """Forwards WebSocket messages to serial and serial lines to WebSocket."""

    def __init__(self, serial_handler: SerialHandler, websocket_handler: WebSocketHandler) -> None:
        self.serial_handler = serial_handler
        self.websocket_handler = websocket_handler
        websocket_handler.message_handler = self._forward_to_serial

    def _forward_to_serial(self, data: str) -> None:
        self.serial_handler.send(data)

    def pump(self) -> str:
        """Read one serial line and forward it if it is not empty."""
        data = self.serial_handler.receive()
        if data:
            self.websocket_handler.send(data)
        return data

    def run(self) -> None:
        """Start the WebSocket server and relay serial lines forever."""
        self.websocket_handler.start()
        while True:
            self.pump()