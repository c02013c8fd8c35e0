"""Command that relays between a serial port and WebSocket clients."""

from __future__ import annotations

import argparse
import sys

import serial

from wayguide.ipc_manager import IPCManager
from wayguide.serial_handler import SerialHandler
from wayguide.websocket_handler import WebSocketHandler

DEFAULT_SERIAL_PORT = "/dev/ttyUSB0"
DEFAULT_WS_PORT = 8080


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="wayguide",
        description="Relay lines between a serial port and WebSocket clients.",
    )
    parser.add_argument("--serial", default=DEFAULT_SERIAL_PORT, help="serial device or URL")
    parser.add_argument("--ws-port", type=int, default=DEFAULT_WS_PORT, help="WebSocket port")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        serial_handler = SerialHandler(args.serial)
    except serial.SerialException as exc:
        print(f"Failed to open serial port! ({exc})", file=sys.stderr)
        return 1

    with serial_handler:
        try:
            websocket_handler = WebSocketHandler(args.ws_port)
        except OSError as exc:
            print(f"Failed to open WebSocket port! ({exc})", file=sys.stderr)
            return 1
        with websocket_handler:
            try:
                IPCManager(serial_handler, websocket_handler).run()
            except KeyboardInterrupt:
                pass
    return 0


if __name__ == "__main__":
    sys.exit(main())