"""A WebSocket server that passes each received message to a callback."""

from __future__ import annotations

import asyncio
import socket
import sys
import threading
from typing import Callable

import websockets
from websockets.exceptions import ConnectionClosedError


def _ignore(data: str) -> None:
    pass


class WebSocketHandler:
    """Accepts WebSocket clients on a port and serves them on a background thread.

    The port is bound on construction; port 0 picks a free one, found in ``port``.
    """

    def __init__(self, port: int) -> None:
        self._sock = socket.create_server(("", port))
        self.port: int = self._sock.getsockname()[1]
        self.message_handler: Callable[[str], None] = _ignore
        self._running = False
        self._closed = False
        self._thread: threading.Thread | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._stop_event: asyncio.Event | None = None
        self._ready = threading.Event()

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start serving; returns once the server accepts connections."""
        if self._running:
            return
        if self._closed:
            raise RuntimeError("the handler has been stopped")
        self._running = True
        self._ready.clear()
        self._thread = threading.Thread(target=self._run, name="websocket-server", daemon=True)
        self._thread.start()
        self._ready.wait()

    def _run(self) -> None:
        try:
            asyncio.run(self._serve())
        except Exception as exc:
            print(f"WebSocket error: {exc}", file=sys.stderr)
        finally:
            self._ready.set()

    async def _serve(self) -> None:
        self._loop = asyncio.get_running_loop()
        self._stop_event = asyncio.Event()
        async with websockets.serve(self._session, sock=self._sock):
            self._ready.set()
            await self._stop_event.wait()

    async def _session(self, websocket) -> None:
        try:
            async for message in websocket:
                if not self._running:
                    break
                if isinstance(message, bytes):
                    message = message.decode("utf-8", errors="replace")
                self.message_handler(message)
        except ConnectionClosedError as exc:
            print(f"Read error: {exc}", file=sys.stderr)
        except Exception as exc:
            print(f"Session error: {exc}", file=sys.stderr)

    def send(self, data: str) -> None:
        """Outgoing messages are not delivered to clients; they are only logged."""
        print(f"Would send: {data}", flush=True)

    def stop(self) -> None:
        self._running = False
        loop, event = self._loop, self._stop_event
        if loop is not None and event is not None:
            try:
                loop.call_soon_threadsafe(event.set)
            except RuntimeError:
                pass
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        self._sock.close()
        self._closed = True

    def __enter__(self) -> "WebSocketHandler":
        return self

    def __exit__(self, *args) -> None:
        self.stop()