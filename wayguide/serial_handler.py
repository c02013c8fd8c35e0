"""Line-oriented access to a serial port."""

from __future__ import annotations

import serial


class SerialHandler:
    """Sends text to and reads text lines from a serial port.

    ``port`` is a device path or any URL understood by pyserial.
    """

    def __init__(self, port: str) -> None:
        self.port = port
        self._serial = serial.serial_for_url(port, baudrate=9600)

    @property
    def is_open(self) -> bool:
        return self._serial.is_open

    def send(self, data: str) -> None:
        self._serial.write(data.encode("utf-8"))
        self._serial.flush()

    def receive(self) -> str:
        """Read one line, without its trailing newline; empty at end of input."""
        line = self._serial.readline()
        if line.endswith(b"\n"):
            line = line[:-1]
        return line.decode("utf-8", errors="replace")

    def close(self) -> None:
        if self._serial.is_open:
            self._serial.close()

    def __enter__(self) -> "SerialHandler":
        return self

    def __exit__(self, *args) -> None:
        self.close()