"""The guidance controller's main program: text commands and framed proximity data."""

from __future__ import annotations

import re
from typing import TextIO

from wayguide.board import Board
from wayguide.haptics import HapticGuidanceSystem
from wayguide.proximity import ProximityMessage, ProximityReceiver

LEFT_MOTOR_PINS = (22, 23, 12)
RIGHT_MOTOR_PINS = (24, 25, 13)

WARNING_THRESHOLD = 2.0
DANGER_THRESHOLD = 0.5
MIN_INTENSITY = 20
MAX_INTENSITY = 100
PULSE_INTERVAL = 200

DEBUG_INTERVAL = 1000

_MILLIS_MODULUS = 1 << 32

_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def _to_float(text: str) -> float:
    """Parse a leading number; text without one reads as 0."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _to_int(text: str) -> int:
    """Parse a leading integer; text without one reads as 0."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _fmt(value: float) -> str:
    return f"{value:.2f}"


class GuidanceFirmware:
    """Runs the haptic guidance system from serial commands and proximity frames."""

    def __init__(self, board: Board, output: TextIO) -> None:
        self.board = board
        self.output = output
        self.guidance = HapticGuidanceSystem(board, *LEFT_MOTOR_PINS, *RIGHT_MOTOR_PINS)
        self.receiver = ProximityReceiver()
        self._last_debug_print = 0

    def _println(self, text: str) -> None:
        self.output.write(text + "\n")

    def setup(self) -> None:
        """Announce the protocol and apply the default configuration."""
        self._println("com.arduino.wayguideprotocol")
        self._println("Haptic Guidance System Ready")
        self.guidance.configure(
            WARNING_THRESHOLD, DANGER_THRESHOLD, MIN_INTENSITY, MAX_INTENSITY, PULSE_INTERVAL
        )
        self._println("Send test data with format: L<left_distance>,R<right_distance>")
        self._println("Example: L1.5,R2.3")

    def handle_command(self, command: str) -> None:
        """Act on one line of text typed on the serial console."""
        if command.endswith("\n"):
            command = command[:-1]

        if command.startswith("L") and command.find(",R") > 0:
            comma = command.find(",")
            left = _to_float(command[1:comma])
            right = _to_float(command[comma + 2 :])
            self._println(f"Test proximity: Left={_fmt(left)}m, Right={_fmt(right)}m")
            self.guidance.process_proximity(left, right)
        elif command == "left":
            self._println("Testing left motor")
            self.guidance.process_proximity(0.3, 999.0)
        elif command == "right":
            self._println("Testing right motor")
            self.guidance.process_proximity(999.0, 0.3)
        elif command == "stop":
            self._println("Stopping all motors")
            self.guidance.stop()
        elif command.startswith("config:"):
            self._configure_from(command[7:])

    def _configure_from(self, params: str) -> None:
        pos1 = params.find(",")
        pos2 = params.find(",", pos1 + 1)
        pos3 = params.find(",", pos2 + 1)
        pos4 = params.find(",", pos3 + 1)
        if min(pos1, pos2, pos3, pos4) <= 0:
            return
        warning = _to_float(params[:pos1])
        danger = _to_float(params[pos1 + 1 : pos2])
        min_intensity = _to_int(params[pos2 + 1 : pos3])
        max_intensity = _to_int(params[pos3 + 1 : pos4])
        pulse = _to_int(params[pos4 + 1 :]) % _MILLIS_MODULUS
        self.guidance.configure(warning, danger, min_intensity, max_intensity, pulse)
        self._println("Configuration updated")

    def handle_ipc_bytes(self, data: bytes) -> ProximityMessage | None:
        """Feed raw bytes to the receiver and act on a completed message, if any."""
        self.receiver.feed(data)
        if not self.receiver.has_new_data():
            return None
        message = self.receiver.get_latest_data()

        now = self.board.millis()
        if (now - self._last_debug_print) % _MILLIS_MODULUS > DEBUG_INTERVAL:
            self._last_debug_print = now
            self._println(
                f"Proximity data: Left={_fmt(message.left_distance)}m, "
                f"Right={_fmt(message.right_distance)}m"
            )

        self.guidance.process_proximity(message.left_distance, message.right_distance)
        return message

    def update(self) -> None:
        """Advance timing-based effects; call from the main loop."""
        self.guidance.update()