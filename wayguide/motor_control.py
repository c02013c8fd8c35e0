"""Two-motor drive control over a dual H-bridge."""

from __future__ import annotations

from wayguide.board import OUTPUT, Board, Level

_H = Level.HIGH
_L = Level.LOW


class MotorControl:
    """Drives a pair of motors forward, backward, or turning on the spot."""

    def __init__(
        self,
        board: Board,
        pin1: int,
        pin2: int,
        pin3: int,
        pin4: int,
        enable_pin1: int,
        enable_pin2: int,
    ) -> None:
        self.board = board
        self.motor_pins = (pin1, pin2, pin3, pin4)
        self.enable_pins = (enable_pin1, enable_pin2)
        for pin in (*self.motor_pins, *self.enable_pins):
            board.pin_mode(pin, OUTPUT)
        for pin in self.enable_pins:
            board.digital_write(pin, Level.LOW)

    def _drive(self, *levels: Level) -> None:
        for pin in self.enable_pins:
            self.board.digital_write(pin, Level.HIGH)
        for pin, level in zip(self.motor_pins, levels):
            self.board.digital_write(pin, level)

    def drive_forward(self) -> None:
        self._drive(_H, _L, _H, _L)

    def drive_backward(self) -> None:
        self._drive(_L, _H, _L, _H)

    def turn_left(self) -> None:
        self._drive(_L, _H, _H, _L)

    def turn_right(self) -> None:
        self._drive(_H, _L, _L, _H)