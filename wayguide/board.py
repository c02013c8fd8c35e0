"""Pin-level access to the board that drives the motors."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

OUTPUT = "output"
INPUT = "input"

_MILLIS_MODULUS = 1 << 32


class Level(enum.IntEnum):
    """Logic level of a digital pin."""

    LOW = 0
    HIGH = 1


class Board(ABC):
    """The pin and clock operations the motor code relies on."""

    @abstractmethod
    def pin_mode(self, pin: int, mode: str) -> None:
        """Configure a pin as input or output."""

    @abstractmethod
    def digital_write(self, pin: int, level: Level) -> None:
        """Drive a pin high or low."""

    @abstractmethod
    def analog_write(self, pin: int, value: int) -> None:
        """Drive a pin with a PWM duty cycle of 0-255."""

    @abstractmethod
    def millis(self) -> int:
        """Milliseconds since start, wrapping at 2**32."""


class RecordingBoard(Board):
    """A board that keeps pin state in memory and runs on a manual clock."""

    def __init__(self, start_ms: int = 0) -> None:
        self.modes: dict[int, str] = {}
        self.levels: dict[int, Level] = {}
        self.pwm: dict[int, int] = {}
        self.writes: list[tuple[str, int, object]] = []
        self._now = start_ms % _MILLIS_MODULUS

    def pin_mode(self, pin: int, mode: str) -> None:
        self.modes[pin] = mode
        self.writes.append(("mode", pin, mode))

    def digital_write(self, pin: int, level: Level) -> None:
        level = Level(level)
        self.levels[pin] = level
        self.pwm.pop(pin, None)
        self.writes.append(("digital", pin, level))

    def analog_write(self, pin: int, value: int) -> None:
        self.pwm[pin] = value
        self.levels.pop(pin, None)
        self.writes.append(("analog", pin, value))

    def millis(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        """Move the clock forward by ``ms`` milliseconds and return the new time."""
        if ms < 0:
            raise ValueError("the clock cannot run backwards")
        self._now = (self._now + ms) % _MILLIS_MODULUS
        return self._now


def constrain(value, low, high):
    """Clamp ``value`` into the closed range [low, high]."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def map_range(value: int, in_min: int, in_max: int, out_min: int, out_max: int) -> int:
    """Re-map an integer linearly from one range onto another.

    Integer arithmetic with the quotient truncated toward zero.
    """
    span = in_max - in_min
    if span == 0:
        raise ValueError("input range must not be empty")
    numerator = (value - in_min) * (out_max - out_min)
    quotient = abs(numerator) // abs(span)
    if (numerator < 0) != (span < 0):
        quotient = -quotient
    return quotient + out_min