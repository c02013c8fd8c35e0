"""Vibration motors and the proximity-driven haptic guidance controller."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from wayguide.board import OUTPUT, Board, Level, constrain, map_range

_MILLIS_MODULUS = 1 << 32


class MotorCommand(ABC):
    """An action that can be started and stopped on a motor."""

    @abstractmethod
    def execute(self) -> None:
        """Start the action."""

    @abstractmethod
    def stop(self) -> None:
        """Stop the motor."""


class _HBridgeWiring:
    """Shared wiring of a motor on two direction pins and an enable pin."""

    board: Board
    pin1: int
    pin2: int
    enable_pin: int

    def _wire(self, board: Board, pin1: int, pin2: int, enable_pin: int) -> None:
        self.board = board
        self.pin1 = pin1
        self.pin2 = pin2
        self.enable_pin = enable_pin
        for pin in (pin1, pin2, enable_pin):
            board.pin_mode(pin, OUTPUT)
        board.digital_write(enable_pin, Level.LOW)

    def _drive(self, first: Level, second: Level) -> None:
        self.board.digital_write(self.enable_pin, Level.HIGH)
        self.board.digital_write(self.pin1, first)
        self.board.digital_write(self.pin2, second)

    def _release(self) -> None:
        self.board.digital_write(self.enable_pin, Level.LOW)
        self.board.digital_write(self.pin1, Level.LOW)
        self.board.digital_write(self.pin2, Level.LOW)


class DriveForwardCommand(_HBridgeWiring, MotorCommand):
    """Run the motor forward at full power."""

    def __init__(self, board: Board, pin1: int, pin2: int, enable_pin: int) -> None:
        self._wire(board, pin1, pin2, enable_pin)

    def execute(self) -> None:
        self._drive(Level.HIGH, Level.LOW)

    def stop(self) -> None:
        self._release()


class DriveBackwardCommand(_HBridgeWiring, MotorCommand):
    """Run the motor backward at full power."""

    def __init__(self, board: Board, pin1: int, pin2: int, enable_pin: int) -> None:
        self._wire(board, pin1, pin2, enable_pin)

    def execute(self) -> None:
        self._drive(Level.LOW, Level.HIGH)

    def stop(self) -> None:
        self._release()


class VibrationCommand(DriveForwardCommand):
    """Forward drive with a PWM intensity given in percent."""

    def __init__(self, board: Board, pin1: int, pin2: int, enable_pin: int) -> None:
        super().__init__(board, pin1, pin2, enable_pin)
        board.pin_mode(enable_pin, OUTPUT)
        self._intensity = 0

    @property
    def intensity(self) -> int:
        """Vibration intensity, 0-100 percent."""
        return self._intensity

    @intensity.setter
    def intensity(self, level: int) -> None:
        self._intensity = constrain(level, 0, 100)

    def execute(self) -> None:
        if self._intensity > 0:
            self.board.analog_write(self.enable_pin, map_range(self._intensity, 0, 100, 0, 255))
            self.board.digital_write(self.pin1, Level.HIGH)
            self.board.digital_write(self.pin2, Level.LOW)
        else:
            self.stop()


class PulseVibrationCommand(VibrationCommand):
    """Vibration that toggles on and off every ``pulse_interval`` milliseconds."""

    def __init__(self, board: Board, pin1: int, pin2: int, enable_pin: int) -> None:
        super().__init__(board, pin1, pin2, enable_pin)
        self.pulse_interval = 500
        self._last_pulse_time = 0
        self._vibrating = False

    def update(self) -> None:
        """Toggle the vibration once the interval has elapsed; call from the main loop."""
        now = self.board.millis()
        if (now - self._last_pulse_time) % _MILLIS_MODULUS >= self.pulse_interval:
            self._last_pulse_time = now
            self._vibrating = not self._vibrating
            if self._vibrating:
                self.execute()
            else:
                self.stop()


class HapticMotor:
    """A single vibration motor that either vibrates steadily or pulses."""

    def __init__(self, board: Board, pin1: int, pin2: int, enable_pin: int) -> None:
        self._vibration = VibrationCommand(board, pin1, pin2, enable_pin)
        self._pulse = PulseVibrationCommand(board, pin1, pin2, enable_pin)
        self.is_pulsing = False

    def vibrate(self, intensity: int) -> None:
        self.is_pulsing = False
        self._vibration.intensity = intensity
        self._vibration.execute()

    def pulse(self, interval: int, intensity: int) -> None:
        self.is_pulsing = True
        self._pulse.intensity = intensity
        self._pulse.pulse_interval = interval

    def stop(self) -> None:
        self.is_pulsing = False
        self._vibration.stop()
        self._pulse.stop()

    def update(self) -> None:
        if self.is_pulsing:
            self._pulse.update()


@dataclass
class ProximityConfig:
    """Distance thresholds (metres) and feedback levels."""

    warning_threshold: float = 2.0
    danger_threshold: float = 0.5
    min_intensity: int = 20
    max_intensity: int = 100
    pulse_interval: int = 200


class HapticGuidanceSystem:
    """Turns left and right obstacle distances into motor feedback."""

    def __init__(
        self,
        board: Board,
        left_pin1: int,
        left_pin2: int,
        left_enable_pin: int,
        right_pin1: int,
        right_pin2: int,
        right_enable_pin: int,
    ) -> None:
        self.left_motor = HapticMotor(board, left_pin1, left_pin2, left_enable_pin)
        self.right_motor = HapticMotor(board, right_pin1, right_pin2, right_enable_pin)
        self.config = ProximityConfig()

    def configure(
        self,
        warning_threshold: float,
        danger_threshold: float,
        min_intensity: int,
        max_intensity: int,
        pulse_interval: int,
    ) -> None:
        self.config = ProximityConfig(
            warning_threshold, danger_threshold, min_intensity, max_intensity, pulse_interval
        )

    def _respond(self, motor: HapticMotor, distance: float) -> None:
        cfg = self.config
        if distance < cfg.danger_threshold:
            motor.pulse(cfg.pulse_interval, cfg.max_intensity)
        elif distance < cfg.warning_threshold:
            closeness = (cfg.warning_threshold - distance) / (
                cfg.warning_threshold - cfg.danger_threshold
            )
            motor.vibrate(int(cfg.min_intensity + closeness * (cfg.max_intensity - cfg.min_intensity)))
        else:
            motor.stop()

    def process_proximity(self, left_distance: float, right_distance: float) -> None:
        self._respond(self.left_motor, left_distance)
        self._respond(self.right_motor, right_distance)

    def update(self) -> None:
        self.left_motor.update()
        self.right_motor.update()

    def stop(self) -> None:
        self.left_motor.stop()
        self.right_motor.stop()