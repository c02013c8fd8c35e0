import pytest

from wayguide.board import (
    OUTPUT,
    Board,
    Level,
    RecordingBoard,
    constrain,
    map_range,
)


def test_board_is_abstract():
    with pytest.raises(TypeError):
        Board()


def test_pin_mode_is_recorded():
    board = RecordingBoard()
    board.pin_mode(7, OUTPUT)
    assert board.modes[7] == OUTPUT
    assert board.writes == [("mode", 7, OUTPUT)]


def test_digital_write_sets_level():
    board = RecordingBoard()
    board.digital_write(3, Level.HIGH)
    assert board.levels[3] is Level.HIGH
    board.digital_write(3, 0)
    assert board.levels[3] is Level.LOW


def test_digital_write_rejects_bad_level():
    board = RecordingBoard()
    with pytest.raises(ValueError):
        board.digital_write(3, 5)


def test_analog_and_digital_writes_replace_each_other():
    board = RecordingBoard()
    board.analog_write(9, 128)
    assert board.pwm[9] == 128
    assert 9 not in board.levels
    board.digital_write(9, Level.LOW)
    assert 9 not in board.pwm
    assert board.levels[9] is Level.LOW
    board.analog_write(9, 64)
    assert 9 not in board.levels


def test_clock_advances():
    board = RecordingBoard()
    assert board.millis() == 0
    assert board.advance(250) == 250
    board.advance(50)
    assert board.millis() == 300


def test_clock_wraps_at_32_bits():
    board = RecordingBoard(start_ms=(1 << 32) - 10)
    board.advance(15)
    assert board.millis() == 5


def test_clock_cannot_go_backwards():
    with pytest.raises(ValueError):
        RecordingBoard().advance(-1)


@pytest.mark.parametrize(
    "value, low, high, expected",
    [(-5, 0, 100, 0), (150, 0, 100, 100), (42, 0, 100, 42), (0, 0, 100, 0)],
)
def test_constrain(value, low, high, expected):
    assert constrain(value, low, high) == expected


def test_map_range_endpoints():
    assert map_range(0, 0, 100, 0, 255) == 0
    assert map_range(100, 0, 100, 0, 255) == 255


def test_map_range_is_monotonic():
    values = [map_range(i, 0, 100, 0, 255) for i in range(101)]
    assert values == sorted(values)
    assert all(0 <= v <= 255 for v in values)


def test_map_range_truncates_toward_zero():
    assert map_range(50, 0, 100, 0, 255) == 127
    assert map_range(-1, 0, 2, 0, 1) == 0


def test_map_range_reversed_output():
    assert map_range(0, 0, 10, 10, 0) == 10
    assert map_range(10, 0, 10, 10, 0) == 0


def test_map_range_empty_input_range():
    with pytest.raises(ValueError):
        map_range(1, 5, 5, 0, 255)