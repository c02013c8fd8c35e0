import pytest
import serial

from wayguide.serial_handler import SerialHandler


def test_round_trip_strips_newline():
    with SerialHandler("loop://") as handler:
        handler.send("hello\n")
        assert handler.receive() == "hello"


def test_lines_arrive_in_order():
    with SerialHandler("loop://") as handler:
        handler.send("one\ntwo\n")
        assert [handler.receive(), handler.receive()] == ["one", "two"]


def test_carriage_return_is_kept():
    with SerialHandler("loop://") as handler:
        handler.send("L1.0,R2.0\r\n")
        assert handler.receive() == "L1.0,R2.0\r"


def test_context_manager_closes_port():
    with SerialHandler("loop://") as handler:
        assert handler.is_open
    assert not handler.is_open


def test_close_twice_is_harmless():
    handler = SerialHandler("loop://")
    handler.close()
    handler.close()
    assert not handler.is_open


def test_port_is_remembered():
    with SerialHandler("loop://") as handler:
        assert handler.port == "loop://"


def test_missing_device_raises(tmp_path):
    with pytest.raises(serial.SerialException):
        SerialHandler(str(tmp_path / "missing"))