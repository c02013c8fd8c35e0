import pytest

from wayguide.proximity import (
    MESSAGE_END,
    MESSAGE_SIZE,
    MESSAGE_START,
    ProximityMessage,
    ProximityReceiver,
    encode_frame,
)

# Frames are only accepted when the final payload byte is the end marker,
# i.e. when the timestamp's top byte is 0xFF.
ACCEPTED = ProximityMessage(1.5, 2.25, 0xFF000010)
REJECTED = ProximityMessage(1.5, 2.25, 1000)


def test_payload_round_trip():
    data = ACCEPTED.to_bytes()
    assert len(data) == 12
    assert ProximityMessage.from_bytes(data) == ACCEPTED


def test_payload_is_little_endian():
    data = ProximityMessage(0.0, 0.0, 1).to_bytes()
    assert data[8:] == b"\x01\x00\x00\x00"


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        ProximityMessage.from_bytes(b"\x00" * 11)


def test_to_bytes_rejects_bad_timestamp():
    with pytest.raises(ValueError):
        ProximityMessage(1.0, 1.0, -1).to_bytes()


def test_frame_layout():
    frame = encode_frame(ACCEPTED)
    assert len(frame) == MESSAGE_SIZE == 14
    assert frame[0] == MESSAGE_START == 0xAA
    assert frame[-1] == MESSAGE_END == 0xFF
    assert frame[1:-1] == ACCEPTED.to_bytes()


def test_receiver_defaults():
    receiver = ProximityReceiver()
    assert receiver.has_new_data() is False
    latest = receiver.get_latest_data()
    assert latest.left_distance == 999.9
    assert latest.right_distance == 999.9
    assert latest.timestamp == 0


def test_receiver_accepts_frame_ending_in_marker():
    receiver = ProximityReceiver()
    receiver.feed(encode_frame(ACCEPTED))
    assert receiver.has_new_data() is True
    assert receiver.get_latest_data() == ACCEPTED
    assert receiver.has_new_data() is False


def test_receiver_rejects_frame_without_marker():
    receiver = ProximityReceiver()
    receiver.feed(encode_frame(REJECTED))
    assert receiver.has_new_data() is False
    assert receiver.get_latest_data().timestamp == 0


def test_receiver_skips_noise_before_start():
    receiver = ProximityReceiver()
    receiver.feed(b"\x01\x02\x03" + encode_frame(ACCEPTED))
    assert receiver.get_latest_data() == ACCEPTED


def test_receiver_handles_consecutive_frames():
    second = ProximityMessage(0.25, 3.0, 0xFF000020)
    receiver = ProximityReceiver()
    receiver.feed(encode_frame(ACCEPTED) + encode_frame(second))
    assert receiver.get_latest_data() == second


def test_receiver_recovers_after_rejected_frame():
    receiver = ProximityReceiver()
    receiver.feed(encode_frame(REJECTED) + encode_frame(ACCEPTED))
    assert receiver.get_latest_data() == ACCEPTED


def test_receiver_byte_by_byte():
    receiver = ProximityReceiver()
    frame = encode_frame(ACCEPTED)
    for byte in frame[:-2]:
        receiver.process_incoming_byte(byte)
    assert receiver.has_new_data() is False
    receiver.process_incoming_byte(frame[-2])
    assert receiver.has_new_data() is True


def test_receiver_rejects_non_byte():
    with pytest.raises(ValueError):
        ProximityReceiver().process_incoming_byte(256)