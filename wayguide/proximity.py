"""Framed binary proximity messages and the byte-wise receiver for them."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum, auto

MESSAGE_START = 0xAA
MESSAGE_END = 0xFF

_PAYLOAD = struct.Struct("<ffI")
PAYLOAD_SIZE = _PAYLOAD.size
MESSAGE_SIZE = PAYLOAD_SIZE + 2


@dataclass(frozen=True)
class ProximityMessage:
    """Left and right obstacle distances in metres with a millisecond timestamp."""

    left_distance: float
    right_distance: float
    timestamp: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "ProximityMessage":
        """Decode a 12-byte little-endian payload."""
        if len(data) != PAYLOAD_SIZE:
            raise ValueError(f"payload must be {PAYLOAD_SIZE} bytes, got {len(data)}")
        return cls(*_PAYLOAD.unpack(bytes(data)))

    def to_bytes(self) -> bytes:
        """Encode as a 12-byte little-endian payload."""
        try:
            return _PAYLOAD.pack(self.left_distance, self.right_distance, self.timestamp)
        except struct.error as exc:
            raise ValueError(str(exc)) from exc


def encode_frame(message: ProximityMessage) -> bytes:
    """Wrap a message's payload in the start and end markers."""
    return bytes([MESSAGE_START]) + message.to_bytes() + bytes([MESSAGE_END])


class _State(Enum):
    WAITING_FOR_START = auto()
    RECEIVING_DATA = auto()


class ProximityReceiver:
    """Reassembles proximity messages from a byte stream.

    After the start marker, payload bytes are collected; the message is
    accepted only if the last payload byte equals ``MESSAGE_END``. Whatever
    follows is scanned for the next start marker.
    """

    def __init__(self) -> None:
        self._current = ProximityMessage(999.9, 999.9, 0)
        self._new_data = False
        self._state = _State.WAITING_FOR_START
        self._buffer = bytearray()

    def process_incoming_byte(self, data: int) -> None:
        if not 0 <= data <= 0xFF:
            raise ValueError(f"not a byte: {data}")
        if self._state is _State.WAITING_FOR_START:
            if data == MESSAGE_START:
                self._state = _State.RECEIVING_DATA
                self._buffer.clear()
            return

        self._buffer.append(data)
        if len(self._buffer) >= PAYLOAD_SIZE:
            self._state = _State.WAITING_FOR_START
            if data == MESSAGE_END:
                self._current = ProximityMessage.from_bytes(self._buffer)
                self._new_data = True

    def feed(self, data: bytes) -> None:
        """Process every byte of ``data`` in order."""
        for byte in data:
            self.process_incoming_byte(byte)

    def has_new_data(self) -> bool:
        return self._new_data

    def get_latest_data(self) -> ProximityMessage:
        """Return the latest message and clear the new-data flag."""
        self._new_data = False
        return self._current