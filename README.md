# wayguide

Proximity-driven haptic guidance. The package has three parts.

- **Haptic feedback logic** (`wayguide.haptics`). Two vibration motors, one on
  the left and one on the right, respond to obstacle distances given in metres.
  `HapticGuidanceSystem.process_proximity` applies these rules to each side:
  - A distance below the danger threshold makes that motor pulse at maximum
    intensity.
  - A distance below the warning threshold gives a steady vibration. It grows from
    the minimum intensity toward the maximum as the obstacle gets closer.
  - Any larger distance stops the motor.

  The defaults come from `ProximityConfig`: warning 2.0, danger 0.5, intensities
  20–100 %, pulse interval 200 ms.
- **Proximity protocol** (`wayguide.proximity`). A binary frame made of the start
  byte `0xAA`, a 12-byte little-endian payload and the byte `0xFF`. The payload
  holds the left distance (float), the right distance (float) and a timestamp
  (unsigned 32-bit). `encode_frame` builds a frame. `ProximityReceiver` reads
  frames one byte at a time.
- **Serial/WebSocket relay** (`wayguide.serial_handler`,
  `wayguide.websocket_handler`, `wayguide.ipc_manager`, `wayguide.cli`). Text from
  WebSocket clients is written to a serial port. Lines read from the serial port
  are handed to `WebSocketHandler.send`.

Motor pins are driven through the abstract `Board` class in `wayguide.board`.
`RecordingBoard` keeps pin modes, levels and PWM values in memory and has a manual
clock (`advance`). You can use it to run and inspect all the guidance logic
without hardware. `MotorControl` (`wayguide.motor_control`) drives a pair of
motors forward, backward or turning on the spot over the same `Board` interface.

## Installation

```
pip install .
```

Install the test dependencies with `pip install .[test]`.

## Running the relay

```
wayguide-bridge [--serial DEVICE_OR_URL] [--ws-port PORT]
```

The defaults are `/dev/ttyUSB0` and port 8080. The command opens the serial port
at 9600 baud and starts the WebSocket server on a background thread. It then reads
serial lines until it is interrupted with Ctrl-C. It exits with status 1, printing
a message, if the serial port or the WebSocket port cannot be opened.

## Using the guidance logic

```python
from wayguide.board import RecordingBoard
from wayguide.haptics import HapticGuidanceSystem

board = RecordingBoard()
guidance = HapticGuidanceSystem(board, 22, 23, 12, 24, 25, 13)
guidance.configure(2.0, 0.5, 20, 100, 200)

guidance.process_proximity(1.2, 0.3)   # left: warning zone, right: danger zone
for _ in range(10):
    board.advance(50)
    guidance.update()                  # toggles the pulsing on the right
guidance.stop()
```

`wayguide.firmware.GuidanceFirmware(board, output)` runs the full device program
on any `Board` and writes its messages to the text stream `output`. Call `setup()`
first, then `update()` from your loop. `handle_command` takes these text commands:

- `L1.5,R2.3` – process test distances
- `left` / `right` – test one motor: 0.3 m on that side, 999 m on the other
- `stop` – stop both motors
- `config:warning,danger,min,max,pulse` – replace the configuration, for example
  `config:2.0,0.5,20,100,200`

`handle_ipc_bytes(data)` feeds raw bytes to the receiver. When a message
completes, it acts on that message and returns it. Otherwise it returns `None`.
A "Proximity data" line is printed at most once per second.

## Proximity frames

A frame is accepted only when the **last payload byte** is `0xFF`. That byte is
the most significant byte of the timestamp. The trailing `0xFF` byte that
`encode_frame` appends is then skipped while the receiver waits for the next
start byte. A frame whose timestamp has another top byte is dropped silently.

```python
from wayguide.proximity import ProximityMessage, ProximityReceiver, encode_frame

frame = encode_frame(ProximityMessage(1.5, 0.25, 0xFF000000 + 1000))
receiver = ProximityReceiver()
receiver.feed(frame)
if receiver.has_new_data():
    message = receiver.get_latest_data()   # also clears the new-data flag
```

Until a frame has been accepted, `get_latest_data()` returns distances of 999.9
and timestamp 0.

## What the package does not do

- `WebSocketHandler.send` does not deliver anything to connected clients. It only
  prints `Would send: <data>` to standard output. Serial lines therefore never
  reach WebSocket clients. The relay is one-way in practice: from WebSocket to
  serial.
- There is no `Board` that drives real pins. Only the in-memory `RecordingBoard`
  is included, so the firmware and motor classes run in simulation unless you
  write a `Board` subclass for your hardware.
- No command starts `GuidanceFirmware`. It is a class to embed in your own loop.