"""Haptic proximity guidance logic, a framed proximity protocol and a serial/WebSocket relay."""

__version__ = "0.1.0"