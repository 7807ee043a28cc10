"""RFID access control: card whitelist, sequential relays and audio cues."""

__version__ = "1.0.0"
__all__ = ["access", "audio", "relays", "rfid"]