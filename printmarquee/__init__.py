"""JSON writing, a scratch buffer, character readers and an HTTP-synced clock."""

__version__ = "0.1.0"
__all__ = ["buffer", "floatparts", "jsonwriter", "readers", "sinks", "timeclient"]