"""superbird-agent - drive a dashboard display over adb."""

__version__ = "0.1.0"
