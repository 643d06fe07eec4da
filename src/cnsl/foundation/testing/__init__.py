"""Testing utilities: recording console and isolated roots."""

from .console import ConsoleCall, RecordingConsole, recording_root

__all__ = ["ConsoleCall", "RecordingConsole", "recording_root"]
