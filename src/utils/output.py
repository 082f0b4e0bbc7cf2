"""
Output channels for human-readable operation outcomes.

Services emit one line per event; the channel decides where it goes.
"""

import sys
from typing import List, Optional, TextIO


class ConsoleOutput:
    """Write lines to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def emit(self, line: str) -> None:
        print(line, file=self._stream or sys.stdout)


class BufferedOutput:
    """Collect lines in memory, used by tests and embedding callers."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def text(self) -> str:
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()
