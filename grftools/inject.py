"""Injection of extra lines in front of an input stream."""

from __future__ import annotations

import sys
from collections import deque
from typing import Optional, TextIO


class Injector:
    """Queues lines that are read before the rest of a target stream."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._queue: deque[str] = deque()
        self._into: Optional[TextIO] = None
        self._out = out

    def inject_into(self, stream) -> None:
        """Make ``stream`` the target and drop any pending lines."""
        self._into = stream
        self._queue.clear()

    def _check(self, stream) -> None:
        if stream is not self._into:
            raise ValueError("stream is not the injection target")

    def getline(self, stream) -> Optional[str]:
        """Return the next line without its newline, or None at end of input."""
        self._check(stream)
        if self._queue:
            return self._queue.popleft()
        line = stream.readline()
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line

    def peek(self, stream) -> str:
        """Return the next character without consuming it; empty at end."""
        self._check(stream)
        if self._queue:
            return self._queue[0][:1]
        pos = stream.tell()
        ch = stream.read(1)
        stream.seek(pos)
        return ch

    def inject(self, line: str) -> None:
        """Queue ``line``, or print it when there is no target stream."""
        if self._into is None:
            print(line, file=self._out if self._out is not None else sys.stdout)
        else:
            self._queue.append(line)