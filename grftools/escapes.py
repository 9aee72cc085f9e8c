"""Named escapes for bytes in NFO pseudo-sprites."""

from __future__ import annotations

from collections.abc import Iterator


class EscapeMap:
    """A two-way map between escape names and byte values.

    Each name maps to exactly one byte; one byte may carry several names,
    which are kept in insertion order.
    """

    def __init__(self) -> None:
        self._by_name: dict[str, int] = {}
        self._by_byte: dict[int, list[str]] = {}

    def insert(self, name: str, byte: int) -> bool:
        """Add ``name`` for ``byte``; an already known name is left alone."""
        if name in self._by_name:
            return False
        self._by_name[name] = byte
        self._by_byte.setdefault(byte, []).append(name)
        return True

    def lookup(self, name: str) -> int:
        """Return the byte of escape ``name``, or -1 if it is unknown."""
        return self._by_name.get(name, -1)

    def find_custom(self, action, byte: int) -> str:
        """Return the escape text for ``byte`` in sprites of ``action``, or ''.

        An escape belongs to an action when its name starts with the action
        character; the result is preceded by a space and a backslash.
        """
        if isinstance(action, int):
            action = chr(action)
        for name in self._by_byte.get(byte, ()):
            if name[:1] == action:
                return " \\" + name
        return ""

    def names_for(self, byte: int) -> list[str]:
        """Return the names carried by ``byte`` in insertion order."""
        return list(self._by_byte.get(byte, ()))

    def __iter__(self) -> Iterator[tuple[int, str]]:
        """Yield ``(byte, name)`` pairs ordered by byte."""
        for byte in sorted(self._by_byte):
            for name in self._by_byte[byte]:
                yield byte, name

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name