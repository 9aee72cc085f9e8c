"""Extract the GRF ID or the MD5 checksum of a NewGRF file."""

from __future__ import annotations

import hashlib
import sys
from pathlib import Path

VERSION = "0.1.0"

HEADER = b"\x00\x00GRF\x82\r\n\x1a\n"

_USAGE = (
    f"GRFID {VERSION}\n"
    "\n"
    "Usage:\n"
    "    GRFID <NewGRF-File>\n"
    "        Get the GRF ID from the NewGRF file\n"
    "    GRFID -m <NewGRF-File>\n"
    "        Get the MD5 checksum of the NewGRF file\n"
    "    GRFID -v\n"
    "        Get the version of GRFID\n"
)


class GrfIdError(Exception):
    """Raised when the requested information cannot be obtained."""


class FileReader:
    """Little-endian reader over an in-memory file; reads past the end yield 0."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0

    @classmethod
    def from_path(cls, path) -> "FileReader":
        try:
            data = Path(path).read_bytes()
        except OSError as exc:
            raise GrfIdError("Unable to open file") from exc
        if not data:
            raise GrfIdError("Unable to open file")
        return cls(data)

    def skip(self, count: int) -> None:
        self.pos += count

    def read_byte(self) -> int:
        if self.pos >= len(self.data) or self.pos < 0:
            return 0
        value = self.data[self.pos]
        self.pos += 1
        return value

    def read_word(self) -> int:
        low = self.read_byte()
        return low | (self.read_byte() << 8)

    def read_dword(self) -> int:
        low = self.read_word()
        return low | (self.read_word() << 16)

    def at_end(self) -> bool:
        return self.pos >= len(self.data)

    def has_header(self) -> bool:
        return len(self.data) > len(HEADER) and self.data.startswith(HEADER)


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _to_int8(value: int) -> int:
    return value - 0x100 if value & 0x80 else value


def skip_sprite_data(reader: FileReader, sprite_type: int, num: int) -> None:
    """Skip the pixel data of a real sprite of ``num`` uncompressed bytes."""
    if sprite_type & 2:
        if num > 0:
            reader.skip(num)
        return
    # Invalid formats make num negative and end the loop.
    while num > 0:
        chunk = _to_int8(reader.read_byte())
        if chunk >= 0:
            size = 0x80 if chunk == 0 else chunk
            num -= size
            reader.skip(size)
        else:
            num -= -(chunk >> 3)
            reader.read_byte()


def _swap32(value: int) -> int:
    return int.from_bytes(value.to_bytes(4, "little"), "big")


def _read_size(reader: FileReader, version: int) -> int:
    return reader.read_dword() if version == 2 else reader.read_word()


def get_grf_id(path) -> int:
    """Return the GRF ID found in the action 8 of the file."""
    reader = FileReader.from_path(path)
    version = 1
    if reader.has_header():
        version = 2
        reader.skip(len(HEADER) + 4 + 1)

    if _read_size(reader, version) != 0x04 or reader.read_byte() != 0xFF:
        raise GrfIdError("No magic header")

    reader.read_dword()  # number of sprites
    grfid = 0
    while not reader.at_end():
        num = _read_size(reader, version)
        if num == 0:
            break
        if reader.pos + num > len(reader.data):
            raise GrfIdError("Corrupt GRF; would read beyond buffer")

        sprite_type = reader.read_byte()
        if sprite_type == 0xFF:
            action = reader.read_byte()
            if action == 0x08:
                reader.read_byte()  # GRF version
                grfid = _swap32(reader.read_dword())
                break
            reader.skip(num - 1)
        elif version == 2 and sprite_type == 0xFD:
            reader.read_dword()
        elif version == 1:
            reader.skip(7)
            skip_sprite_data(reader, sprite_type, _to_int32(num - 8))
        else:
            reader.pos = len(reader.data)

    if grfid == 0:
        raise GrfIdError("File valid but no GrfID found")
    return grfid


def get_md5(path) -> str:
    """Return the hex MD5 of the file, ignoring the sprite section of container 2."""
    reader = FileReader.from_path(path)
    read_length = len(reader.data)
    if reader.has_header():
        reader.skip(len(HEADER))
        read_length = len(HEADER) + 4 + reader.read_dword()
        if read_length > len(reader.data):
            raise GrfIdError("Invalid sprite location offset")
    return hashlib.md5(reader.data[:read_length]).hexdigest()


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args or args[0] == "-h" or (args[0] == "-m" and len(args) < 2):
        print(_USAGE, end="")
        return 1
    if args[0] == "-v":
        print(f"GRFID {VERSION}")
        return 0
    try:
        if args[0] == "-m":
            print(get_md5(args[1]))
        else:
            print(f"{get_grf_id(args[0]):08x}")
    except GrfIdError as exc:
        print(f"Unable to get requested information: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())