"""Strip real sprites of unwanted depth/zoom combinations from a container 2 GRF."""

from __future__ import annotations

import struct
import sys
from collections.abc import Iterable

VERSION = "0.1.0"

HEADER = b"\x00\x00GRF\x82\r\n\x1a\n"

DEPTHS = ("8bpp", "32bpp")
ZOOMS = ("normal", "zi4", "zi2", "zo2", "zo4", "zo8")


class StripError(Exception):
    """Raised when a GRF cannot be stripped."""


def allowed_mask(pairs: Iterable[tuple[str, str]]) -> int:
    """Build the bit mask of allowed (depth, zoom) combinations."""
    mask = 0
    for depth, zoom in pairs:
        if depth not in DEPTHS:
            raise StripError(f'Invalid depth "{depth}"')
        if zoom not in ZOOMS:
            raise StripError(f'Invalid zoom "{zoom}"')
        mask |= 1 << (16 * DEPTHS.index(depth) + ZOOMS.index(zoom))
    return mask


def _unpack(fmt: str, data: bytes, pos: int) -> tuple:
    try:
        return struct.unpack_from(fmt, data, pos)
    except struct.error as exc:
        raise StripError("Invalid GRF") from exc


def strip(origin, dest, allowed: int) -> None:
    """Copy ``origin`` to ``dest``, keeping only allowed real sprites."""
    try:
        fin = open(origin, "rb")
    except OSError as exc:
        raise StripError("Unable to open origin file") from exc
    with fin:
        try:
            fout = open(dest, "wb")
        except OSError as exc:
            raise StripError("Unable to open destination file") from exc
        with fout:
            data = fin.read()
            _strip_into(data, fout, allowed)


def _write(fout, chunk: bytes) -> None:
    try:
        if fout.write(chunk) != len(chunk):
            raise StripError("Could not write to file")
    except OSError as exc:
        raise StripError("Could not write to file") from exc


def _strip_into(data: bytes, fout, allowed: int) -> None:
    end = len(data)
    if end <= len(HEADER) or not data.startswith(HEADER):
        raise StripError("No GRF with container version 2.")

    (length,) = _unpack("<I", data, len(HEADER))
    pos = len(HEADER) + length + 4
    if pos >= end:
        raise StripError("Invalid GRF")
    _write(fout, data[:pos])

    while True:
        begin = pos
        (sprite_id,) = _unpack("<I", data, pos)
        if sprite_id == 0:
            _write(fout, data[begin:])
            return
        size, info, zoom = _unpack("<IBB", data, pos + 4)
        pos += 10

        offset = (0 if info & 0x7 == 4 else 16) + zoom
        if info == 0xFF or allowed & (1 << offset):
            _write(fout, data[begin:begin + size + 8])

        pos += (size - 2) & 0xFFFFFFFF
        if pos >= end:
            raise StripError("Invalid GRF")


def _usage() -> str:
    return (
        f"GRFSTRIP {VERSION}\n"
        "\n"
        "Usage:\n"
        "    GRFSTRIP <origin> <dest> (<depth> <zoom>)*\n"
        '        Strip real sprites that are not in the set "the ones\n'
        '        specified at the command line" from origin into dest.\n'
        f"        Known depths: {', '.join(DEPTHS)}\n"
        f"        Known zooms: {', '.join(ZOOMS)}\n"
        "    GRFSTRIP -v\n"
        "        Get the version of GRFSTRIP\n"
    )


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2 or args[0] == "-h":
        print(_usage(), end="")
        return 1
    if args[0] == "-v":
        print(f"GRFSTRIP {VERSION}")
        return 0

    rest = args[2:]
    pairs = list(zip(rest[0::2], rest[1::2]))
    try:
        allowed = allowed_mask(pairs)
    except StripError as exc:
        print(exc)
        return 1

    try:
        strip(args[0], args[1], allowed)
    except StripError as exc:
        print(f"Unable to get requested information: {exc}")
        return 1
    print(f"Stripped {args[0]} into {args[1]} successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())