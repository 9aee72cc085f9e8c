"""Helpers for the GRF container: version detection, sprite offsets, file replacement."""

from __future__ import annotations

import os
import sys

from grftools.grfcomm import GrfIOError, backup_filename, read_exact

HEADER = b"\x00\x00GRF\x82\r\n\x1a\n"


def container_version(prefix: bytes) -> int:
    """Return 2 if ``prefix`` starts with the container 2 header, else 1."""
    return 2 if bytes(prefix[: len(HEADER)]) == HEADER else 1


def _read_dword(action: str, stream) -> int:
    return int.from_bytes(read_exact(action, stream, 4), "little")


def read_sprite_offsets(stream) -> tuple[dict[int, int], int]:
    """Index the sprite section of a container 2 file.

    The stream must be positioned just after the header. Returns a mapping
    from sprite ID to the file offset of its first chunk, and the total
    number of chunks. The stream position is restored afterwards.
    """
    action = "Reading sprite offsets"
    offset = _read_dword(action, stream)
    pos = stream.tell()
    stream.seek(offset, os.SEEK_CUR)

    offsets: dict[int, int] = {}
    count = 0
    while (sprite_id := _read_dword(action, stream)) != 0:
        offsets.setdefault(sprite_id, stream.tell() - 4)
        stream.seek(_read_dword(action, stream), os.SEEK_CUR)
        count += 1

    stream.seek(pos, os.SEEK_SET)
    return offsets, count


def replace_with_backup(newfile, realfile, interactive: bool = False) -> None:
    """Move ``newfile`` over ``realfile``, keeping the first original as ``.bak``."""
    newfile = str(newfile)
    realfile = str(realfile)
    bakfile = backup_filename(realfile)

    if not os.path.exists(bakfile):
        if interactive:
            print(f"\nRenaming {realfile} to {bakfile}", end="")
        try:
            os.rename(realfile, bakfile)
        except OSError:
            pass

    if os.path.exists(realfile):
        if interactive:
            print(f"\nDeleting {realfile}", end="")
        try:
            os.remove(realfile)
        except OSError:
            print(f"\nError deleting {realfile}", end="", file=sys.stderr)

    if interactive:
        print(f"\nReplacing {realfile} with {newfile}")

    try:
        os.replace(newfile, realfile)
    except OSError as exc:
        raise GrfIOError(f"Error renaming {newfile} to {realfile}") from exc