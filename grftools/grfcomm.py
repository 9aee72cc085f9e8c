"""File name and I/O helpers shared by the GRF tools."""

from __future__ import annotations

import errno
import os
from typing import IO


class GrfIOError(Exception):
    """Raised when a sprite file or stream cannot be handled."""


def _split(path: str) -> tuple[str, str, str, str]:
    """Split a path into drive, directory, name and extension."""
    drive, rest = "", path
    if len(path) >= 2 and path[1] == ":":
        drive, rest = path[:2], path[2:]
    cut = max(rest.rfind("/"), rest.rfind("\\")) + 1
    directory, filename = rest[:cut], rest[cut:]
    dot = filename.rfind(".")
    if dot < 0:
        return drive, directory, filename, ""
    return drive, directory, filename[:dot], filename[dot:]


def _compose(basefilename: str, reldirectory: str, ext: str, spriteno: int) -> tuple[str, str]:
    sdrive, sdirectory, _, _ = _split(reldirectory)
    bdrive, bdirectory, bname, _ = _split(basefilename)

    if sdrive:
        bdrive = sdrive
    if sdirectory:
        if sdirectory[0] in "\\/":
            bdirectory = sdirectory
        else:
            bdirectory += sdirectory
    if spriteno >= 0:
        bname += f"{spriteno:02d}"

    filename = bdrive + bdirectory + bname + ext
    directory = bdrive + bdirectory
    if directory and directory[-1] in "\\/":
        directory = directory[:-1]
    return filename, directory


def sprite_filename(basefilename, reldirectory, ext, spriteno, mode, must_exist) -> str:
    """Build the name of a file belonging to ``basefilename`` in ``reldirectory``.

    With ``must_exist`` the file is opened once with ``mode``; a missing
    directory is created when writing and reported otherwise.
    """
    filename, directory = _compose(str(basefilename), str(reldirectory), ext, spriteno)
    if not must_exist:
        return filename

    while True:
        try:
            with open(filename, mode):
                return filename
        except OSError as exc:
            if exc.errno != errno.ENOENT:
                raise GrfIOError(f"Error opening {filename}") from exc
            if "w" not in mode:
                raise GrfIOError(f"Cannot read {filename}") from exc
            try:
                os.mkdir(directory, 0o755)
            except OSError as mkexc:
                raise GrfIOError(f"Creating {directory}") from mkexc


def open_sprite_file(grffile, directory, ext, mode, must_exist) -> tuple[str, IO]:
    """Return the file name and an open file object for it."""
    filename = sprite_filename(grffile, directory, ext, -1, mode, must_exist)
    try:
        stream = open(filename, mode)
    except OSError as exc:
        raise GrfIOError(f"Error opening {filename}") from exc
    return filename, stream


def read_exact(action: str, stream, size: int) -> bytes:
    """Read exactly ``size`` bytes or raise."""
    data = stream.read(size)
    if len(data) != size:
        raise GrfIOError(
            f"Error while {action}, got {len(data)}, wanted {size}, at {stream.tell()}"
        )
    return data


def write_all(action: str, stream, data: bytes) -> None:
    """Write all of ``data`` or raise."""
    try:
        written = stream.write(data)
    except OSError as exc:
        raise GrfIOError(f"Error while {action}, got 0, wanted {len(data)}") from exc
    if written is not None and written != len(data):
        raise GrfIOError(f"Error while {action}, got {written}, wanted {len(data)}")


def backup_filename(filename: str) -> str:
    """Return ``filename`` with its extension replaced by ``.bak``."""
    dot = filename.rfind(".")
    stem = filename if dot < 0 else filename[:dot]
    return stem + ".bak"