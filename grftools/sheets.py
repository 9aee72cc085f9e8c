"""Output files that receive decoded sprite sheets."""

from __future__ import annotations

from typing import IO, Optional

from grftools.grfcomm import GrfIOError, sprite_filename
from grftools.palette import SpriteSheetFormat, output_extension


class SingleFile:
    """A single sprite sheet file, opened on construction."""

    def __init__(self, filename, mode: str, directory: Optional[str] = None) -> None:
        try:
            self.file: Optional[IO] = open(filename, mode)
        except OSError as exc:
            raise GrfIOError(f"Can't read {filename}") from exc
        self.filename = str(filename)
        self.directory = directory

    def close(self) -> None:
        """Close the file if it is still open."""
        if self.file is not None:
            self.file.close()
            self.file = None

    def __enter__(self) -> "SingleFile":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class SpriteFiles:
    """A numbered series of sprite sheet files, one opened at a time."""

    def __init__(
        self,
        basename,
        directory: str,
        rgba: bool = False,
        fmt: SpriteSheetFormat = SpriteSheetFormat.PCX,
    ) -> None:
        self.basename = str(basename)
        self.directory = directory
        self.rgba = rgba
        self.fmt = fmt
        self.filenum = 0
        self.file: Optional[IO] = None
        self.filename: Optional[str] = None

    def next_file(self) -> Optional[IO]:
        """Open the next numbered file; on failure keep the current one."""
        name = sprite_filename(
            self.basename,
            self.directory,
            output_extension(self.fmt, self.rgba),
            self.filenum,
            "wb",
            True,
        )
        self.filenum += 1
        try:
            new_file = open(name, "wb")
        except OSError:
            return self.file
        if self.file is not None:
            self.file.close()
        self.file = new_file
        self.filename = name
        return self.file

    def close(self) -> None:
        """Close the currently open file, if any."""
        if self.file is not None:
            self.file.close()
            self.file = None

    def __enter__(self) -> "SpriteFiles":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()