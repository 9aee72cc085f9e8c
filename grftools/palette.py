"""Palette selection and reading, and sprite sheet format choice."""

from __future__ import annotations

import enum
import io
import os


class PaletteError(Exception):
    """Raised when a palette file cannot be read."""


class DefaultPalette(enum.IntEnum):
    """Built-in palettes; the ``-p`` number is the value plus one."""

    TTD_NORM = 0
    TTW_NORM = 1
    TTD_CAND = 2
    TTW_CAND = 3
    TT1_NORM = 4
    TT1_MARS = 5
    TTW_PB_PAL1 = 6
    TTW_PB_PAL2 = 7


class SpriteSheetFormat(enum.Enum):
    PCX = "pcx"
    PNG = "png"


_DEFAULT_PALETTES = {
    # DOS TTD
    "TRG1": DefaultPalette.TTD_NORM,
    "TRGC": DefaultPalette.TTD_NORM,
    "TRGH": DefaultPalette.TTD_NORM,
    "TRGI": DefaultPalette.TTD_NORM,
    "TRGT": DefaultPalette.TTD_CAND,
    # Windows TTD
    "TRG1R": DefaultPalette.TTW_NORM,
    "TRGCR": DefaultPalette.TTW_NORM,
    "TRGHR": DefaultPalette.TTW_NORM,
    "TRGIR": DefaultPalette.TTW_NORM,
    "TRGTR": DefaultPalette.TTW_CAND,
    # DOS TTO or TT+WB
    "TREDIT": DefaultPalette.TT1_NORM,
    "TREND": DefaultPalette.TT1_NORM,
    "TRTITLE": DefaultPalette.TT1_NORM,
    "TRHCOM": DefaultPalette.TT1_NORM,
    "TRHCOM2": DefaultPalette.TT1_MARS,
    # TTDPatch
    "TTDPATCH": DefaultPalette.TTD_NORM,
    "TTDPATCHW": DefaultPalette.TTW_NORM,
    "TTDPBASE": DefaultPalette.TTD_NORM,
    "TTDPBASEW": DefaultPalette.TTW_NORM,
}

PALETTE_SIZE = 256 * 3


def _read_bcp(data: bytes, filename: str) -> bytes:
    if len(data) < PALETTE_SIZE:
        raise PaletteError(f"Error: {filename} is not a BCP file.")
    return data[:PALETTE_SIZE]


def _read_psp(stream: io.BytesIO, filename: str) -> bytes:
    not_psp = PaletteError(f"Error: {filename} is not a PSP palette file.")
    if stream.readline() != b"JASC-PAL\r\n":
        raise not_psp
    try:
        nument = int(stream.readline().strip(), 16)
        nument2 = int(stream.readline().strip(), 10)
    except ValueError:
        raise not_psp from None
    if nument != nument2 or nument != 256:
        raise PaletteError(
            f"{filename}: Error: GRFCodec supports only 256 colour palette files."
        )
    pal = bytearray()
    for _ in range(nument):
        fields = stream.readline().split()
        try:
            values = [int(v) for v in fields[:3]]
        except ValueError:
            raise PaletteError("Error reading palette.") from None
        if len(values) != 3 or any(not 0 <= v <= 255 for v in values):
            raise PaletteError("Error reading palette.")
        pal.extend(values)
    return bytes(pal)


def _read_gpl(stream: io.BytesIO, filename: str) -> bytes:
    not_gpl = PaletteError(f"Error: {filename} is not a GIMP palette file.")
    if stream.readline() != b"GIMP Palette\r\n":
        raise not_gpl
    stream.readline()  # Name: ...
    stream.readline()  # Columns: ...
    if not stream.readline():  # '#'
        raise not_gpl
    pal = bytearray()
    for _ in range(256):
        fields = stream.readline().split()
        try:
            values = [int(v) for v in fields[:3]]
        except ValueError:
            values = []
        if len(values) != 3 or any(not 0 <= v <= 255 for v in values):
            raise PaletteError(f"{filename}: Error: reading palette.")
        pal.extend(values)
    return bytes(pal)


def read_palette(filearg: str) -> bytes:
    """Read a palette given as ``[type:]filename``; type is bcp, psp or gpl."""
    filearg = str(filearg)
    kind = filearg[:4].lower()
    if kind in ("bcp:", "psp:", "gpl:"):
        filename = filearg[4:]
    else:
        kind, filename = "bcp:", filearg

    try:
        with open(filename, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise PaletteError(f"Error opening {filename}") from exc

    if kind == "psp:":
        return _read_psp(io.BytesIO(data), filename)
    if kind == "gpl:":
        return _read_gpl(io.BytesIO(data), filename)
    return _read_bcp(data, filename)


def default_palette(grffile: str) -> DefaultPalette:
    """Pick the built-in palette matching the base name of a GRF file."""
    name = str(grffile)
    cut = max(name.rfind("/"), name.rfind("\\")) + 1
    base = name[cut:].split(".", 1)[0].upper()
    return _DEFAULT_PALETTES.get(base, DefaultPalette.TTD_NORM)


def output_format(formatarg: str) -> SpriteSheetFormat:
    """Map a ``-o`` argument to a sprite sheet format; unknown values give PCX."""
    prefix = str(formatarg)[:3].lower()
    if prefix == "png":
        return SpriteSheetFormat.PNG
    return SpriteSheetFormat.PCX


def output_extension(fmt: SpriteSheetFormat, rgba: bool) -> str:
    """Return the file extension used for sprite sheets of ``fmt``."""
    if fmt is SpriteSheetFormat.PNG:
        return "32.png" if rgba else ".png"
    return ".pcx"


__all__ = [
    "PaletteError",
    "DefaultPalette",
    "SpriteSheetFormat",
    "read_palette",
    "default_palette",
    "output_format",
    "output_extension",
    "PALETTE_SIZE",
    "os",
]