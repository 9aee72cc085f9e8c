"""Constants and header lines of the NFO text format."""

from __future__ import annotations

VALID_PSEUDO = "0123456789ABCDEFabcdef \t\v\r\n"
WHITESPACE = " \t\v\r\n"
COMMENT = "/;#"
COMMENT_PREFIX = "//"


def nfo_header(ver: int) -> str:
    """Return the two header lines written at the top of an NFO file."""
    return (
        "// Automatically generated by GRFCODEC. Do not modify!\n"
        f"// (Info version {ver})\n"
    )


def nfo_format(ver: int) -> str:
    """Return the format description line for info version ``ver``."""
    if ver >= 32:
        return "// Format: spritenum imagefile depth xpos ypos xsize ysize xrel yrel zoom flags\n"
    return "// Format: spritenum pcxfile xpos ypos compression ysize xsize xrel yrel\n"


def is_comment(line: str) -> bool:
    """Tell whether the first non-blank character of ``line`` starts a comment."""
    stripped = line.lstrip(WHITESPACE)
    return bool(stripped) and stripped[0] in COMMENT