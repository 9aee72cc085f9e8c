"""Built-in data tables that do not depend on the feature list."""

from __future__ import annotations

# Action 7/9/D variable access flags.
_NOTHING = 0x00
_BITMASK = 0x00
_B = 0x01
_W = 0x02
_D = 0x04
_WD = 0x20
_RD = 0x40
_R7 = 0x80

_DAT_79DV = bytes([
    0x20, 5,
    0x25,
    _NOTHING,                         # 80
    _B | _RD | _R7,                   # 81
    _NOTHING,                         # 82
    _B | _RD | _R7,                   # 83
    _B | _D | _RD | _R7,              # 84
    _BITMASK | _R7,                   # 85
    _BITMASK | _R7,                   # 86
    _NOTHING,                         # 87
    _D | _R7,                         # 88
    _NOTHING,                         # 89
    _NOTHING,                         # 8A
    _W | _D | _RD | _R7,              # 8B
    _NOTHING,                         # 8C
    _B | _RD | _R7,                   # 8D
    _B | _WD | _RD | _R7,             # 8E
    _D | _WD | _RD | _R7,             # 8F
    _NOTHING,                         # 90
    _NOTHING,                         # 91
    _B | _RD | _R7,                   # 92
    _W | _D | _WD | _RD | _R7,        # 93
    _W | _D | _WD | _RD | _R7,        # 94
    _W | _D | _WD | _RD | _R7,        # 95
    _W | _D | _WD | _RD | _R7,        # 96
    _B | _WD | _RD | _R7,             # 97
    _NOTHING,                         # 98
    _D | _WD,                         # 99
    _B | _W | _D | _R7,               # 9A
    _NOTHING,                         # 9B
    _NOTHING,                         # 9C
    _D | _RD | _R7,                   # 9D
    _D | _WD | _RD | _R7,             # 9E
    _D | _WD,                         # 9F
    _NOTHING,                         # A0
    _D | _RD | _R7,                   # A1
    _D | _RD | _R7,                   # A2
    _D | _RD | _R7,                   # A3
    _D | _RD | _R7,                   # A4
])

# Action B: max severity, message type count, parameter counts.
_DAT_B = b"\x01\x02" b"\x03" b"\x07" b"\x02\x02\x02\x03\x02\x02\x02"


# Action 5 option flags.
def _options(num: int) -> int:
    return 0x10 | num


_RECOLOUR = 0x81
_MIXED = 0x82
_WORDCOUNT = 0x84
_OFFSET = 0x88


def _word(value: int) -> list[int]:
    return [value & 0xFF, value >> 8]


_DAT_5 = bytes([
    0x04, 18,
    _OFFSET, _options(3), 0x30, 0x70, 0xF0,                 # 04
    _OFFSET, _options(1), 0x30,                             # 05
    _OFFSET, _options(2), 0x4A, 0x5A,                       # 06
    _options(1), 0x5D,                                      # 07
    _OFFSET, _options(1), 0x41,                             # 08
    _OFFSET, _options(2), 0x06, 0x12,                       # 09
    _OFFSET | _RECOLOUR | _WORDCOUNT, _options(1), *_word(0x100),  # 0A
    _OFFSET, _options(2), 0x71, 0x77,                       # 0B
    _options(1), 0x85,                                      # 0C
    _options(2), 0x10, 0x12,                                # 0D
    _MIXED, _options(1), 0x00,                              # 0E
    _OFFSET, _options(1), 0x0C,                             # 0F
    _OFFSET, _options(1), 0x0F,                             # 10
    _OFFSET, _options(1), 0x08,                             # 11
    _OFFSET, _options(1), 0x08,                             # 12
    _OFFSET, _options(1), 0x37,                             # 13
    _OFFSET, _options(1), 0x24,                             # 14
    _OFFSET, _options(1), 0xC0,                             # 15
    _OFFSET, _options(1), 0x09,                             # 16
    _OFFSET, _options(1), 0x10,                             # 17
    _RECOLOUR, _options(1), 0x01,                           # 18
    _OFFSET, _options(1), 0x04,                             # 19
    _OFFSET, _options(1), 0x5F,                             # 1A
    _OFFSET, _options(1), 0x18,                             # 1B
    0x00,
])

_DAT_TEXTIDS = (
    b"\x04\x09"
    b"\x35\x03\x11\x00\x25\x00\x19\x00\x5D\x00\x11\x00\x6D\x00\x08\x00"
    b"\x11\x00\x3C\x00\x2A\x00\x08\x00\x19\x00\x39\x00\x80\x00\x00\x00"
    b"\x08\x01\x6C\x00\x38\x00\x43\x00\x44\x00\x00\x00\x06\x00\x00\x00"
    b"\xFF\xFF\xFF\xFF\xFF\xFF\xFF\xFF\x4D\x00\x00\x00\x00\x00\x9B\x01"
    b"\x03"
    b"\xC4\xC5\xC9"
)

# Callback feature masks.
_TRAIN, _ROADVEH, _SHIP, _AIRCRAFT = 0x0, 0x1, 0x2, 0x3
_STATION, _CANAL, _BRIDGE, _HOUSE = 0x4, 0x5, 0x6, 0x7
_INDTILE, _INDUSTRY, _CARGO, _SOUND = 0x9, 0xA, 0xB, 0xC
_AIRPORT, _SIGNAL, _OBJECT, _AIRTILE = 0xD, 0xE, 0xF, 0x11


def _mask(*features: int) -> int:
    value = 0x80
    for feat in features:
        value |= 1 << feat
    return value


_NONE = 0x80
_GV = _mask(_TRAIN, _ROADVEH)
_VEH = _mask(_TRAIN, _ROADVEH, _SHIP, _AIRCRAFT)

_DAT_CALLBACKS = bytes([
    0x05, 24,
    *_word(0x162),
    *[_NONE] * 0x10,
    _GV | _mask(_SHIP), _GV, _VEH, _STATION, _STATION, _VEH, _GV, _HOUSE,
    _mask(_STATION) | _VEH, _VEH, _HOUSE, _HOUSE, _HOUSE, _TRAIN, _HOUSE, _HOUSE,
    _HOUSE, _HOUSE, _INDUSTRY, _VEH, _STATION, _INDTILE, _INDTILE, _INDTILE,
    _INDUSTRY, _INDUSTRY, _HOUSE, _INDTILE, _INDTILE, _VEH, _HOUSE, _INDTILE,
    _INDTILE, _VEH, _VEH, _mask(_BRIDGE) | _VEH, _VEH, _INDUSTRY, _VEH, _INDUSTRY,
    _INDUSTRY, _CARGO, _INDUSTRY, _INDUSTRY, _INDTILE, _INDUSTRY, _NONE, _NONE,
    *[_NONE] * 0x100,
    _STATION, _STATION, _STATION, _HOUSE, _SOUND, _CARGO, _SIGNAL, _CANAL,
    _HOUSE, _STATION, _INDUSTRY, _INDUSTRY, _INDUSTRY, _HOUSE, _HOUSE, _HOUSE,
    _AIRTILE, _NONE, _AIRTILE, _AIRTILE, _AIRTILE, _AIRPORT, _AIRPORT, _OBJECT,
    _OBJECT, _OBJECT, _OBJECT, _OBJECT, _OBJECT, _OBJECT, _VEH, _INDUSTRY,
    _VEH, _VEH,
])

_LANGUAGES = (
    # 0x
    "American", "English", "German", "French",
    "Spanish", "Esperanto", "Ido", "Russian",
    "Irish", "Maltese", "Tamil", "Chuvash",
    "Chinese (Traditional)", "Serbian", "Norwegian (Nynorsk)", "Welsh",
    # 1x
    "Belarusian", "Marathi", "Faroese", "Scottish Gaelic",
    "Arabic (Egypt)", "Czech", "Slovak", "",
    "Bulgarian", "", "", "Afrikaans",
    "", "", "Greek", "Dutch",
    # 2x
    "", "Basque", "Catalan", "Luxembourgish",
    "Hungarian", "", "Macedonian", "Italian",
    "Romanian", "Icelandic", "Latvian", "Lithuanian",
    "Slovenian", "Danish", "Swedish", "Norwegian (Bokmal)",
    # 3x
    "Polish", "Galician", "Frisian", "Ukrainian",
    "Estonian", "Finnish", "Portuguese", "Brazilian Portuguese",
    "Croatian", "Japanese", "Korean", "",
    "Malay", "Australian", "Turkish", "",
    # 4x
    "", "", "Thai", "",
    "", "", "", "",
    "", "", "", "",
    "", "", "", "",
    # 5x
    "", "", "", "",
    "Vietnamese", "", "Chinese (Simplified)", "",
    "", "", "Indonesian", "",
    "Urdu", "", "", "",
    # 6x
    "", "Hebrew", "Persian", "",
    "", "", "Latin", "",
    "", "", "", "",
    "", "", "", "",
    # 7x
    "", "", "", "",
    "", "", "", "",
    "", "", "", "",
    "", "", "", "any",
)

_DAT_LANGS = b"\x00\x08" + "".join(f"{name}\n" for name in _LANGUAGES).encode("ascii")

# Maximum beta version, then revisions starting from beta 6.
_DAT_VERSIONS = b"\x00\x04" b"\x09" b"\xD8\x01" b"\x31\x06" b"\x81\x07" b"\x70\x11"

_TABLES = {
    "79Dv": _DAT_79DV,
    "B": _DAT_B,
    "5": _DAT_5,
    "TextIDs": _DAT_TEXTIDS,
    "callbacks": _DAT_CALLBACKS,
    "langs": _DAT_LANGS,
    "versions": _DAT_VERSIONS,
}


def language_names() -> list[str]:
    """Return the names of the 128 language IDs; undefined IDs are empty."""
    return list(_LANGUAGES)


def general_table(name: str) -> bytes:
    """Return the raw contents of the feature-independent data file ``name``.

    The first two bytes are the format and version of the file.
    """
    try:
        return _TABLES[name]
    except KeyError:
        raise KeyError(f"unknown data file {name!r}") from None


def general_table_names() -> list[str]:
    """Return the names of the feature-independent data files."""
    return list(_TABLES)