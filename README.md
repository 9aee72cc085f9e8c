# grftools

Utilities for NewGRF files (the sprite and data containers used by Transport
Tycoon Deluxe and its successors) and for the NFO text files that describe
them.

## Installation

```
pip install .
```

Python 3.10 or newer is required. The package has no third-party dependencies.

## Command-line tools

### grfid

Print the GRF ID of a NewGRF file (taken from its first action 8) as eight
hexadecimal digits. Both container versions 1 and 2 are read.

```
grfid mygrf.grf
```

Print the MD5 checksum of the file. For a version 2 container only the header
and data section are hashed, not the sprite section that follows.

```
grfid -m mygrf.grf
```

Show the tool's version, or the usage text:

```
grfid -v
grfid -h
```

On failure the reason is printed to standard error and the exit status is 1.

### grfstrip

Copy a version 2 container, keeping only the real sprites whose depth and zoom
combination is listed. Pseudo sprites are always kept.

```
grfstrip origin.grf dest.grf 8bpp normal 32bpp normal
```

Known depths: `8bpp`, `32bpp`.
Known zoom levels: `normal`, `zi4`, `zi2`, `zo2`, `zo4`, `zo8`.

`grfstrip -v` shows the version and `grfstrip -h` the usage text.

## Library use

```python
from grftools.grfid import get_grf_id, get_md5
from grftools.grfstrip import allowed_mask, strip

print(f"{get_grf_id('mygrf.grf'):08x}")
print(get_md5("mygrf.grf"))

mask = allowed_mask([("8bpp", "normal"), ("32bpp", "zi4")])
strip("origin.grf", "dest.grf", mask)
```

Failures are raised as exceptions: `GrfIdError` (`grftools.grfid`),
`StripError` (`grftools.grfstrip`), `GrfIOError` (`grftools.grfcomm`) and
`PaletteError` (`grftools.palette`).

Modules:

- `grftools.grfid` – `get_grf_id`, `get_md5`, `skip_sprite_data` and the
  little-endian `FileReader`;
- `grftools.grfstrip` – `allowed_mask` and `strip`;
- `grftools.grfcomm` – `sprite_filename`, `open_sprite_file`, `read_exact`,
  `write_all`, `backup_filename`;
- `grftools.container` – `container_version`, `read_sprite_offsets` (index of
  the sprite section of a version 2 container) and `replace_with_backup`
  (move a new file over an old one, keeping the first original as `.bak`);
- `grftools.palette` – `read_palette` for bcp, psp and gpl palette files,
  `default_palette` (the built-in palette number matching a GRF's base name),
  `output_format` and `output_extension` for sprite sheet files, and the
  `DefaultPalette` and `SpriteSheetFormat` enums;
- `grftools.sheets` – `SingleFile` and `SpriteFiles`, the output files that
  receive sprite sheets;
- `grftools.inject` – `Injector`, which queues extra lines to be read before
  the rest of an input stream;
- `grftools.nfo` – `nfo_header`, `nfo_format`, `is_comment` and the NFO
  character constants;
- `grftools.escapes` – `EscapeMap`, a two-way map of custom NFO escape names
  and byte values;
- `grftools.data_general` – the feature-independent data tables
  (`general_table`, `general_table_names`) and `language_names`.

## What it does not do

- It does not decode a GRF into an NFO file and sprite sheets, nor encode them
  back; there is no image reading or writing (PCX or PNG).
- `DefaultPalette` only names the built-in palettes; their colour values are
  not included. External palettes can be read with `read_palette`.
- Only the feature-independent data tables are included. Tables that depend on
  the feature list (properties, variables, action 2 and action 4 rules, ID
  ranges) are not, and there is no on-disk data directory.
- It does not check or renumber NFO files.

## Running the tests

```
pip install .[test]
pytest
```