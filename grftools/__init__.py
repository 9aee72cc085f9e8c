"""Tools for NewGRF files: GRF IDs, checksums, sprite stripping, palettes and NFO helpers."""

__version__ = "0.1.0"