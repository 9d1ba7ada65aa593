"""Styled cells, tables, tree parts, field renderers and icons for long-format file listings."""

__version__ = "0.1.0"