"""SCALE codec helpers: compact integers, inputs, errors, bounded decoding and encoded-vector appends."""

__version__ = "0.1.0"