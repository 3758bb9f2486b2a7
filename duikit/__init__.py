"""Colours, geometry, affine matrices, ranges, lengths, value trees and a mouse model."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "geometry",
    "matrix",
    "range",
    "length",
    "mouse_model",
    "value",
    "dictionary",
]