"""
Image file I/O for FilterGram
"""

from .images import load_image, save_image, derive_output_path

__all__ = [
    "load_image",
    "save_image",
    "derive_output_path",
]
