"""
Exception hierarchy for FilterGram
"""

from pathlib import Path
from typing import Tuple, Union


class FilterGramError(Exception):
    """Base exception for filter operations."""
    pass


class UnknownFilterError(FilterGramError):
    """Raised when a filter name is not in the preset registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown filter '{name}'")


class DimensionMismatchError(FilterGramError):
    """Raised when an overlay and its base image differ in size."""

    def __init__(self, base_shape: Tuple[int, ...], overlay_shape: Tuple[int, ...]):
        self.base_shape = tuple(base_shape)
        self.overlay_shape = tuple(overlay_shape)
        super().__init__(
            f"Overlay shape {self.overlay_shape} does not match base shape {self.base_shape}"
        )


class DecodeFailure(FilterGramError):
    """Raised when an input image cannot be read or decoded."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(f"Could not decode '{path}': {reason}")


class EncodeFailure(FilterGramError):
    """Raised when an output image cannot be encoded or written."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        super().__init__(f"Could not encode '{path}': {reason}")
