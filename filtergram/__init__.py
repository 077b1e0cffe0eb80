"""
FilterGram: CSSgram-style photo filters for the command line

Applies named Instagram-style presets to raster images by composing colour
adjustments with gradient and solid blend-mode overlays.
"""

__version__ = "0.1.0"

from .config import load_config
from .exceptions import (
    FilterGramError,
    UnknownFilterError,
    DimensionMismatchError,
    DecodeFailure,
    EncodeFailure,
)
from .processing.filters import PipelineExecutor, apply_filter, get_filter_spec, list_filters

__all__ = [
    "load_config",
    "FilterGramError",
    "UnknownFilterError",
    "DimensionMismatchError",
    "DecodeFailure",
    "EncodeFailure",
    "PipelineExecutor",
    "apply_filter",
    "get_filter_spec",
    "list_filters",
]
