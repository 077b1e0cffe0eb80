"""
Image processing modules for FilterGram
"""

from .filters import PipelineExecutor, apply_filter, get_filter_spec, list_filters

__all__ = [
    "PipelineExecutor",
    "apply_filter",
    "get_filter_spec",
    "list_filters",
]
