"""
Filter composition engine for FilterGram

Realises CSSgram presets as ordered sequences of colour adjustments and
blend-mode overlays.
"""

from .models import (
    AdjustmentType,
    BlendMode,
    GradientType,
    ColorStop,
    GradientSpec,
    SolidFill,
    GradientFill,
    Adjustment,
    Overlay,
    FilterSpec,
)
from .gradients import GradientRasterizer
from .overlays import OverlayBuilder
from .compositor import Compositor
from .presets import FilterPresets, get_filter_spec, list_filters
from .pipeline import PipelineExecutor, apply_filter

__all__ = [
    'AdjustmentType',
    'BlendMode',
    'GradientType',
    'ColorStop',
    'GradientSpec',
    'SolidFill',
    'GradientFill',
    'Adjustment',
    'Overlay',
    'FilterSpec',
    'GradientRasterizer',
    'OverlayBuilder',
    'Compositor',
    'FilterPresets',
    'get_filter_spec',
    'list_filters',
    'PipelineExecutor',
    'apply_filter',
]
