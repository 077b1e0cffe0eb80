"""
Pipeline executor: runs a preset's operations over an image in order.
"""

import numpy as np
from typing import Optional

from .models import Adjustment, AdjustmentType, FilterSpec, Operation, Overlay
from . import color_math
from .compositor import Compositor
from .overlays import OverlayBuilder
from .presets import get_filter_spec
from ...utils.logging import StructuredLogger


class PipelineExecutor:
    """
    Applies a FilterSpec to an RGBA float32 image.

    Each operation receives the previous operation's output; the caller's
    array is never modified.
    """

    def __init__(self, logger: Optional[StructuredLogger] = None):
        self.logger = logger or StructuredLogger(__name__)

    def apply(self, image: np.ndarray, spec: FilterSpec) -> np.ndarray:
        """
        Run every operation of ``spec`` over ``image``.

        Args:
            image: RGBA float32 array of shape (height, width, 4), values in [0, 1]
            spec: Preset to apply

        Returns:
            Filtered image with the same shape
        """
        color_math.check_image(image)
        working = image.astype(np.float32, copy=True)

        for index, operation in enumerate(spec.operations):
            self.logger.debug("Applying operation", filter=spec.name,
                              step=index, operation=operation.describe())
            working = self.apply_operation(working, operation)

        return working

    def apply_named(self, image: np.ndarray, name: str) -> np.ndarray:
        """Resolve a preset by name and apply it."""
        spec = get_filter_spec(name)
        return self.apply(image, spec)

    def apply_operation(self, image: np.ndarray, operation: Operation) -> np.ndarray:
        """Apply a single adjustment or overlay."""
        if isinstance(operation, Adjustment):
            return self._apply_adjustment(image, operation)
        elif isinstance(operation, Overlay):
            return self._apply_overlay(image, operation)
        raise ValueError(f"Unsupported operation: {operation!r}")

    def _apply_adjustment(self, image: np.ndarray, adjustment: Adjustment) -> np.ndarray:
        amount = adjustment.amount
        kind = adjustment.type

        if kind == AdjustmentType.BRIGHTNESS:
            return color_math.modulate(image, brightness_pct=amount * 100.0)
        elif kind == AdjustmentType.SATURATE:
            return color_math.modulate(image, saturation_pct=amount * 100.0)
        elif kind == AdjustmentType.HUE_ROTATE:
            return color_math.modulate(image, hue_pct=100.0 + amount / 1.8)
        elif kind == AdjustmentType.CONTRAST:
            return color_math.contrast(image, amount)
        elif kind == AdjustmentType.SEPIA:
            return color_math.color_matrix(image, color_math.sepia_matrix(amount))
        elif kind == AdjustmentType.GRAYSCALE:
            if amount >= 1.0:
                return color_math.desaturate(image)
            return color_math.color_matrix(image, color_math.grayscale_matrix(amount))
        raise ValueError(f"Unsupported adjustment: {kind}")

    def _apply_overlay(self, image: np.ndarray, overlay: Overlay) -> np.ndarray:
        height, width = image.shape[:2]
        layer = OverlayBuilder.build(width, height, overlay.fill, overlay.opacity_percent)
        return Compositor.composite(image, layer, overlay.blend_mode)


def apply_filter(image: np.ndarray, name: str) -> np.ndarray:
    """
    Apply the named preset to an image.

    Raises:
        UnknownFilterError: If ``name`` is not a registered preset
    """
    return PipelineExecutor().apply_named(image, name)
