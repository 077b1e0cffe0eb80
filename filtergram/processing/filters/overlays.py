"""
Overlay layer construction.
"""

import numpy as np
import logging

from .models import Fill, GradientFill, SolidFill
from .gradients import GradientRasterizer

logger = logging.getLogger(__name__)


class OverlayBuilder:
    """Builds full-size overlay buffers from solid or gradient fills."""

    @staticmethod
    def build(width: int, height: int, fill: Fill,
              opacity_percent: float = 100.0) -> np.ndarray:
        """
        Build an overlay layer.

        Args:
            width: Layer width, equal to the image being filtered
            height: Layer height, equal to the image being filtered
            fill: Solid colour or gradient
            opacity_percent: Uniform alpha scale (0-100)

        Returns:
            RGBA float32 array of shape (height, width, 4)
        """
        if not 0.0 <= opacity_percent <= 100.0:
            raise ValueError(f"Opacity {opacity_percent} out of range [0, 100]")
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid overlay size {width}x{height}")

        if isinstance(fill, SolidFill):
            layer = np.empty((height, width, 4), dtype=np.float32)
            layer[..., :3] = np.array(fill.color, dtype=np.float32) / np.float32(255.0)
            layer[..., 3] = 1.0
        elif isinstance(fill, GradientFill):
            layer = GradientRasterizer.rasterize(width, height, fill.gradient)
        else:
            raise ValueError(f"Unsupported overlay fill: {fill!r}")

        if opacity_percent != 100.0:
            layer[..., 3] *= np.float32(opacity_percent / 100.0)

        return layer
