"""
Gradient rasterization for overlay layers.
"""

import numpy as np
from typing import Sequence
import logging

from .models import ColorStop, GradientSpec, GradientType

logger = logging.getLogger(__name__)


class GradientRasterizer:
    """Renders linear and radial gradients to RGBA float32 buffers."""

    @staticmethod
    def rasterize(width: int, height: int, spec: GradientSpec) -> np.ndarray:
        """
        Render a gradient at the given size.

        Args:
            width: Output width in pixels
            height: Output height in pixels
            spec: Gradient geometry and colour stops

        Returns:
            RGBA float32 array of shape (height, width, 4)
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid gradient size {width}x{height}")

        if spec.type == GradientType.LINEAR:
            if spec.direction == "to bottom":
                # Render left-to-right on the transposed size, then turn the
                # left edge into the top edge
                sideways = GradientRasterizer._linear(height, width, spec.stops)
                return np.ascontiguousarray(np.rot90(sideways, k=-1))
            return GradientRasterizer._linear(width, height, spec.stops)
        elif spec.type == GradientType.RADIAL:
            return GradientRasterizer._radial(width, height, spec)
        else:
            raise ValueError(f"Unsupported gradient type: {spec.type}")

    @staticmethod
    def _linear(width: int, height: int, stops: Sequence[ColorStop]) -> np.ndarray:
        """Left-to-right gradient; every row is identical."""
        if width > 1:
            t = np.arange(width, dtype=np.float64) / float(width - 1)
        else:
            t = np.zeros(1, dtype=np.float64)
        row = GradientRasterizer._sample(t, stops)
        return np.ascontiguousarray(np.broadcast_to(row[np.newaxis, :, :], (height, width, 4)))

    @staticmethod
    def _radial(width: int, height: int, spec: GradientSpec) -> np.ndarray:
        """Circular gradient whose radius reaches the farthest image edge."""
        cx = spec.center[0] * (width - 1)
        cy = spec.center[1] * (height - 1)
        max_radius = max(cx, (width - 1) - cx, cy, (height - 1) - cy)
        if max_radius <= 0:
            max_radius = 1.0

        y, x = np.ogrid[:height, :width]
        dist = np.sqrt((x - cx) ** 2 + (y - cy) ** 2)
        t = np.clip(dist / max_radius, 0.0, 1.0)
        return GradientRasterizer._sample(t, spec.stops)

    @staticmethod
    def _sample(t: np.ndarray, stops: Sequence[ColorStop]) -> np.ndarray:
        """
        Interpolate the stop sequence at positions ``t``.

        Colours are interpolated premultiplied by alpha so transparent stops
        fade alpha without dragging RGB toward an arbitrary colour.
        """
        positions = np.array([stop.position for stop in stops], dtype=np.float64)
        alphas = np.array([stop.effective_alpha for stop in stops], dtype=np.float64)
        straight = GradientRasterizer._fill_transparent_colors(stops)

        out = np.empty(t.shape + (4,), dtype=np.float32)
        alpha = np.interp(t, positions, alphas)

        for channel in range(3):
            premultiplied = np.interp(t, positions, straight[:, channel] * alphas)
            fallback = np.interp(t, positions, straight[:, channel])
            with np.errstate(divide='ignore', invalid='ignore'):
                color = np.where(alpha > 0.0, premultiplied / alpha, fallback)
            out[..., channel] = np.clip(color, 0.0, 1.0)

        out[..., 3] = np.clip(alpha, 0.0, 1.0)
        return out

    @staticmethod
    def _fill_transparent_colors(stops: Sequence[ColorStop]) -> np.ndarray:
        """Stop colours in [0, 1], with ``none`` stops borrowing a neighbour's RGB."""
        colors = [None if stop.color is None else np.array(stop.color, dtype=np.float64) / 255.0
                  for stop in stops]
        if all(c is None for c in colors):
            return np.zeros((len(stops), 3), dtype=np.float64)

        filled = list(colors)
        for i, color in enumerate(colors):
            if color is not None:
                continue
            following = next((c for c in colors[i + 1:] if c is not None), None)
            preceding = next((c for c in reversed(colors[:i]) if c is not None), None)
            filled[i] = following if following is not None else preceding
        return np.stack(filled)
