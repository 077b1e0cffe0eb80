"""
Blend-mode compositing of overlay layers onto a base image.
"""

import numpy as np
from typing import Callable, Dict, Union
import logging

from .models import BlendMode
from .color_math import check_image
from ...exceptions import DimensionMismatchError

logger = logging.getLogger(__name__)


def blend_screen(b: np.ndarray, o: np.ndarray) -> np.ndarray:
    return 1.0 - (1.0 - b) * (1.0 - o)


def blend_multiply(b: np.ndarray, o: np.ndarray) -> np.ndarray:
    return b * o


def blend_darken(b: np.ndarray, o: np.ndarray) -> np.ndarray:
    return np.minimum(b, o)


def blend_lighten(b: np.ndarray, o: np.ndarray) -> np.ndarray:
    return np.maximum(b, o)


def blend_overlay(b: np.ndarray, o: np.ndarray) -> np.ndarray:
    low = 2.0 * b * o
    high = 1.0 - 2.0 * (1.0 - b) * (1.0 - o)
    return np.where(b < 0.5, low, high)


def blend_soft_light(b: np.ndarray, o: np.ndarray) -> np.ndarray:
    d = np.where(b < 0.25, ((16.0 * b - 12.0) * b + 4.0) * b, np.sqrt(np.maximum(b, 0.0)))
    darker = b - (1.0 - 2.0 * o) * b * (1.0 - b)
    lighter = b + (2.0 * o - 1.0) * (d - b)
    return np.where(o < 0.5, darker, lighter)


def blend_color_dodge(b: np.ndarray, o: np.ndarray) -> np.ndarray:
    with np.errstate(divide='ignore', invalid='ignore'):
        dodged = np.minimum(1.0, b / (1.0 - o))
    return np.where(o >= 1.0, 1.0, dodged)


def blend_color_burn(b: np.ndarray, o: np.ndarray) -> np.ndarray:
    with np.errstate(divide='ignore', invalid='ignore'):
        burned = 1.0 - np.minimum(1.0, (1.0 - b) / o)
    return np.where(o <= 0.0, 0.0, burned)


def blend_exclusion(b: np.ndarray, o: np.ndarray) -> np.ndarray:
    return b + o - 2.0 * b * o


def _lum(c: np.ndarray) -> np.ndarray:
    return 0.3 * c[..., 0:1] + 0.59 * c[..., 1:2] + 0.11 * c[..., 2:3]


def _clip_color(c: np.ndarray) -> np.ndarray:
    lum = _lum(c)
    low = np.min(c, axis=-1, keepdims=True)
    high = np.max(c, axis=-1, keepdims=True)
    with np.errstate(divide='ignore', invalid='ignore'):
        pulled_up = lum + (c - lum) * lum / (lum - low)
        pulled_down = lum + (c - lum) * (1.0 - lum) / (high - lum)
    c = np.where(low < 0.0, pulled_up, c)
    c = np.where(high > 1.0, pulled_down, c)
    return c


def blend_colorize(b: np.ndarray, o: np.ndarray) -> np.ndarray:
    """Overlay hue and saturation with the base's luminosity."""
    shifted = o + (_lum(b) - _lum(o))
    return _clip_color(shifted)


BLEND_FUNCTIONS: Dict[BlendMode, Callable[[np.ndarray, np.ndarray], np.ndarray]] = {
    BlendMode.SCREEN: blend_screen,
    BlendMode.MULTIPLY: blend_multiply,
    BlendMode.OVERLAY: blend_overlay,
    BlendMode.SOFT_LIGHT: blend_soft_light,
    BlendMode.LIGHTEN: blend_lighten,
    BlendMode.DARKEN: blend_darken,
    BlendMode.COLOR_DODGE: blend_color_dodge,
    BlendMode.COLOR_BURN: blend_color_burn,
    BlendMode.EXCLUSION: blend_exclusion,
    BlendMode.COLORIZE: blend_colorize,
}


class Compositor:
    """Composites overlay layers onto base images with blend modes."""

    @staticmethod
    def blend(base_rgb: np.ndarray, overlay_rgb: np.ndarray,
              mode: Union[BlendMode, str]) -> np.ndarray:
        """
        Apply a blend formula channel-wise, ignoring alpha.

        Args:
            base_rgb: Base colours (..., 3) in [0, 1]
            overlay_rgb: Overlay colours (..., 3) in [0, 1]
            mode: Blend mode or its CSS name

        Returns:
            Blended colours clamped to [0, 1]
        """
        mode = BlendMode(mode)
        base_rgb = np.asarray(base_rgb, dtype=np.float32)
        overlay_rgb = np.asarray(overlay_rgb, dtype=np.float32)
        blended = BLEND_FUNCTIONS[mode](base_rgb, overlay_rgb)
        return np.clip(blended, 0.0, 1.0).astype(np.float32)

    @staticmethod
    def composite(base: np.ndarray, overlay: np.ndarray,
                  mode: Union[BlendMode, str]) -> np.ndarray:
        """
        Composite ``overlay`` onto ``base``.

        The overlay's alpha weights the blended colour against the base;
        the result keeps the base's alpha.

        Raises:
            DimensionMismatchError: If the two images differ in shape
        """
        check_image(base)
        check_image(overlay)
        if base.shape != overlay.shape:
            raise DimensionMismatchError(base.shape, overlay.shape)

        base_rgb = base[..., :3].astype(np.float32)
        weight = overlay[..., 3:4].astype(np.float32)
        blended = Compositor.blend(base_rgb, overlay[..., :3], mode)

        result = np.empty_like(base, dtype=np.float32)
        result[..., :3] = np.clip(base_rgb * (1.0 - weight) + blended * weight, 0.0, 1.0)
        result[..., 3] = base[..., 3]
        return result
