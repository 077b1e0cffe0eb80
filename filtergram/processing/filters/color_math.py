"""
Colour adjustment primitives for the filter engine.

All routines take and return RGBA float32 images of shape (height, width, 4)
with values in [0, 1]. Inputs are never modified and alpha is passed through
untouched.
"""

import numpy as np
import cv2
from typing import Tuple
import logging

logger = logging.getLogger(__name__)


IDENTITY_MATRIX = np.eye(3, dtype=np.float64)

# CSS Filter Effects targets for grayscale(1) and sepia(1)
GRAYSCALE_TARGET = np.array([
    [0.2126, 0.7152, 0.0722],
    [0.2126, 0.7152, 0.0722],
    [0.2126, 0.7152, 0.0722],
], dtype=np.float64)

SEPIA_TARGET = np.array([
    [0.393, 0.769, 0.189],
    [0.349, 0.686, 0.168],
    [0.272, 0.534, 0.131],
], dtype=np.float64)

LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)


def check_image(image: np.ndarray) -> None:
    """Raise ValueError unless ``image`` is an (h, w, 4) RGBA array."""
    if not isinstance(image, np.ndarray) or image.ndim != 3 or image.shape[2] != 4:
        shape = getattr(image, 'shape', None)
        raise ValueError(f"Expected an RGBA array of shape (h, w, 4), got {shape}")


def _working_copy(image: np.ndarray) -> np.ndarray:
    check_image(image)
    return image.astype(np.float32, copy=True)


def modulate(image: np.ndarray, brightness_pct: float = 100.0,
             saturation_pct: float = 100.0, hue_pct: float = 100.0) -> np.ndarray:
    """
    Modulate brightness, saturation and hue.

    Args:
        image: RGBA float32 image
        brightness_pct: Channel scale in percent (100 = unchanged)
        saturation_pct: HSL saturation scale in percent (100 = unchanged)
        hue_pct: Hue position in percent; the shift is (hue_pct - 100) * 1.8 degrees

    Returns:
        Modulated image
    """
    if brightness_pct < 0 or saturation_pct < 0:
        raise ValueError("Brightness and saturation must not be negative")

    result = _working_copy(image)

    if saturation_pct != 100.0 or hue_pct != 100.0:
        rgb = np.ascontiguousarray(result[..., :3])
        # Float HLS from OpenCV: H in degrees [0, 360), L and S in [0, 1]
        hls = cv2.cvtColor(rgb, cv2.COLOR_RGB2HLS)
        if hue_pct != 100.0:
            hls[..., 0] = np.mod(hls[..., 0] + (hue_pct - 100.0) * 1.8, 360.0)
        if saturation_pct != 100.0:
            hls[..., 2] = np.clip(hls[..., 2] * (saturation_pct / 100.0), 0.0, 1.0)
        result[..., :3] = cv2.cvtColor(hls, cv2.COLOR_HLS2RGB)

    if brightness_pct != 100.0:
        result[..., :3] *= np.float32(brightness_pct / 100.0)

    result[..., :3] = np.clip(result[..., :3], 0.0, 1.0)
    return result


def _level_bounds(black_pct: float, white_pct: float) -> Tuple[float, float]:
    if white_pct <= black_pct:
        raise ValueError(f"White point {white_pct}% must be above black point {black_pct}%")
    return black_pct / 100.0, white_pct / 100.0


def level(image: np.ndarray, black_pct: float, white_pct: float) -> np.ndarray:
    """Stretch levels so that black_pct maps to 0 and white_pct maps to 1."""
    black, white = _level_bounds(black_pct, white_pct)
    result = _working_copy(image)
    rgb = result[..., :3]
    stretched = (rgb - np.float32(black)) / np.float32(white - black)
    result[..., :3] = np.clip(stretched, 0.0, 1.0)
    return result


def inverse_level(image: np.ndarray, black_pct: float, white_pct: float) -> np.ndarray:
    """Compress levels so that 0 maps to black_pct and 1 maps to white_pct."""
    black, white = _level_bounds(black_pct, white_pct)
    result = _working_copy(image)
    rgb = result[..., :3]
    compressed = np.float32(black) + rgb * np.float32(white - black)
    result[..., :3] = np.clip(compressed, 0.0, 1.0)
    return result


def contrast_levels(amount: float) -> Tuple[float, float, bool]:
    """
    Translate a CSS contrast() factor into level points.

    Returns:
        (black_pct, white_pct, inverse) where ``inverse`` selects the
        compressing form used below 1.0
    """
    if amount < 0:
        raise ValueError(f"Contrast must not be negative: {amount}")
    if amount >= 1.0:
        return 50.0 - 50.0 / amount, 50.0 + 50.0 / amount, False
    return (1.0 - amount) * 50.0, (1.0 + amount) * 50.0, True


def contrast(image: np.ndarray, amount: float) -> np.ndarray:
    """Apply CSS contrast(amount)."""
    black_pct, white_pct, inverse = contrast_levels(amount)
    if inverse:
        if white_pct == black_pct:
            # contrast(0): everything collapses to mid grey
            result = _working_copy(image)
            result[..., :3] = 0.5
            return result
        return inverse_level(image, black_pct, white_pct)
    return level(image, black_pct, white_pct)


def color_matrix(image: np.ndarray, matrix: np.ndarray) -> np.ndarray:
    """
    Multiply every pixel's RGB by a 3x3 matrix.

    Each output channel is an explicit row dot product, so rows that are
    equal yield bit-identical channels.
    """
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.shape != (3, 3):
        raise ValueError(f"Colour matrix must be 3x3, got {matrix.shape}")

    result = _working_copy(image)
    r = result[..., 0].copy()
    g = result[..., 1].copy()
    b = result[..., 2].copy()

    for channel in range(3):
        m0, m1, m2 = (float(v) for v in matrix[channel])
        result[..., channel] = np.clip(r * m0 + g * m1 + b * m2, 0.0, 1.0)

    return result


def interpolate_matrix(target: np.ndarray, t: float) -> np.ndarray:
    """Blend from the identity matrix toward ``target`` at intensity t."""
    t = float(np.clip(t, 0.0, 1.0))
    target = np.asarray(target, dtype=np.float64)
    return IDENTITY_MATRIX + t * (target - IDENTITY_MATRIX)


def grayscale_matrix(t: float) -> np.ndarray:
    """Colour matrix for CSS grayscale(t)."""
    return interpolate_matrix(GRAYSCALE_TARGET, t)


def sepia_matrix(t: float) -> np.ndarray:
    """Colour matrix for CSS sepia(t)."""
    return interpolate_matrix(SEPIA_TARGET, t)


def desaturate(image: np.ndarray) -> np.ndarray:
    """Full grayscale: replace R, G and B with Rec. 709 luminance."""
    result = _working_copy(image)
    wr, wg, wb = LUMA_WEIGHTS
    luma = result[..., 0] * wr + result[..., 1] * wg + result[..., 2] * wb
    luma = np.clip(luma, 0.0, 1.0)
    for channel in range(3):
        result[..., channel] = luma
    return result
