"""
Image decode/encode for FilterGram
Converts between image files and the RGBA float32 buffers the engine uses
"""

import os
import tempfile
from pathlib import Path
from typing import Optional, Union
import logging

import numpy as np
from PIL import Image

from ..exceptions import DecodeFailure, EncodeFailure

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Pillow formats that cannot store an alpha channel
NO_ALPHA_FORMATS = {"JPEG", "PPM", "EPS", "PCX"}

FALLBACK_EXTENSION = ".png"


def load_image(path: PathLike) -> np.ndarray:
    """
    Decode an image file into an RGBA float32 buffer.

    Args:
        path: Image file readable by Pillow (first frame is used)

    Returns:
        Array of shape (height, width, 4) with values in [0, 1]

    Raises:
        DecodeFailure: If the file cannot be opened or decoded
    """
    path = Path(path)
    try:
        with Image.open(path) as img:
            img.load()
            rgba = img.convert("RGBA")
    except (OSError, ValueError) as e:
        raise DecodeFailure(path, str(e)) from e

    data = np.asarray(rgba, dtype=np.uint8)
    logger.debug(f"Decoded {path} ({rgba.width}x{rgba.height}, source mode {img.mode})")
    return data.astype(np.float32) / np.float32(255.0)


def to_uint8(image: np.ndarray) -> np.ndarray:
    """Quantise a float buffer in [0, 1] to 8-bit with round-half-to-even."""
    return np.rint(np.clip(image, 0.0, 1.0) * 255.0).astype(np.uint8)


def _format_for(path: Path) -> str:
    extension = path.suffix.lower()
    image_format = Image.registered_extensions().get(extension)
    if image_format is None:
        raise EncodeFailure(path, f"unsupported output extension '{path.suffix}'")
    return image_format


def save_image(image: np.ndarray, path: PathLike, quality: int = 95) -> Path:
    """
    Encode an RGBA float32 buffer to ``path``.

    The format follows the file extension. Alpha is dropped for formats that
    cannot store it and for fully opaque images. The file is written to a
    temporary sibling first, so a failure never leaves a partial output.

    Raises:
        EncodeFailure: If the image cannot be encoded or written
    """
    path = Path(path)
    image_format = _format_for(path)

    pixels = to_uint8(image)
    if image_format in NO_ALPHA_FORMATS or bool(np.all(pixels[..., 3] == 255)):
        output = Image.fromarray(np.ascontiguousarray(pixels[..., :3]))
    else:
        output = Image.fromarray(pixels)

    save_kwargs = {}
    if image_format == "JPEG":
        save_kwargs['quality'] = int(quality)

    temp_name = None
    try:
        fd, temp_name = tempfile.mkstemp(prefix=f".{path.stem}-", suffix=path.suffix,
                                         dir=path.parent)
        os.close(fd)
        os.chmod(temp_name, 0o644)
        output.save(temp_name, format=image_format, **save_kwargs)
        os.replace(temp_name, path)
    except (OSError, ValueError, KeyError) as e:
        if temp_name and os.path.exists(temp_name):
            os.remove(temp_name)
        raise EncodeFailure(path, str(e)) from e

    logger.debug(f"Encoded {path} as {image_format} ({output.width}x{output.height})")
    return path


def derive_output_path(input_path: PathLike, filter_name: str,
                       output_dir: Optional[PathLike] = None) -> Path:
    """
    Default output name: ``<input-base>-<filter>.<input-ext>``.

    Inputs without an extension get ``.png``.
    """
    input_path = Path(input_path)
    suffix = input_path.suffix or FALLBACK_EXTENSION
    name = f"{input_path.stem}-{filter_name}{suffix}"
    parent = Path(output_dir) if output_dir is not None else input_path.parent
    return parent / name
