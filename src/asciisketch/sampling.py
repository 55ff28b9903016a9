import logging
import math

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

# Glyph cells are about twice as tall as they are wide
CHAR_ASPECT = 0.5

# Luminance reported for any read outside the grid; the frame is treated as white
BORDER_LUMINANCE = 255.0

# Perceptual RGB weights
LUMA_WEIGHTS = (0.299, 0.587, 0.114)


def output_height(image_width: int, image_height: int, output_width: int) -> int:
    """Number of text rows for a given column count, keeping the image aspect ratio."""
    if image_width <= 0 or image_height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {image_width}x{image_height}")
    aspect = image_height / image_width
    return max(1, math.floor(output_width * aspect * CHAR_ASPECT))


def luminance(pixels: np.ndarray) -> np.ndarray:
    """Grayscale value of each pixel in an (..., 3+) RGB(A) array."""
    pixels = np.asarray(pixels, dtype=np.float64)
    wr, wg, wb = LUMA_WEIGHTS
    return wr * pixels[..., 0] + wg * pixels[..., 1] + wb * pixels[..., 2]


def apply_contrast(gray: np.ndarray, contrast: float) -> np.ndarray:
    """Stretch values around mid-gray (128) by ``contrast``, clipped to 0-255."""
    return np.clip((gray - 128) * contrast + 128, 0, 255)


def _to_8bit(image: Image.Image) -> Image.Image:
    """Scale 16-bit integer modes (I;16*, I) down to 8-bit grayscale; other modes pass through."""
    if not image.mode.startswith("I"):
        return image
    arr = np.asarray(image.convert("I"), dtype=np.float64)
    return Image.fromarray(np.clip(np.round(arr / 257), 0, 255).astype(np.uint8))


def _resample(image: Image.Image, width: int, height: int) -> np.ndarray:
    """Resize to (width, height) and return an (height, width, 4) uint8 RGBA array.

    Fully transparent pixels come back as black, matching what a cleared
    canvas yields after drawing a translucent image onto it.
    """
    resized = _to_8bit(image).convert("RGBA").resize((width, height), Image.BILINEAR)
    arr = np.array(resized, dtype=np.uint8)
    arr[arr[..., 3] == 0, :3] = 0
    return arr


def sample(image: Image.Image, output_width: int, contrast: float = 1.0) -> np.ndarray:
    """Downsample an image to a (rows, cols) luminance grid with contrast applied."""
    height = output_height(image.width, image.height, output_width)
    pixels = _resample(image, output_width, height)
    grid = apply_contrast(luminance(pixels), contrast)
    logger.debug("Sampled %dx%d image to %dx%d grid", image.width, image.height, output_width, height)
    return grid


def pad_border(grid: np.ndarray) -> np.ndarray:
    """Surround the grid with a one-cell frame of BORDER_LUMINANCE."""
    return np.pad(np.asarray(grid, dtype=np.float64), 1, constant_values=BORDER_LUMINANCE)
