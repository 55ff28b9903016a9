import dataclasses
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from asciisketch.charsets import ramp_for_density
from asciisketch.engine import AsciiArt, RenderConfig
from asciisketch.glyphs import map_to_glyphs
from asciisketch.sampling import sample

logger = logging.getLogger(__name__)


def load_image(source: Image.Image | str | Path | np.ndarray) -> Image.Image:
    """Accept a PIL image, an image file path or a (H, W[, 3|4]) uint8 array."""
    if isinstance(source, np.ndarray):
        if source.ndim not in (2, 3) or (source.ndim == 3 and source.shape[2] not in (3, 4)):
            raise ValueError(f"Unsupported pixel array shape: {source.shape}")
        if source.dtype != np.uint8:
            raise ValueError(f"Unsupported pixel array dtype: {source.dtype} (expected uint8)")
        source = Image.fromarray(np.ascontiguousarray(source))
    elif not isinstance(source, Image.Image):
        source = Image.open(source)
    if source.width <= 0 or source.height <= 0:
        raise ValueError(f"Image dimensions must be positive, got {source.width}x{source.height}")
    return source


def render(image: Image.Image | str | Path | np.ndarray, config: RenderConfig) -> AsciiArt:
    image = load_image(image)
    grid = sample(image, config.output_width, config.contrast)
    ramp = ramp_for_density(config.density)
    logger.debug("Using %d-character ramp %r", len(ramp), ramp)
    return AsciiArt(rows=tuple(map_to_glyphs(grid, config.edge_threshold, ramp)))


def image_to_ascii(
    image: Image.Image | str | Path | np.ndarray,
    config: RenderConfig | None = None,
    **overrides,
) -> str:
    """Render an image and return the art as text, rows joined by newlines.

    Keyword arguments override fields of ``config`` (or of the defaults).
    """
    config = dataclasses.replace(config or RenderConfig(), **overrides)
    return str(render(image, config))
