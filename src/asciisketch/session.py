import dataclasses
import logging
import threading
from pathlib import Path

import numpy as np
from PIL import Image

from asciisketch.converter import load_image, render
from asciisketch.engine import AsciiArt, RenderConfig

logger = logging.getLogger(__name__)


class ArtSession:
    """Keeps an image loaded and regenerates its art as the configuration changes.

    Renders run outside the lock, so calls from several threads may overlap.
    Only the most recently started render publishes its result; an older one
    that finishes later is discarded.
    """

    def __init__(self, image: Image.Image | str | Path | np.ndarray, config: RenderConfig | None = None):
        self.image = load_image(image)
        self.image.load()
        self.config = config or RenderConfig()
        self.art: AsciiArt | None = None
        self._lock = threading.Lock()
        self._generation = 0

    def update(self, **changes) -> AsciiArt | None:
        """Apply config changes and regenerate. Returns None if superseded."""
        with self._lock:
            self.config = dataclasses.replace(self.config, **changes)
            self._generation += 1
            generation = self._generation
            config = self.config

        art = render(self.image, config)

        with self._lock:
            if generation != self._generation:
                logger.debug("Discarding stale render %d (latest is %d)", generation, self._generation)
                return None
            self.art = art
        return art

    def regenerate(self) -> AsciiArt | None:
        return self.update()
