from __future__ import annotations

import numbers
from dataclasses import dataclass

from asciisketch.glyphs import assemble


@dataclass(frozen=True)
class RenderConfig:
    output_width: int = 80
    contrast: float = 1.0  # 1.0 leaves luminance untouched
    edge_threshold: int = 50  # on the 0-255 luminance scale
    density: float = 1.0  # fraction of the ramp in use, (0, 1]

    def __post_init__(self):
        for name in ("output_width", "edge_threshold"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.output_width < 1:
            raise ValueError(f"output_width must be at least 1, got {self.output_width}")
        if not self.contrast > 0:
            raise ValueError(f"contrast must be positive, got {self.contrast}")
        if self.edge_threshold < 0:
            raise ValueError(f"edge_threshold must be non-negative, got {self.edge_threshold}")
        if not 0 < self.density <= 1:
            raise ValueError(f"density must be in (0, 1], got {self.density}")


@dataclass(frozen=True)
class AsciiArt:
    rows: tuple[str, ...]  # one string per row, all output_width long

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def text(self) -> str:
        """Rows with a line break after each, ready for display or the clipboard."""
        return assemble(self.rows)

    def __str__(self) -> str:
        return "\n".join(self.rows)
