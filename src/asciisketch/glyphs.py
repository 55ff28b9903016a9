import logging

import numpy as np

from asciisketch.charsets import LINE_CHARS
from asciisketch.sampling import pad_border

logger = logging.getLogger(__name__)


def _neighbour(padded: np.ndarray, dx: int, dy: int) -> np.ndarray:
    """View of the padded grid shifted so index [y, x] reads g(x + dx, y + dy)."""
    rows = padded.shape[0] - 2
    cols = padded.shape[1] - 2
    return padded[1 + dy : 1 + dy + rows, 1 + dx : 1 + dx + cols]


def gradients(grid: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Absolute central differences (gx, gy, gd1, gd2) for every cell.

    Neighbours outside the grid read as the border luminance.
    """
    padded = pad_border(grid)
    gx = np.abs(_neighbour(padded, 1, 0) - _neighbour(padded, -1, 0))
    gy = np.abs(_neighbour(padded, 0, 1) - _neighbour(padded, 0, -1))
    gd1 = np.abs(_neighbour(padded, 1, 1) - _neighbour(padded, -1, -1))
    gd2 = np.abs(_neighbour(padded, -1, 1) - _neighbour(padded, 1, -1))
    return gx, gy, gd1, gd2


def tonal_indices(grid: np.ndarray, ramp_length: int) -> np.ndarray:
    """Ramp index for each cell's luminance."""
    return np.floor((np.asarray(grid, dtype=np.float64) / 255) * (ramp_length - 1)).astype(np.intp)


def map_to_glyphs(grid: np.ndarray, edge_threshold: float, ramp: str) -> list[str]:
    """Map a luminance grid to rows of characters.

    Cells whose gradients exceed ``edge_threshold`` become line glyphs: a
    diagonal when both axes exceed it, otherwise ``|`` for a horizontal
    gradient or ``_`` for a vertical one. All other cells take a glyph from
    ``ramp`` according to their luminance.
    """
    if not ramp:
        raise ValueError("ramp must contain at least one character")
    grid = np.asarray(grid, dtype=np.float64)
    gx, gy, gd1, gd2 = gradients(grid)

    edge_x = gx > edge_threshold
    edge_y = gy > edge_threshold
    diagonal = np.where(gd1 > gd2, LINE_CHARS["diag1"], LINE_CHARS["diag2"])
    tonal = np.array(list(ramp))[tonal_indices(grid, len(ramp))]

    glyphs = np.select(
        [edge_x & edge_y, edge_x, edge_y],
        [diagonal, LINE_CHARS["vertical"], LINE_CHARS["horizontal"]],
        default=tonal,
    )
    edges = int(np.count_nonzero(edge_x | edge_y))
    logger.debug("Mapped %d cells: %d edge, %d tonal", glyphs.size, edges, glyphs.size - edges)
    return ["".join(row) for row in glyphs]


def assemble(rows) -> str:
    """Join rows into one text block, each row followed by a line break."""
    return "".join(row + "\n" for row in rows)
