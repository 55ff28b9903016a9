import math

# Tonal ramp, darkest to lightest
RAMP = "@%#*+=-:. "

# Line glyphs keyed by edge direction
LINE_CHARS = {
    "vertical": "|",
    "horizontal": "_",
    "diag1": "/",
    "diag2": "\\",
}

LINE_GLYPHS = "".join(LINE_CHARS.values())


def ramp_for_density(density: float) -> str:
    """Return the leading slice of RAMP enabled at this density (never empty)."""
    count = max(1, math.floor(density * len(RAMP)))
    return RAMP[:count]
