"""Default palette: no overrides, every field inherits the built-in defaults."""

from .schema import OverridePalette

NAME = "Default"

COLORS: dict = {}

DEFAULT_PALETTE = OverridePalette.from_mapping(COLORS)
