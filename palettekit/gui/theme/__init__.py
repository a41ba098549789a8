"""Palette model, registry, cache and the built-in named palettes."""

from .color import Color, TRANSPARENT
from .schema import (
    FIELD_COUNT,
    FIELD_DEFAULTS,
    FIELD_NAMES,
    FIELD_OFFSETS,
    FieldId,
    OverridePalette,
    ResolvedPalette,
    field_id_from_name,
    resolve,
)
from . import amethyst, default, green_ivory, kintsugi_jade, soft_pink

PALETTES: dict[str, OverridePalette] = {
	default.NAME: default.DEFAULT_PALETTE,
	amethyst.NAME: amethyst.AMETHYST_PALETTE,
	green_ivory.NAME: green_ivory.GREEN_IVORY_PALETTE,
	soft_pink.NAME: soft_pink.SOFT_PINK_PALETTE,
	kintsugi_jade.NAME: kintsugi_jade.KINTSUGI_JADE_PALETTE,
}

DEFAULT_PALETTE_NAME = default.NAME

from .palette_manager import PaletteManager
from .palette_cache import PaletteCache

__all__ = [
	"Color",
	"TRANSPARENT",
	"FIELD_COUNT",
	"FIELD_DEFAULTS",
	"FIELD_NAMES",
	"FIELD_OFFSETS",
	"FieldId",
	"OverridePalette",
	"ResolvedPalette",
	"field_id_from_name",
	"resolve",
	"PALETTES",
	"DEFAULT_PALETTE_NAME",
	"PaletteManager",
	"PaletteCache",
]
